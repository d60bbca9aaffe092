"""Sharpen a directory of images with a pool of threads."""

from __future__ import annotations

import itertools
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from imgsharpen import workspace
from imgsharpen.sequential import _MISSING_INPUT, _announce, _build_parser
from imgsharpen.sequential import _positive_int, _require_input_dir, _save_or_warn
from imgsharpen.sequential import _summarise, _timed_sharpen
from imgsharpen.workspace import InputDirectoryError, RunReport


def _sharpen_file(path: Path, output: Path) -> float:
    """Sharpen one file into ``output`` and return the time spent sharpening."""
    target = output / path.name
    try:
        image = workspace.load_image(path)
    except OSError:
        print("Error: Could not load image.", file=sys.stderr)
        print(f"Error: Could not write image to {target}", file=sys.stderr)
        return 0.0

    sharpened, elapsed = _timed_sharpen(image)
    _save_or_warn(target, sharpened)
    return elapsed


def run_threaded(
    input_dir: workspace.PathLike,
    output_dir: workspace.PathLike,
    num_threads: int,
    max_images: int,
) -> RunReport:
    """Sharpen up to ``max_images`` images using ``num_threads`` threads.

    Files are handed out to threads one at a time as they become free. Every
    listed file is counted, including those that fail to load or save.
    ``worker_sharpen_times`` holds one entry per thread.
    """
    if num_threads < 1:
        raise ValueError(f"num_threads must be at least 1, got {num_threads}")
    _require_input_dir(input_dir)
    output = workspace.prepare_output_dir(output_dir)
    files = workspace.list_images(input_dir, max_images)

    report = RunReport(worker_sharpen_times=[0.0] * num_threads)
    lock = threading.Lock()
    local = threading.local()
    thread_ids = itertools.count()

    def assign_id() -> None:
        with lock:
            local.index = next(thread_ids)

    def process(path: Path) -> None:
        elapsed = _sharpen_file(path, output)
        with lock:
            report.file_count += 1
            report.sharpen_time += elapsed
            report.worker_sharpen_times[local.index] += elapsed

    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=num_threads, initializer=assign_id) as pool:
        list(pool.map(process, files))
    report.total_time = time.perf_counter() - start
    return report


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = _build_parser(
        "imgsharpen-threaded",
        "Sharpen the .png and .jpg images of a directory with threads.",
        ("input_dir", str),
        ("output_dir", str),
        ("num_threads", _positive_int),
        ("max_images", int),
    ).parse_args(argv)

    if not Path(args.input_dir).is_dir():
        print(f"Error: {_MISSING_INPUT}")
        return 0

    _announce(
        "Process running with:",
        args.input_dir,
        args.output_dir,
        num_of_threads=args.num_threads,
        max_images=args.max_images,
    )
    try:
        report = run_threaded(
            args.input_dir, args.output_dir, args.num_threads, args.max_images
        )
    except InputDirectoryError as error:
        print(f"Error: {error}")
        return 0

    _summarise(report, "total runtime", "total sharpen time", worker_label="thread")
    return 0


if __name__ == "__main__":
    sys.exit(main())