"""Sharpen a directory of images split round-robin between workers.

Each worker takes every ``num_processes``-th file starting at its own rank.
The results are gathered in rank order and written as ``processed_<n>.jpg``.
"""

from __future__ import annotations

import sys
import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from numpy.typing import NDArray

from imgsharpen import workspace
from imgsharpen.sequential import _announce, _build_parser, _positive_int
from imgsharpen.sequential import _summarise, _timed_sharpen, _warn
from imgsharpen.workspace import RunReport


def run_distributed(
    input_dir: workspace.PathLike,
    output_dir: workspace.PathLike,
    num_processes: int,
    max_images: int,
) -> RunReport:
    """Sharpen up to ``max_images`` images split between ``num_processes`` ranks.

    An image that cannot be read or written aborts the run with ``OSError``.
    ``worker_sharpen_times`` holds one entry per rank.
    """
    if num_processes < 1:
        raise ValueError(f"num_processes must be at least 1, got {num_processes}")
    start = time.perf_counter()

    files = workspace.list_images(input_dir, max_images)
    output = workspace.prepare_output_dir(output_dir)

    def rank_work(rank: int) -> tuple[list[NDArray[np.uint8]], float]:
        processed: list[NDArray[np.uint8]] = []
        sharpen_time = 0.0
        for path in files[rank::num_processes]:
            sharpened, elapsed = _timed_sharpen(workspace.load_image(path))
            processed.append(sharpened)
            sharpen_time += elapsed
        return processed, sharpen_time

    with ThreadPoolExecutor(max_workers=num_processes) as pool:
        results = list(pool.map(rank_work, range(num_processes)))

    gathered = [image for processed, _ in results for image in processed]
    for index, image in enumerate(gathered):
        workspace.save_image(output / f"processed_{index}.jpg", image)

    worker_times = [sharpen_time for _, sharpen_time in results]
    return RunReport(
        file_count=len(gathered),
        total_time=time.perf_counter() - start,
        sharpen_time=sum(worker_times),
        worker_sharpen_times=worker_times,
    )


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    parser = _build_parser(
        "imgsharpen-distributed",
        "Sharpen the .png and .jpg images of a directory, "
        "splitting the files between workers.",
        ("input_dir", str),
        ("output_dir", str),
        ("max_images", int),
    )
    parser.add_argument(
        "-n", "--processes", type=_positive_int, default=2, dest="num_processes"
    )
    args = parser.parse_args(argv)

    _announce(
        "Process running with:",
        args.input_dir,
        args.output_dir,
        num_of_processes=args.num_processes,
        max_images=args.max_images,
    )
    try:
        report = run_distributed(
            args.input_dir, args.output_dir, args.num_processes, args.max_images
        )
    except OSError as error:
        _warn(error)
        return 1

    _summarise(
        report, "total wall clock runtime", "total sharpen time", worker_label="rank"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())