"""Sharpen a directory of images one after another.

Also holds the small command-line helpers shared by the other runners.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from imgsharpen import workspace
from imgsharpen.kernel import apply_sharpening_filter
from imgsharpen.workspace import InputDirectoryError, RunReport

_MISSING_INPUT = "Input directory does not exist or is not a directory."


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {text}")
    return value


def _require_input_dir(input_dir: workspace.PathLike) -> None:
    if not Path(input_dir).is_dir():
        raise InputDirectoryError(_MISSING_INPUT)


def _warn(error: object) -> None:
    print(f"Error: {error}", file=sys.stderr)


def _timed_sharpen(image: NDArray[np.uint8]) -> tuple[NDArray[np.uint8], float]:
    """Sharpen ``image`` and return the result with the seconds it took."""
    start = time.perf_counter()
    sharpened = apply_sharpening_filter(image)
    return sharpened, time.perf_counter() - start


def _save_or_warn(target: Path, image: NDArray[np.uint8]) -> None:
    try:
        workspace.save_image(target, image)
    except OSError as error:
        _warn(error)


def _build_parser(
    prog: str, description: str, *positionals: tuple[str, Callable[[str], Any]]
) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    for name, kind in positionals:
        parser.add_argument(name, type=kind)
    return parser


def _announce(
    title: str, input_dir: workspace.PathLike, output_dir: workspace.PathLike, **settings: Any
) -> None:
    print(title)
    lines = {
        "input_dir": Path(input_dir).as_posix(),
        "output_dir": Path(output_dir).as_posix(),
        **settings,
    }
    for key, value in lines.items():
        print(f"- {key}: {value}")
    print()


def _summarise(
    report: RunReport,
    runtime_label: str,
    sharpen_label: str,
    unit: str = "",
    worker_label: str | None = None,
) -> None:
    print(f"Processed {report.file_count} files:")
    print(f"- {runtime_label}: {report.total_time:g}{unit}")
    print(f"- {sharpen_label}: {report.sharpen_time:g}{unit}")
    if worker_label:
        for index, seconds in enumerate(report.worker_sharpen_times):
            print(f"  - {worker_label} {index} sharpen time: {seconds:g}")


def run_sequential(
    input_dir: workspace.PathLike, output_dir: workspace.PathLike, max_images: int
) -> RunReport:
    """Sharpen up to ``max_images`` images from ``input_dir`` into ``output_dir``.

    Each output keeps its input's file name. Images that cannot be read are
    reported and skipped; images that cannot be written are reported but
    still counted.
    """
    _require_input_dir(input_dir)
    output = workspace.prepare_output_dir(output_dir)
    files = workspace.list_images(input_dir, max_images)

    report = RunReport()
    start = time.perf_counter()
    for path in files:
        try:
            image = workspace.load_image(path)
        except OSError as error:
            _warn(error)
            continue
        sharpened, elapsed = _timed_sharpen(image)
        report.sharpen_time += elapsed
        _save_or_warn(output / path.name, sharpened)
        report.file_count += 1

    report.total_time = time.perf_counter() - start
    return report


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = _build_parser(
        "imgsharpen-sequential",
        "Sharpen the .png and .jpg images of a directory sequentially.",
        ("input_dir", str),
        ("output_dir", str),
        ("max_images", int),
    ).parse_args(argv)

    _announce(
        "Sequential process running with:",
        args.input_dir,
        args.output_dir,
        max_images=args.max_images,
    )
    try:
        report = run_sequential(args.input_dir, args.output_dir, args.max_images)
    except InputDirectoryError as error:
        print(f"Error: {error}")
        return 1

    _summarise(report, "Total runtime", "Total sharpen time", unit=" sec")
    return 0


if __name__ == "__main__":
    sys.exit(main())