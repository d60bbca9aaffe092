"""Input discovery, output preparation, image I/O and run reporting."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image

PathLike = Union[str, Path]

IMAGE_EXTENSIONS = (".png", ".jpg")


class InputDirectoryError(FileNotFoundError):
    """The input directory does not exist or is not a directory."""


@dataclass
class RunReport:
    """Counts and timings gathered over one run."""

    file_count: int = 0
    total_time: float = 0.0
    sharpen_time: float = 0.0
    worker_sharpen_times: list[float] = field(default_factory=list)


def list_images(input_dir: PathLike, max_images: int) -> list[Path]:
    """Return the .png and .jpg files directly inside ``input_dir``.

    At most ``max_images`` paths are returned; a negative limit keeps them all.
    """
    directory = Path(input_dir)
    if not directory.is_dir():
        raise InputDirectoryError(
            "Input directory does not exist or is not a directory."
        )
    images = sorted(
        entry for entry in directory.iterdir() if entry.suffix in IMAGE_EXTENSIONS
    )
    if max_images >= 0:
        del images[max_images:]
    return images


def prepare_output_dir(output_dir: PathLike) -> Path:
    """Empty ``output_dir`` if it exists, otherwise create it with its parents."""
    directory = Path(output_dir)
    if directory.exists():
        for entry in directory.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
    else:
        directory.mkdir(parents=True)
    return directory


def load_image(path: PathLike) -> NDArray[np.uint8]:
    """Read an image file as a (height, width, 3) array of bytes."""
    try:
        with Image.open(path) as picture:
            return np.asarray(picture.convert("RGB"), dtype=np.uint8).copy()
    except OSError as error:
        raise OSError(f"Could not load image: {path}") from error


def save_image(path: PathLike, image: NDArray[np.uint8]) -> None:
    """Write an image array to ``path``; the format follows the suffix."""
    try:
        Image.fromarray(np.asarray(image, dtype=np.uint8)).save(path)
    except (OSError, ValueError, KeyError) as error:
        raise OSError(f"Could not write image to {path}") from error