"""The 3x3 sharpening convolution applied to every image."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

SHARPEN_KERNEL = np.array(
    [
        [0, -1, 0],
        [-1, 5, -1],
        [0, -1, 0],
    ],
    dtype=np.int32,
)


def apply_sharpening_filter(image: ArrayLike) -> NDArray[np.uint8]:
    """Return a sharpened copy of an 8-bit image.

    The image is an array of shape (height, width) or (height, width, channels).
    Each channel of every interior pixel is convolved with ``SHARPEN_KERNEL``
    and clamped to 0..255; the one-pixel border is copied unchanged.
    """
    source = np.asarray(image)
    if source.ndim not in (2, 3):
        raise ValueError(
            f"expected an image of 2 or 3 dimensions, got {source.ndim}"
        )
    if source.dtype != np.uint8:
        raise ValueError(f"expected an 8-bit image, got dtype {source.dtype}")

    result = source.copy()
    height, width = source.shape[:2]
    if height < 3 or width < 3:
        return result

    wide = source.astype(np.int32)
    total = np.zeros_like(wide[1:-1, 1:-1])
    for (row, col), weight in np.ndenumerate(SHARPEN_KERNEL):
        if weight:
            total += weight * wide[row : height - 2 + row, col : width - 2 + col]

    result[1:-1, 1:-1] = np.clip(total, 0, 255).astype(np.uint8)
    return result