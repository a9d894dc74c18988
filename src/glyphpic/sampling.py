import numpy as np

from glyphpic.model import PixelBuffer


def luminance(pixels: np.ndarray) -> np.ndarray:
    """Unweighted mean of R, G and B per pixel, alpha ignored. Range [0, 255]."""
    return pixels[..., :3].astype(np.float64).sum(axis=-1) / 3


def sample_grid(buffer: PixelBuffer, row_stride: int, col_stride: int) -> np.ndarray:
    """Brightness of the origin pixel of every stride block. Returns array of shape (rows, cols).

    Rows 0, row_stride, 2 * row_stride, ... below the buffer height are visited,
    and likewise for columns, so a trailing partial block is still sampled at
    its in-range origin.
    """
    if row_stride < 1 or col_stride < 1:
        raise ValueError(f"Strides must be positive, got {row_stride}x{col_stride}")
    return luminance(buffer.pixels[::row_stride, ::col_stride])
