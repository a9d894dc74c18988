from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from PIL import Image

from glyphpic.errors import InvalidDimensionError, UnsupportedModeError


class RenderMode(str, Enum):
    ASCII = "ascii"
    DOT = "dot"
    PIXEL = "pixel"

    @classmethod
    def parse(cls, value: RenderMode | str) -> RenderMode:
        """Accept a member or its value/name in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnsupportedModeError(value)


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Read-only RGBA pixels, shape (height, width, 4) uint8, row-major top to bottom."""

    pixels: np.ndarray

    def __post_init__(self):
        pixels = np.array(self.pixels, copy=True)
        if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.dtype != np.uint8:
            raise InvalidDimensionError(f"Expected (H, W, 4) uint8 pixels, got {pixels.shape} {pixels.dtype}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise InvalidDimensionError(f"Empty pixel buffer: {pixels.shape[1]}x{pixels.shape[0]}")
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelBuffer:
        return cls(np.asarray(image.convert("RGBA"), dtype=np.uint8))

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()


@dataclass(frozen=True)
class TextGrid:
    lines: tuple[str, ...]  # one string per visited row
    mode: RenderMode

    @property
    def width(self) -> int:
        return len(self.lines[0]) if self.lines else 0

    @property
    def height(self) -> int:
        return len(self.lines)

    def to_text(self) -> str:
        """Newline-terminated rows, ready for monospace display."""
        return "".join(line + "\n" for line in self.lines)

    def __str__(self) -> str:
        return self.to_text()
