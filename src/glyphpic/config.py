"""Named rendering constants: canvas bound, glyph palettes and brightness ladders."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from glyphpic.charsets import ASCII_GRADIENT, DOTS, LADDER_LIMITS, SHADES
from glyphpic.model import RenderMode


@dataclass(frozen=True)
class GradientPalette:
    """Glyphs ordered densest to sparsest, picked by a continuous brightness ratio."""

    glyphs: str

    def __post_init__(self):
        if not self.glyphs:
            raise ValueError("Gradient palette needs at least one glyph")

    def index(self, brightness: float) -> int:
        return math.floor(brightness / 255 * (len(self.glyphs) - 1))

    def map(self, brightness: np.ndarray) -> np.ndarray:
        indices = np.floor(brightness / 255 * (len(self.glyphs) - 1)).astype(np.intp)
        return np.asarray(list(self.glyphs))[indices]


@dataclass(frozen=True)
class ThresholdLadder:
    """Glyphs bound to half-open brightness intervals, checked in ascending order.

    ``steps`` pairs an exclusive upper limit with its glyph; anything at or
    above the last limit gets ``otherwise``.
    """

    steps: tuple[tuple[float, str], ...]
    otherwise: str = " "

    def __post_init__(self):
        limits = [limit for limit, _ in self.steps]
        if limits != sorted(limits):
            raise ValueError(f"Ladder limits must ascend: {limits}")

    @classmethod
    def from_glyphs(cls, glyphs: str, limits=LADDER_LIMITS) -> ThresholdLadder:
        """Pair ``limits`` with the leading glyphs; the final glyph is the fallback."""
        if len(glyphs) != len(limits) + 1:
            raise ValueError(f"Need {len(limits) + 1} glyphs for {len(limits)} limits, got {len(glyphs)}")
        return cls(steps=tuple(zip(limits, glyphs)), otherwise=glyphs[-1])

    @property
    def limits(self) -> tuple[float, ...]:
        return tuple(limit for limit, _ in self.steps)

    @property
    def glyphs(self) -> str:
        return "".join(glyph for _, glyph in self.steps) + self.otherwise

    def glyph_for(self, brightness: float) -> str:
        for limit, glyph in self.steps:
            if brightness < limit:
                return glyph
        return self.otherwise

    def map(self, brightness: np.ndarray) -> np.ndarray:
        # side="right" sends a value equal to a limit into the next bucket
        indices = np.searchsorted(np.asarray(self.limits, dtype=np.float64), brightness, side="right")
        return np.asarray(list(self.glyphs))[indices]


@dataclass(frozen=True)
class RenderConfig:
    max_dimension: int = 300
    ascii_palette: GradientPalette = field(default_factory=lambda: GradientPalette(ASCII_GRADIENT))
    dot_thresholds: ThresholdLadder = field(default_factory=lambda: ThresholdLadder.from_glyphs(DOTS))
    pixel_thresholds: ThresholdLadder = field(default_factory=lambda: ThresholdLadder.from_glyphs(SHADES))
    fetch_timeout: float = 30.0

    def policy_for(self, mode: RenderMode) -> GradientPalette | ThresholdLadder:
        return {
            RenderMode.ASCII: self.ascii_palette,
            RenderMode.DOT: self.dot_thresholds,
            RenderMode.PIXEL: self.pixel_thresholds,
        }[mode]


DEFAULT_CONFIG = RenderConfig()
