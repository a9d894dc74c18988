import numpy as np
import pytest

from glyphpic.config import DEFAULT_CONFIG, GradientPalette, RenderConfig, ThresholdLadder
from glyphpic.model import RenderMode


def test_defaults():
    assert DEFAULT_CONFIG.max_dimension == 300
    assert DEFAULT_CONFIG.ascii_palette.glyphs == "@#%$&*+=-:. "
    assert DEFAULT_CONFIG.dot_thresholds.steps == ((50, "●"), (100, "◉"), (150, "○"), (200, "◌"))
    assert DEFAULT_CONFIG.dot_thresholds.otherwise == " "
    assert DEFAULT_CONFIG.pixel_thresholds.glyphs == "█▓▒░ "


@pytest.mark.parametrize("ladder", [DEFAULT_CONFIG.dot_thresholds, DEFAULT_CONFIG.pixel_thresholds])
def test_ladder_covers_every_brightness(ladder):
    values = np.arange(256, dtype=np.float64)
    mapped = ladder.map(values)
    for value, glyph in zip(values, mapped):
        assert glyph == ladder.glyph_for(value)
        assert glyph in ladder.glyphs


def test_ladder_is_half_open():
    ladder = ThresholdLadder.from_glyphs("abcde")
    assert ladder.glyph_for(49.999) == "a"
    assert ladder.glyph_for(50) == "b"
    assert ladder.glyph_for(200) == "e"
    assert list(ladder.map(np.array([49.999, 50.0, 200.0]))) == ["a", "b", "e"]


def test_ladder_accepts_fractional_brightness():
    # (1 + 0 + 0) / 3 lands between integers
    assert DEFAULT_CONFIG.dot_thresholds.glyph_for(1 / 3) == "●"


def test_ladder_rejects_unsorted_limits():
    with pytest.raises(ValueError):
        ThresholdLadder(steps=((100, "a"), (50, "b")))


def test_ladder_from_glyphs_needs_one_glyph_per_bucket():
    with pytest.raises(ValueError):
        ThresholdLadder.from_glyphs("abc")


def test_gradient_scalar_and_vector_agree():
    palette = DEFAULT_CONFIG.ascii_palette
    values = np.arange(256, dtype=np.float64)
    mapped = palette.map(values)
    for value, glyph in zip(values, mapped):
        assert glyph == palette.glyphs[palette.index(value)]


def test_gradient_ends():
    palette = GradientPalette("@#%$&*+=-:. ")
    assert palette.index(0) == 0
    assert palette.index(255) == 11


def test_single_glyph_gradient():
    palette = GradientPalette("#")
    assert list(palette.map(np.array([0.0, 128.0, 255.0]))) == ["#", "#", "#"]


def test_empty_gradient_rejected():
    with pytest.raises(ValueError):
        GradientPalette("")


def test_policy_for_each_mode():
    config = RenderConfig(max_dimension=10)
    assert config.policy_for(RenderMode.ASCII) is config.ascii_palette
    assert config.policy_for(RenderMode.DOT) is config.dot_thresholds
    assert config.policy_for(RenderMode.PIXEL) is config.pixel_thresholds
