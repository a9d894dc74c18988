import logging

from glyphpic.config import DEFAULT_CONFIG, RenderConfig
from glyphpic.model import PixelBuffer, RenderMode, TextGrid
from glyphpic.sampling import sample_grid

logger = logging.getLogger(__name__)

# (row stride, col stride). Rows are skipped because character cells are taller than wide.
STRIDES = {
    RenderMode.ASCII: (2, 1),
    RenderMode.DOT: (2, 2),
    # Reads only the top-left pixel of each 10x10 block, not a block average
    RenderMode.PIXEL: (10, 10),
}


class GlyphRenderer:
    """Maps a pixel buffer to a grid of glyphs for one render mode."""

    def __init__(self, mode: RenderMode | str, config: RenderConfig = DEFAULT_CONFIG):
        self.mode = RenderMode.parse(mode)
        self.config = config
        self.row_stride, self.col_stride = STRIDES[self.mode]
        self.policy = config.policy_for(self.mode)

    def render(self, buffer: PixelBuffer) -> TextGrid:
        brightness = sample_grid(buffer, self.row_stride, self.col_stride)
        glyphs = self.policy.map(brightness)
        lines = tuple("".join(row) for row in glyphs)
        logger.debug(
            "rendered %dx%d buffer as %s: %d rows of %d glyphs",
            buffer.width,
            buffer.height,
            self.mode.value,
            len(lines),
            brightness.shape[1],
        )
        return TextGrid(lines=lines, mode=self.mode)


def render(buffer: PixelBuffer, mode: RenderMode | str, config: RenderConfig = DEFAULT_CONFIG) -> TextGrid:
    return GlyphRenderer(mode, config).render(buffer)
