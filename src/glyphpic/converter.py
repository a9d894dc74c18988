import logging
from pathlib import Path

from PIL import Image

from glyphpic.config import DEFAULT_CONFIG, RenderConfig
from glyphpic.model import RenderMode, TextGrid
from glyphpic.renderer import GlyphRenderer
from glyphpic.sampler import downscale, load_image

logger = logging.getLogger(__name__)


def image_to_text(
    source: Image.Image | bytes | str | Path,
    mode: RenderMode | str = RenderMode.ASCII,
    config: RenderConfig = DEFAULT_CONFIG,
) -> TextGrid:
    # Resolve the mode first so a bad mode never costs a fetch
    renderer = GlyphRenderer(mode, config)
    image = load_image(source, timeout=config.fetch_timeout)
    buffer = downscale(image, config.max_dimension)
    grid = renderer.render(buffer)
    logger.debug("rendered %s art: %d rows x %d columns", renderer.mode.value, grid.height, grid.width)
    return grid
