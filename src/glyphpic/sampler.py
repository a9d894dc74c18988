"""Loading image sources and fitting them to the rendering canvas."""

import base64
import binascii
import io
import logging
from pathlib import Path

import requests
from PIL import Image, UnidentifiedImageError

from glyphpic.errors import ImageLoadError, InvalidDimensionError
from glyphpic.model import PixelBuffer

logger = logging.getLogger(__name__)

DEFAULT_MAX_DIMENSION = 300


def _fetch(url: str, timeout: float) -> bytes:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ImageLoadError(f"Could not fetch {url}: {exc}") from exc
    return response.content


def _decode_data_url(url: str) -> bytes:
    """Payload of a base64 ``data:`` URL, as produced by a browser file upload."""
    header, sep, payload = url.partition(",")
    if not sep or not header.endswith(";base64"):
        raise ImageLoadError("Only base64 data URLs are supported")
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ImageLoadError(f"Malformed data URL: {exc}") from exc


def _read_source(source, timeout: float) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, str) and source.startswith(("http://", "https://")):
        return _fetch(source, timeout)
    if isinstance(source, str) and source.startswith("data:"):
        return _decode_data_url(source)
    path = Path(source)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ImageLoadError(f"Could not read {path}: {exc}") from exc


def load_image(source: Image.Image | bytes | str | Path, timeout: float = 30.0) -> Image.Image:
    """Decode an image from a Pillow image, raw bytes, a data/http(s) URL or a file path.

    Decoding is forced here so corrupt or truncated data fails with
    ``ImageLoadError`` rather than later during resampling.
    """
    if isinstance(source, Image.Image):
        return source
    data = _read_source(source, timeout)
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageLoadError(f"Could not decode image: {exc}") from exc
    logger.debug("decoded %s image %dx%d", image.format, image.width, image.height)
    return image


def fit_size(width: int, height: int, max_dimension: int = DEFAULT_MAX_DIMENSION) -> tuple[int, int]:
    """Canvas size for an image scaled so its longer side matches ``max_dimension``.

    Images smaller than the bound are scaled up, so the canvas is the same
    size whatever the source resolution.
    """
    if max_dimension <= 0:
        raise InvalidDimensionError(f"max_dimension must be positive, got {max_dimension}")
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(f"Image has no area: {width}x{height}")
    scale = min(max_dimension / width, max_dimension / height)
    return max(1, round(width * scale)), max(1, round(height * scale))


def downscale(image: Image.Image, max_dimension: int = DEFAULT_MAX_DIMENSION) -> PixelBuffer:
    size = fit_size(image.width, image.height, max_dimension)
    resized = image.convert("RGBA").resize(size, Image.BILINEAR)
    logger.debug("resampled %dx%d to %dx%d", image.width, image.height, *size)
    return PixelBuffer.from_image(resized)
