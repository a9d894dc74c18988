class GlyphpicError(Exception):
    """Base class for everything this package raises on purpose."""


class ImageLoadError(GlyphpicError):
    """The image source could not be fetched or decoded."""


class UnsupportedModeError(GlyphpicError, ValueError):
    def __init__(self, mode):
        super().__init__(f"Unsupported render mode: {mode!r}")
        self.mode = mode


class InvalidDimensionError(GlyphpicError, ValueError):
    pass
