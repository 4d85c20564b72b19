"""Exception hierarchy for cursivekern."""


class CursiveKernError(Exception):
    """Base exception for all cursivekern errors."""

    pass


class FontError(CursiveKernError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphError(CursiveKernError):
    """Errors related to glyph lookup."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class GeometryError(CursiveKernError):
    """Errors in geometric calculations."""

    pass


class UnsupportedSegmentError(GeometryError):
    """The distance oracle cannot measure this segment-type pairing."""

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Distance unavailable for segment combination {first}/{second}")


class InvalidSegmentError(GeometryError):
    """Outline data could not be turned into segments."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
