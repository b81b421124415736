"""Exception hierarchy raised by the ocariner core."""


class OcarinerError(Exception):
    """Base class for every error the core raises to its caller."""


class GlyphDecodeError(OcarinerError):
    """A glyph byte constant is not valid UTF-8."""


class RenderError(OcarinerError):
    """The staff grid could not be written to the output sink."""


class PlaybackError(OcarinerError):
    """A playback frame could not be written to the output sink."""
