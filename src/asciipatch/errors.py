class AsciiPatchError(Exception):
    """Base class for all rendering failures."""


class ImageLoadFailure(AsciiPatchError):
    """The image at a path could not be opened or decoded."""


class InvalidConfiguration(AsciiPatchError, ValueError):
    """Grid dimensions or bias are out of range."""


class EmptyPalette(AsciiPatchError, ValueError):
    """A palette needs at least two glyphs to map brightness onto."""
