"""Exceptions raised by colour-kit.

Out-of-range channel values are never errors: the setters mask or clamp them.
These exceptions cover the few hard failures left.
"""


class ColourKitError(Exception):
    """Base class for every colour-kit error."""


class InvalidColourInput(ColourKitError, ValueError):
    """A colour string could not be read as-is (only raised in strict parsing)."""


class InvalidHexInput(InvalidColourInput):
    """A hex string could not be read as-is (only raised in strict parsing)."""


class PaletteTooLarge(ColourKitError):
    """More colours than a GPL palette can hold."""


class InvalidPaletteEntry(ColourKitError, TypeError):
    """A palette entry has no way to produce RGB channels."""


class SinkUnavailable(ColourKitError):
    """The file sink could not write the palette."""
