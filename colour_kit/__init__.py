"""colour-kit: RGB/HSV/hex colours and GIMP palette export."""

from colour_kit.core.colour import Colour, ColourLike, Hsv, Rgb, is_valid_hex, parse_colour, parse_hex
from colour_kit.core.errors import (
    ColourKitError,
    InvalidColourInput,
    InvalidHexInput,
    InvalidPaletteEntry,
    PaletteTooLarge,
    SinkUnavailable,
)
from colour_kit.core.gpl import GPLPalette, PaletteEntry
from colour_kit.core.sink import DirectorySink, FileSink, MemorySink

__all__ = [
    'Colour',
    'ColourKitError',
    'ColourLike',
    'DirectorySink',
    'FileSink',
    'GPLPalette',
    'Hsv',
    'InvalidColourInput',
    'InvalidHexInput',
    'InvalidPaletteEntry',
    'MemorySink',
    'PaletteEntry',
    'PaletteTooLarge',
    'Rgb',
    'SinkUnavailable',
    'is_valid_hex',
    'parse_colour',
    'parse_hex',
]
