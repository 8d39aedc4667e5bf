"""GIMP Palette (.gpl) export.

Output layout, byte for byte:

    GIMP Palette
    Name: <title>
    Columns: 8
    #<comment>              (only when a comment is given)
    <blank line>
    RRR GGG BBB <name>      (one line per colour, channels right-aligned)

GIMP, Inkscape and Krita all read this layout. A palette holds at most 256
colours; bigger lists are rejected when the palette is built.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from colour_kit.core.colour import ColourLike, Rgb
from colour_kit.core.errors import InvalidPaletteEntry, PaletteTooLarge, SinkUnavailable
from colour_kit.core.sink import FileSink

MAX_COLOURS = 256
COLUMNS = 8

_FILENAME_UNSAFE = re.compile(r'[ /\\]')


@dataclass(frozen=True)
class PaletteEntry:
    """A colour plus the name shown next to it in the palette file."""

    colour: ColourLike
    name: str = ''

    def to_rgb(self) -> Rgb:
        return self.colour.to_rgb()


def _entry_rgb(entry: object) -> Rgb:
    to_rgb = getattr(entry, 'to_rgb', None)
    if not callable(to_rgb):
        raise InvalidPaletteEntry(f'Palette entry {entry!r} cannot be converted to RGB')
    rgb = to_rgb()
    if not all(hasattr(rgb, channel) for channel in ('red', 'green', 'blue')):
        raise InvalidPaletteEntry(f'Palette entry {entry!r} returned {rgb!r} from to_rgb()')
    if not isinstance(rgb, Rgb):
        rgb = Rgb(rgb.red, rgb.green, rgb.blue)
    return rgb


def _has_line_break(text: str) -> bool:
    return any(c in text for c in '\r\n')


def format_entry(entry: object) -> str:
    """One palette line: channels padded to width 3, then the entry's name."""
    rgb = _entry_rgb(entry)
    name = getattr(entry, 'name', '') or f'#{rgb.to_hex():06x}'
    return f'{rgb.red:3d} {rgb.green:3d} {rgb.blue:3d} {name}'


class GPLPalette:
    """An ordered list of colours ready to be written as a .gpl file.

    Entries may be anything with a to_rgb() method (Colour, Rgb, Hsv,
    PaletteEntry). They are only converted when the text is rendered, so an
    unusable entry raises InvalidPaletteEntry from to_string()/save().
    """

    def __init__(self, palette: Iterable[ColourLike], title: str, comment: str | None = None):
        entries = tuple(palette)
        if len(entries) > MAX_COLOURS:
            raise PaletteTooLarge(f'Palette has {len(entries)} colours, max is {MAX_COLOURS}')
        if not title:
            raise ValueError('Palette title must not be empty')
        if _has_line_break(title):
            raise ValueError(f'Palette title must be a single line: {title!r}')
        if comment and _has_line_break(comment):
            raise ValueError(f'Palette comment must be a single line: {comment!r}')
        self._palette = entries
        self._title = title
        self._comment = comment

    @property
    def palette(self) -> tuple[ColourLike, ...]:
        return self._palette

    @property
    def title(self) -> str:
        return self._title

    @property
    def comment(self) -> str | None:
        return self._comment

    @property
    def filename(self) -> str:
        """Title with spaces and path separators turned into underscores, plus .gpl."""
        return _FILENAME_UNSAFE.sub('_', self._title) + '.gpl'

    def __len__(self) -> int:
        return len(self._palette)

    def to_string(self) -> str:
        lines = ['GIMP Palette', f'Name: {self._title}', f'Columns: {COLUMNS}']
        if self._comment:
            lines.append(f'#{self._comment}')
        lines.append('')
        lines.extend(format_entry(entry) for entry in self._palette)
        return '\n'.join(lines) + '\n'

    def __str__(self) -> str:
        return self.to_string()

    def save(self, sink: FileSink) -> str:
        """Render the palette and hand it to sink. Returns the filename used.

        The sink is called exactly once. If it reports failure or raises
        OSError, SinkUnavailable is raised with the cause attached.
        """
        content = self.to_string()
        filename = self.filename
        try:
            ok = sink.write(filename, content)
        except OSError as e:
            raise SinkUnavailable(f'Could not write {filename}: {e}') from e
        if ok is False:
            raise SinkUnavailable(f'Could not write {filename}: sink refused the write')
        return filename
