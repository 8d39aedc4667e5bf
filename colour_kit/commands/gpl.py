"""Build a GIMP palette (.gpl) from the given colours.

The palette title comes from --title, else COLOUR_KIT_PALETTE_TITLE, else
'Palette'. The file is named after the title with spaces turned into
underscores, e.g. 'My Palette' -> My_Palette.gpl, and written to --out
(default: COLOUR_KIT_OUTPUT_DIR, else the current directory).

--stdout prints the palette text instead of writing a file.
A palette holds at most 256 colours.

Example:
    colour-kit gpl '#ff0000' '#00ff00' '#0000ff' --title 'RGB Primaries' -o ./palettes
    colour-kit gpl '#f0a' 'rgb(0,128,255)' --comment 'from the mockups' --stdout
"""

from colour_kit.core.env import load_settings
from colour_kit.core.gpl import GPLPalette
from colour_kit.core.sink import DirectorySink
from colour_kit.core.types import ColourInput, Command, Report

command = Command(
    name='gpl',
    help='Export the colours as a GIMP palette (.gpl) file.',
)


@command.run
def run(colours: list[ColourInput], report: Report, args) -> None:
    settings = load_settings()
    title = getattr(args, 'title', None) or settings.palette_title
    palette = GPLPalette(
        [item.colour for item in colours],
        title,
        getattr(args, 'comment', None),
    )

    if getattr(args, 'stdout', False):
        report.raw = palette.to_string()
        return

    sink = DirectorySink(getattr(args, 'out', None) or settings.output_dir)
    palette.save(sink)
    for path in sink.written:
        report.record_file(str(path))
    for item in colours:
        report.add(item.label, 'gpl', {'hex': item.colour.to_string_hex()})
