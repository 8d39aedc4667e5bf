"""Show every encoding of each colour: hex, rgb, hsv and hsl.

Accepts the same forms the library prints: '#rrggbb', 'rrggbb', the 3-digit
shorthand, 'rgb(r,g,b)' and 'hsv(h,s,v)'. Out-of-range values are normalised
the way the Colour setters do it (RGB masked to a byte, HSV clamped).

Example:
    colour-kit convert '#f0a' 'rgb(255,128,0)' 'hsv(200,0.5,1)'
"""

from colour_kit.core.report import describe
from colour_kit.core.types import ColourInput, Command, Report

command = Command(
    name='convert',
    help='Show each colour as hex, rgb, hsv and hsl.',
)


@command.run
def run(colours: list[ColourInput], report: Report, args) -> None:
    for item in colours:
        report.add(item.label, 'convert', describe(item.colour))
