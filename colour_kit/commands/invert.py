"""Invert each colour by complementing its 24-bit value.

'#ff8000' becomes '#007fff'. Inverting twice gives back the original.

Example:
    colour-kit invert '#ff8000' --json
"""

from colour_kit.core.report import describe
from colour_kit.core.types import ColourInput, Command, Report

command = Command(
    name='invert',
    help='Invert each colour (bitwise complement of the hex value).',
)


@command.run
def run(colours: list[ColourInput], report: Report, args) -> None:
    for item in colours:
        report.add(item.label, 'invert', describe(item.colour.clone().invert()))
