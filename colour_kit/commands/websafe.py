"""Snap each colour to the 216-colour web-safe grid.

Every channel is rounded to the nearest of 0, 51, 102, 153, 204, 255.

Example:
    colour-kit websafe '#1a7fe0'
"""

from colour_kit.core.report import describe
from colour_kit.core.types import ColourInput, Command, Report

command = Command(
    name='websafe',
    help='Round each colour to the nearest web-safe colour.',
)


@command.run
def run(colours: list[ColourInput], report: Report, args) -> None:
    for item in colours:
        report.add(item.label, 'websafe', describe(item.colour.clone().to_web_safe()))
