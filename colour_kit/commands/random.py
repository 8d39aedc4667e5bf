"""Generate random colours, uniform over 0x000000..0xFFFFFF.

--count sets how many (default 1, must be at least 1). --seed makes the output reproducible:
the same seed always yields the same colours.

Example:
    colour-kit random --count 8 --seed 42
"""

import numpy as np

from colour_kit.core.colour import Colour
from colour_kit.core.report import describe
from colour_kit.core.types import ColourInput, Command, Report

command = Command(
    name='random',
    help='Generate random colours (--count, --seed).',
    takes_colours=False,
)


@command.run
def run(colours: list[ColourInput], report: Report, args) -> None:
    rng = np.random.default_rng(args.seed)
    for i in range(args.count):
        colour = Colour.random(rng)
        report.add(f'{i + 1}', 'random', describe(colour))
