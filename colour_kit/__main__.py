"""colour-kit: convert colours between RGB, HSV and hex; export GIMP palettes.

Usage: colour-kit <command> [colours ...] [options]

Commands are auto-discovered from colour_kit/commands/.
Each command module's docstring is its documentation.
Run `colour-kit help <command>` for full module docs.

Colours may be written as '#rrggbb', 'rrggbb', '#rgb', 'rgb(r,g,b)' or
'hsv(h,s,v)'. Malformed input is normalised with a warning on stderr: short
hex gives black, long hex keeps the first 6 digits, and an rgb(...)/hsv(...)
that cannot be read gives black.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-kit looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from colour_kit import registry
from colour_kit.core.colour import parse_colour
from colour_kit.core.env import load_env
from colour_kit.core.errors import ColourKitError, InvalidColourInput, InvalidHexInput
from colour_kit.core.report import format_json, format_text
from colour_kit.core.types import ColourInput, Report

PROG = 'colour-kit'


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid int value: {text!r}') from None
    if value < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1, got {value}')
    return value


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'colour_kit.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  colour-kit convert '#f0a' 'rgb(255,128,0)' 'hsv(200,0.5,1)'\n"
        "  colour-kit invert '#ff8000' --json\n"
        "  colour-kit websafe '#1a7fe0'\n"
        '  colour-kit random --count 8 --seed 42\n'
        "  colour-kit gpl '#ff0000' '#00ff00' --title 'My Palette' -o ./palettes\n"
        "  colour-kit gpl '#ff0000' --stdout\n"
        '  colour-kit help gpl\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  COLOUR_KIT_OUTPUT_DIR     default directory for saved palettes\n'
        '  COLOUR_KIT_PALETTE_TITLE  default palette title\n'
    )
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Convert colours between RGB, HSV and hex; export GIMP palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('colours', nargs='*', help="Colours: '#rrggbb', '#rgb', 'rgb(r,g,b)' or 'hsv(h,s,v)'")
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-t', '--title', help='Palette title (gpl)')
        p.add_argument('-c', '--comment', help='One-line palette comment (gpl)')
        p.add_argument('-o', '--out', metavar='DIR', help='Directory to write the palette to (gpl)')
        p.add_argument('-n', '--count', type=_positive_int, default=1, help='How many colours to generate (random)')
        p.add_argument('-s', '--seed', type=int, default=None, help='Seed for reproducible output (random)')
        p.add_argument('--stdout', action='store_true', help='Print the palette instead of writing a file (gpl)')

    # `help` subcommand: prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print(f'\nRun: {PROG} help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _parse_colours(values: list[str]) -> list[ColourInput]:
    """Parse command-line colours, warning about input that had to be normalised."""
    colours = []
    for text in values:
        try:
            colour = parse_colour(text, strict=True)
        except InvalidColourInput as e:
            colour = parse_colour(text)
            kind = 'hex colour' if isinstance(e, InvalidHexInput) else 'colour'
            print(f'{PROG}: warning: {text!r} is not a valid {kind}, using {colour}', file=sys.stderr)
        colours.append(ColourInput(label=text, colour=colour))
    return colours


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else: OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'{PROG}: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    cmd = registry.get(args.command)
    colours = _parse_colours(args.colours)
    if cmd.takes_colours and not colours:
        print(f'{PROG}: error: {args.command} needs at least one colour', file=sys.stderr)
        sys.exit(1)

    report = Report(command=args.command)
    try:
        cmd.execute(colours, report, args)
    except (ColourKitError, ValueError) as e:
        print(f'{PROG}: error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
