"""Shared types for the colour-kit CLI: Command, ColourInput, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from colour_kit.core.colour import Colour


@dataclass
class ColourInput:
    """A colour parsed from the command line, keyed by what the user typed."""

    label: str
    colour: Colour


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    command: str = ''
    entries: dict[str, dict[str, Any]] = field(default_factory=dict)
    files: list[str] = field(default_factory=list)
    raw: str | None = None  # preformatted output that replaces the text report

    def add(self, label: str, command_name: str, data: dict[str, Any]) -> None:
        """Add command results for one colour."""
        if label not in self.entries:
            self.entries[label] = {}
        self.entries[label][command_name] = data

    def record_file(self, path: str) -> None:
        self.files.append(path)


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='invert', help='Invert colours')

        @command.run
        def run(colours, report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', takes_colours: bool = True):
        self.name = name
        self.help = help
        self.takes_colours = takes_colours
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, colours: list[ColourInput], report: Report, args: Any) -> None:
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(colours, report, args)
