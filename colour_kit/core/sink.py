"""File sinks: where serialised palettes end up.

A sink is anything with write(filename, content). Returning False (or
raising OSError) means the write did not happen; GPLPalette.save() turns
both into SinkUnavailable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSink(Protocol):
    def write(self, filename: str, content: str) -> bool | None: ...


class DirectorySink:
    """Writes each file as UTF-8 text under a directory, creating it if needed."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.written: list[Path] = []

    def write(self, filename: str, content: str) -> bool:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / Path(filename).name
        # newline='' keeps the GPL line endings byte-exact on every platform
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        self.written.append(path)
        return True


class MemorySink:
    """Keeps written files in a dict. Useful for tests and --stdout."""

    def __init__(self):
        self.files: dict[str, str] = {}

    def write(self, filename: str, content: str) -> bool:
        self.files[filename] = content
        return True
