"""Environment and .env configuration for colour-kit.

Load order (first wins):
  1. Existing OS environment variables: never overwritten.
  2. The file passed as --env-file (if given).
  3. A .env found by walking up from cwd, stopping at the nearest .git
     (directory for a clone, file for a worktree).

Recognised variables:
  COLOUR_KIT_OUTPUT_DIR     where `gpl` saves palettes (default: cwd)
  COLOUR_KIT_PALETTE_TITLE  title used when --title is not given
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

OUTPUT_DIR_VAR = 'COLOUR_KIT_OUTPUT_DIR'
PALETTE_TITLE_VAR = 'COLOUR_KIT_PALETTE_TITLE'
DEFAULT_TITLE = 'Palette'


@dataclass(frozen=True)
class Settings:
    output_dir: Path = Path('.')
    palette_title: str = DEFAULT_TITLE


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes around the value are dropped, # lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys that are not set yet.

    Returns the file that was read, or None if there was nothing to read.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings() -> Settings:
    """Read Settings from os.environ (call load_env() first to honour .env)."""
    output_dir = os.environ.get(OUTPUT_DIR_VAR, '').strip()
    title = os.environ.get(PALETTE_TITLE_VAR, '').strip()
    return Settings(
        output_dir=Path(output_dir) if output_dir else Path('.'),
        palette_title=title or DEFAULT_TITLE,
    )
