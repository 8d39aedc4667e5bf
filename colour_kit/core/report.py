"""Report builder: text and JSON output for colour-kit results."""

import json
from typing import Any

from colour_kit.core.colour import Colour
from colour_kit.core.types import Report

_ENCODINGS = ('hex', 'rgb', 'hsv', 'hsl')


def describe(colour: Colour) -> dict[str, Any]:
    """Every encoding of a colour, as strings plus raw values."""
    return {
        'hex': colour.to_string_hex(),
        'rgb': colour.to_string_rgb(),
        'hsv': colour.to_string_hsv(),
        'hsl': colour.to_string_hsl(),
        'value': colour.hex,
        'channels': list(colour.rgb),
        'hsv_values': [round(x, 6) for x in colour.hsv],
    }


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    if report.raw is not None:
        return report.raw.rstrip('\n')

    lines = []
    for label, commands in report.entries.items():
        lines.append(f'── {label}')
        for command_name, data in commands.items():
            if all(key in data for key in _ENCODINGS):
                for key in _ENCODINGS:
                    lines.append(f'  {key}: {data[key]}')
            else:
                # Generic fallback
                for k, v in data.items():
                    lines.append(f'  {command_name}.{k}: {v}')
        lines.append('')

    for path in report.files:
        lines.append(f'wrote {path}')
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command}
    obj['colours'] = [{'input': label, **commands} for label, commands in report.entries.items()]
    if report.files:
        obj['files'] = report.files
    if report.raw is not None:
        obj['output'] = report.raw
    return json.dumps(obj, indent=2)
