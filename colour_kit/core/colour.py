"""Colour model: one colour readable as RGB, HSV and packed 24-bit hex.

Normalisation rules (applied by every setter, never raised):
  - RGB channels are masked into a byte: 256 -> 0, -1 -> 255.
  - HSV components saturate: hue into [0, 360], sat/val into [0, 1].
    NaN or anything that is not a number falls back to 0.
  - Hex numbers are masked to 24 bits (finite floats truncated first; NaN,
    infinities and non-numbers give black); hex strings go through parse_hex().

Conversions follow the usual piecewise HSV formulas. HSV -> RGB rounds half
away from zero, so RGB -> HSV -> RGB reproduces every byte triple exactly.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np

from colour_kit.core.errors import InvalidColourInput, InvalidHexInput

MAX_HEX = 0xFFFFFF
MAX_HUE = 360.0
WEB_SAFE_STEP = 51  # 255 / 5, six levels per channel

_HEX_DIGITS = re.compile(r'[0-9a-fA-F]{6}')
_FUNCTIONAL = re.compile(
    r'^\s*(rgb|hsv)\(\s*([^,()]+?)\s*,\s*([^,()]+?)\s*,\s*([^,()]+?)\s*\)\s*$',
    re.IGNORECASE,
)


@runtime_checkable
class ColourLike(Protocol):
    """Anything that can hand out its RGB channels."""

    def to_rgb(self) -> Rgb: ...


def _to_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _mask_channel(value: Any) -> int:
    try:
        return int(value) & 0xFF
    except (TypeError, ValueError, OverflowError):
        return 0


def _clamp(value: Any, upper: float) -> float:
    number = _to_number(value)
    if math.isnan(number) or number < 0:
        return 0.0
    if number > upper:
        return float(upper)
    return number


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _pack(red: int, green: int, blue: int) -> int:
    return (red << 16) | (green << 8) | blue


def _unpack(hex_value: int) -> tuple[int, int, int]:
    return (hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def rgb_to_hsv(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """Byte channels -> (hue in degrees, sat, val). Grey maps to hue 0."""
    top = max(red, green, blue)
    diff = top - min(red, green, blue)
    if diff == 0:
        return 0.0, 0.0, top / 255
    if top == red:
        # Python's % is already non-negative for a positive modulus
        hue = ((green - blue) / diff) % 6
    elif top == green:
        hue = (blue - red) / diff + 2
    else:
        hue = (red - green) / diff + 4
    return hue * 60, diff / top, top / 255


def hsv_to_rgb(hue: float, sat: float, val: float) -> tuple[int, int, int]:
    """(hue in degrees, sat, val) -> byte channels. Expects clamped input."""
    chroma = val * sat
    x = chroma * (1 - abs((hue / 60) % 2 - 1))
    m = val - chroma

    if hue < 60:
        r, g, b = chroma, x, 0.0
    elif hue < 120:
        r, g, b = x, chroma, 0.0
    elif hue < 180:
        r, g, b = 0.0, chroma, x
    elif hue < 240:
        r, g, b = 0.0, x, chroma
    elif hue < 300:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return (
        _round_half_up((r + m) * 255),
        _round_half_up((g + m) * 255),
        _round_half_up((b + m) * 255),
    )


def hsv_to_hsl(hue: float, sat: float, val: float) -> tuple[float, float, float]:
    """(hue, sat, val) -> (hue, saturation, lightness), all but hue in [0, 1]."""
    lightness = val * (1 - sat / 2)
    if lightness <= 0 or lightness >= 1:
        return hue, 0.0, lightness
    return hue, (val - lightness) / min(lightness, 1 - lightness), lightness


def _fallback(text: str, strict: bool) -> int:
    if strict:
        raise InvalidHexInput(f'Invalid hex colour: {text!r}')
    return 0x000000


def parse_hex(text: str, strict: bool = False) -> int:
    """Parse '#rrggbb', 'rrggbb' or the 3-digit shorthand into a 24-bit int.

    Lenient by default:
      - fewer than 6 digits (after shorthand expansion) -> black
      - more than 6 digits -> the first 6 are used
      - anything that is not a hex digit -> black

    With strict=True every one of those cases raises InvalidHexInput.
    """
    digits = text.strip()
    if digits.startswith('#'):
        digits = digits[1:]
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    if len(digits) < 6:
        return _fallback(text, strict)
    if len(digits) > 6:
        if strict:
            raise InvalidHexInput(f'Hex colour has more than 6 digits: {text!r}')
        digits = digits[:6]
    if not _HEX_DIGITS.fullmatch(digits):
        return _fallback(text, strict)
    return int(digits, 16)


def is_valid_hex(text: str) -> bool:
    """True if parse_hex() can read text without falling back."""
    try:
        parse_hex(text, strict=True)
    except InvalidHexInput:
        return False
    return True


@dataclass(frozen=True)
class Rgb:
    """Immutable RGB snapshot. Channels are masked into a byte."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'red', _mask_channel(self.red))
        object.__setattr__(self, 'green', _mask_channel(self.green))
        object.__setattr__(self, 'blue', _mask_channel(self.blue))

    def to_rgb(self) -> Rgb:
        return self

    def to_hsv(self) -> Hsv:
        return Hsv(*rgb_to_hsv(self.red, self.green, self.blue))

    def to_hex(self) -> int:
        return _pack(self.red, self.green, self.blue)


@dataclass(frozen=True)
class Hsv:
    """Immutable HSV snapshot. Components are clamped into range."""

    hue: float
    sat: float
    val: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'hue', _clamp(self.hue, MAX_HUE))
        object.__setattr__(self, 'sat', _clamp(self.sat, 1.0))
        object.__setattr__(self, 'val', _clamp(self.val, 1.0))

    def to_rgb(self) -> Rgb:
        return Rgb(*hsv_to_rgb(self.hue, self.sat, self.val))

    def to_hsv(self) -> Hsv:
        return self

    def to_hex(self) -> int:
        return self.to_rgb().to_hex()

    def to_hsl(self) -> tuple[float, float, float]:
        return hsv_to_hsl(self.hue, self.sat, self.val)


class Colour:
    """A mutable colour kept consistent across RGB, HSV and hex.

    Build one with from_rgb(), from_hsv() or from_hex() (Colour(value) is
    the same as from_hex). Every property setter and set_*() call recomputes
    the other two representations before returning, so nothing is ever read
    stale. The encoding written last is authoritative: after an HSV write the
    stored hue/sat/val are the clamped inputs, while red/green/blue/hex are
    derived from them.
    """

    def __init__(self, value: int | float | str = 0):
        self._red = self._green = self._blue = 0
        self._hue = self._sat = self._val = 0.0
        self._hex = 0
        self.set_hex(value)

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Colour:
        colour = cls()
        colour.set_rgb(red, green, blue)
        return colour

    @classmethod
    def from_hsv(cls, hue: float, sat: float, val: float) -> Colour:
        colour = cls()
        colour.set_hsv(hue, sat, val)
        return colour

    @classmethod
    def from_hex(cls, value: int | str) -> Colour:
        return cls(value)

    @classmethod
    def random(cls, rng: np.random.Generator | None = None) -> Colour:
        """A colour drawn uniformly from 0x000000..0xFFFFFF inclusive."""
        if rng is None:
            rng = np.random.default_rng()
        return cls(int(rng.integers(0, MAX_HEX, endpoint=True)))

    # -- whole-encoding setters --

    def set_rgb(self, red: int, green: int, blue: int) -> None:
        self._red = _mask_channel(red)
        self._green = _mask_channel(green)
        self._blue = _mask_channel(blue)
        self._on_rgb_change()

    def set_hsv(self, hue: float, sat: float, val: float) -> None:
        self._hue = _clamp(hue, MAX_HUE)
        self._sat = _clamp(sat, 1.0)
        self._val = _clamp(val, 1.0)
        self._on_hsv_change()

    def set_hex(self, value: int | float | str) -> None:
        if isinstance(value, str):
            self._hex = parse_hex(value)
        elif isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            self._hex = int(value) & MAX_HEX
        elif isinstance(value, (float, np.floating)) and math.isfinite(value):
            # truncated toward zero, then masked like an int
            self._hex = int(value) & MAX_HEX
        else:
            self._hex = 0
        self._on_hex_change()

    # -- per-field accessors --

    @property
    def red(self) -> int:
        return self._red

    @red.setter
    def red(self, value: int) -> None:
        self._red = _mask_channel(value)
        self._on_rgb_change()

    @property
    def green(self) -> int:
        return self._green

    @green.setter
    def green(self, value: int) -> None:
        self._green = _mask_channel(value)
        self._on_rgb_change()

    @property
    def blue(self) -> int:
        return self._blue

    @blue.setter
    def blue(self, value: int) -> None:
        self._blue = _mask_channel(value)
        self._on_rgb_change()

    @property
    def hue(self) -> float:
        return self._hue

    @hue.setter
    def hue(self, value: float) -> None:
        self._hue = _clamp(value, MAX_HUE)
        self._on_hsv_change()

    @property
    def sat(self) -> float:
        return self._sat

    @sat.setter
    def sat(self, value: float) -> None:
        self._sat = _clamp(value, 1.0)
        self._on_hsv_change()

    @property
    def val(self) -> float:
        return self._val

    @val.setter
    def val(self, value: float) -> None:
        self._val = _clamp(value, 1.0)
        self._on_hsv_change()

    @property
    def hex(self) -> int:
        return self._hex

    @hex.setter
    def hex(self, value: int | str) -> None:
        self.set_hex(value)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self._red, self._green, self._blue

    @property
    def hsv(self) -> tuple[float, float, float]:
        return self._hue, self._sat, self._val

    # -- recomputation --

    def _on_rgb_change(self) -> None:
        self._hue, self._sat, self._val = rgb_to_hsv(self._red, self._green, self._blue)
        self._hex = _pack(self._red, self._green, self._blue)

    def _on_hsv_change(self) -> None:
        self._red, self._green, self._blue = hsv_to_rgb(self._hue, self._sat, self._val)
        self._hex = _pack(self._red, self._green, self._blue)

    def _on_hex_change(self) -> None:
        self._red, self._green, self._blue = _unpack(self._hex)
        self._hue, self._sat, self._val = rgb_to_hsv(self._red, self._green, self._blue)

    # -- operations --

    def invert(self) -> Colour:
        """Bitwise-complement the 24-bit value in place. Returns self."""
        self._hex = ~self._hex & MAX_HEX
        self._on_hex_change()
        return self

    def to_web_safe(self) -> Colour:
        """Snap every channel to the nearest multiple of 51 in place. Returns self."""
        self.set_rgb(*(_nearest_step(c, WEB_SAFE_STEP) for c in self.rgb))
        return self

    def clone(self) -> Colour:
        return type(self)(self._hex)

    def to_rgb(self) -> Rgb:
        return Rgb(self._red, self._green, self._blue)

    def to_hsv(self) -> Hsv:
        return Hsv(self._hue, self._sat, self._val)

    def to_hex(self) -> int:
        return self._hex

    def to_hsl(self) -> tuple[float, float, float]:
        return hsv_to_hsl(self._hue, self._sat, self._val)

    # -- string forms --

    def to_string_rgb(self) -> str:
        return f'rgb({self._red},{self._green},{self._blue})'

    def to_string_hsv(self) -> str:
        parts = ','.join(_format_number(x) for x in self.hsv)
        return f'hsv({parts})'

    def to_string_hsl(self) -> str:
        hue, sat, lightness = self.to_hsl()
        return f'hsl({round(hue)},{round(sat * 100)}%,{round(lightness * 100)}%)'

    def to_string_hex(self, with_hash: bool = True) -> str:
        digits = f'{self._hex:06x}'
        return f'#{digits}' if with_hash else digits

    def __str__(self) -> str:
        return self.to_string_hex()

    def __repr__(self) -> str:
        return f'Colour({self.to_string_hex()!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self._hex == other._hex

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]


def _nearest_step(value: int, step: int) -> int:
    """Round to the nearest multiple of step; an exact half goes down."""
    remainder = value % step
    if remainder * 2 > step:
        return value - remainder + step
    return value - remainder


def parse_colour(text: str, strict: bool = False) -> Colour:
    """Read 'rgb(r,g,b)', 'hsv(h,s,v)' or a hex string into a Colour.

    Components are normalised exactly as the matching setter would. With
    strict=True, input that would need a fallback raises InvalidColourInput
    instead: a malformed rgb(...)/hsv(...), a component that is not a number,
    or a hex string parse_hex() rejects (InvalidHexInput).
    """
    match = _FUNCTIONAL.match(text)
    if match is None:
        if strict and text.strip().lower().startswith(('rgb(', 'hsv(')):
            raise InvalidColourInput(f'Malformed colour: {text!r}')
        return Colour(parse_hex(text, strict=strict))
    kind = match.group(1).lower()
    a, b, c = (_to_number(part) for part in match.groups()[1:])
    if strict and any(math.isnan(x) for x in (a, b, c)):
        raise InvalidColourInput(f'Colour components must be numbers: {text!r}')
    if kind == 'rgb':
        return Colour.from_rgb(a, b, c)
    return Colour.from_hsv(a, b, c)
