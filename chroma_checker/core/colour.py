"""Colour model conversion between HEX, RGB and HSL.

All functions are total: malformed hex decodes channel-by-channel with
unparseable channels read as 0, and out-of-range RGB/HSL values are clamped
(hue wraps modulo 360) before conversion.

Rounding is half-up (x.5 goes up), matching the palette records produced by
the generation backend. Python's round() would send 0.5 to the even side.
"""

import math
import re
from typing import NamedTuple


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: int  # degrees 0-359
    s: int  # percent 0-100
    l: int  # noqa: E741  percent 0-100


_HEX_PAIR = re.compile(r'[0-9a-fA-F]{2}')
_VALID_HEX = re.compile(r'#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})')


def round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def clamp_rgb(rgb) -> RGB:
    """Clamp any 3-sequence of numbers into an integer RGB."""
    r, g, b = rgb
    return RGB(*(round_half_up(_clamp(c, 0, 255)) for c in (r, g, b)))


def clamp_hsl(hsl) -> HSL:
    """Wrap hue into 0-359, clamp saturation and lightness into 0-100."""
    h, s, l = hsl  # noqa: E741
    return HSL(
        round_half_up(h) % 360,
        round_half_up(_clamp(s, 0, 100)),
        round_half_up(_clamp(l, 0, 100)),
    )


def is_valid_hex(hex_str: str) -> bool:
    """Strict check: '#RGB' or '#RRGGBB'."""
    return bool(_VALID_HEX.fullmatch(hex_str or ''))


def hex_to_rgb(hex_str: str) -> RGB:
    """'#2563eb' -> (37, 99, 235). Accepts 3/6 digits, with or without '#'.

    Wrong-length input decodes as black.
    """
    clean = (hex_str or '').strip().lstrip('#')
    if len(clean) == 3:
        clean = ''.join(ch * 2 for ch in clean)
    if len(clean) != 6:
        return RGB(0, 0, 0)
    channels = []
    for i in (0, 2, 4):
        pair = clean[i : i + 2]
        channels.append(int(pair, 16) if _HEX_PAIR.fullmatch(pair) else 0)
    return RGB(*channels)


def rgb_to_hex(rgb, upper: bool = False) -> str:
    r, g, b = clamp_rgb(rgb)
    out = f'#{r:02x}{g:02x}{b:02x}'
    return out.upper() if upper else out


def normalise_hex(hex_str: str) -> str:
    """Canonical display form: '#RRGGBB' uppercase."""
    return rgb_to_hex(hex_to_rgb(hex_str), upper=True)


def rgb_to_hsl(rgb) -> HSL:
    r, g, b = (c / 255 for c in clamp_rgb(rgb))
    mx = max(r, g, b)
    mn = min(r, g, b)
    diff = mx - mn

    h = 0.0
    s = 0.0
    lum = (mx + mn) / 2

    if diff != 0:
        s = diff / (2 - mx - mn) if lum > 0.5 else diff / (mx + mn)
        if mx == r:
            h = ((g - b) / diff + (6 if g < b else 0)) / 6
        elif mx == g:
            h = ((b - r) / diff + 2) / 6
        else:
            h = ((r - g) / diff + 4) / 6

    return HSL(round_half_up(h * 360) % 360, round_half_up(s * 100), round_half_up(lum * 100))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl) -> RGB:
    hh, ss, ll = clamp_hsl(hsl)
    h = hh / 360
    s = ss / 100
    lum = ll / 100

    if s == 0:
        grey = round_half_up(lum * 255)
        return RGB(grey, grey, grey)

    q = lum * (1 + s) if lum < 0.5 else lum + s - lum * s
    p = 2 * lum - q
    return RGB(
        round_half_up(_hue_to_channel(p, q, h + 1 / 3) * 255),
        round_half_up(_hue_to_channel(p, q, h) * 255),
        round_half_up(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


def hex_to_hsl(hex_str: str) -> HSL:
    return rgb_to_hsl(hex_to_rgb(hex_str))


def hsl_to_hex(hsl, upper: bool = False) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl), upper=upper)


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance in RGB space for a single pair. Plain ints, so no uint8 wrap-around.

    Scalar form of the metric; the confusability screen computes the same distance for
    every pair at once with engine.confusability.pairwise_distances.
    """
    return math.sqrt(sum((int(x) - int(y)) ** 2 for x, y in zip(a, b)))


def format_color_value(colour, fmt: str = 'hex') -> str:
    """Render a hex string, RGB or HSL as 'hex', 'rgb' or 'hsl' text."""
    if isinstance(colour, HSL):
        rgb = hsl_to_rgb(colour)
        hsl = colour
    elif isinstance(colour, str):
        rgb = hex_to_rgb(colour)
        hsl = rgb_to_hsl(rgb)
    else:
        rgb = clamp_rgb(colour)
        hsl = rgb_to_hsl(rgb)

    if fmt == 'rgb':
        return f'rgb({rgb.r}, {rgb.g}, {rgb.b})'
    if fmt == 'hsl':
        return f'hsl({hsl.h}, {hsl.s}%, {hsl.l}%)'
    return rgb_to_hex(rgb, upper=True)
