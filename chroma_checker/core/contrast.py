"""WCAG relative luminance, contrast ratio and compliance levels.

Luminance uses the WCAG 2.0 sRGB linearisation (threshold 0.03928) and the
0.2126 / 0.7152 / 0.0722 weights. Contrast is (L_max + 0.05) / (L_min + 0.05),
so it is symmetric and always falls in [1, 21].

Colours may be given as hex strings, RGB triples, or anything with an `.rgb`
attribute (Color). An optional caller-owned mapping can memoise luminance by
RGB; nothing is cached at module level.
"""

from collections.abc import MutableMapping
from typing import Literal

from chroma_checker.core.colour import RGB, clamp_rgb, hex_to_rgb

WcagLevel = Literal['AA', 'AAA', 'FAIL']

# (AA, AAA) minimum ratios
NORMAL_TEXT_THRESHOLDS = (4.5, 7.0)
LARGE_TEXT_THRESHOLDS = (3.0, 4.5)

TEXT_READABLE_RATIO = 4.5

WHITE = RGB(255, 255, 255)
BLACK = RGB(0, 0, 0)

LEVEL_TARGETS: dict[str, float] = {'AA': 4.5, 'AAA': 7.0}

LuminanceCache = MutableMapping[RGB, float]


def _linear(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def to_rgb(colour) -> RGB:
    """Coerce a hex string, RGB-like triple or Color into RGB."""
    if isinstance(colour, str):
        return hex_to_rgb(colour)
    return clamp_rgb(getattr(colour, 'rgb', colour))


def relative_luminance(rgb) -> float:
    r, g, b = to_rgb(rgb)
    lum = 0.2126 * _linear(r) + 0.7152 * _linear(g) + 0.0722 * _linear(b)
    return max(0.0, min(1.0, lum))


def luminance_of(colour, cache: LuminanceCache | None = None) -> float:
    rgb = to_rgb(colour)
    if cache is None:
        return relative_luminance(rgb)
    if rgb not in cache:
        cache[rgb] = relative_luminance(rgb)
    return cache[rgb]


def contrast_ratio(colour_a, colour_b, cache: LuminanceCache | None = None) -> float:
    lum_a = luminance_of(colour_a, cache)
    lum_b = luminance_of(colour_b, cache)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return max(1.0, min(21.0, (lighter + 0.05) / (darker + 0.05)))


def classify(ratio: float, is_large_text: bool = False) -> WcagLevel:
    """Map a contrast ratio to AAA / AA / FAIL.

    Large text is >= 18pt, or >= 14pt bold.
    """
    aa, aaa = LARGE_TEXT_THRESHOLDS if is_large_text else NORMAL_TEXT_THRESHOLDS
    if ratio >= aaa:
        return 'AAA'
    if ratio >= aa:
        return 'AA'
    return 'FAIL'


def target_ratio(level: str) -> float:
    """Minimum normal-text ratio for a target level ('AA' or 'AAA')."""
    if level not in LEVEL_TARGETS:
        raise ValueError(f'Unknown target level: {level!r}. Expected AA or AAA')
    return LEVEL_TARGETS[level]


def is_text_readable(text, background, level: str = 'AA') -> bool:
    return contrast_ratio(text, background) >= target_ratio(level)


def best_text_color(background) -> str:
    """'#FFFFFF' or '#000000', whichever reads better on background. Ties go to black."""
    if contrast_ratio(WHITE, background) > contrast_ratio(BLACK, background):
        return '#FFFFFF'
    return '#000000'


def format_contrast_ratio(ratio: float) -> str:
    return f'{ratio:.2f}:1'
