"""WCAG-compliant palette variants by bounded lightness search.

For each colour, hue and saturation stay fixed and lightness is scanned:
  up:   L, L+5, ... while <= 95
  down: L, L-5, ... while >= 5   (only if the upward scan accepted nothing)

A candidate is accepted when its contrast against white both meets the target
(AA 4.5, AAA 7.0) and beats the colour's current white contrast. The first
accepted candidate wins. When nothing is accepted the colour keeps its exact
original values, so a colour that already met the target cannot slip below it
through HSL rounding.
"""

import logging
from collections.abc import Sequence

from chroma_checker.core.colour import HSL, hsl_to_rgb
from chroma_checker.core.contrast import WHITE, contrast_ratio, target_ratio
from chroma_checker.core.errors import EmptyPaletteError
from chroma_checker.core.types import Color, Palette

logger = logging.getLogger(__name__)

LIGHTNESS_STEP = 5
LIGHTNESS_MAX = 95
LIGHTNESS_MIN = 5


def lightness_candidates(start: int, direction: str) -> list[int]:
    """Lightness values the search tries, in order. direction is 'up' or 'down'."""
    if direction == 'up':
        return list(range(start, LIGHTNESS_MAX + 1, LIGHTNESS_STEP))
    if direction == 'down':
        return list(range(start, LIGHTNESS_MIN - 1, -LIGHTNESS_STEP))
    raise ValueError(f'direction must be up or down, not {direction!r}')


def _first_improvement(hsl: HSL, candidates: Sequence[int], target: float, current: float) -> int | None:
    for lightness in candidates:
        contrast = contrast_ratio(hsl_to_rgb(HSL(hsl.h, hsl.s, lightness)), WHITE)
        if contrast >= target and contrast > current:
            return lightness
    return None


def compliant_color(color: Color, level: str = 'AA') -> Color:
    """One colour moved to the first qualifying lightness, renamed '<name> (<level>)'."""
    target = target_ratio(level)
    current = color.accessibility.contrast_with_white
    start = color.hsl.l

    lightness = _first_improvement(color.hsl, lightness_candidates(start, 'up'), target, current)
    if lightness is None:
        lightness = _first_improvement(color.hsl, lightness_candidates(start, 'down'), target, current)

    name = f'{color.name} ({level})'
    if lightness is None:
        return color.renamed(name)

    logger.debug('%s: lightness %d -> %d for %s', color.hex, start, lightness, level)
    return Color.from_hsl(
        HSL(color.hsl.h, color.hsl.s, lightness),
        name=name,
        category=color.category,
        usage=color.usage,
    )


def find_accessible_alternative(palette: Palette | Sequence[Color], level: str = 'AA') -> Palette:
    palette = Palette.coerce(palette)
    if not palette.colors:
        raise EmptyPaletteError('find_accessible_alternative')
    target_ratio(level)
    return palette.with_colors(compliant_color(c, level) for c in palette.colors)
