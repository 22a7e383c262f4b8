"""Deficiency-friendly remap for red-green confusion (protanopia/deuteranopia).

Hue bands, checked in this order:
  0-60    -> 15 (orange) below 30, else 45 (yellow); saturation at least 70
  60-180  -> 75 (yellow) below 120, else 150 (cyan); saturation at least 60
Other hues are left alone. Lightness never changes.
"""

from collections.abc import Sequence

from chroma_checker.core.colour import HSL
from chroma_checker.core.errors import EmptyPaletteError
from chroma_checker.core.types import Color, Palette

REMAP_SUFFIX = '(CB-Friendly)'


def remap_hsl(hsl: HSL) -> HSL:
    h, s, lightness = hsl
    if 0 <= h <= 60:
        return HSL(15 if h < 30 else 45, max(s, 70), lightness)
    if 60 < h <= 180:
        return HSL(75 if h < 120 else 150, max(s, 60), lightness)
    return hsl


def remap_color(color: Color) -> Color:
    return Color.from_hsl(
        remap_hsl(color.hsl),
        name=f'{color.name} {REMAP_SUFFIX}',
        category=color.category,
        usage=color.usage,
    )


def remap_for_deficiency(palette: Palette | Sequence[Color]) -> Palette:
    palette = Palette.coerce(palette)
    if not palette.colors:
        raise EmptyPaletteError('remap_for_deficiency')
    return palette.with_colors(remap_color(c) for c in palette.colors)
