"""Single-colour analysis and lighter/darker adjustment suggestions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chroma_checker.core.colour import RGB, rgb_to_hex, round_half_up
from chroma_checker.core.contrast import WcagLevel, classify, relative_luminance, target_ratio
from chroma_checker.core.types import Color

LIGHTEN_FACTOR = 1.3
DARKEN_FACTOR = 0.7

POOR_ON_BOTH = 'This color has poor contrast with both white and black. Consider adjusting its lightness.'
POOR_ON_WHITE = 'This color has poor contrast with white backgrounds. Use with dark backgrounds instead.'
POOR_ON_BLACK = 'This color has poor contrast with black backgrounds. Use with light backgrounds instead.'


@dataclass(frozen=True)
class ColorAnalysis:
    contrast_with_white: float
    contrast_with_black: float
    wcag_level_white: WcagLevel
    wcag_level_black: WcagLevel
    luminance: float
    recommendations: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            'contrastWithWhite': self.contrast_with_white,
            'contrastWithBlack': self.contrast_with_black,
            'wcagLevelWhite': self.wcag_level_white,
            'wcagLevelBlack': self.wcag_level_black,
            'luminance': self.luminance,
            'recommendations': list(self.recommendations),
        }


@dataclass(frozen=True)
class ColorAdjustment:
    lighter_version: str
    darker_version: str
    adjustment_needed: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            'lighterVersion': self.lighter_version,
            'darkerVersion': self.darker_version,
            'adjustmentNeeded': self.adjustment_needed,
        }


def analyze_color(color: Color) -> ColorAnalysis:
    white = color.accessibility.contrast_with_white
    black = color.accessibility.contrast_with_black
    level_white = classify(white)
    level_black = classify(black)
    luminance = relative_luminance(color.rgb)

    recommendations = []
    if level_white == 'FAIL' and level_black == 'FAIL':
        recommendations.append(POOR_ON_BOTH)
    elif level_white == 'FAIL':
        recommendations.append(POOR_ON_WHITE)
    elif level_black == 'FAIL':
        recommendations.append(POOR_ON_BLACK)

    if luminance > 0.9:
        recommendations.append('This is a very bright color. Ensure sufficient contrast when used with text.')
    elif luminance < 0.1:
        recommendations.append('This is a very dark color. Ensure sufficient contrast when used with text.')

    return ColorAnalysis(
        contrast_with_white=white,
        contrast_with_black=black,
        wcag_level_white=level_white,
        wcag_level_black=level_black,
        luminance=luminance,
        recommendations=tuple(recommendations),
    )


def _scaled(rgb: RGB, factor: float) -> str:
    # rgb_to_hex clamps at 0/255
    return rgb_to_hex(tuple(round_half_up(c * factor) for c in rgb), upper=True)


def suggest_color_adjustments(color: Color, target_level: str = 'AA') -> ColorAdjustment:
    """Lighter (x1.3) and darker (x0.7) versions when the colour misses the target on both white and black."""
    target = target_ratio(target_level)
    acc = color.accessibility
    if acc.contrast_with_white >= target or acc.contrast_with_black >= target:
        return ColorAdjustment(lighter_version=color.hex, darker_version=color.hex, adjustment_needed=False)
    return ColorAdjustment(
        lighter_version=_scaled(color.rgb, LIGHTEN_FACTOR),
        darker_version=_scaled(color.rgb, DARKEN_FACTOR),
        adjustment_needed=True,
    )
