"""Palette accessibility scorer.

Contrast checks, in order:
  1. for each colour: vs white (#FFFFFF), then vs black (#000000)
  2. every pair i < j in palette order

Every ratio is classified at normal-text thresholds. The overall score is the
worst level seen. Recommendations come from RECOMMENDATION_RULES, evaluated in
order; every rule that applies contributes its message, and the fallback
message is used only when none applied.

An empty palette scores AAA with no checks and gets the "add more colours"
recommendation; nothing here raises on empty, single or monochrome palettes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from chroma_checker.core.contrast import LuminanceCache, WcagLevel, contrast_ratio, luminance_of
from chroma_checker.core.types import AccessibilityScore, Color, ContrastRatio, Palette
from chroma_checker.engine.confusability import is_colorblind_compatible

logger = logging.getLogger(__name__)

WHITE_HEX = '#FFFFFF'
BLACK_HEX = '#000000'

MIN_COLORS = 3
BRIGHT_LUMINANCE = 0.9
DARK_LUMINANCE = 0.1
SKEW_SHARE = 0.6


@dataclass(frozen=True)
class RuleContext:
    """Everything a recommendation rule may look at."""

    colors: tuple[Color, ...]
    ratios: tuple[ContrastRatio, ...]
    colorblind_compatible: bool
    luminances: tuple[float, ...] = field(default=())

    @property
    def color_count(self) -> int:
        return len(self.colors)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.ratios if r.level == 'FAIL')

    @property
    def aa_count(self) -> int:
        return sum(1 for r in self.ratios if r.level == 'AA')

    @property
    def bright_count(self) -> int:
        return sum(1 for lum in self.luminances if lum > BRIGHT_LUMINANCE)

    @property
    def dark_count(self) -> int:
        return sum(1 for lum in self.luminances if lum < DARK_LUMINANCE)


@dataclass(frozen=True)
class Rule:
    """A recommendation: fires when `applies(ctx)`; message is `template.format(ctx=ctx)`."""

    name: str
    applies: Callable[[RuleContext], bool]
    template: str

    def message(self, ctx: RuleContext) -> str:
        return self.template.format(ctx=ctx)


RECOMMENDATION_RULES: tuple[Rule, ...] = (
    Rule(
        'insufficient-contrast',
        lambda ctx: ctx.failed_count > 0,
        '{ctx.failed_count} color combinations have insufficient contrast. Consider adjusting lightness values.',
    ),
    Rule(
        'aa-only',
        lambda ctx: ctx.aa_count > 0,
        '{ctx.aa_count} combinations meet AA standards but could be improved for AAA compliance.',
    ),
    Rule(
        'colorblind',
        lambda ctx: not ctx.colorblind_compatible,
        'Some colors may be difficult to distinguish for users with color blindness. '
        'Consider increasing color differences.',
    ),
    Rule(
        'too-few-colors',
        lambda ctx: ctx.color_count < MIN_COLORS,
        'Consider adding more colors to provide sufficient design flexibility while maintaining accessibility.',
    ),
    Rule(
        'mostly-bright',
        lambda ctx: ctx.bright_count > ctx.color_count * SKEW_SHARE,
        'Palette contains many very bright colors. Consider adding some darker colors for better contrast options.',
    ),
    Rule(
        'mostly-dark',
        lambda ctx: ctx.dark_count > ctx.color_count * SKEW_SHARE,
        'Palette contains many very dark colors. Consider adding some lighter colors for better contrast options.',
    ),
)

ALL_CLEAR_MESSAGE = 'Excellent! This palette meets high accessibility standards and should work well for all users.'


def generate_recommendations(ctx: RuleContext, rules: Sequence[Rule] = RECOMMENDATION_RULES) -> tuple[str, ...]:
    messages = tuple(rule.message(ctx) for rule in rules if rule.applies(ctx))
    return messages or (ALL_CLEAR_MESSAGE,)


def calculate_contrast_ratios(
    colors: Sequence[Color], cache: LuminanceCache | None = None
) -> tuple[ContrastRatio, ...]:
    ratios: list[ContrastRatio] = []
    for c in colors:
        ratios.append(ContrastRatio.between(c.hex, WHITE_HEX, contrast_ratio(c.rgb, WHITE_HEX, cache)))
        ratios.append(ContrastRatio.between(c.hex, BLACK_HEX, contrast_ratio(c.rgb, BLACK_HEX, cache)))
    for i in range(len(colors)):
        for j in range(i + 1, len(colors)):
            a, b = colors[i], colors[j]
            ratios.append(ContrastRatio.between(a.hex, b.hex, contrast_ratio(a.rgb, b.rgb, cache)))
    return tuple(ratios)


def worst_level(ratios: Sequence[ContrastRatio]) -> WcagLevel:
    levels = {r.level for r in ratios}
    if 'FAIL' in levels:
        return 'FAIL'
    if 'AA' in levels:
        return 'AA'
    return 'AAA'


def score_palette(
    palette: Palette | Sequence[Color],
    mode: str = 'matrix',
    cache: LuminanceCache | None = None,
) -> AccessibilityScore:
    """Score a palette. `cache` is an optional caller-owned luminance memo keyed by RGB."""
    colors = Palette.coerce(palette).colors
    ratios = calculate_contrast_ratios(colors, cache)
    compatible = is_colorblind_compatible(colors, mode=mode)
    ctx = RuleContext(
        colors=colors,
        ratios=ratios,
        colorblind_compatible=compatible,
        luminances=tuple(luminance_of(c.rgb, cache) for c in colors),
    )

    passed = sum(1 for r in ratios if r.level != 'FAIL')
    score = AccessibilityScore(
        overall_score=worst_level(ratios),
        contrast_ratios=ratios,
        colorblind_compatible=compatible,
        recommendations=generate_recommendations(ctx),
        passed_checks=passed,
        total_checks=len(ratios),
    )
    logger.debug(
        'Scored %d colours: overall=%s passed=%d/%d',
        len(colors),
        score.overall_score,
        passed,
        len(ratios),
    )
    return score
