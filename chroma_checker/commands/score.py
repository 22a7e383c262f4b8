"""Score a palette for WCAG contrast and colour-blind compatibility.

Checks every colour against white and black, then every pair of colours,
at normal-text thresholds (AA 4.5:1, AAA 7:1). The overall score is the
worst level seen. Also screens the palette under protanopia, deuteranopia
and tritanopia, and prints rule-based recommendations.

Use --fail-under AA (or AAA) to exit 1 when the overall score is lower.

Example:
    uv run chroma-tool score palette.json
    uv run chroma-tool score palette.json --json --fail-under AA
"""

from chroma_checker.core.report import PALETTE_SECTION
from chroma_checker.core.types import Command, Palette, Report
from chroma_checker.engine.scorer import score_palette

command = Command(
    name='score',
    help='WCAG contrast score, colour-blind screen and recommendations for the whole palette.',
)


@command.run
def run(palette: Palette, report: Report, args) -> None:
    mode = getattr(args, 'mode', None) or 'matrix'
    score = score_palette(palette, mode=mode)

    report.add(
        PALETTE_SECTION,
        'score',
        {
            'overall': score.overall_score,
            'passed': score.passed_checks,
            'total': score.total_checks,
            'colorblind_compatible': score.colorblind_compatible,
            'recommendations': list(score.recommendations),
            'ratios': [r.to_dict() for r in score.contrast_ratios],
        },
    )
    report.record_checks(score.passed_checks, score.total_checks)
    report.overall = score.overall_score
