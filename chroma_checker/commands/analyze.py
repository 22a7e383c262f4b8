"""Per-colour analysis: contrast on white and black, luminance, advice.

For each colour reports the contrast ratio and WCAG level against white and
against black, its relative luminance, and recommendations. When a colour
misses --level (default AA) on both white and black, a lighter (x1.3) and
a darker (x0.7) version are suggested.

Example:
    uv run chroma-tool analyze palette.json
    uv run chroma-tool analyze palette.json --level AAA
"""

from chroma_checker.core.report import colour_section
from chroma_checker.core.types import Command, Palette, Report
from chroma_checker.engine.analysis import analyze_color, suggest_color_adjustments

command = Command(
    name='analyze',
    help='Per-colour contrast on white/black, luminance and lighter/darker suggestions.',
)


@command.run
def run(palette: Palette, report: Report, args) -> None:
    level = getattr(args, 'level', None) or 'AA'
    for i, color in enumerate(palette.colors):
        data = analyze_color(color).to_dict()
        data['adjustment'] = suggest_color_adjustments(color, level).to_dict()
        report.add(colour_section(report, i, color), 'analyze', data)
