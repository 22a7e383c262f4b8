"""List colour pairs that become indistinguishable under a deficiency.

Simulates every colour, then flags each pair whose simulated colours are
closer than RGB distance 30. Screens protanopia, deuteranopia and
tritanopia, or only --type if given. A single flagged pair means the
palette is not colour-blind compatible.

Example:
    uv run chroma-tool confusability palette.json
    uv run chroma-tool confusability palette.json --type protanopia
"""

from chroma_checker.core.report import PALETTE_SECTION
from chroma_checker.core.types import Command, Palette, Report
from chroma_checker.engine.confusability import SCREENED_DEFICIENCIES, find_confusable_pairs

command = Command(
    name='confusability',
    help='Pairs of colours closer than RGB distance 30 once simulated (colour-blind screen).',
)


@command.run
def run(palette: Palette, report: Report, args) -> None:
    mode = getattr(args, 'mode', None) or 'matrix'
    deficiency = getattr(args, 'type', None)
    types = [deficiency] if deficiency else list(SCREENED_DEFICIENCIES)

    pairs = {t: [p.to_dict() for p in find_confusable_pairs(palette, t, mode=mode)] for t in types}
    report.add(
        PALETTE_SECTION,
        'confusability',
        {'pairs': pairs, 'compatible': not any(pairs.values())},
    )
