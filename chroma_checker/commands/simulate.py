"""Show every colour as seen with a colour-vision deficiency.

Types: protanopia, deuteranopia, tritanopia, achromatopsia. Without --type
all four are shown. Simulated colours are a preview only; the palette file
is never changed.

--mode legacy uses the channel-by-channel update of earlier palette tooling
instead of the matrix transform (also settable via CHROMA_SIMULATION_MODE).

Example:
    uv run chroma-tool simulate palette.json
    uv run chroma-tool simulate palette.json --type deuteranopia --mode legacy
"""

from chroma_checker.core.report import colour_section
from chroma_checker.core.types import Command, Palette, Report
from chroma_checker.engine.simulate import DEFICIENCY_TYPES, simulate

command = Command(
    name='simulate',
    help='Simulate each colour under protanopia, deuteranopia, tritanopia and achromatopsia.',
)


@command.run
def run(palette: Palette, report: Report, args) -> None:
    mode = getattr(args, 'mode', None) or 'matrix'
    deficiency = getattr(args, 'type', None)
    types = [deficiency] if deficiency else list(DEFICIENCY_TYPES)

    for i, color in enumerate(palette.colors):
        data = {t: simulate(color.hex, t, mode) for t in types}
        report.add(colour_section(report, i, color), 'simulate', data)
