"""Build a colour-blind friendly variant of the palette (red/green confusion).

Hues 0-60 move to orange (15) or yellow (45) with saturation at least 70.
Hues 60-180 move to yellow (75) or cyan (150) with saturation at least 60.
Other hues and all lightness values are unchanged. Each colour is renamed
'<name> (CB-Friendly)'.

Use --out to write the variant as a palette JSON file.

Example:
    uv run chroma-tool remap palette.json
    uv run chroma-tool remap palette.json --out palette-cb.json
"""

from chroma_checker.core.palette_parser import write_palette_file
from chroma_checker.core.report import PALETTE_SECTION, colour_section
from chroma_checker.core.types import Command, Palette, Report
from chroma_checker.engine.remap import remap_for_deficiency

command = Command(
    name='remap',
    help='Shift red/yellow/green hues apart for protanopia/deuteranopia. --out writes it.',
)


@command.run
def run(palette: Palette, report: Report, args) -> None:
    derived = remap_for_deficiency(palette)

    for i, (before, after) in enumerate(zip(palette.colors, derived.colors)):
        report.add(
            colour_section(report, i, before),
            'remap',
            {
                'from': before.hex,
                'hex': after.hex,
                'name': after.name,
                'hsl': list(after.hsl),
                'contrastWithWhite': after.accessibility.contrast_with_white,
                'changed': after.hex != before.hex,
            },
        )

    out = getattr(args, 'out', None)
    if out:
        write_palette_file(derived, out)
        report.add(PALETTE_SECTION, 'output', {'path': out})
