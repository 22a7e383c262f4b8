"""Build a WCAG-compliant variant of the palette by adjusting lightness.

For each colour, hue and saturation are kept and lightness is scanned in
steps of 5 (up to 95, then down to 5) for the first value whose contrast
with white meets --level (AA 4.5:1, AAA 7:1) and beats the colour's
current white contrast. Colours where no step qualifies are kept as they
are. Each colour is renamed '<name> (<level>)'.

Use --out to write the variant as a palette JSON file.

Example:
    uv run chroma-tool alternatives palette.json --level AAA
    uv run chroma-tool alternatives palette.json --level AA --out palette-aa.json
"""

from chroma_checker.core.palette_parser import write_palette_file
from chroma_checker.core.report import PALETTE_SECTION, colour_section
from chroma_checker.core.types import Command, Palette, Report
from chroma_checker.engine.alternatives import find_accessible_alternative

command = Command(
    name='alternatives',
    help='WCAG AA/AAA variant of the palette via bounded lightness search. --out writes it.',
)


@command.run
def run(palette: Palette, report: Report, args) -> None:
    level = getattr(args, 'level', None) or 'AA'
    derived = find_accessible_alternative(palette, level)

    for i, (before, after) in enumerate(zip(palette.colors, derived.colors)):
        report.add(
            colour_section(report, i, before),
            'alternatives',
            {
                'level': level,
                'from': before.hex,
                'hex': after.hex,
                'name': after.name,
                'contrastWithWhite': after.accessibility.contrast_with_white,
                'wcagLevel': after.accessibility.wcag_level,
                'changed': after.hex != before.hex,
            },
        )

    out = getattr(args, 'out', None)
    if out:
        write_palette_file(derived, out)
        report.add(PALETTE_SECTION, 'output', {'path': out, 'level': level})
