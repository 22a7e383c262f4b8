"""Render a PNG swatch sheet: the palette plus one row per deficiency.

Row 1 is the palette as given; rows 2-5 are the same colours simulated
under protanopia, deuteranopia, tritanopia and achromatopsia (respecting
--mode). Each swatch is SWATCH_SIZE pixels square.

Saves to <out-dir>/<palette name or 'palette'>_preview.png.

Example:
    uv run chroma-tool preview palette.json --out-dir ./tmp
"""

import os
import re

import numpy as np
from PIL import Image

from chroma_checker.core.report import PALETTE_SECTION
from chroma_checker.core.types import Command, Palette, Report
from chroma_checker.engine.simulate import DEFICIENCY_TYPES, simulate_palette

command = Command(
    name='preview',
    help='PNG swatch sheet of the palette and its four deficiency simulations. Needs --out-dir.',
)

SWATCH_SIZE = 64


def _slug(name: str) -> str:
    return re.sub(r'[^a-z0-9]+', '-', name.lower()).strip('-') or 'palette'


def render_rows(rows: list[Palette], swatch: int = SWATCH_SIZE) -> Image.Image:
    """One swatch row per palette, columns in palette order."""
    width = max(len(p.colors) for p in rows) * swatch
    sheet = np.full((len(rows) * swatch, width, 3), 255, dtype=np.uint8)
    for y, row in enumerate(rows):
        for x, color in enumerate(row.colors):
            sheet[y * swatch : (y + 1) * swatch, x * swatch : (x + 1) * swatch] = color.rgb
    return Image.fromarray(sheet)


@command.run
def run(palette: Palette, report: Report, args) -> None:
    mode = getattr(args, 'mode', None) or 'matrix'
    out_dir = getattr(args, 'out_dir', None) or '.'

    rows = [palette] + [simulate_palette(palette, t, mode) for t in DEFICIENCY_TYPES]
    image = render_rows(rows)

    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f'{_slug(palette.name)}_preview.png')
    image.save(path)

    report.add(
        PALETTE_SECTION,
        'preview',
        {'image': path, 'rows': ['original', *DEFICIENCY_TYPES]},
    )
