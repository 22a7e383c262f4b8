"""Colour-vision deficiency simulation.

Each deficiency is a fixed 3x3 transform over normalised (0-1) RGB, then the
result is scaled back to 0-255, clamped and re-encoded as hex.

Two modes:
  matrix  (default) all three output channels are computed from the original
          channels at once: v' = M @ v.
  legacy  channels are updated one row at a time, each row reading the values
          already written by the rows before it (new G is computed from new R).
          Matches simulated colours stored by earlier palette tooling.

achromatopsia is a luma grey (0.299 R + 0.587 G + 0.114 B) in both modes.
"""

import numpy as np

from chroma_checker.core.colour import RGB, clamp_rgb, hex_to_rgb, rgb_to_hex
from chroma_checker.core.errors import EmptyPaletteError, UnsupportedDeficiencyError
from chroma_checker.core.types import Color, Palette

DEFICIENCY_TYPES: tuple[str, ...] = ('protanopia', 'deuteranopia', 'tritanopia', 'achromatopsia')

SIMULATION_MODES: tuple[str, ...] = ('matrix', 'legacy')

_MATRICES: dict[str, np.ndarray] = {
    # red-blind
    'protanopia': np.array(
        [
            [0.567, 0.433, 0.0],
            [0.558, 0.442, 0.0],
            [0.0, 0.242, 0.758],
        ]
    ),
    # green-blind
    'deuteranopia': np.array(
        [
            [0.625, 0.375, 0.0],
            [0.7, 0.3, 0.0],
            [0.0, 0.3, 0.7],
        ]
    ),
    # blue-blind
    'tritanopia': np.array(
        [
            [0.95, 0.05, 0.0],
            [0.0, 0.433, 0.567],
            [0.0, 0.475, 0.525],
        ]
    ),
    'achromatopsia': np.array(
        [
            [0.299, 0.587, 0.114],
            [0.299, 0.587, 0.114],
            [0.299, 0.587, 0.114],
        ]
    ),
}

DEFICIENCY_DESCRIPTIONS: dict[str, str] = {
    'protanopia': 'Red-blind (Protanopia)',
    'deuteranopia': 'Green-blind (Deuteranopia)',
    'tritanopia': 'Blue-blind (Tritanopia)',
    'achromatopsia': 'Complete color blindness (Achromatopsia)',
}


def deficiency_description(deficiency: str) -> str:
    _check_deficiency(deficiency)
    return DEFICIENCY_DESCRIPTIONS[deficiency]


def _check_deficiency(deficiency: str) -> None:
    if deficiency not in _MATRICES:
        raise UnsupportedDeficiencyError(deficiency, DEFICIENCY_TYPES)


def _check_mode(mode: str) -> None:
    if mode not in SIMULATION_MODES:
        raise ValueError(f'Unknown simulation mode: {mode!r}. Expected one of: {", ".join(SIMULATION_MODES)}')


def _sequential(matrix: np.ndarray, channels: tuple[float, float, float]) -> tuple[float, float, float]:
    v = list(channels)
    for i, row in enumerate(matrix.tolist()):
        v[i] = row[0] * v[0] + row[1] * v[1] + row[2] * v[2]
    return v[0], v[1], v[2]


def _to_rgb255(values) -> RGB:
    return clamp_rgb(tuple(float(x) * 255 for x in values))


def simulate_rgb(rgb, deficiency: str, mode: str = 'matrix') -> RGB:
    """Simulated RGB for one colour."""
    _check_deficiency(deficiency)
    _check_mode(mode)
    r, g, b = clamp_rgb(rgb)
    channels = (r / 255, g / 255, b / 255)
    matrix = _MATRICES[deficiency]

    if mode == 'legacy' and deficiency != 'achromatopsia':
        return _to_rgb255(_sequential(matrix, channels))
    return _to_rgb255(matrix @ np.array(channels))


def simulate(hex_str: str, deficiency: str, mode: str = 'matrix') -> str:
    """'#ff0000' under `deficiency` -> simulated hex (lowercase)."""
    return rgb_to_hex(simulate_rgb(hex_to_rgb(hex_str), deficiency, mode))


def simulate_palette(palette: Palette | list[Color], deficiency: str, mode: str = 'matrix') -> Palette:
    """Preview palette: every colour as it appears under `deficiency`.

    Names, categories and usage are kept; rgb/hsl/accessibility describe the simulated colour.
    """
    palette = Palette.coerce(palette)
    if not palette.colors:
        raise EmptyPaletteError('simulate_palette')
    return palette.with_colors(
        Color.from_rgb(simulate_rgb(c.rgb, deficiency, mode), name=c.name, category=c.category, usage=c.usage)
        for c in palette.colors
    )
