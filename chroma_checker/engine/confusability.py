"""Confusability screen: do palette colours collapse into each other under a deficiency?

For each screened deficiency, every colour is simulated and every pair of
simulated colours is compared by Euclidean RGB distance. A pair closer than
CONFUSION_THRESHOLD (30) is confusable, and one confusable pair under any
screened deficiency makes the palette not colour-blind compatible.

Only the dichromacies are screened. Under achromatopsia nearly every palette
has a near pair, so it is left to the simulate command.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from chroma_checker.core.types import Color, Palette
from chroma_checker.engine.simulate import simulate_rgb

logger = logging.getLogger(__name__)

CONFUSION_THRESHOLD = 30.0

SCREENED_DEFICIENCIES: tuple[str, ...] = ('protanopia', 'deuteranopia', 'tritanopia')


@dataclass(frozen=True)
class ConfusablePair:
    deficiency: str
    index_a: int
    index_b: int
    hex_a: str
    hex_b: str
    simulated_a: str
    simulated_b: str
    distance: float

    def to_dict(self) -> dict:
        return {
            'deficiency': self.deficiency,
            'color1': self.hex_a,
            'color2': self.hex_b,
            'simulated1': self.simulated_a,
            'simulated2': self.simulated_b,
            'distance': round(self.distance, 1),
        }


def _colors(palette: Palette | Sequence[Color]) -> tuple[Color, ...]:
    return Palette.coerce(palette).colors


def pairwise_distances(points: np.ndarray) -> np.ndarray:
    """(n, 3) RGB -> (n, n) matrix of rgb_distance values, computed in one pass."""
    pts = points.astype(int)
    return np.linalg.norm(pts[:, None, :] - pts[None, :, :], axis=-1)


def find_confusable_pairs(
    palette: Palette | Sequence[Color],
    deficiency: str,
    threshold: float = CONFUSION_THRESHOLD,
    mode: str = 'matrix',
) -> list[ConfusablePair]:
    """All pairs (i < j, palette order) whose simulated colours are closer than threshold."""
    colors = _colors(palette)
    if len(colors) < 2:
        return []

    simulated = [simulate_rgb(c.rgb, deficiency, mode) for c in colors]
    dists = pairwise_distances(np.array(simulated))

    pairs = []
    for i in range(len(colors)):
        for j in range(i + 1, len(colors)):
            d = float(dists[i, j])
            if d < threshold:
                pairs.append(
                    ConfusablePair(
                        deficiency=deficiency,
                        index_a=i,
                        index_b=j,
                        hex_a=colors[i].hex,
                        hex_b=colors[j].hex,
                        simulated_a=Color.from_rgb(simulated[i]).hex,
                        simulated_b=Color.from_rgb(simulated[j]).hex,
                        distance=d,
                    )
                )
    return pairs


def is_colorblind_compatible(
    palette: Palette | Sequence[Color],
    threshold: float = CONFUSION_THRESHOLD,
    mode: str = 'matrix',
    deficiencies: Iterable[str] = SCREENED_DEFICIENCIES,
) -> bool:
    colors = _colors(palette)
    for deficiency in deficiencies:
        pairs = find_confusable_pairs(colors, deficiency, threshold=threshold, mode=mode)
        if pairs:
            first = pairs[0]
            logger.debug(
                'Confusable under %s: %s vs %s -> %s vs %s (distance %.1f)',
                deficiency,
                first.hex_a,
                first.hex_b,
                first.simulated_a,
                first.simulated_b,
                first.distance,
            )
            return False
    return True
