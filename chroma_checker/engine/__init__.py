"""Accessibility engine: scoring, deficiency simulation, confusability and palette variants.

Everything here is a pure function over immutable core types. Depends on
chroma_checker.core only.
"""

from chroma_checker.engine.alternatives import find_accessible_alternative, lightness_candidates
from chroma_checker.engine.analysis import analyze_color, suggest_color_adjustments
from chroma_checker.engine.confusability import find_confusable_pairs, is_colorblind_compatible
from chroma_checker.engine.remap import remap_for_deficiency
from chroma_checker.engine.scorer import score_palette
from chroma_checker.engine.simulate import DEFICIENCY_TYPES, simulate, simulate_palette

__all__ = [
    'DEFICIENCY_TYPES',
    'analyze_color',
    'find_accessible_alternative',
    'find_confusable_pairs',
    'is_colorblind_compatible',
    'lightness_candidates',
    'remap_for_deficiency',
    'score_palette',
    'simulate',
    'simulate_palette',
    'suggest_color_adjustments',
]
