"""Tests for chroma_checker.core.contrast: luminance, contrast ratio and WCAG levels."""

import itertools

import pytest
from chroma_checker.core.colour import RGB
from chroma_checker.core.contrast import (
    BLACK,
    WHITE,
    best_text_color,
    classify,
    contrast_ratio,
    format_contrast_ratio,
    is_text_readable,
    luminance_of,
    relative_luminance,
    target_ratio,
)
from chroma_checker.core.types import Color

SAMPLES = ['#000000', '#FFFFFF', '#FF5733', '#3B82F6', '#1E3A8A', '#777777', '#FDE68A', '#00FF00']


class TestRelativeLuminance:
    def test_black(self):
        assert relative_luminance('#000000') == 0.0

    def test_white(self):
        assert relative_luminance('#FFFFFF') == pytest.approx(1.0)

    def test_pure_red_is_red_weight(self):
        assert relative_luminance((255, 0, 0)) == pytest.approx(0.2126)

    def test_low_channel_uses_linear_segment(self):
        # 10/255 is below the 0.03928 knee
        assert relative_luminance((10, 10, 10)) == pytest.approx((10 / 255) / 12.92)

    def test_accepts_color(self):
        assert relative_luminance(Color.from_hex('#FF0000')) == pytest.approx(0.2126)

    @pytest.mark.parametrize('hex_str', SAMPLES)
    def test_range(self, hex_str):
        assert 0.0 <= relative_luminance(hex_str) <= 1.0


class TestContrastRatio:
    def test_black_on_white(self):
        assert contrast_ratio('#000000', '#FFFFFF') == pytest.approx(21.0)

    def test_same_colour(self):
        assert contrast_ratio('#3B82F6', '#3B82F6') == 1.0

    def test_sunset_orange_on_white(self):
        ratio = contrast_ratio('#FF5733', '#FFFFFF')
        assert ratio == pytest.approx(3.15, abs=0.05)
        assert classify(ratio) == 'FAIL'

    def test_mixed_inputs(self):
        assert contrast_ratio(RGB(0, 0, 0), WHITE) == contrast_ratio('#000', '#fff')

    @pytest.mark.parametrize('a,b', list(itertools.combinations(SAMPLES, 2)))
    def test_symmetric_and_bounded(self, a, b):
        ratio = contrast_ratio(a, b)
        assert ratio == contrast_ratio(b, a)
        assert 1.0 <= ratio <= 21.0

    def test_cache_is_filled(self):
        cache = {}
        first = contrast_ratio('#3B82F6', WHITE, cache)
        assert RGB(59, 130, 246) in cache
        assert WHITE in cache
        assert contrast_ratio('#3B82F6', WHITE, cache) == first

    def test_cache_is_used(self):
        cache = {BLACK: 0.0, WHITE: 0.5}
        assert luminance_of(WHITE, cache) == 0.5
        assert contrast_ratio(BLACK, WHITE, cache) == pytest.approx(0.55 / 0.05)


class TestClassify:
    def test_normal_text_boundaries(self):
        assert classify(7.0) == 'AAA'
        assert classify(6.99) == 'AA'
        assert classify(4.5) == 'AA'
        assert classify(4.49999) == 'FAIL'
        assert classify(1.0) == 'FAIL'
        assert classify(21.0) == 'AAA'

    def test_large_text_boundaries(self):
        assert classify(4.5, is_large_text=True) == 'AAA'
        assert classify(3.0, is_large_text=True) == 'AA'
        assert classify(2.99, is_large_text=True) == 'FAIL'

    def test_black_on_white_is_aaa(self):
        assert classify(contrast_ratio(BLACK, WHITE)) == 'AAA'


class TestTargets:
    def test_known_levels(self):
        assert target_ratio('AA') == 4.5
        assert target_ratio('AAA') == 7.0

    def test_unknown_level(self):
        with pytest.raises(ValueError, match='Unknown target level'):
            target_ratio('A')


class TestTextHelpers:
    def test_is_text_readable(self):
        assert is_text_readable('#000000', '#FFFFFF', 'AAA')
        assert not is_text_readable('#FF5733', '#FFFFFF')

    def test_best_text_on_yellow_is_black(self):
        assert best_text_color('#FFFF00') == '#000000'

    def test_best_text_on_navy_is_white(self):
        assert best_text_color('#1E3A8A') == '#FFFFFF'

    def test_format_contrast_ratio(self):
        assert format_contrast_ratio(4.5) == '4.50:1'
        assert format_contrast_ratio(21) == '21.00:1'
