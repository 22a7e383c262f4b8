"""Tests for chroma_checker.core.types: Color, ContrastRatio, Palette, Report."""

import dataclasses

import pytest
from chroma_checker.core.colour import HSL, RGB
from chroma_checker.core.types import Color, ColorAccessibility, Command, ContrastRatio, Palette, Report


class TestColor:
    def test_from_hex_derives_everything(self):
        c = Color.from_hex('3b82f6', name='Sky Blue', category='secondary', usage='Links')
        assert c.hex == '#3B82F6'
        assert c.rgb == RGB(59, 130, 246)
        assert c.hsl == HSL(217, 91, 60)
        assert c.name == 'Sky Blue'
        assert c.category == 'secondary'
        assert c.usage == 'Links'

    def test_name_defaults_to_hex(self):
        assert Color.from_hex('#ff0000').name == '#FF0000'

    def test_unknown_category_falls_back(self):
        assert Color.from_hex('#ff0000', category='decorative').category == 'primary'

    def test_neutral_category(self):
        assert Color.from_hex('#777777', category='neutral').category == 'neutral'

    def test_accessibility_matches_rgb(self):
        c = Color.from_hex('#3B82F6')
        assert c.accessibility == ColorAccessibility.of(RGB(59, 130, 246))
        assert c.accessibility.contrast_with_white == pytest.approx(3.68, abs=0.01)
        assert c.accessibility.contrast_with_black == pytest.approx(5.71, abs=0.01)
        # better of the two pairings
        assert c.accessibility.wcag_level == 'AA'

    def test_from_hsl_keeps_hsl(self):
        c = Color.from_hsl(HSL(11, 100, 40))
        assert c.hsl == HSL(11, 100, 40)
        assert c.rgb[0] == 204

    def test_direct_construction_fills_accessibility(self):
        c = Color(hex='#000000', rgb=RGB(0, 0, 0), hsl=HSL(0, 0, 0))
        assert c.accessibility.contrast_with_white == pytest.approx(21.0)

    def test_from_dict_ignores_stale_derived_fields(self):
        record = {
            'hex': '#FF0000',
            'rgb': {'r': 1, 'g': 2, 'b': 3},
            'accessibility': {'contrastWithWhite': 99},
            'name': 'Red',
        }
        c = Color.from_dict(record)
        assert c.rgb == RGB(255, 0, 0)
        assert c.accessibility.contrast_with_white < 21

    def test_immutable(self):
        c = Color.from_hex('#ff0000')
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.name = 'x'

    def test_renamed(self):
        c = Color.from_hex('#ff0000', name='Red')
        r = c.renamed('Red (AA)')
        assert r.name == 'Red (AA)'
        assert r.hex == c.hex
        assert c.name == 'Red'

    def test_to_dict(self):
        d = Color.from_hex('#ff0000', name='Red').to_dict()
        assert d['hex'] == '#FF0000'
        assert d['rgb'] == {'r': 255, 'g': 0, 'b': 0}
        assert d['hsl'] == {'h': 0, 's': 100, 'l': 50}
        assert set(d['accessibility']) == {'contrastWithWhite', 'contrastWithBlack', 'wcagLevel'}


class TestContrastRatioType:
    def test_between_classifies(self):
        r = ContrastRatio.between('#000000', '#FFFFFF', 21.0)
        assert r.level == 'AAA'
        assert r.is_text_readable

    def test_readability_threshold(self):
        assert ContrastRatio.between('a', 'b', 4.5).is_text_readable
        assert not ContrastRatio.between('a', 'b', 4.49).is_text_readable

    def test_to_dict_keys(self):
        d = ContrastRatio.between('#000000', '#FFFFFF', 21.0).to_dict()
        assert d == {'color1': '#000000', 'color2': '#FFFFFF', 'ratio': 21.0, 'level': 'AAA', 'isTextReadable': True}


class TestPalette:
    def test_coerce_list(self):
        p = Palette.coerce([Color.from_hex('#000'), Color.from_hex('#fff')])
        assert len(p) == 2
        assert [c.hex for c in p] == ['#000000', '#FFFFFF']

    def test_coerce_palette_is_identity(self):
        p = Palette(name='x')
        assert Palette.coerce(p) is p

    def test_with_colors_keeps_envelope(self):
        p = Palette(colors=(Color.from_hex('#000'),), name='Night', prompt='dark mode', id='p1')
        q = p.with_colors([Color.from_hex('#fff')])
        assert (q.name, q.prompt, q.id) == ('Night', 'dark mode', 'p1')
        assert q.colors[0].hex == '#FFFFFF'
        assert p.colors[0].hex == '#000000'

    def test_to_dict_omits_empty_envelope(self):
        d = Palette(colors=(Color.from_hex('#000'),)).to_dict()
        assert list(d) == ['colors']


class TestCommand:
    def test_run_decorator(self):
        cmd = Command(name='noop', help='does nothing')
        calls = []

        @cmd.run
        def run(palette, report, args):
            calls.append((palette, report, args))

        cmd.execute(Palette(), Report(), None)
        assert len(calls) == 1

    def test_execute_without_run(self):
        with pytest.raises(RuntimeError, match='no run function'):
            Command(name='empty').execute(Palette(), Report(), None)


class TestReport:
    def test_add_and_label(self):
        report = Report()
        report.add('_palette', 'score', {'overall': 'AA'})
        report.set_label('1:#000000', '1. #000000')
        report.add('1:#000000', 'simulate', {})
        assert report.sections['_palette']['commands']['score'] == {'overall': 'AA'}
        assert report.sections['1:#000000']['label'] == '1. #000000'

    def test_record_checks(self):
        report = Report()
        report.record_checks(3, 5)
        assert (report.pass_count, report.fail_count) == (3, 2)
