"""End-to-end tests: run chroma-tool commands against palette files and check the report."""

import json
import sys
from pathlib import Path

import pytest
from chroma_checker import registry
from chroma_checker.__main__ import main
from chroma_checker.commands.preview import SWATCH_SIZE, render_rows
from chroma_checker.core.palette_parser import parse_palette_file
from chroma_checker.core.report import format_json, format_text, level_status
from chroma_checker.core.types import Color, Palette, Report
from PIL import Image

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
SAMPLE = FIXTURES_DIR / 'sample_palette.json'

ALL_COMMANDS = {'all', 'alternatives', 'analyze', 'confusability', 'preview', 'remap', 'score', 'simulate'}


@pytest.fixture
def run_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    """Run main() with the given arguments; return (exit code, stdout, stderr)."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('CHROMA_SIMULATION_MODE', raising=False)
    monkeypatch.delenv('CHROMA_LOG_LEVEL', raising=False)

    def _run(*args: str) -> tuple[int, str, str]:
        monkeypatch.setattr(sys, 'argv', ['chroma-tool', *args])
        code = 0
        try:
            main()
        except SystemExit as e:
            code = e.code or 0
        out, err = capsys.readouterr()
        return code, out, err

    return _run


def _sections(out: str) -> dict[str, dict]:
    return {s['key']: s['commands'] for s in json.loads(out)['sections']}


class TestRegistry:
    def test_discovers_all_commands(self):
        assert set(registry.discover()) == ALL_COMMANDS

    def test_unknown_command(self):
        with pytest.raises(KeyError, match='Unknown command'):
            registry.get('nope')


class TestHelp:
    def test_lists_commands(self, run_cli):
        code, out, _ = run_cli('help')
        assert code == 0
        for name in ALL_COMMANDS:
            assert name in out

    def test_command_docs(self, run_cli):
        code, out, _ = run_cli('help', 'alternatives')
        assert code == 0
        assert 'lightness' in out
        assert 'Example:' in out

    def test_unknown_topic(self, run_cli):
        code, _, err = run_cli('help', 'nope')
        assert code == 1
        assert 'Unknown command: nope' in err


class TestScoreCommand:
    def test_text(self, run_cli):
        code, out, _ = run_cli('score', str(SAMPLE))
        assert code == 0
        assert out.startswith('chroma-tool: sample_palette.json (5 colours) | Ocean Sunset')
        assert 'colour-blind compatible: yes' in out
        assert 'OVERALL FAIL' in out

    def test_json(self, run_cli):
        code, out, _ = run_cli('score', str(SAMPLE), '--json')
        assert code == 0
        data = json.loads(out)
        assert data['colorCount'] == 5
        assert data['name'] == 'Ocean Sunset'
        assert data['summary']['total'] == 20
        assert data['summary']['overall'] == 'FAIL'
        score = _sections(out)['_palette']['score']
        assert len(score['ratios']) == 20
        assert score['ratios'][0] == {
            'color1': '#1E3A8A',
            'color2': '#FFFFFF',
            'ratio': pytest.approx(10.36, abs=0.01),
            'level': 'AAA',
            'isTextReadable': True,
        }

    def test_fail_under(self, run_cli):
        code, out, _ = run_cli('score', str(SAMPLE), '--fail-under', 'AA')
        assert code == 1
        assert 'FAIL: overall score FAIL is below AA' in out

    def test_fail_under_passes_for_empty_palette(self, run_cli, tmp_path: Path):
        empty = tmp_path / 'empty.txt'
        empty.write_text('no colours in here\n')
        code, out, _ = run_cli('score', str(empty), '--fail-under', 'AAA')
        assert code == 0
        assert 'OVERALL AAA' in out


class TestAllCommand:
    def test_json_sections(self, run_cli):
        code, out, _ = run_cli('all', str(SAMPLE), '--json')
        assert code == 0
        sections = _sections(out)
        assert set(sections['_palette']) == {'score', 'confusability'}
        assert sections['_palette']['confusability']['compatible'] is True
        navy = sections['1:#1E3A8A']
        assert set(navy) == {'analyze', 'simulate'}
        assert set(navy['simulate']) == {'protanopia', 'deuteranopia', 'tritanopia', 'achromatopsia'}

    def test_section_labels(self, run_cli):
        _, out, _ = run_cli('all', str(SAMPLE), '--json')
        labels = [s['label'] for s in json.loads(out)['sections']]
        assert '1. #1E3A8A Deep Navy' in labels


class TestSimulateCommand:
    def test_single_type_legacy(self, run_cli, tmp_path: Path):
        palette = tmp_path / 'red.txt'
        palette.write_text('#FF0000\n')
        code, out, _ = run_cli('simulate', str(palette), '--type', 'protanopia', '--mode', 'legacy', '--json')
        assert code == 0
        assert _sections(out)['1:#FF0000']['simulate'] == {'protanopia': '#915114'}

    def test_mode_from_env(self, run_cli, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        palette = tmp_path / 'red.txt'
        palette.write_text('#FF0000\n')
        monkeypatch.setenv('CHROMA_SIMULATION_MODE', 'legacy')
        _, out, _ = run_cli('simulate', str(palette), '--type', 'protanopia', '--json')
        assert _sections(out)['1:#FF0000']['simulate'] == {'protanopia': '#915114'}

    def test_mode_from_dotenv(self, run_cli, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        palette = tmp_path / 'red.txt'
        palette.write_text('#FF0000\n')
        (tmp_path / '.env').write_text('CHROMA_SIMULATION_MODE=legacy\n')
        # load_env writes into os.environ; register the key so it is removed afterwards
        monkeypatch.setenv('CHROMA_SIMULATION_MODE', '')
        monkeypatch.delenv('CHROMA_SIMULATION_MODE')
        code, out, err = run_cli('simulate', str(palette), '--type', 'protanopia', '--json')
        assert code == 0
        assert 'loaded' in err
        assert _sections(out)['1:#FF0000']['simulate'] == {'protanopia': '#915114'}


class TestDerivedPalettes:
    def test_alternatives_out(self, run_cli, tmp_path: Path):
        out_path = tmp_path / 'aaa.json'
        code, out, _ = run_cli('alternatives', str(SAMPLE), '--level', 'AAA', '--out', str(out_path))
        assert code == 0
        assert 'alternatives:' in out
        derived = parse_palette_file(str(out_path))
        assert derived.name == 'Ocean Sunset'
        assert [c.name for c in derived][0] == 'Deep Navy (AAA)'
        for c in derived:
            assert c.name.endswith('(AAA)')

    def test_remap_out(self, run_cli, tmp_path: Path):
        out_path = tmp_path / 'cb.json'
        code, _, _ = run_cli('remap', str(SAMPLE), '--out', str(out_path))
        assert code == 0
        derived = parse_palette_file(str(out_path))
        assert all(c.name.endswith('(CB-Friendly)') for c in derived)

    def test_empty_palette_is_an_error(self, run_cli, tmp_path: Path):
        empty = tmp_path / 'empty.txt'
        empty.write_text('nothing\n')
        code, _, err = run_cli('alternatives', str(empty))
        assert code == 1
        assert 'requires at least one colour' in err


class TestPreview:
    def test_writes_png(self, run_cli, tmp_path: Path):
        out_dir = tmp_path / 'previews'
        code, _, _ = run_cli('preview', str(SAMPLE), '--out-dir', str(out_dir))
        assert code == 0
        path = out_dir / 'ocean-sunset_preview.png'
        assert path.is_file()
        with Image.open(path) as img:
            assert img.size == (5 * SWATCH_SIZE, 5 * SWATCH_SIZE)
            assert img.getpixel((0, 0)) == (0x1E, 0x3A, 0x8A)

    def test_render_rows(self):
        rows = [
            Palette(colors=(Color.from_hex('#FF0000'), Color.from_hex('#0000FF'))),
            Palette(colors=(Color.from_hex('#00FF00'),)),
        ]
        img = render_rows(rows, swatch=4)
        assert img.size == (8, 8)
        assert img.getpixel((5, 0)) == (0, 0, 255)
        assert img.getpixel((0, 5)) == (0, 255, 0)
        # short rows are padded white
        assert img.getpixel((5, 5)) == (255, 255, 255)


class TestErrors:
    def test_missing_palette(self, run_cli):
        code, _, err = run_cli('score', 'does-not-exist.json')
        assert code == 1
        assert 'palette not found' in err

    def test_no_command(self, run_cli):
        code, _, _ = run_cli()
        assert code == 1


class TestReportFormat:
    def test_empty_report_text(self):
        text = format_text(Report(palette_path='/tmp/p.json', color_count=0))
        assert text.startswith('chroma-tool: p.json (0 colours)')
        assert 'OVERALL' not in text

    def test_json_summary(self):
        report = Report(palette_path='p.json', color_count=1, overall='AA')
        report.record_checks(1, 2)
        data = json.loads(format_json(report))
        assert data['summary'] == {'total': 2, 'pass': 1, 'fail': 1, 'overall': 'AA'}

    def test_level_status(self):
        assert level_status('AAA')['label'] == 'Excellent (AAA)'
        assert level_status('AA')['color'] == '#f59e0b'
        assert level_status('unknown') == level_status('FAIL')
