"""Report builder: text and JSON output for chroma-tool results."""

import json
import os
from typing import Any

from chroma_checker.core.contrast import format_contrast_ratio
from chroma_checker.core.types import Color, Report

PALETTE_SECTION = '_palette'

_LEVEL_STATUS: dict[str, dict[str, str]] = {
    'AAA': {'icon': '✓✓', 'color': '#22c55e', 'label': 'Excellent (AAA)'},
    'AA': {'icon': '✓', 'color': '#f59e0b', 'label': 'Good (AA)'},
    'FAIL': {'icon': '✗', 'color': '#ef4444', 'label': 'Poor (Fail)'},
}


def colour_section(report: Report, index: int, color: Color) -> str:
    """Section key for one palette entry; sets its display label."""
    key = f'{index + 1}:{color.hex}'
    label = f'{index + 1}. {color.hex}'
    if color.name != color.hex:
        label += f' {color.name}'
    report.set_label(key, label)
    return key


def level_status(level: str) -> dict[str, str]:
    """Display icon, badge colour and label for a WCAG level."""
    return _LEVEL_STATUS.get(level, _LEVEL_STATUS['FAIL'])


def _mark(level: str) -> str:
    return level_status(level)['icon']


def _format_command(name: str, data: dict[str, Any]) -> list[str]:
    lines = []
    if name == 'score':
        status = level_status(data['overall'])
        lines.append(f'  overall: {status["label"]}  {data["passed"]}/{data["total"]} checks pass')
        cb = 'yes' if data['colorblind_compatible'] else 'no'
        lines.append(f'  colour-blind compatible: {cb}')
        for r in data['ratios']:
            ratio = format_contrast_ratio(r['ratio'])
            lines.append(f'  {r["color1"]} / {r["color2"]}  {ratio:>8}  {r["level"]:<4} {_mark(r["level"])}')
        for rec in data['recommendations']:
            lines.append(f'  * {rec}')
    elif name == 'analyze':
        white = format_contrast_ratio(data['contrastWithWhite'])
        black = format_contrast_ratio(data['contrastWithBlack'])
        lines.append(f'  on white: {white} {data["wcagLevelWhite"]}  on black: {black} {data["wcagLevelBlack"]}')
        lines.append(f'  luminance: {data["luminance"]:.3f}')
        adjust = data.get('adjustment')
        if adjust and adjust['adjustmentNeeded']:
            lines.append(f'  try: lighter {adjust["lighterVersion"]}  darker {adjust["darkerVersion"]}')
        for rec in data['recommendations']:
            lines.append(f'  * {rec}')
    elif name == 'simulate':
        for deficiency, hex_str in data.items():
            lines.append(f'  {deficiency:<14} {hex_str}')
    elif name == 'confusability':
        for deficiency, pairs in data['pairs'].items():
            if not pairs:
                lines.append(f'  {deficiency:<14} ok')
            for p in pairs:
                lines.append(
                    f'  {deficiency:<14} {p["color1"]} ~ {p["color2"]}  '
                    f'({p["simulated1"]} vs {p["simulated2"]}, Δ={p["distance"]})'
                )
    elif name in ('alternatives', 'remap'):
        changed = '' if data['changed'] else '  (unchanged)'
        ratio = format_contrast_ratio(data['contrastWithWhite'])
        lines.append(f'  {name}: {data["from"]} → {data["hex"]}  {data["name"]}  on white {ratio}{changed}')
    else:
        for k, v in data.items():
            lines.append(f'  {name}.{k}: {v}')
    return lines


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'chroma-tool: {os.path.basename(report.palette_path) or "<palette>"} ({report.color_count} colours)'
    if report.palette_name:
        header += f' | {report.palette_name}'
    lines.append(header)
    lines.append('')

    for section, section_data in report.sections.items():
        label = section_data.get('label') or ('palette' if section == PALETTE_SECTION else section)
        lines.append(f'── {label}')
        for name, data in section_data.get('commands', {}).items():
            lines.extend(_format_command(name, data))
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} checks  FAIL {report.fail_count}/{total} checks')
    if report.overall:
        lines.append(f'OVERALL {report.overall}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'palette': report.palette_path,
        'colorCount': report.color_count,
    }
    if report.palette_name:
        obj['name'] = report.palette_name

    obj['sections'] = []
    for section, section_data in report.sections.items():
        obj['sections'].append(
            {
                'key': section,
                'label': section_data.get('label'),
                'commands': section_data.get('commands', {}),
            }
        )

    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
        'overall': report.overall,
    }
    return json.dumps(obj, indent=2)
