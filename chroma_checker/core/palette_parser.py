"""Palette file reader and writer.

Accepts:
  - a JSON palette object: {"name": ..., "prompt": ..., "id": ..., "colors": [...]}
  - a JSON list of colour records ({"hex": ..., "name": ...}) or hex strings
  - anything else: every '#RGB' / '#RRGGBB' token found in the text, in order

Records without a hex value are skipped. Only hex/name/category/usage are
read from a record; rgb, hsl and accessibility are always recomputed.
"""

import json
import logging
import re
from typing import Any

from chroma_checker.core.types import Color, Palette

logger = logging.getLogger(__name__)

_HEX_TOKEN = re.compile(r'#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b')


def parse_palette_file(path: str) -> Palette:
    """Parse a palette file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_palette_string(text)


def parse_palette_string(text: str) -> Palette:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return _scan_hex_tokens(text)

    if isinstance(data, dict):
        return Palette(
            colors=_colors_from(data.get('colors')),
            name=str(data.get('name') or ''),
            prompt=data.get('prompt'),
            id=str(data['id']) if data.get('id') is not None else None,
        )
    if isinstance(data, list):
        return Palette(colors=_colors_from(data))
    # bare JSON string or number
    return _scan_hex_tokens(str(data))


def _scan_hex_tokens(text: str) -> Palette:
    return Palette(colors=tuple(Color.from_hex(m.group(0)) for m in _HEX_TOKEN.finditer(text)))


def _colors_from(entries: Any) -> tuple[Color, ...]:
    if entries is None:
        return ()
    if not isinstance(entries, list):
        logger.warning('Ignoring palette colors: expected a list, got %s', type(entries).__name__)
        return ()
    colors = []
    for i, entry in enumerate(entries):
        if isinstance(entry, str):
            colors.append(Color.from_hex(entry))
        elif isinstance(entry, dict) and entry.get('hex'):
            colors.append(Color.from_dict(entry))
        else:
            logger.warning('Skipping palette entry %d: no hex value', i)
    return tuple(colors)


def palette_to_json(palette: Palette) -> str:
    return json.dumps(palette.to_dict(), indent=2)


def write_palette_file(palette: Palette, path: str) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        f.write(palette_to_json(palette))
        f.write('\n')
