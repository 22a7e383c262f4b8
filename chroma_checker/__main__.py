"""chroma-tool: WCAG contrast and colour-vision checks for colour palettes.

Usage: uv run chroma-tool <command> <palette> [options]

Commands are auto-discovered from chroma_checker/commands/.
Each command module's docstring is its documentation.
Run `chroma-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, chroma-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import os
import sys

from chroma_checker import registry
from chroma_checker.core.env import SIMULATION_MODES, load_env, load_settings
from chroma_checker.core.errors import ChromaError
from chroma_checker.core.palette_parser import parse_palette_file
from chroma_checker.core.report import format_json, format_text
from chroma_checker.core.types import Report
from chroma_checker.engine.simulate import DEFICIENCY_TYPES

_LEVEL_RANK = {'FAIL': 0, 'AA': 1, 'AAA': 2}


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'chroma_checker.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  chroma-tool score palette.json\n'
        '  chroma-tool all palette.json --json\n'
        '  chroma-tool score palette.json --fail-under AA\n'
        '  chroma-tool simulate palette.json --type deuteranopia\n'
        '  chroma-tool alternatives palette.json --level AAA --out palette-aaa.json\n'
        '  chroma-tool remap palette.json --out palette-cb.json\n'
        '  chroma-tool preview palette.json --out-dir ./tmp\n'
        '  chroma-tool help alternatives\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  CHROMA_SIMULATION_MODE  matrix (default) | legacy\n'
        '  CHROMA_LOG_LEVEL        DEBUG | INFO | WARNING (default) | ERROR\n'
    )
    parser = argparse.ArgumentParser(
        prog='chroma-tool',
        description='WCAG contrast and colour-vision checks for colour palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        p.add_argument('palette', help='Palette file: JSON colour records, or any text containing #hex codes')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-l', '--level', choices=['AA', 'AAA'], default=None, help='Target WCAG level (default AA)')
        p.add_argument('-t', '--type', choices=list(DEFICIENCY_TYPES), default=None, help='Deficiency type')
        p.add_argument(
            '-m',
            '--mode',
            choices=list(SIMULATION_MODES),
            default=None,
            help='Simulation mode (default: CHROMA_SIMULATION_MODE or matrix)',
        )
        p.add_argument('-o', '--out', metavar='PATH', help='Write the derived palette JSON (alternatives/remap)')
        p.add_argument('-d', '--out-dir', metavar='DIR', help='Directory for preview images')
        p.add_argument(
            '-f',
            '--fail-under',
            choices=['AA', 'AAA'],
            default=None,
            help='Exit 1 if the overall score is below this level (CI gating)',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<14} {_short_doc(name, cmd.help)}')
        print('\nRun: chroma-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc or f'(No module docs for {topic!r})')


def _check_fail_under(report: Report, level: str) -> bool:
    """Return True if the overall score is below level."""
    if report.overall is None:
        return False
    if _LEVEL_RANK[report.overall] < _LEVEL_RANK[level]:
        print(f'\nFAIL: overall score {report.overall} is below {level}')
        return True
    return False


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    settings = load_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format='%(levelname)s %(name)s: %(message)s',
    )
    if env_path:
        print(f'chroma-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    if not os.path.isfile(args.palette):
        print(f'Error: palette not found: {args.palette}', file=sys.stderr)
        sys.exit(1)

    args.mode = args.mode or settings.simulation_mode

    try:
        palette = parse_palette_file(args.palette)
    except (OSError, UnicodeDecodeError) as e:
        print(f'chroma-tool: cannot read {args.palette}: {e}', file=sys.stderr)
        sys.exit(1)

    report = Report(
        palette_path=args.palette,
        palette_name=palette.name,
        color_count=len(palette.colors),
    )

    cmd = registry.get(args.command)
    try:
        cmd.execute(palette, report, args)
    except ChromaError as e:
        print(f'chroma-tool: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate after output so the report is visible even on failure
    if args.fail_under and _check_fail_under(report, args.fail_under):
        sys.exit(1)


if __name__ == '__main__':
    main()
