"""Run every read-only check, combine into a single report.

Runs: score, analyze, confusability, simulate.
Skips: alternatives and remap (they derive a new palette; run explicitly).
Skips: preview (writes an image; run explicitly with --out-dir).

Example:
    uv run chroma-tool all palette.json
    uv run chroma-tool all palette.json --json --fail-under AA
"""

from chroma_checker.core.types import Command, Palette, Report

command = Command(
    name='all',
    help='Run score, analyze, confusability and simulate. Combine into a single report.',
)

RUN_ORDER = ('score', 'analyze', 'confusability', 'simulate')


@command.run
def run(palette: Palette, report: Report, args) -> None:
    from chroma_checker.registry import get

    for name in RUN_ORDER:
        get(name).execute(palette, report, args)
