"""Environment and settings loading for chroma-tool.

Load order (first wins):
  1. Existing OS environment variables. Never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  CHROMA_SIMULATION_MODE  matrix (default) or legacy
  CHROMA_LOG_LEVEL        logging level name (default WARNING)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

SIMULATION_MODES = ('matrix', 'legacy')


@dataclass(frozen=True)
class Settings:
    simulation_mode: str = 'matrix'
    log_level: str = 'WARNING'


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes stripped, comments and blank lines skipped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the path that was loaded, or None.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)

    return path


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment. Unknown values fall back to defaults."""
    env = os.environ if environ is None else environ
    defaults = Settings()

    mode = env.get('CHROMA_SIMULATION_MODE', defaults.simulation_mode).strip().lower()
    if mode not in SIMULATION_MODES:
        mode = defaults.simulation_mode

    level = env.get('CHROMA_LOG_LEVEL', defaults.log_level).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        level = defaults.log_level

    return Settings(simulation_mode=mode, log_level=level)
