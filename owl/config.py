from __future__ import annotations
import logging
import os
from pathlib import Path


# Defaults
_DEFAULT_SCRIPT_PATH = Path('scripts') / 'repl.owl'
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_script_path() -> Path:
    raw = os.environ.get('OWL_SCRIPT_PATH')
    if not raw or not raw.strip():
        return _DEFAULT_SCRIPT_PATH
    return Path(raw.strip())


def get_log_level(name: str | None = None) -> int:
    """Resolve a level name (argument, then OWL_LOG_LEVEL) to a logging level.

    Unknown names fall back to WARNING.
    """
    raw = name or os.environ.get('OWL_LOG_LEVEL') or _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.WARNING
