from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Defaults
DEFAULT_PROMPT = 'hoagie> '
DEFAULT_LOG_LEVEL = 'WARNING'


def str_from_env(var: str, default: Optional[str]) -> Optional[str]:
    raw = os.environ.get(var)
    if not raw:
        return default
    return raw


def get_prompt() -> str:
    return str_from_env('HOAGIE_PROMPT', DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    raw = str_from_env('HOAGIE_HISTORY_FILE', None)
    return Path(raw.strip()).expanduser() if raw and raw.strip() else None


def get_log_level() -> str:
    return str_from_env('HOAGIE_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
