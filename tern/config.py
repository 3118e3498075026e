from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return os.pathsep


# Defaults
_DEFAULT_MODULE_DIRS = [Path('.')]
_DEFAULT_LOG_LEVEL = 'WARNING'

MODULE_SUFFIX = '.tn'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_module_roots() -> List[Path]:
    return paths_from_env('TERN_PATH', _DEFAULT_MODULE_DIRS)


def get_log_level() -> int:
    name = os.environ.get('TERN_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName answers "Level X" for names it does not know
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    # each Tern call nests several Python frames
    raw = os.environ.get('TERN_RECURSION_LIMIT', '').strip()
    return int(raw) if raw.isdigit() else 5000
