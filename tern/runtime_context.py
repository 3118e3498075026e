from __future__ import annotations
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

# NOTE: process-global, like the rest of the interpreter's state; evaluation
# is single-threaded.
_loading_modules: list[Path] = []


def current_module() -> Optional[Path]:
    """The module file whose statements are being evaluated, if any."""
    return _loading_modules[-1] if _loading_modules else None


def is_loading(path: Path) -> bool:
    return path in _loading_modules


@contextmanager
def loading_module(path: Path) -> Iterator[Path]:
    _loading_modules.append(path)
    try:
        yield path
    finally:
        _loading_modules.pop()
