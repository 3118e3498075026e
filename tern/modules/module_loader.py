from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from tern import EvaluatorFn, TernValue
from tern.config import MODULE_SUFFIX, get_module_roots
from tern.errors import TernImportError
from tern.reader import ast
from tern.reader.lexer import Lexer
from tern.reader.parser import Parser
from tern.runtime_context import current_module, is_loading, loading_module
from tern.types.environment import Environment
from tern.types.signals import Error

logger = logging.getLogger(__name__)


# Map an import path to a file: absolute paths as given, relative paths
# against the importing module's directory, then the working directory,
# then each TERN_PATH root. A path without a suffix also tries `.tn`.

def _candidates(name: str) -> list[Path]:
    rel = Path(name)
    names = [rel] if rel.suffix else [rel, rel.with_suffix(MODULE_SUFFIX)]
    if rel.is_absolute():
        return names
    bases: list[Path] = []
    importer = current_module()
    if importer is not None:
        bases.append(importer.parent)
    bases.append(Path.cwd())
    bases.extend(get_module_roots())
    return [base / n for base in bases for n in names]


def resolve_module(name: str) -> Optional[Path]:
    for candidate in _candidates(name):
        if candidate.is_file():
            return candidate.resolve()
    return None


def read_module(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except OSError as exc:
        raise TernImportError(f"cannot read module {path}: {exc.strerror}") from exc


def parse_module(source: str) -> tuple[ast.Program, list[str]]:
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors


def evaluate_module(
    program: ast.Program, path: Path, env: Environment, evaluate_fn: EvaluatorFn
) -> TernValue:
    """Evaluate an already-parsed module with `path` as the current module."""
    with loading_module(path):
        return evaluate_fn(program, env)


def load_module(name: str, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    """Run the module `name` in `env`; its definitions land in that environment.

    Answers the module's final value, or an Error when the module cannot be
    found, read or parsed, is already being loaded, or fails at runtime.
    """
    path = resolve_module(name)
    if path is None:
        return Error(f"module not found: {name}")
    if is_loading(path):
        return Error(f"circular import: {name}")

    logger.debug("loading module %s from %s", name, path)
    try:
        source = read_module(path)
    except TernImportError as exc:
        return Error(str(exc))

    program, errors = parse_module(source)
    if errors:
        return Error(f"parse errors in {name}:\n" + "\n".join(errors))
    return evaluate_module(program, path, env, evaluate_fn)
