from __future__ import annotations
import logging
from pathlib import Path

from tern import TernValue
from tern.errors import TernParseError
from tern.evaluation.evaluator import evaluate
from tern.modules.module_loader import evaluate_module, parse_module, read_module
from tern.reader import ast
from tern.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Tern code.
    Keeps one global Environment across calls, so definitions made by one
    `eval` are visible to the next (REPL session semantics).
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()

    @staticmethod
    def parse(code: str) -> ast.Program:
        """Parse `code`; raises TernParseError carrying every parser error."""
        program, errors = parse_module(code)
        if errors:
            raise TernParseError(errors)
        return program

    def eval(self, code: str) -> TernValue:
        return evaluate(self.parse(code), self.env)

    def run_file(self, path: str | Path) -> TernValue:
        """Parse and evaluate a whole source file; its imports resolve next to it."""
        path = Path(path).resolve()
        logger.debug("running %s", path)
        program = self.parse(read_module(path))
        return evaluate_module(program, path, self.env, evaluate)
