# Core type aliases for Tern's runtime.
# Runtime values are the classes in tern.types (objects, signals, function);
# syntax is the dataclass tree in tern.reader.ast.
#
# Naming guidance:
# - TernValue:   use in evaluator/runtime code to denote an evaluation result,
#                which may be a control value (return, break, error).
# - EvaluatorFn: the evaluator callable handed to node forms and the module
#                loader, so they can recurse without importing the evaluator.

import logging
from typing import Any, Callable

__version__ = "0.4.0"

TernValue = Any
EvaluatorFn = Callable[..., TernValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())


from tern.reader.lexer import Lexer, Token, TokenType, lex
from tern.reader.parser import Parser
from tern.types.environment import Environment
from tern.evaluation.evaluator import evaluate
from tern.interpreter import Interpreter
