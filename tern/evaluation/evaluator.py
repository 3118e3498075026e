"""Core evaluator for the Tern interpreter.

`evaluate` is a total function over syntax tree nodes: it dispatches on the
node's class through the NODE_FORMS registry and always answers a Tern
object. Failures come back as Error values, and `return`/`break` travel as
ReturnValue/BREAK signals until the construct that consumes them (a call
boundary, a loop, or the program itself) unwraps them.
"""

from __future__ import annotations

from tern import TernValue
from tern.reader import ast
from tern.types.environment import Environment
from tern.types.signals import Error
from tern.evaluation.forms import NODE_FORMS


def evaluate(node: ast.Node, env: Environment) -> TernValue:
    form = NODE_FORMS.get(type(node))
    if form is None:
        return Error(f"unknown node: {type(node).__name__}")
    return form(node, env, evaluate)
