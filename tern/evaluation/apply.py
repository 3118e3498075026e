"""Application engine for Tern.

Keeps call semantics in one place:
- Arguments are evaluated left to right; the first control value stops
  evaluation and is handed back instead of an argument list.
- A user Function gets a fresh frame over its captured environment, with
  parameters bound positionally; the argument count must match the
  parameter count.
- A ReturnValue coming out of the body is unwrapped here, at the call
  boundary. A BREAK that escaped every loop in the body is an error.
- Builtins are invoked directly and do their own checking.
"""

from __future__ import annotations

from tern import EvaluatorFn, TernValue
from tern.reader import ast
from tern.types.environment import Environment
from tern.types.function import Builtin, Function
from tern.types.objects import TernObject
from tern.types.signals import BreakSignal, Error, ReturnValue, is_signal


def evaluate_expressions(
    exprs: list[ast.Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[TernObject] | TernValue:
    """Evaluate `exprs` in order; a control value short-circuits and is returned as-is."""
    values: list[TernObject] = []
    for expr in exprs:
        value = evaluate_fn(expr, env)
        if is_signal(value):
            return value
        values.append(value)
    return values


def unwrap_call_result(result: TernValue) -> TernValue:
    if isinstance(result, ReturnValue):
        return result.value
    if isinstance(result, BreakSignal):
        return Error("break outside loop")
    return result


def apply_function(fn: TernObject, args: list[TernObject], evaluate_fn: EvaluatorFn) -> TernValue:
    """Apply either a Function or a Builtin to already-evaluated arguments."""
    if isinstance(fn, Function):
        if len(args) != fn.arity:
            return Error(
                f"wrong number of arguments to fn: got={len(args)}, expected={fn.arity}"
            )
        result = evaluate_fn(fn.body, fn.extend_env(args))
        return unwrap_call_result(result)
    elif isinstance(fn, Builtin):
        return fn(*args)
    else:
        return Error(f"not a function: {fn.type}")
