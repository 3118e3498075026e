from tern import EvaluatorFn, TernValue
from tern.reader import ast
from tern.types.environment import Environment
from tern.types.objects import NULL
from tern.types.signals import BreakSignal, Error, ReturnValue, is_signal


def program_form(
    node: ast.Program,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    """
    Top level: a `return` ends the program with its value; an Error stops it.
    """
    result: TernValue = NULL
    for stmt in node.statements:
        result = evaluate_fn(stmt, env)
        if isinstance(result, ReturnValue):
            return result.value
        if isinstance(result, BreakSignal):
            return Error("break outside loop")
        if isinstance(result, Error):
            return result
    return result


def block_form(
    node: ast.BlockStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    """
    Blocks share the enclosing environment and hand every control value
    upward untouched; the call boundary or loop that owns it unwraps it.
    """
    result: TernValue = NULL
    for stmt in node.statements:
        result = evaluate_fn(stmt, env)
        if is_signal(result):
            return result
    return result
