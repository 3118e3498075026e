import logging

from tern import EvaluatorFn, TernValue
from tern.reader import ast
from tern.types.environment import Environment
from tern.types.objects import NULL
from tern.types.signals import BREAK, ReturnValue, is_signal

logger = logging.getLogger(__name__)


def let_form(
    node: ast.LetStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    """
    let name = value
    Binds in the current frame and yields null.
    """
    value = evaluate_fn(node.value, env)
    if is_signal(value):
        return value
    env.set(node.name.value, value)
    return NULL


def return_form(
    node: ast.ReturnStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    value = evaluate_fn(node.return_value, env)
    if is_signal(value):
        return value
    return ReturnValue(value)


def expression_statement_form(
    node: ast.ExpressionStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    return evaluate_fn(node.expression, env)


def break_form(node: ast.BreakStatement, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    return BREAK


def exit_form(node: ast.ExitStatement, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    """
    exit <code>
    Ends the process with that status; nothing after it runs.
    """
    logger.debug("exit %d", node.code.value)
    raise SystemExit(node.code.value)
