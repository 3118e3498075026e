from tern import EvaluatorFn, TernValue
from tern.reader import ast
from tern.types.environment import Environment
from tern.types.objects import NULL
from tern.types.signals import BreakSignal, Error, ReturnValue


def loop_form(
    node: ast.LoopExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    """
    loop { body }
    Runs the body until it breaks (the loop is then null), returns, or fails.
    A body that never signals loops forever.
    """
    while True:
        result = evaluate_fn(node.body, env)
        if isinstance(result, BreakSignal):
            return NULL
        if isinstance(result, (ReturnValue, Error)):
            return result
