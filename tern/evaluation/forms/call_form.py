from tern import EvaluatorFn, TernValue
from tern.reader import ast
from tern.evaluation.apply import apply_function, evaluate_expressions
from tern.types.environment import Environment
from tern.types.signals import is_signal


def call_form(
    node: ast.CallExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    fn = evaluate_fn(node.function, env)
    if is_signal(fn):
        return fn

    args = evaluate_expressions(node.arguments, env, evaluate_fn)
    if is_signal(args):
        return args

    return apply_function(fn, args, evaluate_fn)
