from tern import EvaluatorFn, TernValue
from tern.reader import ast
from tern.types.environment import Environment
from tern.types.objects import Array, Integer
from tern.types.signals import Error, is_signal


def index_form(
    node: ast.IndexExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    left = evaluate_fn(node.left, env)
    if is_signal(left):
        return left
    index = evaluate_fn(node.index, env)
    if is_signal(index):
        return index

    if not (isinstance(left, Array) and isinstance(index, Integer)):
        return Error(f"index operator not supported: {left.type}[{index.type}]")

    i = index.value
    if i < 0 or i >= len(left.elements):
        return Error(f"index out of bounds: {i}")
    return left.elements[i]
