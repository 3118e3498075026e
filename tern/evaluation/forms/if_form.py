from tern import EvaluatorFn, TernValue
from tern.reader import ast
from tern.types.environment import Environment
from tern.types.objects import FALSE, NULL, TernObject
from tern.types.signals import is_signal


def is_truthy(obj: TernObject) -> bool:
    # Only false and null are falsy; 0, "" and [] are all true here
    return not (obj == FALSE or obj == NULL)


def if_form(
    node: ast.IfExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    condition = evaluate_fn(node.condition, env)
    if is_signal(condition):
        return condition

    if is_truthy(condition):
        return evaluate_fn(node.consequence, env)
    elif node.alternative is not None:
        return evaluate_fn(node.alternative, env)
    else:
        return NULL
