from tern import EvaluatorFn, TernValue
from tern.reader import ast
from tern.modules.module_loader import load_module
from tern.types.environment import Environment
from tern.types.objects import NULL
from tern.types.signals import is_error


def import_form(
    node: ast.ImportStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TernValue:
    """
    Usage:
        import "path/to/module.tn"
    Runs the module in the importing environment, so its definitions become
    visible here. Yields null, or the Error that stopped the module.
    """
    result = load_module(node.path.value, env, evaluate_fn)
    if is_error(result):
        return result
    return NULL
