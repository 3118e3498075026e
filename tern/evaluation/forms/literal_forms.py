from tern import EvaluatorFn, TernValue
from tern.builtins import lookup as lookup_builtin
from tern.reader import ast
from tern.evaluation.apply import evaluate_expressions
from tern.types.environment import Environment
from tern.types.function import Function
from tern.types.objects import Array, Hash, HashPair, Integer, String, native_bool
from tern.types.signals import Error, is_signal


def integer_form(node: ast.IntegerLiteral, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    return Integer(node.value)


def string_form(node: ast.StringLiteral, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    return String(node.value)


def boolean_form(node: ast.BooleanLiteral, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    return native_bool(node.value)


def identifier_form(node: ast.Identifier, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    # Lexical chain first, so programs may shadow builtins
    value = env.get(node.value)
    if value is not None:
        return value
    builtin = lookup_builtin(node.value)
    if builtin is not None:
        return builtin
    return Error(f"identifier not found: {node.value}")


def array_form(node: ast.ArrayLiteral, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    elements = evaluate_expressions(node.elements, env, evaluate_fn)
    if is_signal(elements):
        return elements
    return Array(elements)


def hash_form(node: ast.HashLiteral, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    """
    Keys must be hashable when the literal is built, not when it is read.
    A repeated key keeps the last value.
    """
    pairs: dict = {}
    for key_node, value_node in node.pairs:
        key = evaluate_fn(key_node, env)
        if is_signal(key):
            return key
        if not key.hashable:
            return Error(f"unusable as hash key: {key.type}")

        value = evaluate_fn(value_node, env)
        if is_signal(value):
            return value
        pairs[key.hash_key()] = HashPair(key, value)
    return Hash(pairs)


def function_form(node: ast.FunctionLiteral, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    # closes over the defining environment itself, not a copy
    return Function(node.parameters, node.body, env)
