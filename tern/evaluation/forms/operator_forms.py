"""Prefix and infix operators.

Operands must share a type before an operator is looked up: mixing types is
a "type mismatch", an operator the shared type does not support is an
"unknown operator". Integer arithmetic is signed 64-bit and wraps on
overflow; `/` truncates toward zero and `%` takes the sign of the dividend.
"""

from __future__ import annotations

from typing import Callable

from tern import EvaluatorFn, TernValue
from tern.reader import ast
from tern.types.environment import Environment
from tern.types.objects import (
    INT_MIN,
    Boolean,
    Integer,
    ObjectType,
    String,
    TernObject,
    native_bool,
)
from tern.types.signals import Error, is_signal


def _wrap(v: int) -> Integer:
    return Integer((v - INT_MIN) % 2 ** 64 + INT_MIN)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _divide(a: int, b: int) -> TernObject:
    if b == 0:
        return Error("division by zero")
    return _wrap(_trunc_div(a, b))


def _remainder(a: int, b: int) -> TernObject:
    if b == 0:
        return Error("division by zero")
    return _wrap(a - b * _trunc_div(a, b))


INTEGER_OPERATORS: dict[str, Callable[[int, int], TernObject]] = {
    "+": lambda a, b: _wrap(a + b),
    "-": lambda a, b: _wrap(a - b),
    "*": lambda a, b: _wrap(a * b),
    "/": _divide,
    "%": _remainder,
    "<": lambda a, b: native_bool(a < b),
    "<=": lambda a, b: native_bool(a <= b),
    ">": lambda a, b: native_bool(a > b),
    ">=": lambda a, b: native_bool(a >= b),
    "==": lambda a, b: native_bool(a == b),
    "!=": lambda a, b: native_bool(a != b),
}

STRING_OPERATORS: dict[str, Callable[[str, str], TernObject]] = {
    "+": lambda a, b: String(a + b),
}

BOOLEAN_OPERATORS: dict[str, Callable[[bool, bool], TernObject]] = {
    "==": lambda a, b: native_bool(a == b),
    "!=": lambda a, b: native_bool(a != b),
    "&&": lambda a, b: native_bool(a and b),
    "||": lambda a, b: native_bool(a or b),
}

OPERATORS_BY_TYPE = {
    ObjectType.INTEGER: INTEGER_OPERATORS,
    ObjectType.STRING: STRING_OPERATORS,
    ObjectType.BOOLEAN: BOOLEAN_OPERATORS,
}


def eval_infix(operator: str, left: TernObject, right: TernObject) -> TernObject:
    if left.type != right.type:
        return Error(f"type mismatch: {left.type} {operator} {right.type}")
    op = OPERATORS_BY_TYPE.get(left.type, {}).get(operator)
    if op is None:
        return Error(f"unknown operator: {left.type} {operator} {right.type}")
    return op(left.value, right.value)


def eval_prefix(operator: str, right: TernObject) -> TernObject:
    if operator == "!":
        if isinstance(right, Boolean):
            return native_bool(not right.value)
        if isinstance(right, Integer):
            # 0 is the only integer `!` treats as false; `if` treats every integer as true
            return native_bool(right.value == 0)
    elif operator == "-":
        if isinstance(right, Integer):
            # -0 is 0, and negating INT_MIN wraps back to INT_MIN
            return _wrap(-right.value)
    return Error(f"unknown operator: {operator}{right.type}")


def prefix_form(node: ast.PrefixExpression, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    right = evaluate_fn(node.right, env)
    if is_signal(right):
        return right
    return eval_prefix(node.operator, right)


def infix_form(node: ast.InfixExpression, env: Environment, evaluate_fn: EvaluatorFn) -> TernValue:
    # both sides are always evaluated; && and || do not short-circuit
    left = evaluate_fn(node.left, env)
    if is_signal(left):
        return left
    right = evaluate_fn(node.right, env)
    if is_signal(right):
        return right
    return eval_infix(node.operator, left, right)
