from __future__ import annotations

from tern.types.objects import TernObject, Integer, String, Array, NULL
from tern.types.signals import Error
from tern.types.function import Builtin

# Builtins report misuse as Error values, the same way the evaluator does.

def wrong_arity(got: int, expected: int) -> Error:
    return Error(f"wrong number of arguments. got={got}, expected={expected}")

def unsupported(name: str, arg: TernObject) -> Error:
    return Error(f"argument to '{name}' not supported, got {arg.type}")

# -------------------------------
# Sequences (String and Array)
# -------------------------------
def len_builtin(*args: TernObject) -> TernObject:
    if len(args) != 1:
        return wrong_arity(len(args), 1)
    arg = args[0]
    if isinstance(arg, String):
        return Integer(len(arg.value))
    if isinstance(arg, Array):
        return Integer(len(arg.elements))
    return unsupported("len", arg)

def first(*args: TernObject) -> TernObject:
    if len(args) != 1:
        return wrong_arity(len(args), 1)
    arg = args[0]
    if isinstance(arg, String):
        return String(arg.value[:1])
    if isinstance(arg, Array):
        return arg.elements[0] if arg.elements else NULL
    return unsupported("first", arg)

def last(*args: TernObject) -> TernObject:
    if len(args) != 1:
        return wrong_arity(len(args), 1)
    arg = args[0]
    if isinstance(arg, String):
        return String(arg.value[-1:])
    if isinstance(arg, Array):
        return arg.elements[-1] if arg.elements else NULL
    return unsupported("last", arg)

def tail(*args: TernObject) -> TernObject:
    if len(args) != 1:
        return wrong_arity(len(args), 1)
    arg = args[0]
    if isinstance(arg, String):
        return String(arg.value[1:])
    if isinstance(arg, Array):
        return Array(arg.elements[1:])
    return unsupported("tail", arg)

def push(*args: TernObject) -> TernObject:
    """push(arr, v): a new Array with v appended; arr itself is not modified."""
    if len(args) != 2:
        return wrong_arity(len(args), 2)
    arr, value = args
    if isinstance(arr, Array):
        return Array(arr.elements + [value])
    return unsupported("push", arr)

# -------------------------------
# Output
# -------------------------------
def puts(*args: TernObject) -> TernObject:
    for arg in args:
        print(arg)
    return NULL

# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Builtin] = {
    name: Builtin(name, fn)
    for name, fn in (
        ("len", len_builtin),
        ("first", first),
        ("last", last),
        ("tail", tail),
        ("push", push),
        ("puts", puts),
    )
}

def lookup(name: str) -> Builtin | None:
    return BUILTINS.get(name)
