"""Callable values: user functions (closures) and builtins."""

from __future__ import annotations

from io import StringIO
from typing import Callable, ClassVar

from tern.reader import ast
from tern.types.environment import Environment
from tern.types.objects import TernObject, ObjectType


class Function(TernObject):
    """A first-class function with parameters, body, and closure env."""

    type: ClassVar[str] = ObjectType.FUNCTION

    __slots__ = ("parameters", "body", "env")

    def __init__(
        self, parameters: list[ast.Identifier], body: ast.BlockStatement, env: Environment
    ):
        self.parameters: list[ast.Identifier] = parameters
        self.body: ast.BlockStatement = body
        # captured by reference: later changes to outer bindings are visible
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def extend_env(self, args: list[TernObject]) -> Environment:
        """Bind argument values positionally in a fresh frame over the closure env."""
        call_env = self.env.enclosed()
        for param, arg in zip(self.parameters, args):
            call_env.set(param.value, arg)
        return call_env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("fn(")
            buffer.write(", ".join(str(p) for p in self.parameters))
            buffer.write(") {\n")
            buffer.write(str(self.body))
            buffer.write("\n}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Function {self}>"


BuiltinFunction = Callable[..., TernObject]


class Builtin(TernObject):
    """A native function. It checks its own arity and argument types."""

    type: ClassVar[str] = ObjectType.BUILTIN

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFunction):
        self.name = name
        self.fn = fn

    def __call__(self, *args: TernObject) -> TernObject:
        return self.fn(*args)

    def __str__(self) -> str:
        return f"builtin function {self.name}"

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"
