"""Runtime environment for Tern.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Many child frames may share one outer
frame: every call of a closure gets a fresh frame whose outer is the
environment the closure captured.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from tern.errors import TernTypeError
from tern.types.objects import TernObject
from tern.types.signals import is_signal


class Environment:
    """Hierarchical mapping from names to Tern values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, TernObject] = {}
        self.outer: Environment | None = outer

    def enclosed(self) -> Environment:
        """A fresh child frame whose outer is this environment."""
        return Environment(outer=self)

    def set(self, name: str, value: TernObject) -> TernObject:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises TernTypeError for control values (return, break, error), which
        are never bound to names.
        """
        if is_signal(value):
            raise TernTypeError(f"Cannot bind control value {value!r} to {name}")
        self.vars[name] = value
        return value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str) -> Optional[TernObject]:
        """Look up `name` here, then in each outer frame; None if unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
