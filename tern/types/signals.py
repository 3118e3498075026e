"""Control values: results that propagate through evaluation instead of data.

A ReturnValue, the BREAK signal or an Error is never bound to a name or
stored in a collection; every evaluation step that receives one hands it
straight back to its caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tern.types.objects import TernObject, ObjectType


@dataclass(frozen=True)
class ReturnValue(TernObject):
    type: ClassVar[str] = ObjectType.RETURN_VALUE

    value: TernObject

    def __str__(self) -> str:
        return str(self.value)


class BreakSignal(TernObject):
    type: ClassVar[str] = ObjectType.BREAK

    def __repr__(self): return "BREAK"
    def __str__(self): return "break"

    def __eq__(self, other):
        return isinstance(other, BreakSignal)

    def __hash__(self):
        return hash(BreakSignal)


@dataclass(frozen=True)
class Error(TernObject):
    type: ClassVar[str] = ObjectType.ERROR

    message: str

    def __str__(self) -> str:
        return f"ERROR: {self.message}"


BREAK = BreakSignal()


def is_error(obj: TernObject | None) -> bool:
    return isinstance(obj, Error)


def is_signal(obj: TernObject | None) -> bool:
    """True for every control value: return, break and error."""
    return isinstance(obj, (ReturnValue, BreakSignal, Error))
