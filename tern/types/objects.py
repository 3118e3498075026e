"""Runtime values of the Tern language.

Data values (Integer, Boolean, String, Null, Array, Hash) are what programs
compute with. Functions live in `tern.types.function`; the control values
that ride through the evaluator (return, break, error) live in
`tern.types.signals`.

Integer, Boolean and String are hashable: `hash_key()` gives the canonical
key a Hash stores them under.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple

from tern.errors import TernTypeError


class ObjectType:
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    NULL = "NULL"
    ARRAY = "ARRAY"
    HASH = "HASH"
    FUNCTION = "FUNCTION"
    BUILTIN = "BUILTIN"
    RETURN_VALUE = "RETURN_VALUE"
    BREAK = "BREAK"
    ERROR = "ERROR"


# Integers are signed 64-bit
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


class HashKey(NamedTuple):
    # the type tag keeps 1 and "1" apart
    type: str
    key: str


class TernObject:
    type: ClassVar[str]
    hashable: ClassVar[bool] = False

    def hash_key(self) -> HashKey:
        raise TernTypeError(f"unusable as hash key: {self.type}")


@dataclass(frozen=True)
class Integer(TernObject):
    type: ClassVar[str] = ObjectType.INTEGER
    hashable: ClassVar[bool] = True

    value: int

    def hash_key(self) -> HashKey:
        return HashKey(self.type, str(self.value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean(TernObject):
    type: ClassVar[str] = ObjectType.BOOLEAN
    hashable: ClassVar[bool] = True

    value: bool

    def hash_key(self) -> HashKey:
        return HashKey(self.type, str(self))

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class String(TernObject):
    type: ClassVar[str] = ObjectType.STRING
    hashable: ClassVar[bool] = True

    value: str

    def hash_key(self) -> HashKey:
        return HashKey(self.type, self.value)

    def __str__(self) -> str:
        return self.value


class NullType(TernObject):
    type: ClassVar[str] = ObjectType.NULL

    def __repr__(self): return "NULL"
    def __str__(self): return "null"

    # Null is equal only to Null
    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)


@dataclass
class Array(TernObject):
    type: ClassVar[str] = ObjectType.ARRAY

    elements: list = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self.elements) + "]"


class HashPair(NamedTuple):
    key: TernObject
    value: TernObject


@dataclass
class Hash(TernObject):
    type: ClassVar[str] = ObjectType.HASH

    pairs: dict[HashKey, HashPair] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{p.key}: {p.value}" for p in self.pairs.values()) + "}"


NULL = NullType()
TRUE = Boolean(True)
FALSE = Boolean(False)


def native_bool(value: bool) -> Boolean:
    return TRUE if value else FALSE
