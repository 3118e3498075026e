from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tern.errors import TernError


class Opcode(IntEnum):
    # Stack and constants
    CONSTANT = 0x00  # u16 constant index


@dataclass(frozen=True)
class Definition:
    """Human-readable name and the byte width of each operand of an opcode."""

    name: str
    operand_widths: tuple[int, ...] = ()


DEFINITIONS: dict[int, Definition] = {
    Opcode.CONSTANT: Definition("CONSTANT", (2,)),
}


def lookup(op: int) -> Definition:
    try:
        return DEFINITIONS[op]
    except KeyError:
        raise TernError(f"opcode {op} undefined") from None
