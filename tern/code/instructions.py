"""Encoding and decoding of single bytecode instructions.

An instruction is the opcode byte followed by its operands, each stored
big-endian in the width its Definition gives. Operands are truncated to
their width.
"""

from __future__ import annotations

from io import StringIO

from tern.code.opcodes import Definition, lookup


def make(op: int, *operands: int) -> bytes:
    definition = lookup(op)

    instruction = bytearray([int(op)])
    for i, width in enumerate(definition.operand_widths):
        v = operands[i] if i < len(operands) else 0
        if width == 2:
            instruction.extend(((v >> 8) & 0xFF, v & 0xFF))
        elif width == 1:
            instruction.append(v & 0xFF)
    return bytes(instruction)


def read_u16(ins: bytes, offset: int) -> int:
    return (ins[offset] << 8) | ins[offset + 1]


def read_operands(definition: Definition, ins: bytes) -> tuple[list[int], int]:
    """Decode the operands at the start of `ins`; answers them and the bytes read."""
    operands: list[int] = []
    offset = 0
    for width in definition.operand_widths:
        if width == 2:
            operands.append(read_u16(ins, offset))
        elif width == 1:
            operands.append(ins[offset])
        offset += width
    return operands, offset


def instructions_to_str(ins: bytes) -> str:
    """Disassemble a run of instructions, one `0000 NAME operands` line each."""
    with StringIO() as out:
        i = 0
        while i < len(ins):
            definition = lookup(ins[i])
            operands, read = read_operands(definition, ins[i + 1:])
            line = f"{i:04d} {definition.name}"
            if operands:
                line += " " + " ".join(str(o) for o in operands)
            out.write(line + "\n")
            i += 1 + read
        return out.getvalue()
