"""Compiled instruction representation."""

from dataclasses import dataclass
from enum import Enum


class Op(Enum):
    INC = "+"
    DEC = "-"
    RIGHT = ">"
    LEFT = "<"
    OUTPUT = "."
    INPUT = ","
    JZ = "["
    JNZ = "]"

    @property
    def char(self) -> str:
        return self.value


# Operators whose consecutive repeats are coalesced into one instruction
RUN_LENGTH_OPS = {op.value: op for op in (Op.INC, Op.DEC, Op.RIGHT, Op.LEFT, Op.OUTPUT, Op.INPUT)}

VALID_CHARS = "+-><.,[]"


def is_valid(char: str) -> bool:
    """Return True if char is one of the eight operator characters."""
    return len(char) == 1 and char in VALID_CHARS


@dataclass(frozen=True)
class Instruction:
    """One compiled operation.

    For arithmetic, move and I/O operations ``value`` is a repeat count. For
    JZ/JNZ it is the index of the instruction following the matching bracket.
    """
    op: Op
    value: int

    def __str__(self) -> str:
        if self.op in (Op.JZ, Op.JNZ):
            return f"{self.op.char}->{self.value}"
        return f"{self.op.char}x{self.value}"
