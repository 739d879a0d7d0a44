"""
Brainfuck compiler

Turns source text into a flat tuple of Instructions in a single pass:
    - runs of identical + - > < . , are coalesced into one instruction
      carrying the run length
    - brackets are matched with a stack and become JZ/JNZ instructions whose
      value is the index of the instruction following the matching bracket

Malformed bracket nesting never raises. The first error is reported in the
returned CompileResult, unmatched ] are dropped and unmatched [ are patched to
skip to their own next instruction, so the sanitized program is always safe to
run.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import CompileError
from .instruction import Instruction, Op, RUN_LENGTH_OPS

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Compilation completed successfully without any errors."


@dataclass(frozen=True)
class CompileResult:
    """Outcome of compiling a program."""
    success: bool
    message: str
    position: Optional[int] = None
    line: Optional[int] = None
    column: Optional[int] = None
    char: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success

    def raise_for_error(self) -> None:
        """Raise CompileError if compilation failed."""
        if not self.success:
            raise CompileError(self)

    @classmethod
    def ok(cls) -> 'CompileResult':
        return cls(success=True, message=SUCCESS_MESSAGE)

    @classmethod
    def failure(cls, source: str, position: int) -> 'CompileResult':
        """Build the diagnostic for the misplaced bracket at ``position``."""
        line, column = locate(source, position)
        char = source[position]
        message = (
            f"Compilation failed: misplaced '{char}' on line {line}, column {column} "
            f"(no matching bracket found)."
        )
        return cls(success=False, message=message, position=position,
                   line=line, column=column, char=char)


def locate(source: str, position: int) -> Tuple[int, int]:
    """Return the 1-indexed (line, column) of ``position`` in ``source``."""
    line = source.count("\n", 0, position) + 1
    column = position - (source.rfind("\n", 0, position) + 1) + 1
    return line, column


def compile_source(source: str) -> Tuple[Tuple[Instruction, ...], CompileResult]:
    """Compile Brainfuck source into (instructions, result)."""
    instructions: List[Instruction] = []
    # (index of the emitted JZ, source index of its [)
    open_brackets: List[Tuple[int, int]] = []
    error: Optional[int] = None

    i = 0
    n = len(source)
    while i < n:
        char = source[i]

        op = RUN_LENGTH_OPS.get(char)
        if op is not None:
            count = 1
            while i + 1 < n and source[i + 1] == char:
                count += 1
                i += 1
            instructions.append(Instruction(op, count))

        elif char == "[":
            open_brackets.append((len(instructions), i))
            instructions.append(Instruction(Op.JZ, 0))  # target patched by ]

        elif char == "]":
            if open_brackets:
                start, _ = open_brackets.pop()
                instructions.append(Instruction(Op.JNZ, start + 1))
                instructions[start] = Instruction(Op.JZ, len(instructions))
            elif error is None:
                error = i

        i += 1

    for start, _ in open_brackets:
        instructions[start] = Instruction(Op.JZ, start + 1)
    if open_brackets and error is None:
        error = open_brackets[0][1]

    if error is None:
        result = CompileResult.ok()
        logger.debug("Compiled %d instructions from %d characters", len(instructions), n)
    else:
        result = CompileResult.failure(source, error)
        logger.warning("%s", result.message, extra={"position": error})

    return tuple(instructions), result


def compile_strict(source: str) -> Tuple[Instruction, ...]:
    """Compile and raise CompileError on malformed bracket nesting."""
    instructions, result = compile_source(source)
    result.raise_for_error()
    return instructions
