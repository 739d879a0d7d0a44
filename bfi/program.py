"""
Brainfuck virtual machine

A Program compiles its source once and then executes the instruction tuple
against a fixed-length numpy tape:
    +  -   add/subtract the repeat count, wrapping at the cell width
    >  <   move the memory pointer (see ``wraparound``)
    .      push the current cell to the output sink, repeat-count times
    ,      pull up to repeat-count values from the input source
    [  ]   jump to the instruction after the matching bracket

Execution can be paused with a step budget and resumed by calling run again.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import numpy as np

from .cells import DEFAULT_CELL_TYPE, resolve_cell_type, wrap
from .compiler import CompileResult, compile_source
from .config import DEFAULT_CELLS, VMConfig
from .errors import TapeBoundsError
from .instruction import Instruction, Op
from .streams import as_sink, as_source

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """What a single call to Program.run did."""
    steps: int = 0
    halted: bool = False
    hit_step_limit: bool = False
    input_reads: int = 0
    output_writes: int = 0


class Program:
    """A compiled Brainfuck program bound to its own memory tape.

    Without wraparound the memory pointer moves exactly one cell per move
    instruction, whatever its repeat count. Only wraparound mode honours the
    full count (modulo the tape length).
    """

    def __init__(self, source: str, cells: int = DEFAULT_CELLS, cell_type: Any = DEFAULT_CELL_TYPE,
                 wraparound: bool = True, max_steps: int = 0):
        if cells <= 0:
            raise ValueError(f"tape length must be positive, got {cells}")
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        self.source = source
        self.max_steps = max_steps
        self._dtype: np.dtype = resolve_cell_type(cell_type)
        self._cells = cells
        self._wraparound = wraparound
        self._memory = np.zeros(cells, dtype=self._dtype)
        self._ip = 0
        self._mp = 0
        self._instructions, self._compile_result = compile_source(source)

    @classmethod
    def from_config(cls, source: str, config: VMConfig) -> 'Program':
        config.validate()
        return cls(source, cells=config.cells, cell_type=config.cell_type,
                   wraparound=config.wraparound, max_steps=config.max_steps)

    def __repr__(self) -> str:
        return (f"Program(instructions={len(self._instructions)}, cells={self._cells}, "
                f"cell_type={self._dtype}, wraparound={self._wraparound}, ip={self._ip}, mp={self._mp})")

    # State

    @property
    def instructions(self) -> Tuple[Instruction, ...]:
        return self._instructions

    @property
    def compile_result(self) -> CompileResult:
        return self._compile_result

    @property
    def compiled(self) -> bool:
        return self._compile_result.success

    def get_compile_result(self) -> Tuple[bool, str]:
        return self._compile_result.success, self._compile_result.message

    @property
    def cells(self) -> int:
        return self._cells

    @property
    def cell_type(self) -> np.dtype:
        return self._dtype

    @property
    def wraparound(self) -> bool:
        return self._wraparound

    @property
    def ip(self) -> int:
        return self._ip

    @property
    def mp(self) -> int:
        return self._mp

    @property
    def finished(self) -> bool:
        return self._ip >= len(self._instructions)

    @property
    def memory(self) -> np.ndarray:
        """Read-only view of the tape."""
        view = self._memory.view()
        view.flags.writeable = False
        return view

    def get_memory(self, i: int) -> int:
        """Value of tape cell i, wrapped modulo the tape length in wraparound mode."""
        if self._wraparound:
            return int(self._memory[i % self._cells])
        if not 0 <= i < self._cells:
            raise TapeBoundsError(i, self._cells)
        return int(self._memory[i])

    __getitem__ = get_memory

    def dump(self, start: int = 0, stop: Optional[int] = None) -> List[int]:
        """Tape cells [start, stop) as plain ints."""
        return [int(v) for v in self._memory[start:stop]]

    def reset_memory(self) -> None:
        self._memory.fill(0)

    def reset_ip(self) -> None:
        self._ip = 0

    def reset_mp(self) -> None:
        self._mp = 0

    def reset_state(self) -> None:
        self.reset_memory()
        self.reset_ip()
        self.reset_mp()

    # Execution

    def step(self, input=None, output=None) -> RunResult:
        """Execute a single instruction.

        To feed input across several steps pass the same iterator or file
        object each time; a str, bytes or list is read from its start again.
        """
        return self.run(input, output, max_steps=1)

    def run(self, input=None, output=None, max_steps: Optional[int] = None) -> RunResult:
        """Execute from the current instruction pointer.

        ``input`` is anything streams.as_source accepts and ``output`` anything
        streams.as_sink accepts; either may be None, which turns , or . into a
        no-op. ``max_steps`` bounds the instructions executed by this call
        (0 = until the program ends, None = the program's default budget).

        Each call adapts ``input`` afresh, so resuming a budgeted run with the
        same str, bytes or list re-reads it from the start. Pass an iterator
        or file object to keep the read position between calls.
        """
        if max_steps is None:
            max_steps = self.max_steps
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")

        dtype = self._dtype
        source = as_source(input)
        sink = as_sink(output, dtype)
        code = self._instructions
        end = len(code)
        memory = self._memory
        cells = self._cells
        wraparound = self._wraparound
        trace = logger.isEnabledFor(logging.DEBUG)

        result = RunResult()
        ip = self._ip
        mp = self._mp
        try:
            while ip < end:
                if max_steps and result.steps >= max_steps:
                    break

                instr = code[ip]
                op = instr.op
                value = instr.value
                if trace:
                    logger.debug("ip=%d %s mp=%d cell=%d mem=%s",
                                 ip, instr, mp, memory[mp], self.dump(0, 5))

                if op is Op.INC:
                    memory[mp] = wrap(int(memory[mp]) + value, dtype)

                elif op is Op.DEC:
                    memory[mp] = wrap(int(memory[mp]) - value, dtype)

                elif op is Op.RIGHT:
                    if wraparound:
                        mp = (mp + value) % cells
                    elif mp + 1 >= cells:
                        raise TapeBoundsError(mp + 1, cells)
                    else:
                        mp += 1

                elif op is Op.LEFT:
                    if wraparound:
                        mp = (mp - value) % cells
                    elif mp == 0:
                        raise TapeBoundsError(-1, cells)
                    else:
                        mp -= 1

                elif op is Op.OUTPUT:
                    if sink is not None:
                        cell = int(memory[mp])
                        for _ in range(value):
                            sink(cell)
                        result.output_writes += value

                elif op is Op.INPUT:
                    if source is not None:
                        for _ in range(value):
                            x = next(source, None)
                            if x is None:
                                break
                            memory[mp] = wrap(x, dtype)
                            result.input_reads += 1

                elif op is Op.JZ:
                    if memory[mp] == 0:
                        ip = value - 1

                elif op is Op.JNZ:
                    if memory[mp] != 0:
                        ip = value - 1

                ip += 1
                result.steps += 1
        finally:
            self._ip = ip
            self._mp = mp

        result.halted = ip >= end
        result.hit_step_limit = not result.halted and bool(max_steps) and result.steps >= max_steps
        logger.debug("Run stopped: steps=%d halted=%s hit_step_limit=%s ip=%d mp=%d",
                     result.steps, result.halted, result.hit_step_limit, ip, mp, extra={
            "steps": result.steps,
            "halted": result.halted,
            "hit_step_limit": result.hit_step_limit,
            "ip": ip,
            "mp": mp,
        })
        return result
