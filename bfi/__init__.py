"""
bfi: a compiled Brainfuck virtual machine.

    >>> from bfi import Program, TextSink
    >>> program = Program("++++++++[>+++++++++<-]>.")
    >>> out = TextSink()
    >>> result = program.run(output=out)
    >>> out.getvalue()
    'H'
"""

from . import log
from .cells import CELL_TYPES, resolve_cell_type
from .compiler import CompileResult, compile_source, compile_strict
from .config import VMConfig, load_config
from .errors import BFIError, CellTypeError, CompileError, ConfigError, TapeBoundsError
from .instruction import Instruction, Op
from .program import Program, RunResult
from .runner import run_once, run_text
from .streams import ByteSink, ListSink, TextSink, as_sink, as_source

__version__ = "0.1.0"

__all__ = [
    "CELL_TYPES",
    "BFIError",
    "ByteSink",
    "CellTypeError",
    "CompileError",
    "CompileResult",
    "ConfigError",
    "Instruction",
    "ListSink",
    "Op",
    "Program",
    "RunResult",
    "TapeBoundsError",
    "TextSink",
    "VMConfig",
    "as_sink",
    "as_source",
    "compile_source",
    "compile_strict",
    "load_config",
    "log",
    "resolve_cell_type",
    "run_once",
    "run_text",
]
