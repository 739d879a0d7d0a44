"""One-shot helpers for running programs."""

import logging
from typing import Any, Optional

from .errors import BFIError
from .program import Program
from .streams import TextSink

logger = logging.getLogger(__name__)

DEFAULT_STEP_LIMIT = 5000


def run_text(source: str, input_text: str = "", strict: bool = True, **options: Any) -> str:
    """Compile and run source on text input, returning the text output.

    Extra keyword arguments (cells, cell_type, wraparound, max_steps) go to
    Program. With ``strict`` a failed compile raises CompileError instead of
    running the sanitized program.
    """
    program = Program(source, **options)
    if strict:
        program.compile_result.raise_for_error()
    sink = TextSink(program.cell_type)
    program.run(input_text, sink)
    return sink.getvalue()


def run_once(source: str, x: int, step_limit: int = DEFAULT_STEP_LIMIT, **options: Any) -> Optional[int]:
    """Feed a single value and return the first value written, or None.

    None means the program wrote nothing within step_limit steps or failed
    at runtime. Memory is fresh on every call.
    """
    program = Program(source, **options)
    out = []
    try:
        program.run([x], out, max_steps=step_limit)
    except BFIError as e:
        logger.debug("run_once failed: %s", e)
        return None
    return out[0] if out else None
