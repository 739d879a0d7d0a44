import io
import logging

from bfi.log import PACKAGE_LOGGER, enable_debug_logging
from bfi.program import Program


def test_enable_debug_logging_traces_program():
    stream = io.StringIO()
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = enable_debug_logging(stream=stream)
    try:
        Program("+").run()
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
    text = stream.getvalue()
    assert "bfi.program DEBUG: ip=0 +x1 mp=0 cell=0" in text
    assert "bfi.compiler DEBUG: Compiled 1 instructions from 1 characters" in text


def test_package_is_silent_by_default():
    handlers = logging.getLogger(PACKAGE_LOGGER).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
