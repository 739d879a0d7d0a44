"""Exception hierarchy for the bfi package."""


class BFIError(Exception):
    """Base class for every error raised by bfi."""


class CompileError(BFIError):
    """A program failed to compile and the caller asked for strict handling.

    The compiler itself never raises: it returns a CompileResult. This is only
    raised by helpers that opt into strict mode.
    """

    def __init__(self, result):
        super().__init__(result.message)
        self.result = result


class TapeBoundsError(BFIError, IndexError):
    """Memory pointer or direct memory access left the tape (no wraparound)."""

    def __init__(self, index: int, cells: int):
        super().__init__(f"tape bounds exceeded: index {index} outside [0, {cells})")
        self.index = index
        self.cells = cells


class CellTypeError(BFIError, TypeError):
    """Unsupported cell type."""


class ConfigError(BFIError, ValueError):
    """Invalid VM configuration."""
