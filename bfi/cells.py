"""
Cell types for the memory tape.

A cell is any fixed-width numpy integer dtype. Arithmetic on cells wraps
modulo 2**bits, with two's complement for signed types, exactly like the
underlying machine integer.
"""

from typing import Any, Dict

import numpy as np

from .errors import CellTypeError

CELL_TYPES: Dict[str, np.dtype] = {
    "char": np.dtype(np.int8),
    "i8": np.dtype(np.int8),
    "u8": np.dtype(np.uint8),
    "i16": np.dtype(np.int16),
    "u16": np.dtype(np.uint16),
    "i32": np.dtype(np.int32),
    "u32": np.dtype(np.uint32),
    "i64": np.dtype(np.int64),
    "u64": np.dtype(np.uint64),
}

DEFAULT_CELL_TYPE = "char"


def resolve_cell_type(cell_type: Any) -> np.dtype:
    """Turn an alias, numpy scalar type or dtype into a validated integer dtype."""
    if isinstance(cell_type, str) and cell_type in CELL_TYPES:
        return CELL_TYPES[cell_type]
    try:
        dtype = np.dtype(cell_type)
    except TypeError as e:
        raise CellTypeError(f"unknown cell type: {cell_type!r}") from e
    if dtype.kind not in "iu":
        raise CellTypeError(f"cell type must be a fixed-width integer, got {dtype}")
    return dtype


def cell_bounds(dtype: np.dtype):
    """Return (min, max) representable by dtype."""
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


def wrap(value: int, dtype: np.dtype) -> int:
    """Reduce value into dtype's range modulo 2**bits."""
    bits = dtype.itemsize * 8
    value = int(value) & ((1 << bits) - 1)
    if dtype.kind == "i" and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def to_unsigned(value: int, dtype: np.dtype) -> int:
    """Two's complement reinterpretation of a cell value as unsigned."""
    return int(value) & ((1 << (dtype.itemsize * 8)) - 1)
