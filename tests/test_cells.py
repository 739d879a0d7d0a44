import numpy as np
import pytest

from bfi.cells import CELL_TYPES, cell_bounds, resolve_cell_type, to_unsigned, wrap
from bfi.errors import CellTypeError


@pytest.mark.parametrize("alias", sorted(CELL_TYPES))
def test_aliases_resolve_to_integer_dtypes(alias):
    assert resolve_cell_type(alias).kind in "iu"


def test_char_is_signed_byte():
    assert resolve_cell_type("char") == np.dtype(np.int8)


def test_resolve_accepts_numpy_types():
    assert resolve_cell_type(np.uint32) == np.dtype(np.uint32)
    assert resolve_cell_type(np.dtype("int16")) == np.dtype(np.int16)
    assert resolve_cell_type("uint64") == np.dtype(np.uint64)


@pytest.mark.parametrize("cell_type", [np.float32, "float64", bool, "i7", "not a type"])
def test_resolve_rejects_non_integer_types(cell_type):
    with pytest.raises(CellTypeError):
        resolve_cell_type(cell_type)


@pytest.mark.parametrize("value, dtype, expected", [
    (256, np.uint8, 0),
    (-1, np.uint8, 255),
    (128, np.int8, -128),
    (-129, np.int8, 127),
    (70000, np.uint16, 4464),
    (2 ** 31, np.int32, -(2 ** 31)),
    (-1, np.uint64, 2 ** 64 - 1),
    (5, np.int64, 5),
])
def test_wrap(value, dtype, expected):
    assert wrap(value, np.dtype(dtype)) == expected


def test_cell_bounds():
    assert cell_bounds(np.dtype(np.int8)) == (-128, 127)
    assert cell_bounds(np.dtype(np.uint16)) == (0, 65535)


def test_to_unsigned():
    assert to_unsigned(-61, np.dtype(np.int8)) == 195
    assert to_unsigned(-1, np.dtype(np.int16)) == 65535
    assert to_unsigned(42, np.dtype(np.uint8)) == 42
