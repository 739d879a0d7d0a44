"""
Input/output adapters.

The VM only knows two capabilities:
    - a source: an iterator it pulls cell values from (exhausted = EOF)
    - a sink: a callable it pushes cell values to

The helpers here turn the usual Python collaborators (str, bytes, lists,
file objects) into that pair.
"""

import io
from collections import abc
from typing import Any, Callable, Iterator, List, Optional

import numpy as np

from .cells import resolve_cell_type, to_unsigned

Source = Iterator[int]
Sink = Callable[[int], None]

MAX_CODE_POINT = 0x110000


def _read_chars(stream) -> Iterator[int]:
    while True:
        chunk = stream.read(1)
        if not chunk:
            return
        yield chunk[0] if isinstance(chunk, (bytes, bytearray)) else ord(chunk)


def as_source(obj: Any) -> Optional[Source]:
    """Adapt obj into a pull-source of ints, or None."""
    if obj is None:
        return None
    if isinstance(obj, str):
        return iter([ord(c) for c in obj])
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return iter(bytes(obj))
    if hasattr(obj, "read"):
        return _read_chars(obj)
    if isinstance(obj, abc.Iterator):
        return (int(v) for v in obj)
    if isinstance(obj, abc.Iterable):
        return iter([int(v) for v in obj])
    raise TypeError(f"cannot use {type(obj).__name__} as an input source")


def _write_value(stream, value: int, dtype: np.dtype) -> None:
    if isinstance(stream, io.TextIOBase):
        stream.write(chr(to_unsigned(value, dtype) % MAX_CODE_POINT))
    else:
        stream.write(bytes([value % 256]))


def as_sink(obj: Any, cell_type: Any = "char") -> Optional[Sink]:
    """Adapt obj into a push-sink of ints, or None.

    Text streams receive characters; negative values from signed cells are
    reinterpreted as unsigned of ``cell_type`` first, as TextSink does.
    """
    if obj is None:
        return None
    if isinstance(obj, bytearray):
        return lambda value: obj.append(value % 256)
    if isinstance(obj, list):
        return obj.append
    if hasattr(obj, "write"):
        dtype = resolve_cell_type(cell_type)
        return lambda value: _write_value(obj, value, dtype)
    if callable(obj):
        return obj
    raise TypeError(f"cannot use {type(obj).__name__} as an output sink")


class ListSink:
    """Collects raw cell values."""

    def __init__(self):
        self.values: List[int] = []

    def __call__(self, value: int) -> None:
        self.values.append(int(value))

    def getvalue(self) -> List[int]:
        return list(self.values)


class TextSink(ListSink):
    """Collects output as a str.

    Negative values from signed cells are reinterpreted as unsigned using the
    cell width, so a char cell holding -61 becomes 195.
    """

    def __init__(self, cell_type: Any = "char"):
        super().__init__()
        self.dtype: np.dtype = resolve_cell_type(cell_type)

    def getvalue(self) -> str:
        return "".join(chr(to_unsigned(v, self.dtype) % MAX_CODE_POINT) for v in self.values)


class ByteSink(ListSink):
    """Collects output as bytes, each value narrowed modulo 256."""

    def getvalue(self) -> bytes:
        return bytes(v % 256 for v in self.values)
