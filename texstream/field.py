"""A fixed-size two-dimensional grid of cells."""

from __future__ import annotations

import struct
from typing import Generic, TypeVar

from texstream.errors import OutOfRangeError
from texstream.point import Point

T = TypeVar("T")


class Field(Generic[T]):
    """A width by height grid stored row by row."""

    def __init__(self, width: int, height: int, clear_value: T) -> None:
        self._width = width
        self._height = height
        self._clear_value = clear_value
        self._data: list[T] = [clear_value] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def data(self) -> list[T]:
        """A copy of the cells in row-major order."""
        return list(self._data)

    def _index(self, x: int, y: int) -> int:
        if not 0 <= x < self._width:
            raise OutOfRangeError("x", x, 0, self._width - 1)
        if not 0 <= y < self._height:
            raise OutOfRangeError("y", y, 0, self._height - 1)
        return y * self._width + x

    def get_cell(self, x: int, y: int) -> T:
        return self._data[self._index(x, y)]

    def set_cell(self, x: int, y: int, value: T) -> None:
        self._data[self._index(x, y)] = value

    def __getitem__(self, point: Point) -> T:
        return self.get_cell(point.x, point.y)

    def __setitem__(self, point: Point, value: T) -> None:
        self.set_cell(point.x, point.y, value)

    def clear(self) -> None:
        """Reset every cell to the clear value."""
        self._data = [self._clear_value] * (self._width * self._height)

    def to_bytes(self) -> bytes:
        """Pack the cells as big-endian 32-bit words (RGBA byte order)."""
        return struct.pack(f">{len(self._data)}I", *self._data)