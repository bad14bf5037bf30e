"""Integer points on a grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An immutable grid position or offset."""

    x: int = 0
    y: int = 0

    @staticmethod
    def zero() -> Point:
        return Point(0, 0)

    @staticmethod
    def up() -> Point:
        return Point(0, 1)

    @staticmethod
    def down() -> Point:
        return Point(0, -1)

    @staticmethod
    def left() -> Point:
        return Point(-1, 0)

    @staticmethod
    def right() -> Point:
        return Point(1, 0)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)