"""Rules for moving between points on a bounded grid."""

from __future__ import annotations

from abc import ABC, abstractmethod

from texstream.point import Point


class Topology(ABC):
    """Decides where a point ends up after an offset is added."""

    @abstractmethod
    def try_add(self, a: Point, b: Point) -> Point | None:
        """Return a + b on this topology, or None if it leaves the grid."""


class CroppedTopology(Topology):
    """A flat grid whose edges cannot be crossed."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def try_add(self, a: Point, b: Point) -> Point | None:
        result = a + b
        if not 0 <= result.x < self.width:
            return None
        if not 0 <= result.y < self.height:
            return None
        return result


class TorusTopology(Topology):
    """A grid whose opposite edges are joined."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def try_add(self, a: Point, b: Point) -> Point | None:
        result = a + b
        return Point(result.x % self.width, result.y % self.height)