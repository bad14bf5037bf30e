"""Strategies for finding the next points to visit from a given one."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Set

from texstream.point import Point
from texstream.topology import Topology


class PointsTraverser(ABC):
    """Lists points reachable from a point that are not yet visited."""

    @abstractmethod
    def next_points(
        self, point: Point, topology: Topology, visited: Set[Point]
    ) -> list[Point]:
        """Return the unvisited points to go to next."""


class Neighbour4PointsTraverser(PointsTraverser):
    """Steps up, down, left and right, in that order."""

    _DIRECTIONS = (Point.up(), Point.down(), Point.left(), Point.right())

    def next_points(
        self, point: Point, topology: Topology, visited: Set[Point]
    ) -> list[Point]:
        candidates = (topology.try_add(point, step) for step in self._DIRECTIONS)
        return [p for p in candidates if p is not None and p not in visited]


class ChanceBasedPointsTraverser(PointsTraverser):
    """Keeps each point of another traverser with a given probability."""

    def __init__(
        self, traverser: PointsTraverser, rng: random.Random, chance_to_return: float
    ) -> None:
        self.traverser = traverser
        self.rng = rng
        self.chance_to_return = chance_to_return

    def next_points(
        self, point: Point, topology: Topology, visited: Set[Point]
    ) -> list[Point]:
        return [
            p
            for p in self.traverser.next_points(point, topology, visited)
            if self.rng.random() < self.chance_to_return
        ]