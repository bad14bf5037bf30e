"""Drawers that paint a field one step at a time."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from texstream.color_generators import ColorGenerator
from texstream.colors import Color
from texstream.field import Field
from texstream.pickers import PointPicker
from texstream.point import Point
from texstream.pushers import PointPusher
from texstream.topology import Topology
from texstream.traversers import PointsTraverser


class Drawer(ABC):
    """Paints part of a field each time it is called."""

    @abstractmethod
    def draw(self, field: Field[int]) -> None:
        """Perform one drawing step on the field."""


def _random_point(field: Field[int], rng: random.Random) -> Point:
    return Point(rng.randint(0, field.width - 1), rng.randint(0, field.height - 1))


class PointsTraverserDrawer(Drawer):
    """Grows a region from a random seed using pluggable strategies.

    The picker chooses which pending point to paint, the traverser finds
    the unvisited points next to it, and the pusher decides where those
    go in the pending list. Newly found points are painted white.
    """

    def __init__(
        self,
        topology: Topology,
        picker: PointPicker,
        pusher: PointPusher,
        traverser: PointsTraverser,
        color_generator: ColorGenerator,
        field_fill_before_flush: float,
        rng: random.Random | None = None,
    ) -> None:
        self.topology = topology
        self.picker = picker
        self.pusher = pusher
        self.traverser = traverser
        self.color_generator = color_generator
        self.field_fill_before_flush = field_fill_before_flush
        self.rng = rng if rng is not None else random.Random()
        self._pending: list[Point] = []
        self._visited: set[Point] = set()

    def draw(self, field: Field[int]) -> None:
        limit = int(self.field_fill_before_flush * field.width * field.height)
        if len(self._visited) > limit:
            self._visited.clear()

        if not self._pending:
            self._visited.clear()
            start = _random_point(field, self.rng)
            self._pending.append(start)
            self._visited.add(start)

        index = self.picker.pick_point(self._pending)
        if index is None:
            return

        point = self._pending.pop(index)
        field[point] = self.color_generator.generate_color()

        for next_point in self.traverser.next_points(point, self.topology, self._visited):
            self._visited.add(next_point)
            self.pusher.push_point(self._pending, next_point)
            field[next_point] = int(Color.WHITE)


class RandomDrawer(Drawer):
    """Paints one uniformly random cell per step."""

    def __init__(
        self, color_generator: ColorGenerator, rng: random.Random | None = None
    ) -> None:
        self.color_generator = color_generator
        self.rng = rng if rng is not None else random.Random()

    def draw(self, field: Field[int]) -> None:
        x = self.rng.randint(0, field.width - 1)
        y = self.rng.randint(0, field.height - 1)
        field.set_cell(x, y, self.color_generator.generate_color())