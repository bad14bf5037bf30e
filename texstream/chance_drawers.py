"""Flood-fill drawers that use a queue or a stack and random chances."""

from __future__ import annotations

import random
from abc import abstractmethod
from collections import deque

from texstream.color_generators import ColorGenerator
from texstream.colors import Color
from texstream.drawers import Drawer
from texstream.field import Field
from texstream.point import Point
from texstream.topology import Topology

_DIRECTIONS = (Point.up(), Point.down(), Point.left(), Point.right())


class _FrontierDrawer(Drawer):
    """Shared state of drawers that keep a frontier of pending points."""

    def __init__(
        self,
        topology: Topology,
        color_generator: ColorGenerator,
        chance: float,
        field_fill_before_flush: float,
        rng: random.Random | None,
    ) -> None:
        self.topology = topology
        self.color_generator = color_generator
        self.chance = chance
        self.field_fill_before_flush = field_fill_before_flush
        self.rng = rng if rng is not None else random.Random()
        self._pending: deque[Point] = deque()
        self._visited: set[Point] = set()

    @abstractmethod
    def _take(self) -> Point:
        """Remove and return the next pending point."""

    def _try_push(self, point: Point) -> bool:
        if point in self._visited:
            return False
        self._visited.add(point)
        self._pending.append(point)
        return True

    def _next_point(self, field: Field[int]) -> Point:
        limit = int(self.field_fill_before_flush * field.width * field.height)
        if len(self._visited) > limit:
            self._visited.clear()
        if not self._pending:
            self._visited.clear()
            x = self.rng.randint(0, field.width - 1)
            y = self.rng.randint(0, field.height - 1)
            self._try_push(Point(x, y))
        return self._take()

    def _push_neighbours(
        self, field: Field[int], point: Point, roll_each: bool
    ) -> None:
        for step in _DIRECTIONS:
            if roll_each and not self.rng.random() < self.chance:
                continue
            neighbour = self.topology.try_add(point, step)
            if neighbour is not None and self._try_push(neighbour):
                field[neighbour] = int(Color.WHITE)


class _QueueDrawer(_FrontierDrawer):
    def _take(self) -> Point:
        return self._pending.popleft()


class _StackDrawer(_FrontierDrawer):
    def _take(self) -> Point:
        return self._pending.pop()


class QueuePopWithChanceDrawer(_QueueDrawer):
    """Breadth-first fill that expands a popped point only with a chance."""

    def __init__(
        self,
        topology: Topology,
        color_generator: ColorGenerator,
        chance_to_use_popped_item: float,
        field_fill_before_flush: float,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            topology, color_generator, chance_to_use_popped_item,
            field_fill_before_flush, rng,
        )

    def draw(self, field: Field[int]) -> None:
        point = self._next_point(field)
        field[point] = self.color_generator.generate_color()
        if self.rng.random() > self.chance:
            return
        self._push_neighbours(field, point, roll_each=False)


class QueuePushWithChanceDrawer(_QueueDrawer):
    """Breadth-first fill that queues each neighbour only with a chance."""

    def __init__(
        self,
        topology: Topology,
        color_generator: ColorGenerator,
        chance_to_push_item: float,
        field_fill_before_flush: float,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            topology, color_generator, chance_to_push_item,
            field_fill_before_flush, rng,
        )

    def draw(self, field: Field[int]) -> None:
        point = self._next_point(field)
        field[point] = self.color_generator.generate_color()
        self._push_neighbours(field, point, roll_each=True)


class StackPopWithChanceDrawer(_StackDrawer):
    """Depth-first fill; a popped point it declines to use is painted black."""

    def __init__(
        self,
        topology: Topology,
        color_generator: ColorGenerator,
        chance_to_use_popped_item: float,
        field_fill_before_flush: float,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            topology, color_generator, chance_to_use_popped_item,
            field_fill_before_flush, rng,
        )

    def draw(self, field: Field[int]) -> None:
        point = self._next_point(field)
        if self.rng.random() >= self.chance:
            field[point] = int(Color.BLACK)
            return
        field[point] = self.color_generator.generate_color()
        self._push_neighbours(field, point, roll_each=False)


class StackPushWithChanceDrawer(_StackDrawer):
    """Depth-first fill that stacks each neighbour only with a chance."""

    def __init__(
        self,
        topology: Topology,
        color_generator: ColorGenerator,
        chance_to_push_item: float,
        field_fill_before_flush: float,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            topology, color_generator, chance_to_push_item,
            field_fill_before_flush, rng,
        )

    def draw(self, field: Field[int]) -> None:
        point = self._next_point(field)
        field[point] = self.color_generator.generate_color()
        self._push_neighbours(field, point, roll_each=True)