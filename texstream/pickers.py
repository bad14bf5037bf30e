"""Strategies for choosing which pending point to visit next."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence

from texstream.point import Point


class PointPicker(ABC):
    """Chooses one point out of a sequence of pending points."""

    @abstractmethod
    def pick_point(self, points: Sequence[Point]) -> int | None:
        """Return the index of the chosen point, or None to pick nothing."""


class PointFromStartPicker(PointPicker):
    """Always picks the first point."""

    def pick_point(self, points: Sequence[Point]) -> int | None:
        return 0 if points else None


class PointFromEndPicker(PointPicker):
    """Always picks the last point."""

    def pick_point(self, points: Sequence[Point]) -> int | None:
        return len(points) - 1 if points else None


def _walk_index(rng: random.Random, length: int) -> int:
    # A fresh bound is drawn at every step, which favours the front.
    index = 0
    while index < rng.randint(0, length - 1):
        index += 1
    return index


class RandomPointPicker(PointPicker):
    """Picks a random point, favouring those near the front."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def pick_point(self, points: Sequence[Point]) -> int | None:
        if not points:
            return None
        return _walk_index(self.rng, len(points))


class ChanceBasedPointPicker(PointPicker):
    """Defers to another picker only with a given probability."""

    def __init__(
        self, picker: PointPicker, rng: random.Random, chance_to_pick: float
    ) -> None:
        self.picker = picker
        self.rng = rng
        self.chance_to_pick = chance_to_pick

    def pick_point(self, points: Sequence[Point]) -> int | None:
        if self.rng.random() < self.chance_to_pick:
            return self.picker.pick_point(points)
        return None