"""Strategies for adding newly found points to the pending list."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from texstream.point import Point


class PointPusher(ABC):
    """Inserts a point into a list of pending points."""

    @abstractmethod
    def push_point(self, points: list[Point], point: Point) -> None:
        """Insert the point into the list in place."""


class PointToStartPusher(PointPusher):
    """Inserts at the front."""

    def push_point(self, points: list[Point], point: Point) -> None:
        points.insert(0, point)


class PointToEndPusher(PointPusher):
    """Appends at the back."""

    def push_point(self, points: list[Point], point: Point) -> None:
        points.append(point)


class RandomPointPusher(PointPusher):
    """Inserts before a random existing point, favouring the front."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def push_point(self, points: list[Point], point: Point) -> None:
        if not points:
            points.append(point)
            return
        # A fresh bound is drawn at every step, which favours the front.
        index = 0
        while index < self.rng.randint(0, len(points) - 1):
            index += 1
        points.insert(index, point)


class ChanceBasedPointPusher(PointPusher):
    """Defers to another pusher only with a given probability."""

    def __init__(
        self, pusher: PointPusher, rng: random.Random, chance_to_push: float
    ) -> None:
        self.pusher = pusher
        self.rng = rng
        self.chance_to_push = chance_to_push

    def push_point(self, points: list[Point], point: Point) -> None:
        if self.rng.random() < self.chance_to_push:
            self.pusher.push_point(points, point)