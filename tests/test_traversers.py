import random

from texstream.point import Point
from texstream.topology import CroppedTopology, TorusTopology
from texstream.traversers import ChanceBasedPointsTraverser, Neighbour4PointsTraverser


def test_neighbours_in_order():
    result = Neighbour4PointsTraverser().next_points(
        Point(1, 1), CroppedTopology(3, 3), set()
    )
    assert result == [Point(1, 2), Point(1, 0), Point(0, 1), Point(2, 1)]


def test_cropped_corner_drops_outside():
    result = Neighbour4PointsTraverser().next_points(
        Point(0, 0), CroppedTopology(3, 3), set()
    )
    assert result == [Point(0, 1), Point(1, 0)]


def test_visited_points_are_skipped():
    visited = {Point(1, 2), Point(2, 1)}
    result = Neighbour4PointsTraverser().next_points(
        Point(1, 1), CroppedTopology(3, 3), visited
    )
    assert result == [Point(1, 0), Point(0, 1)]


def test_torus_wraps_neighbours():
    result = Neighbour4PointsTraverser().next_points(
        Point(0, 0), TorusTopology(3, 3), set()
    )
    assert result == [Point(0, 1), Point(0, 2), Point(2, 0), Point(1, 0)]


def test_chance_traverser_full_chance_keeps_all():
    traverser = ChanceBasedPointsTraverser(
        Neighbour4PointsTraverser(), random.Random(0), 1.0
    )
    result = traverser.next_points(Point(1, 1), CroppedTopology(3, 3), set())
    assert result == [Point(1, 2), Point(1, 0), Point(0, 1), Point(2, 1)]


def test_chance_traverser_zero_chance_keeps_none():
    traverser = ChanceBasedPointsTraverser(
        Neighbour4PointsTraverser(), random.Random(0), 0.0
    )
    assert traverser.next_points(Point(1, 1), CroppedTopology(3, 3), set()) == []


def test_chance_traverser_result_is_ordered_subset():
    full = [Point(1, 2), Point(1, 0), Point(0, 1), Point(2, 1)]
    traverser = ChanceBasedPointsTraverser(
        Neighbour4PointsTraverser(), random.Random(9), 0.5
    )
    for _ in range(50):
        result = traverser.next_points(Point(1, 1), CroppedTopology(3, 3), set())
        assert result == [p for p in full if p in result]