import pytest

from texstream.point import Point
from texstream.topology import CroppedTopology, Topology, TorusTopology

DIRECTIONS = [Point.up(), Point.down(), Point.left(), Point.right()]


def test_topology_is_abstract():
    with pytest.raises(TypeError):
        Topology()


def test_cropped_inside_returns_sum():
    topology = CroppedTopology(5, 4)
    assert topology.try_add(Point(2, 2), Point.right()) == Point(2, 2) + Point.right()


@pytest.mark.parametrize(
    "start, offset",
    [
        (Point(0, 0), Point.left()),
        (Point(0, 0), Point.down()),
        (Point(4, 3), Point.right()),
        (Point(4, 3), Point.up()),
    ],
)
def test_cropped_outside_returns_none(start, offset):
    assert CroppedTopology(5, 4).try_add(start, offset) is None


def test_torus_wraps_left_edge():
    topology = TorusTopology(5, 4)
    assert topology.try_add(Point(0, 1), Point.left()) == Point(5 - 1, 1)


def test_torus_wraps_bottom_edge():
    topology = TorusTopology(5, 4)
    assert topology.try_add(Point(2, 0), Point.down()) == Point(2, 4 - 1)


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_torus_results_stay_in_grid(direction):
    topology = TorusTopology(3, 2)
    for x in range(3):
        for y in range(2):
            result = topology.try_add(Point(x, y), direction)
            assert 0 <= result.x < 3 and 0 <= result.y < 2


def test_torus_full_lap_returns_to_start():
    topology = TorusTopology(6, 3)
    point = Point(2, 1)
    for _ in range(6):
        point = topology.try_add(point, Point.right())
    assert point == Point(2, 1)