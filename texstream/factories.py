"""Construction of pickers, pushers and traversers by kind."""

from __future__ import annotations

import random
from enum import IntEnum

from texstream.pickers import (
    ChanceBasedPointPicker,
    PointFromEndPicker,
    PointFromStartPicker,
    PointPicker,
    RandomPointPicker,
)
from texstream.pushers import (
    ChanceBasedPointPusher,
    PointPusher,
    PointToEndPusher,
    PointToStartPusher,
    RandomPointPusher,
)
from texstream.traversers import (
    ChanceBasedPointsTraverser,
    Neighbour4PointsTraverser,
    PointsTraverser,
)

_PICK_CHANCE = 0.5
_PUSH_CHANCE = 0.5
_TRAVERSE_CHANCE = 0.59


class PickerType(IntEnum):
    """Kinds of picker and pusher strategy."""

    RANDOM = 0
    FROM_START = 1
    FROM_END = 2
    RANDOM_WITH_CHANCE = 3
    FROM_START_WITH_CHANCE = 4
    FROM_END_WITH_CHANCE = 5


class PointsTraverserType(IntEnum):
    """Kinds of traverser strategy."""

    NEIGHBOUR4 = 0
    NEIGHBOUR4_WITH_CHANCE = 1


def create_picker(picker_type: PickerType, rng: random.Random) -> PointPicker:
    """Build the picker for a picker type; unknown types give a random picker."""
    match picker_type:
        case PickerType.FROM_START:
            return PointFromStartPicker()
        case PickerType.FROM_END:
            return PointFromEndPicker()
        case PickerType.FROM_START_WITH_CHANCE:
            return ChanceBasedPointPicker(PointFromStartPicker(), rng, _PICK_CHANCE)
        case PickerType.FROM_END_WITH_CHANCE:
            return ChanceBasedPointPicker(PointFromEndPicker(), rng, _PICK_CHANCE)
        case PickerType.RANDOM_WITH_CHANCE:
            return ChanceBasedPointPicker(RandomPointPicker(rng), rng, _PICK_CHANCE)
        case _:
            return RandomPointPicker(rng)


def create_pusher(pusher_type: PickerType, rng: random.Random) -> PointPusher:
    """Build the pusher for a picker type; unknown types give a random pusher."""
    match pusher_type:
        case PickerType.FROM_START:
            return PointToStartPusher()
        case PickerType.FROM_END:
            return PointToEndPusher()
        case PickerType.FROM_START_WITH_CHANCE:
            return ChanceBasedPointPusher(PointToStartPusher(), rng, _PUSH_CHANCE)
        case PickerType.FROM_END_WITH_CHANCE:
            return ChanceBasedPointPusher(PointToEndPusher(), rng, _PUSH_CHANCE)
        case PickerType.RANDOM_WITH_CHANCE:
            return ChanceBasedPointPusher(RandomPointPusher(rng), rng, _PUSH_CHANCE)
        case _:
            return RandomPointPusher(rng)


def create_points_traverser(
    traverser_type: PointsTraverserType, rng: random.Random
) -> PointsTraverser:
    """Build the traverser for a traverser type; unknown types give Neighbour4."""
    neighbour4 = Neighbour4PointsTraverser()
    if traverser_type == PointsTraverserType.NEIGHBOUR4_WITH_CHANCE:
        return ChanceBasedPointsTraverser(neighbour4, rng, _TRAVERSE_CHANCE)
    return neighbour4