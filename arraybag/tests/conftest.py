from __future__ import annotations

import pytest

from arraybag.interface.bag import Bag


@pytest.fixture
def scenario_bag() -> Bag[float]:
    """Returns a bag built from an empty one by inserting 4.0, 2.0, 1.0, 3.0, 2.0."""
    bag: Bag[float] = Bag()
    for value in [4.0, 2.0, 1.0, 3.0, 2.0]:
        bag.insert(value)
    return bag


@pytest.fixture
def full_bag_of_ones() -> Bag[float]:
    """Returns a bag with capacity 4 holding four copies of 1.0."""
    bag: Bag[float] = Bag(initial_capacity=4)
    for _ in range(4):
        bag.insert(1.0)
    return bag
