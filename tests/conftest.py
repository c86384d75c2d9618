import random

import pytest

from queenslab.app import app as flask_app
from queenslab.models import build_grid
from queenslab.partitioner import column_partition


@pytest.fixture
def rng():
    """A seeded randomness source so generated layouts are reproducible."""
    return random.Random(1234)


@pytest.fixture
def column_grid():
    """Returns a function building an empty board whose regions are its columns."""
    def _build(size):
        return build_grid(column_partition(size))
    return _build


@pytest.fixture
def touching_layout():
    """
    4x4 layout with two single-cell regions at (0,0) and (1,1). Their markers
    are forced to touch diagonally, so the layout has no solution.
    """
    return [
        [0, 2, 2, 2],
        [3, 1, 2, 3],
        [3, 3, 3, 2],
        [3, 3, 3, 2],
    ]


@pytest.fixture
def client():
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as c:
        yield c
