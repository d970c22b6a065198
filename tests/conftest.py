import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from delaunay_triangulation import Delaunay


@pytest.fixture
def rng():
    yield np.random.default_rng(20210506)


@pytest.fixture
def trivial3():
    yield Delaunay([(-1, -1), (1, -1), (0, 1)])


@pytest.fixture
def trivial4():
    yield Delaunay([(-1, -1), (1, -1), (0.5, 0), (1, 1)])


@pytest.fixture
def square():
    yield Delaunay([(0, 0), (1, 0), (0, 1), (1, 1)])


@pytest.fixture
def two_columns():
    """Two vertical groups of three with one point below and one above the gap."""
    yield Delaunay([
        (0, 0), (0, 1), (0, 2),
        (2, 0), (2, 1), (2, 2),
        (1, -1), (1, 3),
    ])
