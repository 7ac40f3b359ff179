"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinsys.sparse import SparseTriplet


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def block_triplet():
    """4x4 triplet with a repeated (0, 0) entry, capacity exactly used."""
    trip = SparseTriplet(4, 4, 7)
    trip.put(0, 0, 0.5)  # a00 / 2
    trip.put(0, 0, 0.5)  # a00 / 2
    trip.put(0, 1, 2.0)
    trip.put(1, 0, 3.0)
    trip.put(1, 1, 4.0)
    trip.put(2, 2, 5.0)
    trip.put(3, 3, 6.0)
    return trip


@pytest.fixture
def tridiag_lower():
    """Lower triangle of [[2,-1,0],[-1,2,-1],[0,-1,2]], flagged symmetric."""
    trip = SparseTriplet(3, 3, 5, symmetric=True)
    trip.put(0, 0, 2.0)
    trip.put(1, 1, 2.0)
    trip.put(2, 2, 2.0)
    trip.put(1, 0, -1.0)
    trip.put(2, 1, -1.0)
    return trip


@pytest.fixture
def tridiag_full():
    """Both triangles of [[2,-1,0],[-1,2,-1],[0,-1,2]]."""
    trip = SparseTriplet(3, 3, 7)
    trip.put(0, 0, 2.0)
    trip.put(1, 1, 2.0)
    trip.put(2, 2, 2.0)
    trip.put(1, 0, -1.0)
    trip.put(0, 1, -1.0)
    trip.put(2, 1, -1.0)
    trip.put(1, 2, -1.0)
    return trip


@pytest.fixture
def general_3x3():
    """Non-symmetric [[1,3,-2],[3,5,6],[2,4,3]] with exact solution [-15, 8, 2]."""
    trip = SparseTriplet(3, 3, 9)
    rows = [[1.0, 3.0, -2.0], [3.0, 5.0, 6.0], [2.0, 4.0, 3.0]]
    for i, row in enumerate(rows):
        for j, aij in enumerate(row):
            trip.put(i, j, aij)
    x = np.array([-15.0, 8.0, 2.0])
    rhs = np.array([5.0, 7.0, 8.0])
    return trip, x, rhs
