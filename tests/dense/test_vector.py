"""
Tests for the dense Vector container and vector updates.
"""

import numpy as np
import pytest

from pylinsys.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
)
from pylinsys.dense import Vector, as_vector, update_vector


class TestVector:

    def test_zero_filled(self):
        v = Vector(3)
        assert v.dim() == 3
        assert len(v) == 3
        np.testing.assert_array_equal(v.as_array(), [0.0, 0.0, 0.0])

    def test_empty_allowed(self):
        assert Vector(0).dim() == 0

    def test_negative_rejected(self):
        with pytest.raises(InvalidDimensionError):
            Vector(-3)

    def test_from_values(self):
        v = Vector.from_values([1, 2, 3])
        assert v[2] == 3.0
        assert v.as_array().dtype == np.float64

    def test_from_values_copies(self):
        data = np.array([1.0, 2.0])
        v = Vector.from_values(data)
        data[0] = 99.0
        assert v.get(0) == 1.0

    def test_filled_and_fill(self):
        v = Vector.filled(2, 4.0)
        assert v.get(1) == 4.0
        v.fill(0.0)
        assert v.get(1) == 0.0

    def test_set_add(self):
        v = Vector(2)
        v.set(0, 1.0)
        v.add(0, 2.0)
        assert v.get(0) == 3.0

    @pytest.mark.parametrize("i", [3, -1])
    def test_out_of_bounds(self, i):
        with pytest.raises(IndexOutOfBoundsError, match="out of bounds"):
            Vector(3).get(i)

    def test_repr(self):
        assert repr(Vector(4)) == "Vector(dim=4)"


class TestUpdateVector:

    def test_axpy(self):
        v = Vector.from_values([1.0, 2.0, 3.0])
        u = Vector.from_values([1.0, 1.0, 1.0])
        update_vector(v, -2.0, u)
        np.testing.assert_array_equal(v.as_array(), [-1.0, 0.0, 1.0])

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="same dimension"):
            update_vector(Vector(2), 1.0, Vector(3))


class TestAsVector:

    def test_passes_vector_through(self):
        v = Vector(2)
        assert as_vector(v, 'v') is v

    def test_converts_list(self):
        v = as_vector([1.0, 2.0], 'v')
        assert isinstance(v, Vector)
        assert v.dim() == 2

    def test_rejects_2d(self):
        with pytest.raises(DimensionMismatchError, match="v: expected 1D"):
            as_vector(np.zeros((2, 2)), 'v')
