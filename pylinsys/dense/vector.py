"""
Dense vector container.

A fixed-length float64 buffer with the same access surface as Matrix.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.exceptions import IndexOutOfBoundsError
from pylinsys.core.validation import (
    check_1d,
    check_array,
    check_length,
    check_non_negative_dims,
)
from pylinsys.dense.norms import Norm, vec_norm


class Vector:
    """
    Dense vector of length dim.
    
    Construction:
        Vector(n)                     # zero-filled
        Vector.filled(n, 1.0)         # constant
        Vector.from_values([1, 2, 3])
    """
    
    __slots__ = ('_data',)
    
    def __init__(self, dim: int):
        (dim,) = check_non_negative_dims(dim=dim)
        self._data: NDArray[np.floating[Any]] = np.zeros(dim, dtype=np.float64)
    
    @classmethod
    def filled(cls, dim: int, value: float) -> Vector:
        v = cls(dim)
        v.fill(value)
        return v
    
    @classmethod
    def from_values(cls, values: Sequence[float] | NDArray) -> Vector:
        arr = check_array(values, 'values')
        check_1d(arr, 'values')
        v = cls(arr.shape[0])
        v._data[:] = arr
        return v
    
    def dim(self) -> int:
        return self._data.shape[0]
    
    def _check(self, i: int) -> None:
        n = self._data.shape[0]
        if not 0 <= i < n:
            raise IndexOutOfBoundsError(
                f"index {i} is out of bounds for a vector of dimension {n}",
                row=i,
                bounds=(n, 1),
            )
    
    def get(self, i: int) -> float:
        self._check(i)
        return float(self._data[i])
    
    def set(self, i: int, value: float) -> None:
        self._check(i)
        self._data[i] = value
    
    def add(self, i: int, value: float) -> None:
        """v[i] += value."""
        self._check(i)
        self._data[i] += value
    
    def fill(self, value: float) -> None:
        self._data.fill(value)
    
    def as_array(self) -> NDArray[np.floating[Any]]:
        """The live buffer; writes are visible to the vector."""
        return self._data
    
    def norm(self, kind: Norm) -> float:
        return vec_norm(self, kind)
    
    def __len__(self) -> int:
        return self._data.shape[0]
    
    def __getitem__(self, i: int) -> float:
        return self.get(i)
    
    def __repr__(self) -> str:
        return f"Vector(dim={self.dim()})"


def update_vector(v: Vector, alpha: float, u: Vector) -> None:
    """
    v := v + alpha * u
    
    Raises:
        DimensionMismatchError: If v and u differ in length
    """
    check_length(u.dim(), v.dim(), "vectors must have the same dimension")
    v.as_array()[:] += alpha * u.as_array()


def as_vector(values: Vector | Sequence[float] | NDArray, name: str) -> Vector:
    """
    Return values as a Vector, copying array-likes.
    
    Vectors are passed through untouched so callers can keep working on
    the same buffer.
    """
    if isinstance(values, Vector):
        return values
    arr = check_array(values, name)
    check_1d(arr, name)
    return Vector.from_values(arr)
