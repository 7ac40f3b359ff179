"""
Dense matrix container.

A fixed-size, column-major buffer of float64 values. Column-major order is
what the LAPACK kernels expect, so the buffer can be handed to them
without a copy. Dimensions are fixed at construction; all mutation goes
through set/add/fill or the live array returned by as_array().
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.exceptions import IndexOutOfBoundsError
from pylinsys.core.validation import (
    check_2d,
    check_array,
    check_non_negative_dims,
)
from pylinsys.dense.norms import Norm, mat_norm


class Matrix:
    """
    Dense (nrow x ncol) matrix.
    
    Construction:
        Matrix(m, n)                  # zero-filled
        Matrix.filled(m, n, 1.0)      # constant
        Matrix.from_rows([[1, 2], [3, 4]])
    """
    
    __slots__ = ('_data',)
    
    def __init__(self, nrow: int, ncol: int):
        nrow, ncol = check_non_negative_dims(nrow=nrow, ncol=ncol)
        self._data: NDArray[np.floating[Any]] = np.zeros((nrow, ncol), dtype=np.float64, order='F')
    
    @classmethod
    def filled(cls, nrow: int, ncol: int, value: float) -> Matrix:
        """Matrix with every entry set to value."""
        a = cls(nrow, ncol)
        a.fill(value)
        return a
    
    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]] | NDArray) -> Matrix:
        """Matrix copied from nested row sequences or a 2D array."""
        arr = check_array(rows, 'rows')
        check_2d(arr, 'rows')
        a = cls(*arr.shape)
        a._data[:, :] = arr
        return a
    
    # === Dimensions ===
    
    @property
    def nrow(self) -> int:
        return self._data.shape[0]
    
    @property
    def ncol(self) -> int:
        return self._data.shape[1]
    
    def dims(self) -> tuple[int, int]:
        """(nrow, ncol)."""
        return self._data.shape
    
    # === Element access ===
    
    def _check(self, i: int, j: int) -> None:
        m, n = self._data.shape
        if not (0 <= i < m and 0 <= j < n):
            raise IndexOutOfBoundsError(
                f"index ({i}, {j}) is out of bounds for a ({m} x {n}) matrix",
                row=i,
                col=j,
                bounds=(m, n),
            )
    
    def get(self, i: int, j: int) -> float:
        self._check(i, j)
        return float(self._data[i, j])
    
    def set(self, i: int, j: int, value: float) -> None:
        self._check(i, j)
        self._data[i, j] = value
    
    def add(self, i: int, j: int, value: float) -> None:
        """a[i, j] += value."""
        self._check(i, j)
        self._data[i, j] += value
    
    def fill(self, value: float) -> None:
        self._data.fill(value)
    
    def as_array(self) -> NDArray[np.floating[Any]]:
        """The live (Fortran-ordered) buffer; writes are visible to the matrix."""
        return self._data
    
    def norm(self, kind: Norm) -> float:
        return mat_norm(self, kind)
    
    def __repr__(self) -> str:
        m, n = self._data.shape
        return f"Matrix(nrow={m}, ncol={n})"
