"""
Sparse matrix in triplet (coordinate) format.

A SparseTriplet accumulates (i, j, aij) entries into preallocated parallel
arrays. Entries with repeated (i, j) are allowed and kept as separate
triples; they are summed only when the triplet is consumed (to_matrix,
mat_vec_mul, or the hand-off to a direct solver). This is what finite
element assembly wants: each element appends its local contributions
without looking anything up.

Duplicate folding always follows insertion order, so the same sequence of
put() calls gives bit-identical results. numpy.add.at accumulates its
indices sequentially, which is what keeps that promise.

Example:
    >>> trip = SparseTriplet(4, 4, 7)
    >>> trip.put(0, 0, 0.5)     # a00 / 2
    >>> trip.put(0, 0, 0.5)     # a00 / 2
    >>> trip.put(0, 1, 2.0)
    >>> trip.put(1, 0, 3.0)
    >>> trip.put(1, 1, 4.0)
    >>> trip.put(2, 2, 5.0)
    >>> trip.put(3, 3, 6.0)
    >>> trip.as_matrix().as_array()
    array([[1., 2., 0., 0.],
           [3., 4., 0., 0.],
           [0., 0., 5., 0.],
           [0., 0., 0., 6.]])
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.sparse import coo_matrix

from pylinsys.core.exceptions import (
    CapacityExceededError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
)
from pylinsys.core.validation import check_index, check_positive_dims, check_scalar
from pylinsys.dense.matrix import Matrix
from pylinsys.dense.vector import Vector, as_vector


class SparseTriplet:
    """
    Holds triples (i, j, aij) representing a sparse (nrow x ncol) matrix.

    Remarks:
        - Only the non-zero values are required
        - Entries with repeated (i, j) indices are allowed and are summed
          when the triplet is consumed
        - max_nnz must be decided up front and includes repeated entries
        - symmetric=True records that only one triangle (plus the diagonal)
          is being supplied. to_matrix() still reproduces exactly what was
          stored; mat_vec_mul() and the verifier decide whether to mirror.

    Args:
        nrow: Number of rows
        ncol: Number of columns
        max_nnz: Maximum number of entries, repeated ones included
        symmetric: Whether only one triangle of a symmetric matrix is stored

    Raises:
        InvalidDimensionError: If nrow, ncol or max_nnz is not positive
    """

    def __init__(self, nrow: int, ncol: int, max_nnz: int, symmetric: bool = False):
        nrow, ncol, max_nnz = check_positive_dims(
            "nrow, ncol, and max_nnz must be greater than zero",
            nrow=nrow,
            ncol=ncol,
            max_nnz=max_nnz,
        )
        self._nrow = nrow
        self._ncol = ncol
        self._max = max_nnz
        self._pos = 0
        self._symmetric = bool(symmetric)
        self._indices_i: NDArray[np.intp] = np.zeros(max_nnz, dtype=np.intp)
        self._indices_j: NDArray[np.intp] = np.zeros(max_nnz, dtype=np.intp)
        self._values_aij: NDArray[np.floating[Any]] = np.zeros(max_nnz, dtype=np.float64)

    @classmethod
    def from_arrays(
        cls,
        nrow: int,
        ncol: int,
        rows: ArrayLike,
        cols: ArrayLike,
        values: ArrayLike,
        *,
        max_nnz: int | None = None,
        symmetric: bool = False,
    ) -> SparseTriplet:
        """
        Build a triplet by putting parallel arrays in order.

        max_nnz defaults to the number of entries given.
        """
        rows = np.asarray(rows)
        cols = np.asarray(cols)
        values = np.asarray(values, dtype=np.float64)
        if rows.ndim != 1 or not (rows.shape == cols.shape == values.shape):
            raise DimensionMismatchError(
                "rows, cols and values must be 1D arrays of the same length",
                expected=values.shape,
                actual=rows.shape,
            )
        capacity = values.shape[0] if max_nnz is None else max_nnz
        trip = cls(nrow, ncol, capacity, symmetric=symmetric)
        for i, j, aij in zip(rows, cols, values):
            trip.put(i, j, aij)
        return trip

    # === Assembly ===

    def put(self, i: int, j: int, aij: float) -> None:
        """
        Append the next triple (i, j, aij).

        No lookup and no merging: the same (i, j) may be put any number
        of times.

        Raises:
            ValidationError: If i or j is not an integer, or aij is not a real number
            IndexOutOfBoundsError: If i >= nrow or j >= ncol (or negative)
            CapacityExceededError: If nnz_current() == nnz_maximum()
        """
        i = check_index(i, 'i')
        j = check_index(j, 'j')
        aij = check_scalar(aij, 'aij')
        if i < 0 or i >= self._nrow:
            raise IndexOutOfBoundsError(
                "sparse matrix row index is out of bounds",
                row=i, col=j, bounds=(self._nrow, self._ncol),
            )
        if j < 0 or j >= self._ncol:
            raise IndexOutOfBoundsError(
                "sparse matrix column index is out of bounds",
                row=i, col=j, bounds=(self._nrow, self._ncol),
            )
        if self._pos >= self._max:
            raise CapacityExceededError(
                "current nnz (number of non-zeros) reached maximum limit",
                capacity=self._max,
            )
        self._indices_i[self._pos] = i
        self._indices_j[self._pos] = j
        self._values_aij[self._pos] = aij
        self._pos += 1

    def reset(self) -> None:
        """Forget all entries, keeping the allocated capacity."""
        self._pos = 0

    # === Accessors ===

    @property
    def nrow(self) -> int:
        return self._nrow

    @property
    def ncol(self) -> int:
        return self._ncol

    @property
    def symmetric(self) -> bool:
        """True if only one triangle of a symmetric matrix is stored."""
        return self._symmetric

    def dims(self) -> tuple[int, int]:
        return self._nrow, self._ncol

    def nnz_current(self) -> int:
        """Number of entries stored so far, repeated ones included."""
        return self._pos

    def nnz_maximum(self) -> int:
        """Maximum number of entries (the capacity)."""
        return self._max

    def raw_arrays(
        self, one_based: bool = False
    ) -> tuple[NDArray[np.intp], NDArray[np.intp], NDArray[np.floating[Any]]]:
        """
        Copies of the stored (rows, cols, values), in insertion order.

        This is the hand-off format for external direct solvers; Fortran
        solvers want one_based=True.
        """
        n = self._pos
        offset = 1 if one_based else 0
        return (
            self._indices_i[:n] + offset,
            self._indices_j[:n] + offset,
            self._values_aij[:n].copy(),
        )

    # === Consumers ===

    def to_matrix(self, a: Matrix) -> None:
        """
        Write the triplet into a dense matrix, up to the matrix dimensions.

        `a` may be smaller than the triplet, in which case only the leading
        (m x n) block is extracted. `a` is zeroed first and every stored
        entry that falls inside the window is added to it, which is how
        repeated entries get summed. No mirroring is done, whatever the
        symmetric flag says.

        Raises:
            DimensionMismatchError: If a is larger than the triplet
        """
        m, n = a.dims()
        if m > self._nrow or n > self._ncol:
            raise DimensionMismatchError(
                "wrong matrix dimensions",
                expected=(self._nrow, self._ncol),
                actual=(m, n),
            )
        rows = self._indices_i[:self._pos]
        cols = self._indices_j[:self._pos]
        values = self._values_aij[:self._pos]
        inside = (rows < m) & (cols < n)
        data = a.as_array()
        data.fill(0.0)
        np.add.at(data, (rows[inside], cols[inside]), values[inside])

    def as_matrix(self) -> Matrix:
        """The full (nrow x ncol) dense matrix; see to_matrix()."""
        a = Matrix(self._nrow, self._ncol)
        self.to_matrix(a)
        return a

    def mat_vec_mul(self, u: Vector | ArrayLike, triangular: bool = False) -> Vector:
        """
        Matrix-vector product v = a @ u computed from the triples.

        For every stored (i, j, aij), in insertion order:
            v[i] += aij * u[j]
            v[j] += aij * u[i]      (only if triangular and i != j)

        Pass triangular=True when only one triangle of a symmetric matrix
        was stored; pass False when both triangles were stored explicitly,
        otherwise the off-diagonal terms are counted twice.

        Args:
            u: Vector of length ncol
            triangular: Mirror off-diagonal entries

        Returns:
            New Vector of length nrow

        Raises:
            DimensionMismatchError: If len(u) != ncol, or triangular is
                requested on a non-square triplet
        """
        u = as_vector(u, 'u')
        if u.dim() != self._ncol:
            raise DimensionMismatchError(
                "u.ndim must equal ncol", expected=self._ncol, actual=u.dim()
            )
        if triangular and self._nrow != self._ncol:
            raise DimensionMismatchError(
                "triangular storage requires a square matrix",
                expected=(self._ncol, self._ncol),
                actual=(self._nrow, self._ncol),
            )
        n = self._pos
        rows = self._indices_i[:n]
        cols = self._indices_j[:n]
        values = self._values_aij[:n]
        x = u.as_array()
        v = Vector(self._nrow)
        out = v.as_array()
        if not triangular:
            np.add.at(out, rows, values * x[cols])
            return v
        # entry p contributes to v[i] and then v[j] before entry p + 1
        targets = np.empty(2 * n, dtype=np.intp)
        terms = np.empty(2 * n, dtype=np.float64)
        keep = np.ones(2 * n, dtype=bool)
        targets[0::2] = rows
        targets[1::2] = cols
        terms[0::2] = values * x[cols]
        terms[1::2] = values * x[rows]
        keep[1::2] = rows != cols
        np.add.at(out, targets[keep], terms[keep])
        return v

    def to_coo(self, mirror: bool = False) -> coo_matrix:
        """
        SciPy COO matrix with the stored entries (duplicates not yet summed).

        Args:
            mirror: Also emit (j, i, aij) for every off-diagonal entry, turning
                triangular storage into full storage

        Raises:
            DimensionMismatchError: If mirror is requested on a non-square triplet
        """
        rows, cols, values = self.raw_arrays()
        if mirror:
            if self._nrow != self._ncol:
                raise DimensionMismatchError(
                    "triangular storage requires a square matrix",
                    expected=(self._ncol, self._ncol),
                    actual=(self._nrow, self._ncol),
                )
            off = rows != cols
            rows, cols, values = (
                np.concatenate([rows, cols[off]]),
                np.concatenate([cols, rows[off]]),
                np.concatenate([values, values[off]]),
            )
        return coo_matrix((values, (rows, cols)), shape=(self._nrow, self._ncol))

    def __repr__(self) -> str:
        return (
            f"SparseTriplet(nrow={self._nrow}, ncol={self._ncol}, "
            f"nnz_current={self._pos}, nnz_maximum={self._max}, "
            f"symmetric={self._symmetric})"
        )
