"""
Symmetric eigen-decomposition.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylinsys.core.compute.kernels import dsyev
from pylinsys.core.exceptions import DimensionMismatchError, InvalidDimensionError

if TYPE_CHECKING:
    from pylinsys.dense.matrix import Matrix
    from pylinsys.dense.vector import Vector


def mat_eigen_sym(l: Vector, a: Matrix) -> None:
    """
    Eigenvalues and eigenvectors of a symmetric matrix.
    
    Computes l and v such that a @ v[:, j] = l[j] * v[:, j].
    
    Args:
        l: Output; receives the eigenvalues in ascending order
        a: Input symmetric square matrix; overwritten with the
           eigenvectors as columns
    
    Raises:
        DimensionMismatchError: If a is not square or l has the wrong length
        InvalidDimensionError: If a is 0 x 0
        ExternalSolverFailure: If LAPACK dsyev fails
    """
    m, n = a.dims()
    if m != n:
        raise DimensionMismatchError("matrix must be square", expected=(n, n), actual=(m, n))
    if m == 0:
        raise InvalidDimensionError("matrix dimension must be ≥ 1", dims=(m, n))
    if l.dim() != n:
        raise DimensionMismatchError(
            "l vector has incompatible dimension", expected=n, actual=l.dim()
        )
    w, v = dsyev(a.as_array(), compute_v=True)
    a.as_array()[:, :] = v
    l.as_array()[:] = w
