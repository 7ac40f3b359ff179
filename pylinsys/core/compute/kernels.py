"""
Numerical-kernel interface.

The only module in pylinsys that talks to BLAS/LAPACK. Each function is a
thin, pure wrapper over SciPy's Fortran bindings with an explicit buffer
contract, so the rest of the package never depends on a binding mechanism.

Kernels:
    dsyev: symmetric eigen-decomposition (LAPACK)
    dlange: matrix norm selected by a one-character code (LAPACK)
    idamax: index of the entry of maximum magnitude (BLAS level 1)
    dasum: sum of magnitudes (BLAS level 1)
    dnrm2: Euclidean norm (BLAS level 1)

Thread counts for native kernels are never set process-wide; callers pass
a KernelConfig to whatever needs one.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import blas, lapack

from pylinsys.core.exceptions import ExternalSolverFailure, ValidationError


# dlange codes: one-norm, infinity-norm, Frobenius, max-abs entry
NORM_CODES = frozenset({'1', 'I', 'F', 'M'})


@dataclass(frozen=True)
class KernelConfig:
    """
    Explicit configuration for native kernels.
    
    Attributes:
        num_threads: Thread count requested from the native kernel. Opaque
            to pylinsys: it is forwarded to solver backends and recorded in
            their result info, never applied globally.
    """
    num_threads: int = 1
    
    def __post_init__(self) -> None:
        if not isinstance(self.num_threads, int) or self.num_threads < 1:
            raise ValidationError(
                f"num_threads: must be a positive integer, got {self.num_threads!r}"
            )


def dsyev(
    a: NDArray[np.floating[Any]],
    compute_v: bool = True,
    lower: bool = False,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Eigenvalues and eigenvectors of a real symmetric matrix.
    
    Only the upper (or lower) triangle of `a` is referenced.
    
    Args:
        a: Square symmetric matrix (n x n); not modified
        compute_v: If True, compute eigenvectors as well
        lower: Use the lower triangle instead of the upper
        
    Returns:
        (w, v): eigenvalues in ascending order, eigenvectors as columns
        
    Raises:
        ExternalSolverFailure: If LAPACK reports info != 0
    """
    w, v, info = lapack.dsyev(
        np.asfortranarray(a, dtype=np.float64),
        compute_v=int(compute_v),
        lower=int(lower),
    )
    if info < 0:
        raise ExternalSolverFailure(
            f"dsyev: argument {-info} had an illegal value",
            routine='dsyev',
            code=int(info),
        )
    if info > 0:
        raise ExternalSolverFailure(
            f"dsyev: failed to converge ({info} off-diagonal elements did not converge to zero)",
            routine='dsyev',
            code=int(info),
        )
    return w, v


def dlange(kind: str, a: NDArray[np.floating[Any]]) -> float:
    """
    Matrix norm.
    
    Args:
        kind: '1' (max column sum), 'I' (max row sum), 'F' (Frobenius),
              or 'M' (largest absolute entry)
        a: Matrix (m x n)
        
    Returns:
        The norm; 0.0 when m == 0 or n == 0
        
    Raises:
        ValidationError: If kind is not one of the four codes
    """
    if kind not in NORM_CODES:
        raise ValidationError(
            f"kind: expected one of {sorted(NORM_CODES)}, got {kind!r}"
        )
    m, n = a.shape
    if m == 0 or n == 0:
        return 0.0
    return float(lapack.dlange(kind, np.asfortranarray(a, dtype=np.float64)))


def idamax(x: NDArray[np.floating[Any]]) -> int:
    """
    Index of the first entry with the largest absolute value.
    
    Returns:
        0-based index, or -1 for an empty array
    """
    if x.size == 0:
        return -1
    return int(blas.idamax(np.ascontiguousarray(x, dtype=np.float64)))


def dasum(x: NDArray[np.floating[Any]]) -> float:
    """Sum of absolute values; 0.0 for an empty array."""
    if x.size == 0:
        return 0.0
    return float(blas.dasum(np.ascontiguousarray(x, dtype=np.float64)))


def dnrm2(x: NDArray[np.floating[Any]]) -> float:
    """Euclidean norm; 0.0 for an empty array."""
    if x.size == 0:
        return 0.0
    return float(blas.dnrm2(np.ascontiguousarray(x, dtype=np.float64)))
