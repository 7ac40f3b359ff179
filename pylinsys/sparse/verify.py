"""
Linear-system verification.

Recomputes a ⋅ x from the triplet (no dense form, no solver involved) and
reports how far it is from rhs, relative to the magnitude of the stored
coefficients:

    relative_error = max|a ⋅ x - rhs| / (max|aij| + 1)

The +1 keeps the metric defined for an all-zero matrix.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.compute.kernels import idamax
from pylinsys.core.compute.timing import Timer
from pylinsys.core.exceptions import DimensionMismatchError
from pylinsys.core.result import Result
from pylinsys.dense.vector import Vector, as_vector, update_vector
from pylinsys.sparse.solution import VerifyLinSys, VerifyParams
from pylinsys.sparse.triplet import SparseTriplet


def verify_lin_sys(
    trip: SparseTriplet,
    x: Vector | Sequence[float] | NDArray,
    rhs: Vector | Sequence[float] | NDArray,
    triangular: bool | None = None,
) -> VerifyLinSys:
    """
    Verify the linear system a ⋅ x = rhs.

    Args:
        trip: The matrix a, as triples
        x: Candidate solution, length ncol
        rhs: Right-hand side, length nrow
        triangular: Mirror off-diagonal entries when multiplying. None uses
            trip.symmetric.

    Returns:
        VerifyLinSys with max_abs_a, max_abs_ax, max_abs_diff,
        relative_error and time_check

    Raises:
        DimensionMismatchError: If len(x) != ncol or len(rhs) != nrow

    Example:
        >>> trip = SparseTriplet(3, 3, 4)
        >>> trip.put(0, 0, 1.0)
        >>> trip.put(0, 2, 4.0)
        >>> trip.put(1, 1, 2.0)
        >>> trip.put(2, 2, 3.0)
        >>> verify = verify_lin_sys(trip, [1.0, 1.0, 1.0], [5.0, 2.0, 3.0])
        >>> verify.max_abs_a, verify.max_abs_ax, verify.relative_error
        (4.0, 5.0, 0.0)
    """
    x = as_vector(x, 'x')
    rhs = as_vector(rhs, 'rhs')
    nrow, ncol = trip.dims()
    if x.dim() != ncol or rhs.dim() != nrow:
        raise DimensionMismatchError(
            "vector dimensions are incompatible",
            expected=(ncol, nrow),
            actual=(x.dim(), rhs.dim()),
        )
    if triangular is None:
        triangular = trip.symmetric

    timer = Timer()
    timer.start()

    with timer.section('max_abs_a'):
        _, _, values = trip.raw_arrays()
        idx = idamax(values)
        max_abs_a = float(abs(values[idx])) if idx >= 0 else 0.0

    with timer.section('mat_vec_mul'):
        ax = trip.mat_vec_mul(x, triangular)
        max_abs_ax = ax.norm('max')

    with timer.section('residual'):
        update_vector(ax, -1.0, rhs)  # ax := ax - rhs
        max_abs_diff = ax.norm('max')

    relative_error = max_abs_diff / (max_abs_a + 1.0)

    timer.stop()

    params = VerifyParams(
        max_abs_a=max_abs_a,
        max_abs_ax=max_abs_ax,
        max_abs_diff=max_abs_diff,
        relative_error=relative_error,
    )

    info: dict[str, Any] = {
        'nrow': nrow,
        'ncol': ncol,
        'nnz': trip.nnz_current(),
        'triangular': triangular,
    }

    return VerifyLinSys(
        Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name='cpu_triplet',
        )
    )
