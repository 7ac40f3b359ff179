"""
Matrix and vector norms.

Matrix norms go through LAPACK dlange; vector norms through BLAS level-1
kernels. Both accept the same norm names:

    'one'  max column sum (matrix) / sum of magnitudes (vector)
    'inf'  max row sum (matrix) / largest magnitude (vector)
    'fro'  Frobenius (matrix) / Euclidean (vector)
    'euc'  same as 'fro'
    'max'  largest magnitude
"""

from __future__ import annotations

from typing import Literal, TYPE_CHECKING

from pylinsys.core.compute.kernels import dasum, dlange, dnrm2, idamax
from pylinsys.core.exceptions import ValidationError

if TYPE_CHECKING:
    from pylinsys.dense.matrix import Matrix
    from pylinsys.dense.vector import Vector


Norm = Literal['one', 'inf', 'fro', 'euc', 'max']

_DLANGE_CODES: dict[str, str] = {
    'one': '1',
    'inf': 'I',
    'fro': 'F',
    'euc': 'F',
    'max': 'M',
}


def _check_kind(kind: str) -> None:
    if kind not in _DLANGE_CODES:
        raise ValidationError(
            f"kind: expected one of {sorted(_DLANGE_CODES)}, got {kind!r}"
        )


def mat_norm(a: Matrix, kind: Norm) -> float:
    """
    Matrix norm via dlange.
    
    Example:
        >>> a = Matrix.from_rows([[-2.0, 2.0], [1.0, -4.0]])
        >>> mat_norm(a, 'one'), mat_norm(a, 'inf'), mat_norm(a, 'fro'), mat_norm(a, 'max')
        (6.0, 5.0, 5.0, 4.0)
    """
    _check_kind(kind)
    return dlange(_DLANGE_CODES[kind], a.as_array())


def vec_norm(v: Vector, kind: Norm) -> float:
    """Vector norm via dasum, dnrm2 or idamax."""
    _check_kind(kind)
    x = v.as_array()
    if kind == 'one':
        return dasum(x)
    if kind in ('fro', 'euc'):
        return dnrm2(x)
    idx = idamax(x)
    if idx < 0:
        return 0.0
    return float(abs(x[idx]))
