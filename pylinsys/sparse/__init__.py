"""
Sparse matrices in triplet format, verification and direct solvers.

Public API:
    SparseTriplet: coordinate-format assembly with duplicate summation
    verify_lin_sys(trip, x, rhs, ...) -> VerifyLinSys
    Solver / solve(trip, rhs, ...) -> SparseSolution
    ConfigSolver: solver kind, ordering, kernel settings

Example:
    >>> from pylinsys.sparse import SparseTriplet, solve
    >>> trip = SparseTriplet(3, 3, 5, symmetric=True)
    >>> for i, j, aij in [(0, 0, 2.0), (1, 1, 2.0), (2, 2, 2.0), (1, 0, -1.0), (2, 1, -1.0)]:
    ...     trip.put(i, j, aij)
    >>> solution = solve(trip, [2.0, 4.0, 6.0], verify=True)
    >>> solution.x.as_array()
    array([5., 8., 7.])
"""

from pylinsys.sparse.triplet import SparseTriplet
from pylinsys.sparse.solution import (
    SolveParams,
    SparseSolution,
    VerifyLinSys,
    VerifyParams,
)
from pylinsys.sparse.verify import verify_lin_sys
from pylinsys.sparse.config import ConfigSolver, LinSolKind, Ordering
from pylinsys.sparse.solvers import Solver, solve

__all__ = [
    "SparseTriplet",
    "verify_lin_sys",
    "VerifyLinSys",
    "VerifyParams",
    "Solver",
    "solve",
    "SparseSolution",
    "SolveParams",
    "ConfigSolver",
    "LinSolKind",
    "Ordering",
]
