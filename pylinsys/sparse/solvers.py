"""
Solver dispatch for sparse linear systems.

This module is the hand-off point between a SparseTriplet and the external
direct solver. It provides the Solver class (factorize once, solve many
times) and the one-shot solve() function.
"""

from __future__ import annotations

import dataclasses
import logging
import warnings
from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.compute.timing import Timer
from pylinsys.core.compute.tolerances import select_tolerance
from pylinsys.core.exceptions import (
    DimensionMismatchError,
    InvalidDimensionError,
    SolverStateError,
)
from pylinsys.core.protocols import SolverBackend
from pylinsys.core.result import Result
from pylinsys.core.validation import check_positive_dims
from pylinsys.dense.vector import Vector, as_vector
from pylinsys.sparse.backends.cpu import CPUSuperLUBackend
from pylinsys.sparse.config import ConfigSolver
from pylinsys.sparse.solution import SolveParams, SparseSolution
from pylinsys.sparse.triplet import SparseTriplet
from pylinsys.sparse.verify import verify_lin_sys


def _get_backend(config: ConfigSolver, symmetric_mode: bool) -> SolverBackend:
    """
    Instantiate the backend for a configuration.

    Args:
        config: Solver configuration
        symmetric_mode: Whether the matrix came from triangular storage and
            the kind wants SuperLU's symmetric mode

    Returns:
        Backend instance ready to factorize
    """
    return CPUSuperLUBackend(
        kind=config.kind,
        permc_spec=config.permc_spec,
        symmetric_mode=symmetric_mode,
        kernel=config.kernel,
    )


class Solver:
    """
    Sparse direct solver for square systems a ⋅ x = rhs.

    Args:
        neq: Number of equations (rows = columns of a)
        nnz: Maximum number of stored entries the solver accepts
        config: Solver configuration; defaults to ConfigSolver()
        logger: Logger for milestones; defaults to this module's logger

    Raises:
        InvalidDimensionError: If neq or nnz is not positive

    Example:
        >>> solver = Solver(3, 5, ConfigSolver(kind='mmp'))
        >>> solver.factorize(trip)
        >>> solution = solver.solve([1.0, 1.0, 1.0])
        >>> solution.x.as_array()
    """

    def __init__(
        self,
        neq: int,
        nnz: int,
        config: ConfigSolver | None = None,
        *,
        logger: logging.Logger | None = None,
    ):
        self._neq, self._nnz = check_positive_dims(
            "neq and nnz must be greater than zero", neq=neq, nnz=nnz
        )
        self._config = config if config is not None else ConfigSolver()
        self._log = logger or logging.getLogger(__name__)
        self._level = logging.INFO if self._config.verbose else logging.DEBUG
        self._backend: SolverBackend | None = None
        self._info: dict[str, Any] = {}
        self._factorize_seconds: float | None = None

    @property
    def config(self) -> ConfigSolver:
        return self._config

    @property
    def neq(self) -> int:
        return self._neq

    @property
    def factorized(self) -> bool:
        return self._backend is not None

    def factorize(self, trip: SparseTriplet) -> None:
        """
        Factorize the matrix held by trip.

        Repeated entries are summed when the triples are compressed.
        Triangular storage (trip.symmetric) is mirrored into full storage.
        A failed factorization leaves the solver unfactorized.

        Raises:
            DimensionMismatchError: If trip is not (neq x neq) or holds more
                than nnz entries
            InvalidDimensionError: If trip holds no entries
            ExternalSolverFailure: If the matrix is singular
        """
        if trip.dims() != (self._neq, self._neq):
            raise DimensionMismatchError(
                "triplet dimensions must equal (neq, neq)",
                expected=(self._neq, self._neq),
                actual=trip.dims(),
            )
        if trip.nnz_current() > self._nnz:
            raise DimensionMismatchError(
                "triplet holds more entries than the solver's nnz",
                expected=self._nnz,
                actual=trip.nnz_current(),
            )
        if trip.nnz_current() == 0:
            raise InvalidDimensionError("triplet has no entries", dims=trip.dims())

        self._backend = None
        symmetric_mode = self._config.kind == 'mmp' and trip.symmetric
        backend = _get_backend(self._config, symmetric_mode)

        self._log.log(
            self._level,
            "factorizing %s: neq=%d nnz=%d ordering=%s",
            backend.name, self._neq, trip.nnz_current(), self._config.resolved_ordering,
        )

        timer = Timer()
        timer.start()
        with timer.section('assemble'):
            a = trip.to_coo(mirror=trip.symmetric).tocsc()
        with timer.section('factorize'):
            backend_info = backend.factorize(a)
        timer.stop()

        self._backend = backend
        self._factorize_seconds = timer.result()['total_seconds']
        self._info = {
            'neq': self._neq,
            'nnz': trip.nnz_current(),
            'kind': self._config.kind,
            'ordering': self._config.resolved_ordering,
            'mirrored': trip.symmetric,
            **backend_info,
        }
        self._log.log(
            self._level,
            "factorized %s in %.3es (nnz in factors: %s)",
            backend.name, self._factorize_seconds, backend_info.get('nnz_factors'),
        )

    def solve(self, rhs: Vector | Sequence[float] | NDArray) -> SparseSolution:
        """
        Solve with the current factorization.

        Raises:
            SolverStateError: If factorize() has not succeeded
            DimensionMismatchError: If len(rhs) != neq
        """
        if self._backend is None:
            raise SolverStateError("factorize must be called before solve")
        rhs = as_vector(rhs, 'rhs')
        if rhs.dim() != self._neq:
            raise DimensionMismatchError(
                "rhs dimension must equal neq", expected=self._neq, actual=rhs.dim()
            )

        timer = Timer()
        timer.start()
        with timer.section('solve'):
            x = self._backend.solve(rhs.as_array())
        timer.stop()

        timing = timer.result()
        timing['factorize'] = self._factorize_seconds
        self._log.log(self._level, "solved in %.3es", timing['solve'])

        result = Result(
            params=SolveParams(x=x),
            info=dict(self._info),
            timing=timing,
            backend_name=self._backend.name,
        )
        return SparseSolution(_result=result)


def solve(
    trip: SparseTriplet,
    rhs: Vector | Sequence[float] | NDArray,
    config: ConfigSolver | None = None,
    *,
    verify: bool = False,
    logger: logging.Logger | None = None,
) -> SparseSolution:
    """
    Factorize trip and solve a ⋅ x = rhs in one call.

    Args:
        trip: Square matrix as triples
        rhs: Right-hand side, length nrow
        config: Solver configuration; defaults to ConfigSolver()
        verify: Also run verify_lin_sys on the solution and attach it.
            A relative error above the kind's tolerance is reported as a
            RuntimeWarning and in SparseSolution.warnings.
        logger: Logger for solver milestones

    Returns:
        SparseSolution

    Raises:
        DimensionMismatchError: If trip is not square or rhs has the wrong length
        InvalidDimensionError: If trip holds no entries
        ExternalSolverFailure: If the matrix is singular
    """
    config = config if config is not None else ConfigSolver()
    nrow, ncol = trip.dims()
    if nrow != ncol:
        raise DimensionMismatchError(
            "matrix must be square", expected=(nrow, nrow), actual=(nrow, ncol)
        )
    solver = Solver(nrow, trip.nnz_maximum(), config, logger=logger)
    solver.factorize(trip)
    solution = solver.solve(rhs)
    if not verify:
        return solution

    verification = verify_lin_sys(trip, solution.x, rhs, triangular=trip.symmetric)
    tier = select_tolerance(config.kind)
    issues: list[str] = []
    if not verification.within(tier):
        msg = (
            f"relative error {verification.relative_error:.3e} exceeds "
            f"{tier.name} tolerance {tier.atol:.1e}"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        issues.append(msg)

    result = dataclasses.replace(
        solution._result,
        warnings=solution._result.warnings + tuple(issues),
    )
    return SparseSolution(_result=result, verification=verification)
