"""
Tests for the sparse direct solvers.
"""

import logging

import numpy as np
import pytest

from pylinsys.core.compute.kernels import KernelConfig
from pylinsys.core.compute.tolerances import ToleranceTier, UMF_FP64
from pylinsys.core.exceptions import (
    DimensionMismatchError,
    ExternalSolverFailure,
    InvalidDimensionError,
    SolverStateError,
)
from pylinsys.core.protocols import SolverBackend
from pylinsys.sparse import ConfigSolver, Solver, SparseSolution, SparseTriplet, solve
from pylinsys.sparse import solvers
from pylinsys.sparse.backends import CPUSuperLUBackend


# ═══════════════════════════════════════════════════════════════════════
# One-shot solve
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    @pytest.mark.parametrize("kind", ['umf', 'mmp'])
    def test_tridiagonal_lower(self, tridiag_lower, kind):
        solution = solve(tridiag_lower, [2.0, 4.0, 6.0], ConfigSolver(kind=kind))
        assert isinstance(solution, SparseSolution)
        np.testing.assert_allclose(solution.x.as_array(), [5.0, 8.0, 7.0], atol=1e-12)
        assert solution.info['mirrored'] is True
        assert solution.backend_name == f'cpu_{kind}'

    def test_mmp_uses_symmetric_mode(self, tridiag_lower):
        solution = solve(tridiag_lower, [2.0, 4.0, 6.0], ConfigSolver(kind='mmp'))
        assert solution.info['symmetric_mode'] is True
        assert solution.info['permc_spec'] == 'MMD_AT_PLUS_A'

    def test_umf_never_symmetric_mode(self, tridiag_lower):
        solution = solve(tridiag_lower, [2.0, 4.0, 6.0])
        assert solution.info['symmetric_mode'] is False
        assert solution.info['permc_spec'] == 'COLAMD'

    def test_tridiagonal_full(self, tridiag_full):
        solution = solve(tridiag_full, [2.0, 4.0, 6.0])
        np.testing.assert_allclose(solution.x.as_array(), [5.0, 8.0, 7.0], atol=1e-12)
        assert solution.info['mirrored'] is False

    @pytest.mark.parametrize("kind", ['umf', 'mmp'])
    def test_general_3x3(self, general_3x3, kind):
        trip, x, rhs = general_3x3
        solution = solve(trip, rhs, ConfigSolver(kind=kind))
        np.testing.assert_allclose(solution.x.as_array(), x, atol=1e-12)

    def test_duplicates_summed(self, block_triplet):
        solution = solve(block_triplet, [5.0, 11.0, 5.0, 6.0])
        np.testing.assert_allclose(solution.x.as_array(), [1.0, 2.0, 1.0, 1.0], atol=1e-12)

    def test_random_against_dense(self, rng):
        n = 20
        a = rng.standard_normal((n, n)) * (rng.random((n, n)) < 0.2) + n * np.eye(n)
        rows, cols = np.nonzero(a)
        trip = SparseTriplet.from_arrays(n, n, rows, cols, a[rows, cols])
        rhs = rng.standard_normal(n)
        solution = solve(trip, rhs, verify=True)
        np.testing.assert_allclose(
            solution.x.as_array(), np.linalg.solve(a, rhs),
            rtol=UMF_FP64.rtol, atol=UMF_FP64.atol,
        )
        assert solution.warnings == ()

    def test_verify_attaches_check(self, tridiag_lower):
        solution = solve(tridiag_lower, [2.0, 4.0, 6.0], ConfigSolver(kind='mmp'), verify=True)
        assert solution.verification is not None
        assert solution.verification.info['triangular'] is True
        assert solution.verification.relative_error < 1e-14
        assert "Relative error" in solution.summary()

    def test_no_verification_by_default(self, tridiag_lower):
        assert solve(tridiag_lower, [2.0, 4.0, 6.0]).verification is None

    def test_verification_failure_warns(self, tridiag_lower, monkeypatch):
        strict = ToleranceTier(rtol=0.0, atol=-1.0, name='strict', description='never met')
        monkeypatch.setattr(solvers, 'select_tolerance', lambda kind: strict)
        with pytest.warns(RuntimeWarning, match="exceeds strict tolerance"):
            solution = solve(tridiag_lower, [2.0, 4.0, 6.0], verify=True)
        assert len(solution.warnings) == 1
        assert "Warning:" in solution.summary()

    def test_singular(self):
        trip = SparseTriplet.from_arrays(2, 2, [0, 0, 1, 1], [0, 1, 0, 1], [1.0, 1.0, 1.0, 1.0])
        with pytest.raises(ExternalSolverFailure, match="superlu") as exc:
            solve(trip, [1.0, 2.0])
        assert exc.value.routine == 'superlu'
        assert exc.value.code is not None

    def test_not_square(self):
        trip = SparseTriplet(2, 3, 1)
        with pytest.raises(DimensionMismatchError, match="matrix must be square"):
            solve(trip, [1.0, 1.0])

    def test_wrong_rhs(self, tridiag_full):
        with pytest.raises(DimensionMismatchError, match="rhs dimension must equal neq"):
            solve(tridiag_full, [1.0, 1.0])

    def test_empty_triplet(self, tridiag_full):
        tridiag_full.reset()
        with pytest.raises(InvalidDimensionError, match="no entries"):
            solve(tridiag_full, [1.0, 1.0, 1.0])


# ═══════════════════════════════════════════════════════════════════════
# Solver (factorize once, solve many)
# ═══════════════════════════════════════════════════════════════════════


class TestSolver:

    def test_bad_sizes(self):
        with pytest.raises(InvalidDimensionError, match="neq and nnz must be greater than zero"):
            Solver(0, 3)

    def test_solve_before_factorize(self):
        solver = Solver(3, 5)
        assert not solver.factorized
        with pytest.raises(SolverStateError, match="factorize must be called before solve"):
            solver.solve([1.0, 2.0, 3.0])

    def test_many_rhs(self, tridiag_lower):
        solver = Solver(3, 5, ConfigSolver(kind='mmp'))
        solver.factorize(tridiag_lower)
        assert solver.factorized
        first = solver.solve([2.0, 4.0, 6.0])
        second = solver.solve([1.0, 0.0, 1.0])
        np.testing.assert_allclose(first.x.as_array(), [5.0, 8.0, 7.0], atol=1e-12)
        np.testing.assert_allclose(second.x.as_array(), [1.0, 1.0, 1.0], atol=1e-12)

    def test_timing(self, tridiag_full):
        solver = Solver(3, 7)
        solver.factorize(tridiag_full)
        solution = solver.solve([2.0, 4.0, 6.0])
        assert solution.timing['factorize'] >= 0.0
        assert solution.timing['solve'] >= 0.0

    def test_wrong_triplet_dims(self, tridiag_full):
        with pytest.raises(DimensionMismatchError, match=r"\(neq, neq\)"):
            Solver(4, 7).factorize(tridiag_full)

    def test_too_many_entries(self, tridiag_full):
        with pytest.raises(DimensionMismatchError, match="more entries"):
            Solver(3, 5).factorize(tridiag_full)

    def test_failed_factorization_resets_state(self, tridiag_full):
        solver = Solver(2, 4)
        solver.factorize(SparseTriplet.from_arrays(2, 2, [0, 1], [0, 1], [1.0, 2.0]))
        singular = SparseTriplet.from_arrays(2, 2, [0, 0, 1, 1], [0, 1, 0, 1], [1.0, 1.0, 1.0, 1.0])
        with pytest.raises(ExternalSolverFailure):
            solver.factorize(singular)
        assert not solver.factorized

    def test_num_threads_recorded(self, tridiag_full):
        solver = Solver(3, 7, ConfigSolver(kernel=KernelConfig(num_threads=2)))
        solver.factorize(tridiag_full)
        assert solver.solve([2.0, 4.0, 6.0]).info['num_threads'] == 2

    def test_logs_at_debug(self, tridiag_full, caplog):
        caplog.set_level(logging.DEBUG, logger='pylinsys.sparse.solvers')
        Solver(3, 7).factorize(tridiag_full)
        assert "factorizing cpu_umf" in caplog.text
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

    def test_verbose_logs_at_info(self, tridiag_full, caplog):
        caplog.set_level(logging.INFO, logger='pylinsys.sparse.solvers')
        Solver(3, 7, ConfigSolver(verbose=True)).factorize(tridiag_full)
        assert any(r.levelno == logging.INFO for r in caplog.records)

    def test_custom_logger(self, tridiag_full, caplog):
        log = logging.getLogger('fem.assembly')
        caplog.set_level(logging.DEBUG, logger='fem.assembly')
        Solver(3, 7, logger=log).factorize(tridiag_full)
        assert any(r.name == 'fem.assembly' for r in caplog.records)


class TestBackend:

    def test_satisfies_protocol(self):
        backend = CPUSuperLUBackend('umf', 'COLAMD', False, KernelConfig())
        assert isinstance(backend, SolverBackend)
        assert backend.name == 'cpu_umf'

    def test_solve_before_factorize(self):
        backend = CPUSuperLUBackend('mmp', 'MMD_AT_PLUS_A', True, KernelConfig())
        with pytest.raises(SolverStateError):
            backend.solve(np.ones(2))

    def test_repr_and_summary(self, tridiag_full):
        solution = solve(tridiag_full, [2.0, 4.0, 6.0])
        assert repr(solution) == "SparseSolution(neq=3, backend='cpu_umf')"
        assert "Sparse Direct Solve" in solution.summary()


class DenseBackend:
    """Dense LU stand-in that satisfies SolverBackend without inheriting from it."""

    name = 'cpu_dense'

    def __init__(self):
        self._a = None

    def factorize(self, a):
        self._a = a.toarray()
        return {'nnz_factors': int(np.count_nonzero(self._a))}

    def solve(self, rhs):
        return np.linalg.solve(self._a, rhs)


class TestBackendSeam:

    def test_get_backend_returns_protocol(self):
        backend = solvers._get_backend(ConfigSolver(), symmetric_mode=False)
        assert isinstance(backend, SolverBackend)

    def test_solver_accepts_any_protocol_backend(self, tridiag_lower, monkeypatch):
        monkeypatch.setattr(solvers, '_get_backend', lambda config, symmetric_mode: DenseBackend())
        solver = Solver(3, 5)
        solver.factorize(tridiag_lower)
        solution = solver.solve([2.0, 4.0, 6.0])
        assert solution.backend_name == 'cpu_dense'
        np.testing.assert_allclose(solution.x.as_array(), [5.0, 8.0, 7.0], atol=1e-12)
