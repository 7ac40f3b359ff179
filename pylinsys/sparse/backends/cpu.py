"""
CPU direct-solver backends.

Both solver kinds run on SuperLU through scipy.sparse.linalg.splu. The
matrix arrives in CSC form with duplicates already summed; mirroring of
triangular storage happens before it gets here.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.sparse import csc_matrix
from scipy.sparse.linalg import splu

from pylinsys.core.compute.kernels import KernelConfig
from pylinsys.core.exceptions import ExternalSolverFailure, SolverStateError


# SuperLU's symmetric mode: prefer diagonal pivots, order on A^T + A
_SYMMETRIC_PIVOT_THRESHOLD = 0.1


class CPUSuperLUBackend:
    """
    SuperLU backend.

    Implements the SolverBackend protocol.

    Args:
        kind: 'umf' or 'mmp'; only used for naming
        permc_spec: SuperLU column permutation
        symmetric_mode: Run SuperLU in symmetric mode
        kernel: Native kernel settings, reported back in the info dict
    """

    def __init__(
        self,
        kind: str,
        permc_spec: str,
        symmetric_mode: bool,
        kernel: KernelConfig,
    ):
        self._kind = kind
        self._permc_spec = permc_spec
        self._symmetric_mode = symmetric_mode
        self._kernel = kernel
        self._lu = None
        self._neq: int | None = None

    @property
    def name(self) -> str:
        return f'cpu_{self._kind}'

    def factorize(self, a: csc_matrix) -> dict[str, Any]:
        """
        LU-factorize a.

        Raises:
            ExternalSolverFailure: If SuperLU rejects the matrix (e.g. singular)
        """
        self._lu = None
        options: dict[str, Any] = {}
        diag_pivot_thresh = None
        if self._symmetric_mode:
            options['SymmetricMode'] = True
            diag_pivot_thresh = _SYMMETRIC_PIVOT_THRESHOLD
        try:
            lu = splu(
                a,
                permc_spec=self._permc_spec,
                diag_pivot_thresh=diag_pivot_thresh,
                options=options,
            )
        except RuntimeError as e:
            raise ExternalSolverFailure(
                f"superlu: factorization failed: {e}",
                routine='superlu',
                code=-1,
            ) from e
        self._lu = lu
        self._neq = a.shape[0]
        return {
            'permc_spec': self._permc_spec,
            'symmetric_mode': self._symmetric_mode,
            'nnz_factors': int(lu.L.nnz + lu.U.nnz),
            'num_threads': self._kernel.num_threads,
        }

    def solve(self, rhs: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """
        Solve a ⋅ x = rhs with the current factors.

        Raises:
            SolverStateError: If factorize() has not succeeded
            ExternalSolverFailure: If the solution is not finite
        """
        if self._lu is None:
            raise SolverStateError("factorize must be called before solve")
        x = self._lu.solve(np.asarray(rhs, dtype=np.float64))
        if not np.all(np.isfinite(x)):
            raise ExternalSolverFailure(
                "superlu: solution contains non-finite values (matrix is numerically singular)",
                routine='superlu',
                code=-2,
            )
        return x
