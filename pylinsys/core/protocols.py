"""
Core protocols for pylinsys.

These define structural interfaces that solver implementations must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so external sparse solvers can be plugged in without inheriting
from anything in this package.
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray
from scipy.sparse import csc_matrix


@runtime_checkable
class SolverBackend(Protocol):
    """
    Protocol for sparse direct solver backends.
    
    A backend receives an assembled compressed matrix (duplicates already
    summed), factorizes it once, and solves for any number of right-hand
    sides. All configuration arrives through the constructor; backends
    hold no process-wide state.
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{kind}'
        Examples: 'cpu_umf', 'cpu_mmp'
        """
        ...
    
    def factorize(self, a: csc_matrix) -> dict[str, Any]:
        """
        Factorize the matrix.
        
        Returns:
            Backend-specific diagnostics, merged into Result.info
            
        Raises:
            ExternalSolverFailure: If the kernel rejects the matrix (singular, etc.)
        """
        ...
    
    def solve(self, rhs: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """
        Solve with the current factorization.
        
        Raises:
            SolverStateError: If factorize() has not succeeded yet
        """
        ...
