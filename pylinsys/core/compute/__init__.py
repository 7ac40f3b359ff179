"""
Shared compute infrastructure for pylinsys.

Submodules:
    kernels: BLAS/LAPACK kernel interface and KernelConfig
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from pylinsys.core.compute.kernels import (
    KernelConfig,
    dasum,
    dlange,
    dnrm2,
    dsyev,
    idamax,
)
from pylinsys.core.compute.timing import Timer, timed

__all__ = [
    # Kernels
    "KernelConfig",
    "dasum",
    "dlange",
    "dnrm2",
    "dsyev",
    "idamax",
    # Timing
    "Timer",
    "timed",
]
