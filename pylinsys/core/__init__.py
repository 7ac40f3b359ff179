"""
Core infrastructure for pylinsys.

Shared abstractions used by the dense and sparse subpackages.

Key components:
    protocols: SolverBackend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Kernel interface, timing, tolerances
"""

from pylinsys.core.protocols import SolverBackend
from pylinsys.core.result import Result
from pylinsys.core.exceptions import (
    PyLinSysError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfBoundsError,
    CapacityExceededError,
    DimensionMismatchError,
    SolverStateError,
    NumericalError,
    ExternalSolverFailure,
)

__all__ = [
    # Protocols
    "SolverBackend",
    # Result
    "Result",
    # Exceptions
    "PyLinSysError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfBoundsError",
    "CapacityExceededError",
    "DimensionMismatchError",
    "SolverStateError",
    "NumericalError",
    "ExternalSolverFailure",
]
