"""
Exception hierarchy for pylinsys.

All exceptions inherit from PyLinSysError to allow catching any
library-specific error. Domain modules raise the most specific class
available here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Messages are short and stable (tests match on them)
    - Never catch and re-raise with less information
"""


class PyLinSysError(Exception):
    """Base exception for all pylinsys errors."""
    pass


class ValidationError(PyLinSysError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    A size given at construction is zero, negative, or otherwise unusable.
    
    Attributes:
        dims: The offending dimensions, as given
    """
    
    def __init__(self, message: str, dims: tuple[int, ...] | None = None):
        super().__init__(message)
        self.dims = dims


class IndexOutOfBoundsError(ValidationError):
    """
    A row or column index falls outside the declared bounds.
    
    Attributes:
        row: Row index that was supplied
        col: Column index that was supplied
        bounds: (nrow, ncol) of the container
    """
    
    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        bounds: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.bounds = bounds


class CapacityExceededError(ValidationError):
    """
    A triplet store is full.
    
    Retry policy belongs to the caller (e.g. re-create the store with a
    larger capacity).
    
    Attributes:
        capacity: Maximum number of entries the store accepts
    """
    
    def __init__(self, message: str, capacity: int | None = None):
        super().__init__(message)
        self.capacity = capacity


class DimensionMismatchError(ValidationError):
    """
    A vector or matrix does not have the shape an operation expects.
    
    Attributes:
        expected: Expected shape or length, if known
        actual: Actual shape or length, if known
    """
    
    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class SolverStateError(PyLinSysError):
    """
    A solver method was called in the wrong order.
    
    Raised, for instance, when solve() is called before factorize().
    """
    pass


class NumericalError(PyLinSysError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class ExternalSolverFailure(NumericalError):
    """
    An external numerical kernel reported failure.
    
    Raised when a BLAS/LAPACK routine or a sparse direct solver returns
    an error status (singular matrix, failed convergence, illegal argument).
    The kernel's native error code is preserved for diagnostics.
    
    Attributes:
        routine: Name of the failing kernel (e.g. 'dsyev', 'superlu')
        code: Native error code reported by the kernel
    """
    
    def __init__(
        self,
        message: str,
        routine: str | None = None,
        code: int | None = None
    ):
        super().__init__(message)
        self.routine = routine
        self.code = code
