"""
Generic result container for pylinsys computations.

Every operation that produces diagnostics (verification, sparse solves)
wraps its payload in a Result. This gives one place for timing, backend
identification, warnings and provenance while each domain keeps its own
parameter structure.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (ordering, solver kind, threads)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True): produced once, never mutated
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the packages that produced a result."""
    import numpy as np
    import scipy

    from pylinsys import __version__

    return {
        'pylinsys_version': __version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.
    
    Type Parameters:
        P: The domain-specific parameter payload type
        
    Attributes:
        params: Domain-specific payload (verification metrics, solution vector)
        info: Structured metadata (method, kernel settings, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions, filled in automatically
        
    Examples:
        >>> Result(
        ...     params=VerifyParams(max_abs_a=6.0, ...),
        ...     info={'triangular': False, 'nnz': 9},
        ...     timing={'total_seconds': 1.2e-05},
        ...     backend_name='cpu_triplet'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
