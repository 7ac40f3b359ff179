"""
Sparse solver backends.

Available backends:
    CPUSuperLUBackend: SuperLU via SciPy, used for both 'umf' and 'mmp'
"""

from pylinsys.sparse.backends.cpu import CPUSuperLUBackend

__all__ = [
    "CPUSuperLUBackend",
]
