"""
pylinsys: dense and sparse linear-algebra support.

Dense containers backed by BLAS/LAPACK, a sparse triplet (coordinate)
format for finite-element-style assembly, and the verification and direct
solver hand-off built on top of it.

Submodules:
    core: exceptions, Result envelope, validation, kernels, timing
    dense: Matrix, Vector, norms, symmetric eigen-decomposition
    sparse: SparseTriplet, verify_lin_sys, Solver
"""

__version__ = "0.1.0"

from pylinsys import dense
from pylinsys import sparse
from pylinsys.dense import Matrix, Vector
from pylinsys.sparse import SparseTriplet, verify_lin_sys

__all__ = [
    "__version__",
    "dense",
    "sparse",
    "Matrix",
    "Vector",
    "SparseTriplet",
    "verify_lin_sys",
]
