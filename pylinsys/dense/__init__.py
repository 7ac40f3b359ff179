"""
Dense containers and kernels.

Public API:
    Matrix, Vector: fixed-size float64 buffers
    update_vector(v, alpha, u): v += alpha * u
    mat_norm, vec_norm: norms via BLAS/LAPACK
    mat_eigen_sym(l, a): symmetric eigen-decomposition in place
"""

from pylinsys.dense.matrix import Matrix
from pylinsys.dense.vector import Vector, as_vector, update_vector
from pylinsys.dense.norms import Norm, mat_norm, vec_norm
from pylinsys.dense.eigen import mat_eigen_sym

__all__ = [
    "Matrix",
    "Vector",
    "as_vector",
    "update_vector",
    "Norm",
    "mat_norm",
    "vec_norm",
    "mat_eigen_sym",
]
