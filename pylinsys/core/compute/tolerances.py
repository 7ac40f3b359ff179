"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different compute paths:
- exact: integer-valued systems reproduced bit-for-bit
- triplet FP64: sums of a handful of float64 products
- direct solvers: residual-level agreement after factorization

Used by the test suite and by VerifyLinSys.within().
"""

from dataclasses import dataclass

from pylinsys.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer-valued data: no rounding at all
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bit-for-bit agreement',
)

# A few float64 multiply-adds (mat_vec_mul on small systems)
TRIPLET_FP64 = ToleranceTier(
    rtol=1e-15,
    atol=1e-14,
    name='triplet_fp64',
    description='Double precision sums over a short triplet list',
)

# General sparse LU on full storage
UMF_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='umf_fp64',
    description='Sparse LU on full storage, well-conditioned',
)

# Symmetric input given as one triangle and mirrored before factorization
MMP_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-10,
    name='mmp_fp64',
    description='Sparse LU on mirrored triangular storage',
)


def select_tolerance(kind: str) -> ToleranceTier:
    """Select the tolerance tier for a sparse solver kind ('umf' or 'mmp')."""
    if kind == 'mmp':
        return MMP_FP64
    if kind == 'umf':
        return UMF_FP64
    raise ValidationError(f"Unknown solver kind: {kind!r}")
