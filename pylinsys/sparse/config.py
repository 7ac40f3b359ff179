"""
Configuration for sparse direct solvers.

Two solver kinds are offered, named after the direct solvers they stand in
for:

    'umf'  general LU on full storage. Triangular (symmetric) triplets are
           mirrored into full storage before factorization.
    'mmp'  LU tuned for symmetric matrices given as one triangle: the
           triangle is mirrored, and SuperLU runs in symmetric mode
           (diagonal pivoting, A^T + A ordering). Non-symmetric triplets
           are factorized as general matrices.

Both are backed by SciPy's SuperLU. Fill-reducing orderings map onto
SuperLU's column-permutation specs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pylinsys.core.compute.kernels import KernelConfig
from pylinsys.core.exceptions import ValidationError


LinSolKind = Literal['umf', 'mmp']
Ordering = Literal['auto', 'natural', 'colamd', 'mmd_ata', 'mmd_at_plus_a']

_KINDS: frozenset[str] = frozenset({'umf', 'mmp'})

_PERMC_SPECS: dict[str, str] = {
    'natural': 'NATURAL',
    'colamd': 'COLAMD',
    'mmd_ata': 'MMD_ATA',
    'mmd_at_plus_a': 'MMD_AT_PLUS_A',
}

# 'auto' ordering per kind
_AUTO_ORDERING: dict[str, str] = {
    'umf': 'colamd',
    'mmp': 'mmd_at_plus_a',
}


@dataclass(frozen=True)
class ConfigSolver:
    """
    Sparse solver configuration.

    Attributes:
        kind: 'umf' or 'mmp'
        ordering: Fill-reducing ordering; 'auto' picks per kind
        kernel: Native kernel settings (thread count)
        verbose: Log solver milestones at INFO instead of DEBUG

    Example:
        >>> config = ConfigSolver(kind='mmp', ordering='auto')
        >>> config.permc_spec
        'MMD_AT_PLUS_A'
    """
    kind: LinSolKind = 'umf'
    ordering: Ordering = 'auto'
    kernel: KernelConfig = field(default_factory=KernelConfig)
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValidationError(
                f"kind: expected one of {sorted(_KINDS)}, got {self.kind!r}"
            )
        if self.ordering != 'auto' and self.ordering not in _PERMC_SPECS:
            raise ValidationError(
                f"ordering: expected 'auto' or one of {sorted(_PERMC_SPECS)}, "
                f"got {self.ordering!r}"
            )
        if not isinstance(self.kernel, KernelConfig):
            raise ValidationError(
                f"kernel: expected KernelConfig, got {type(self.kernel).__name__}"
            )

    @property
    def resolved_ordering(self) -> str:
        """The ordering actually used ('auto' resolved for this kind)."""
        if self.ordering == 'auto':
            return _AUTO_ORDERING[self.kind]
        return self.ordering

    @property
    def permc_spec(self) -> str:
        """SuperLU column permutation spec for the resolved ordering."""
        return _PERMC_SPECS[self.resolved_ordering]
