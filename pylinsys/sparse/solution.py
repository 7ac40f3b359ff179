"""
Sparse solution types.

Contains the parameter payloads computed by the verifier and by the
direct solvers, and the user-facing wrappers around their Results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.compute.tolerances import ToleranceTier
from pylinsys.core.result import Result
from pylinsys.dense.vector import Vector


@dataclass(frozen=True)
class VerifyParams:
    """
    Payload of a linear-system verification.

    Attributes:
        max_abs_a: Largest |aij| among the stored entries
        max_abs_ax: Largest |(a @ x)_i|
        max_abs_diff: Largest |(a @ x - rhs)_i|
        relative_error: max_abs_diff / (max_abs_a + 1)
    """
    max_abs_a: float
    max_abs_ax: float
    max_abs_diff: float
    relative_error: float


@dataclass(frozen=True)
class VerifyLinSys:
    """
    Immutable verification of a ⋅ x = rhs.

    Wraps the verifier Result and exposes its four metrics plus the
    elapsed wall-clock time of the check.
    """
    _result: Result[VerifyParams]

    @property
    def max_abs_a(self) -> float:
        return self._result.params.max_abs_a

    @property
    def max_abs_ax(self) -> float:
        return self._result.params.max_abs_ax

    @property
    def max_abs_diff(self) -> float:
        return self._result.params.max_abs_diff

    @property
    def relative_error(self) -> float:
        return self._result.params.relative_error

    @property
    def time_check(self) -> float:
        """Seconds spent verifying."""
        return self._result.timing['total_seconds']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def within(self, tier: ToleranceTier) -> bool:
        """True if relative_error does not exceed the tier's absolute tolerance."""
        return self.relative_error <= tier.atol

    def summary(self) -> str:
        lines = [
            "Linear System Verification",
            "=" * 40,
            f"max_abs_a:      {self.max_abs_a:.6e}",
            f"max_abs_ax:     {self.max_abs_ax:.6e}",
            f"max_abs_diff:   {self.max_abs_diff:.6e}",
            f"relative_error: {self.relative_error:.6e}",
            f"Time: {self.time_check:.3e}s",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"VerifyLinSys(max_abs_a={self.max_abs_a:g}, max_abs_ax={self.max_abs_ax:g}, "
            f"max_abs_diff={self.max_abs_diff:g}, relative_error={self.relative_error:g})"
        )


@dataclass(frozen=True)
class SolveParams:
    """
    Payload of a sparse direct solve.

    This is the immutable data computed by backends.
    """
    x: NDArray[np.floating[Any]]


@dataclass
class SparseSolution:
    """
    User-facing result of a sparse direct solve.

    Wraps the backend Result and, when requested, the verification of the
    computed solution against the original triplet.
    """
    _result: Result[SolveParams]
    verification: VerifyLinSys | None = None

    # Cached
    _x: Vector | None = None

    @property
    def x(self) -> Vector:
        """Solution as a Vector (a copy of the backend array)."""
        if self._x is None:
            self._x = Vector.from_values(self._result.params.x)
        return self._x

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        lines = [
            "Sparse Direct Solve",
            "=" * 40,
            f"Equations: {self.info.get('neq')}",
            f"Stored entries: {self.info.get('nnz')}",
            f"Kind: {self.info.get('kind')}",
            f"Ordering: {self.info.get('ordering')}",
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            for key in ('factorize', 'solve'):
                if key in self.timing:
                    lines.append(f"Time {key}: {self.timing[key]:.3e}s")
        if self.verification is not None:
            lines.append(f"Relative error: {self.verification.relative_error:.6e}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SparseSolution(neq={self.info.get('neq')}, "
            f"backend={self.backend_name!r})"
        )
