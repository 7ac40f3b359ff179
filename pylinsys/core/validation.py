"""
Input validation utilities for pylinsys.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every check runs before any
output buffer is touched, so a failing call never leaves partial results.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinsys.core.exceptions import (
    ValidationError,
    InvalidDimensionError,
    DimensionMismatchError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like. Rejects inputs that result in object dtype
    (mixed types) or a non-numeric dtype.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray of dtype float64
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Raises:
        DimensionMismatchError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionMismatchError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_index(value: Any, name: str) -> int:
    """
    Convert value to a Python int, rejecting floats and other non-integers.
    
    Accepts numpy integer scalars (anything implementing __index__).
    
    Raises:
        ValidationError: If value is not an integer
    """
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e


def check_scalar(value: Any, name: str) -> float:
    """
    Convert value to a Python float, rejecting anything that is not a real number.
    
    Accepts Python and numpy integer or floating scalars. None, strings,
    complex numbers and sequences raise.
    
    Raises:
        ValidationError: If value is not a real scalar
    """
    if not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_positive_dims(message: str, **dims: Any) -> tuple[int, ...]:
    """
    Verify every named size is an integer greater than zero.
    
    Args:
        message: Error message used when any size is not positive
        **dims: Sizes to check, by parameter name
        
    Returns:
        The sizes as Python ints, in keyword order
        
    Raises:
        ValidationError: If a size is not an integer
        InvalidDimensionError: If a size is zero or negative
    """
    values = tuple(check_index(v, k) for k, v in dims.items())
    if any(v <= 0 for v in values):
        raise InvalidDimensionError(message, dims=values)
    return values


def check_non_negative_dims(**dims: Any) -> tuple[int, ...]:
    """
    Verify every named size is an integer greater than or equal to zero.
    
    Raises:
        ValidationError: If a size is not an integer
        InvalidDimensionError: If a size is negative
    """
    values = tuple(check_index(v, k) for k, v in dims.items())
    for name, v in zip(dims, values):
        if v < 0:
            raise InvalidDimensionError(
                f"{name}: must be non-negative, got {v}", dims=values
            )
    return values


def check_length(length: int, expected: int, message: str) -> None:
    """
    Verify a vector length equals the expected length.
    
    Raises:
        DimensionMismatchError: If the lengths differ
    """
    if length != expected:
        raise DimensionMismatchError(message, expected=expected, actual=length)
