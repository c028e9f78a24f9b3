"""
Input validation utilities for PyVecMat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

They guard container construction and configuration arguments only.
Operands of arithmetic are never validated here; the engine checks them.

Design principles:
    - No silent type coercion (except integer/bool promotion to float64)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[np.inexact[Any]]:
    """
    Validate and convert input to a numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype or any other non-numeric dtype.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Requested element type, or None to infer
        
    Returns:
        numpy.ndarray with a floating or complex dtype
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    # Integer and boolean data is promoted; float32/complex are kept as-is
    if not np.issubdtype(result.dtype, np.inexact):
        result = result.astype(np.float64)

    return result


def check_ndim(array: Any, ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Works on any native array exposing ``ndim`` and ``shape``
    (numpy arrays and torch tensors alike).
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {tuple(array.shape)}"
        )


def check_1d(array: Any, name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: Any, name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_norm_order(p: Any, name: str) -> float:
    """
    Verify a vector norm order.
    
    Valid orders are integers p >= 1 and ``math.inf``.
    
    Args:
        p: Norm order to check
        name: Parameter name for error messages
        
    Returns:
        The order, as int for finite orders and float inf otherwise
        
    Raises:
        ValidationError: If p is not a valid norm order
    """
    if isinstance(p, bool) or not isinstance(p, numbers.Real):
        raise ValidationError(f"{name}: norm order must be an integer >= 1 or inf, got {p!r}")
    if p == math.inf:
        return math.inf
    if not math.isfinite(p) or p != int(p) or p < 1:
        raise ValidationError(f"{name}: norm order must be an integer >= 1 or inf, got {p!r}")
    return int(p)


def check_int(value: Any, name: str, minimum: int = 0) -> int:
    """
    Verify a size, offset or stride is an integer no smaller than minimum.

    Raises:
        ValidationError: If value is not integral or is below minimum
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < minimum:
        raise ValidationError(f"{name}: expected an integer >= {minimum}, got {value!r}")
    return int(value)
