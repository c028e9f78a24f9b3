"""
Named numeric functions over vectors and matrices.

Each function is a direct forward to the operand's engine; none of them
validates shapes or values of the operands. Owned containers and views
are accepted interchangeably, and results are always owned.

Public API:
    write(stream, x)     - Insert the engine's text for x into a stream
    transpose(A)         - Transposed copy
    inverse(A)           - Matrix inverse
    norm(v, p=None)      - L2 (default) or Lp vector norm; Frobenius for matrices
    normalize(v, p=None) - Scale v in place to unit norm
    sum(x)               - Sum of all entries
    cprod(a, b)          - Coefficient-wise product
    cdiv(a, b)           - Coefficient-wise quotient
    unary(v, func)       - Apply a scalar function to every entry
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Callable, TextIO, TypeVar, Union

from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.validation import check_norm_order
from pyvecmat.dense._base import DenseBase
from pyvecmat.dense.vector import Vector, VectorBase
from pyvecmat.dense.matrix import Matrix, MatrixBase

S = TypeVar('S', bound=TextIO)


class NormOrder(Enum):
    """Common vector norm orders."""
    L1 = 1
    L2 = 2
    LINF = math.inf


_KIND_NAMES = {VectorBase: "vector", MatrixBase: "matrix", DenseBase: "vector or matrix"}


def _require(value: Any, kind: type, func: str) -> None:
    if not isinstance(value, kind):
        expected = _KIND_NAMES[kind]
        raise TypeError(f"{func}() expects a {expected}, got {type(value).__name__}")


def write(stream: S, x: DenseBase) -> S:
    """
    Write the engine's default text rendering of ``x`` to ``stream``.

    Returns the stream so calls can be chained.

    Example:
        >>> write(sys.stdout, Vector([1, 2, 3]))
        [1. 2. 3.]
    """
    _require(x, DenseBase, 'write')
    stream.write(str(x))
    return stream


def transpose(mat: MatrixBase) -> Matrix:
    _require(mat, MatrixBase, 'transpose')
    return Matrix._adopt(mat.engine.transpose(mat.native), mat.engine)


def inverse(mat: MatrixBase) -> Matrix:
    """
    Inverse of a square matrix.

    A singular matrix raises the engine's error unchanged
    (``numpy.linalg.LinAlgError`` on the CPU engine,
    ``torch.linalg.LinAlgError`` on the torch engine).
    """
    _require(mat, MatrixBase, 'inverse')
    return Matrix._adopt(mat.engine.inverse(mat.native), mat.engine)


def norm(x: Union[VectorBase, MatrixBase], p: Union[int, float, NormOrder, None] = None) -> Any:
    """
    Vector Lp norm or matrix Frobenius norm.

    Args:
        x: Vector or matrix
        p: Vector norm order: integer >= 1, ``math.inf`` or a NormOrder.
            None means L2. Matrices only support the default (Frobenius).

    Returns:
        Scalar of the element's real type

    Raises:
        ValidationError: If p is not a valid order, or p is given for a matrix
    """
    if isinstance(x, MatrixBase):
        if p is not None:
            raise ValidationError(f"p: matrices only support the Frobenius norm, got p={p!r}")
        return x.engine.frobenius_norm(x.native)

    _require(x, VectorBase, 'norm')
    if p is None:
        p = 2
    elif isinstance(p, NormOrder):
        p = p.value
    return x.engine.lp_norm(x.native, check_norm_order(p, 'p'))


def normalize(vec: VectorBase, p: Union[int, float, NormOrder, None] = None) -> None:
    """
    Scale ``vec`` in place to unit norm.

    Views write through to their buffer. A zero vector divides by zero:
    the CPU engine fills it with NaN and emits numpy's RuntimeWarning.
    """
    _require(vec, VectorBase, 'normalize')
    vec /= norm(vec, p)


def sum(x: DenseBase) -> Any:
    """Accumulate all entries of a vector or matrix."""
    _require(x, DenseBase, 'sum')
    return x.engine.sum(x.native)


def cprod(lhs: VectorBase, rhs: VectorBase) -> Vector:
    """Coefficient-wise product: c[i] = a[i] * b[i]."""
    _require(lhs, VectorBase, 'cprod')
    _require(rhs, VectorBase, 'cprod')
    return Vector._adopt(lhs.engine.cprod(lhs.native, lhs._operand(rhs)), lhs.engine)


def cdiv(lhs: VectorBase, rhs: VectorBase) -> Vector:
    """Coefficient-wise quotient: c[i] = a[i] / b[i]. Zero divisors follow IEEE rules."""
    _require(lhs, VectorBase, 'cdiv')
    _require(rhs, VectorBase, 'cdiv')
    return Vector._adopt(lhs.engine.cdiv(lhs.native, lhs._operand(rhs)), lhs.engine)


def unary(vec: VectorBase, func: Callable[[Any], Any]) -> Vector:
    """
    Apply ``func`` to every element.

    ``func`` receives one scalar at a time; results are cast back to the
    vector's element type.
    """
    _require(vec, VectorBase, 'unary')
    return Vector._adopt(vec.engine.unary(vec.native, func), vec.engine)
