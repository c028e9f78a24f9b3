"""
Matrix containers.

    Matrix     - owns a copy of its data
    MatrixMap  - strided 2D view over an externally owned buffer

Operators (both classes, any mix of owned and view operands):
    A + B, A - B        elementwise, returns Matrix
    A * B, A @ B        matrix product, returns Matrix
    A * v, A @ v        linear map, returns Vector
    v * A, v @ A        transposed linear map (v'A), returns Vector
    A * s, s * A, A / s scaling, returns Matrix
    A += B, A -= B      in place
    A *= s, A /= s      in place
"""

from __future__ import annotations

from typing import Any, Literal, Union

import numpy as np

from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.protocols import Engine
from pyvecmat.core.validation import check_2d, check_int
from pyvecmat.dense._base import DenseBase, is_scalar
from pyvecmat.dense.vector import Vector, VectorBase
from pyvecmat.backends import BackendChoice, engine_for, get_engine


class MatrixBase(DenseBase):
    """Operators shared by Matrix and MatrixMap."""

    @property
    def rows(self) -> int:
        return int(self._native.shape[0])

    @property
    def cols(self) -> int:
        return int(self._native.shape[1])

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def copy(self) -> Matrix:
        """Owned copy, also for views."""
        return Matrix._adopt(self._engine.copy(self._native), self._engine)

    def _result(self, native: Any) -> Matrix:
        return Matrix._adopt(native, self._engine)

    def _vector(self, native: Any) -> Vector:
        return Vector._adopt(native, self._engine)

    def __add__(self, other: Any) -> Any:
        if isinstance(other, MatrixBase):
            return self._result(self._native + self._operand(other))
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, MatrixBase):
            return self._result(self._native - self._operand(other))
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, MatrixBase):
            return self._result(self._native @ self._operand(other))
        if isinstance(other, VectorBase):
            return self._vector(self._native @ self._operand(other))
        if is_scalar(other):
            return self._result(self._native * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, VectorBase):
            return self._vector(self._operand(other) @ self._native)
        if is_scalar(other):
            return self._result(other * self._native)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, MatrixBase):
            return self._result(self._native @ self._operand(other))
        if isinstance(other, VectorBase):
            return self._vector(self._native @ self._operand(other))
        return NotImplemented

    def __rmatmul__(self, other: Any) -> Any:
        if isinstance(other, VectorBase):
            return self._vector(self._operand(other) @ self._native)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        if is_scalar(other):
            return self._result(self._native / other)
        return NotImplemented

    def __iadd__(self, other: Any) -> Any:
        if isinstance(other, MatrixBase):
            self._native += self._operand(other)
            return self
        return NotImplemented

    def __isub__(self, other: Any) -> Any:
        if isinstance(other, MatrixBase):
            self._native -= self._operand(other)
            return self
        return NotImplemented

    def __imul__(self, other: Any) -> Any:
        if is_scalar(other):
            self._native *= other
            return self
        return NotImplemented

    def __itruediv__(self, other: Any) -> Any:
        if is_scalar(other):
            self._native /= other
            return self
        return NotImplemented


class Matrix(MatrixBase):
    """
    Owned 2D dense matrix.

    Args:
        data: 2D array-like, Matrix/MatrixMap, ndarray or tensor. Always copied.
        dtype: Element type; None keeps floating/complex data and promotes
            integers to float (float32 on the torch engine unless FP64).
        backend: 'cpu', 'gpu', 'auto' or an Engine instance.

    Raises:
        ValidationError: If data is not numeric
        DimensionError: If data is not 2D
    """

    def __init__(
        self,
        data: Any,
        *,
        dtype: Any = None,
        backend: Union[BackendChoice, Engine] = 'cpu',
    ):
        if isinstance(data, DenseBase):
            data = data.native
        engine = get_engine(backend)
        native = engine.asarray(data, dtype)
        check_2d(native, 'data')
        self._native = native
        self._engine = engine

    @classmethod
    def from_native(cls, native: Any, engine: Engine | None = None) -> Matrix:
        """Wrap an existing 2D engine array without copying."""
        check_2d(native, 'native')
        return cls._adopt(native, engine if engine is not None else engine_for(native))

    @classmethod
    def zeros(
        cls,
        rows: int,
        cols: int,
        *,
        dtype: Any = None,
        backend: Union[BackendChoice, Engine] = 'cpu',
    ) -> Matrix:
        shape = (check_int(rows, 'rows'), check_int(cols, 'cols'))
        return cls(np.zeros(shape), dtype=dtype, backend=backend)

    @classmethod
    def identity(
        cls,
        n: int,
        *,
        dtype: Any = None,
        backend: Union[BackendChoice, Engine] = 'cpu',
    ) -> Matrix:
        return cls(np.eye(check_int(n, 'n')), dtype=dtype, backend=backend)


class MatrixMap(MatrixBase):
    """
    Non-owning 2D view over an external buffer.

    Args:
        buffer: ndarray, buffer-protocol object or torch tensor.
        rows, cols: View shape.
        offset: Index of the element at (0, 0), in elements.
        order: 'C' for row-major, 'F' for column-major layout.
            Ignored when ``strides`` is given.
        strides: Explicit (row_stride, col_stride) in elements.
        dtype: Element type of the buffer; None uses the ndarray/tensor
            dtype, or float64 for raw buffers.

    Raises:
        ValidationError: On a negative shape/offset or unknown order
    """

    def __init__(
        self,
        buffer: Any,
        rows: int,
        cols: int,
        *,
        offset: int = 0,
        order: Literal['C', 'F'] = 'C',
        strides: tuple[int, int] | None = None,
        dtype: Any = None,
    ):
        rows = check_int(rows, 'rows')
        cols = check_int(cols, 'cols')
        if strides is None:
            if order == 'C':
                strides = (cols, 1)
            elif order == 'F':
                strides = (1, rows)
            else:
                raise ValidationError(f"order: expected 'C' or 'F', got {order!r}")
        else:
            strides = (
                check_int(strides[0], 'strides[0]', minimum=1),
                check_int(strides[1], 'strides[1]', minimum=1),
            )
        engine = engine_for(buffer)
        self._native = engine.view(buffer, (rows, cols), strides, check_int(offset, 'offset'), dtype)
        self._engine = engine

    @property
    def is_view(self) -> bool:
        return True
