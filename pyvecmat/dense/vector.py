"""
Vector containers.

    Vector     - owns a copy of its data
    VectorMap  - strided view over an externally owned buffer

Operators (both classes, any mix of owned and view operands):
    v + w, v - w        elementwise, returns Vector
    v * w, v @ w        inner product, returns a scalar
    v * s, s * v, v / s scaling, returns Vector
    v += w, v -= w      in place
    v *= s, v /= s      in place

Vector-matrix products are implemented on the matrix side
(``Matrix.__rmul__``), so this module does not depend on matrices.
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np

from pyvecmat.core.protocols import Engine
from pyvecmat.core.validation import check_1d, check_int
from pyvecmat.dense._base import DenseBase, is_scalar
from pyvecmat.backends import BackendChoice, engine_for, get_engine


class VectorBase(DenseBase):
    """Operators shared by Vector and VectorMap."""

    @property
    def size(self) -> int:
        return int(self._native.shape[0])

    def copy(self) -> Vector:
        """Owned copy, also for views."""
        return Vector._adopt(self._engine.copy(self._native), self._engine)

    def _result(self, native: Any) -> Vector:
        return Vector._adopt(native, self._engine)

    def __add__(self, other: Any) -> Any:
        if isinstance(other, VectorBase):
            return self._result(self._native + self._operand(other))
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, VectorBase):
            return self._result(self._native - self._operand(other))
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, VectorBase):
            return self._engine.dot(self._native, self._operand(other))
        if is_scalar(other):
            return self._result(self._native * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if is_scalar(other):
            return self._result(other * self._native)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, VectorBase):
            return self._engine.dot(self._native, self._operand(other))
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        if is_scalar(other):
            return self._result(self._native / other)
        return NotImplemented

    def __iadd__(self, other: Any) -> Any:
        if isinstance(other, VectorBase):
            self._native += self._operand(other)
            return self
        return NotImplemented

    def __isub__(self, other: Any) -> Any:
        if isinstance(other, VectorBase):
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


class Vector(VectorBase):
    """
    Owned 1D dense vector.

    Args:
        data: 1D array-like, Vector/VectorMap, ndarray or tensor. Always copied.
        dtype: Element type; None keeps floating/complex data and promotes
            integers to float (float32 on the torch engine unless FP64).
        backend: 'cpu', 'gpu', 'auto' or an Engine instance.

    Raises:
        ValidationError: If data is not numeric
        DimensionError: If data is not 1D

    Example:
        >>> a = Vector([1, 2, 3])
        >>> b = Vector([4, 5, 6])
        >>> a * b
        32.0
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
        check_1d(native, 'data')
        self._native = native
        self._engine = engine

    @classmethod
    def from_native(cls, native: Any, engine: Engine | None = None) -> Vector:
        """
        Wrap an existing 1D engine array without copying.

        The Vector shares memory with ``native``.
        """
        check_1d(native, 'native')
        return cls._adopt(native, engine if engine is not None else engine_for(native))

    @classmethod
    def zeros(cls, size: int, *, dtype: Any = None, backend: Union[BackendChoice, Engine] = 'cpu') -> Vector:
        return cls(np.zeros(check_int(size, 'size')), dtype=dtype, backend=backend)

    @classmethod
    def ones(cls, size: int, *, dtype: Any = None, backend: Union[BackendChoice, Engine] = 'cpu') -> Vector:
        return cls(np.ones(check_int(size, 'size')), dtype=dtype, backend=backend)


class VectorMap(VectorBase):
    """
    Non-owning strided view over an external buffer.

    Reads and writes go straight to the buffer; nothing is copied. The
    buffer must outlive any use of the view (NumPy and torch keep the
    base object referenced, so in practice this holds automatically for
    Python-owned storage).

    Args:
        buffer: ndarray, buffer-protocol object (bytearray, array.array,
            memoryview, mmap) or torch tensor.
        size: Number of elements, or None for the rest of the buffer.
        offset: Index of the first element, in elements.
        stride: Distance between consecutive elements, in elements.
        dtype: Element type of the buffer; None uses the ndarray/tensor
            dtype, or float64 for raw buffers.

    Example:
        >>> buf = np.arange(6.0)
        >>> evens = VectorMap(buf, stride=2)
        >>> evens *= 10.0
        >>> buf
        array([ 0.,  1., 20.,  3., 40.,  5.])
    """

    def __init__(
        self,
        buffer: Any,
        size: int | None = None,
        *,
        offset: int = 0,
        stride: int = 1,
        dtype: Any = None,
    ):
        engine = engine_for(buffer)
        shape = None if size is None else (check_int(size, 'size'),)
        self._native = engine.view(
            buffer,
            shape,
            (check_int(stride, 'stride', minimum=1),),
            check_int(offset, 'offset'),
            dtype,
        )
        self._engine = engine

    @property
    def is_view(self) -> bool:
        return True
