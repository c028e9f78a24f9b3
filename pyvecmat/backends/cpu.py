"""
CPU engine: NumPy arrays with SciPy (LAPACK) kernels.

Reference engine. Native type is ``numpy.ndarray``; views over external
buffers are plain strided ndarrays sharing the buffer's memory.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence
import numpy as np
from numpy.typing import NDArray
from scipy import linalg

from pyvecmat.core.validation import check_array


class CPUEngine:
    """
    NumPy/SciPy engine.

    Inversion and norms go through ``scipy.linalg`` with finiteness
    checks disabled, so NaN/Inf operands flow through LAPACK exactly as
    they would in plain NumPy code instead of being rejected up front.
    """

    @property
    def name(self) -> str:
        return 'cpu_numpy'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CPUEngine)

    def __hash__(self) -> int:
        return hash(CPUEngine)

    def __repr__(self) -> str:
        return "CPUEngine()"

    # === Storage ===

    def asarray(self, data: Any, dtype: Any = None) -> NDArray:
        return np.array(check_array(data, 'data', dtype=dtype), copy=True)

    def copy(self, native: NDArray) -> NDArray:
        return native.copy()

    def view(
        self,
        buffer: Any,
        shape: tuple[int, ...] | None,
        strides: Sequence[int],
        offset: int,
        dtype: Any = None,
    ) -> NDArray:
        """
        Strided ndarray over ``buffer`` without copying.

        ``buffer`` is anything exposing the buffer protocol: a contiguous
        ndarray, bytearray, array.array, memoryview, mmap. Read-only
        buffers give read-only views. A buffer too small for the requested
        shape raises numpy's own ValueError.
        """
        if dtype is None:
            dtype = buffer.dtype if isinstance(buffer, np.ndarray) else np.float64
        dtype = np.dtype(dtype)

        if shape is None:
            remaining = memoryview(buffer).nbytes // dtype.itemsize - offset
            shape = (max(0, -(-remaining // strides[0])),)

        return np.ndarray(
            shape,
            dtype=dtype,
            buffer=buffer,
            offset=offset * dtype.itemsize,
            strides=tuple(s * dtype.itemsize for s in strides),
        )

    # === Kernels ===

    def transpose(self, native: NDArray) -> NDArray:
        return native.T.copy()

    def inverse(self, native: NDArray) -> NDArray:
        # LinAlgError on singular input, ValueError on non-square
        return linalg.inv(native, check_finite=False)

    def dot(self, lhs: NDArray, rhs: NDArray) -> Any:
        # plain transpose-times, no conjugation for complex data
        return np.dot(lhs, rhs)

    def cprod(self, lhs: NDArray, rhs: NDArray) -> NDArray:
        return np.multiply(lhs, rhs)

    def cdiv(self, lhs: NDArray, rhs: NDArray) -> NDArray:
        return np.divide(lhs, rhs)

    def unary(self, native: NDArray, func: Callable[[Any], Any]) -> NDArray:
        return np.vectorize(func, otypes=[native.dtype])(native)

    def lp_norm(self, native: NDArray, p: float) -> Any:
        return linalg.norm(native, ord=p, check_finite=False)

    def frobenius_norm(self, native: NDArray) -> Any:
        return linalg.norm(native, ord='fro', check_finite=False)

    def sum(self, native: NDArray) -> Any:
        return native.sum()

    def format(self, native: NDArray) -> str:
        return str(native)
