"""
GPU engine: PyTorch tensors with torch.linalg kernels.

Supports CUDA (Linux/Windows) and MPS (macOS Apple Silicon). The engine
also accepts ``device='cpu'``, which runs the same torch kernels on host
memory; this is what ``engine_for`` picks for CPU tensors.

FP32 by default for performance, FP64 on request (CUDA/CPU only).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence
import warnings

import numpy as np
import torch

from pyvecmat.core.compute.device import DeviceInfo
from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.validation import check_array


def as_torch_dtype(dtype: Any) -> Any:
    """
    Map a NumPy dtype (or anything ``np.dtype`` accepts) to a torch dtype.

    None and torch dtypes pass through unchanged.

    Raises:
        ValidationError: If dtype has no torch equivalent
    """
    if dtype is None or isinstance(dtype, torch.dtype):
        return dtype
    try:
        return torch.from_numpy(np.empty(0, dtype=np.dtype(dtype))).dtype
    except TypeError as e:
        raise ValidationError(f"dtype: no torch equivalent for {dtype!r}") from e


@dataclass(frozen=True)
class GPUEngine:
    """
    PyTorch engine.

    Attributes:
        device: torch device string ('cuda', 'cuda:1', 'mps', 'cpu')
        use_fp64: Store real data as float64 instead of float32.
            Only applies when data is converted; tensors adopted through
            views or ``from_native`` keep their own dtype.
    """
    device: str = 'cuda'
    use_fp64: bool = False

    @classmethod
    def from_device(cls, device: DeviceInfo, use_fp64: bool = False) -> GPUEngine:
        """
        Build an engine for a device returned by ``select_device``.

        MPS has no float64 support: requesting FP64 there warns and falls
        back to FP32.
        """
        if device.device_type == 'mps' and use_fp64:
            warnings.warn("MPS does not support FP64, falling back to FP32")
            use_fp64 = False
        return cls(device=device.torch_device, use_fp64=use_fp64)

    @classmethod
    def for_tensor(cls, native: torch.Tensor) -> GPUEngine:
        return cls(device=str(native.device), use_fp64=native.dtype == torch.float64)

    @property
    def name(self) -> str:
        # host tensors report cpu_torch_*, device tensors gpu_torch_*
        kind = 'cpu' if torch.device(self.device).type == 'cpu' else 'gpu'
        return f"{kind}_torch_fp64" if self.use_fp64 else f"{kind}_torch_fp32"

    @property
    def real_dtype(self) -> torch.dtype:
        return torch.float64 if self.use_fp64 else torch.float32

    # === Storage ===

    def asarray(self, data: Any, dtype: Any = None) -> torch.Tensor:
        """
        Copy ``data`` onto the engine device.

        Non-tensor input is validated like on the CPU engine, so
        non-numeric data raises ValidationError. ``dtype`` may be a torch
        or a NumPy dtype.
        """
        dtype = as_torch_dtype(dtype)
        if isinstance(data, torch.Tensor):
            tensor = data
        else:
            # writable copy; from_numpy warns on read-only arrays
            tensor = torch.from_numpy(np.array(check_array(data, 'data'), copy=True))
        if dtype is None:
            dtype = tensor.dtype if tensor.is_complex() else self.real_dtype
        return tensor.to(device=self.device, dtype=dtype, copy=True)

    def copy(self, native: torch.Tensor) -> torch.Tensor:
        return native.clone()

    def view(
        self,
        buffer: torch.Tensor,
        shape: tuple[int, ...] | None,
        strides: Sequence[int],
        offset: int,
        dtype: Any = None,
    ) -> torch.Tensor:
        """
        Strided tensor aliasing ``buffer``'s storage.

        Offsets are relative to the buffer tensor's own first element.
        """
        dtype = as_torch_dtype(dtype)
        if dtype is not None and dtype != buffer.dtype:
            buffer = buffer.view(dtype)
        if shape is None:
            remaining = buffer.numel() - offset
            shape = (max(0, -(-remaining // strides[0])),)
        return buffer.as_strided(shape, tuple(strides), buffer.storage_offset() + offset)

    # === Kernels ===

    def transpose(self, native: torch.Tensor) -> torch.Tensor:
        return native.transpose(0, 1).clone()

    def inverse(self, native: torch.Tensor) -> torch.Tensor:
        # torch.linalg.LinAlgError on singular input
        return torch.linalg.inv(native)

    def dot(self, lhs: torch.Tensor, rhs: torch.Tensor) -> Any:
        return torch.dot(lhs, rhs).item()

    def cprod(self, lhs: torch.Tensor, rhs: torch.Tensor) -> torch.Tensor:
        return torch.mul(lhs, rhs)

    def cdiv(self, lhs: torch.Tensor, rhs: torch.Tensor) -> torch.Tensor:
        return torch.div(lhs, rhs)

    def unary(self, native: torch.Tensor, func: Callable[[Any], Any]) -> torch.Tensor:
        # torch has no per-element Python map on device tensors
        values = [func(x) for x in native.tolist()]
        return torch.tensor(values, dtype=native.dtype, device=native.device)

    def lp_norm(self, native: torch.Tensor, p: float) -> Any:
        return torch.linalg.vector_norm(native, ord=p).item()

    def frobenius_norm(self, native: torch.Tensor) -> Any:
        return torch.linalg.matrix_norm(native, ord='fro').item()

    def sum(self, native: torch.Tensor) -> Any:
        return native.sum().item()

    def format(self, native: torch.Tensor) -> str:
        return str(native)
