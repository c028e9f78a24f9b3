"""
Engine selection.

    get_engine(backend)  - Engine for a backend name ('cpu', 'gpu', 'auto')
    engine_for(native)   - Engine owning an existing native array

The torch engine is imported lazily so that NumPy-only installs never
import torch.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pyvecmat.core.compute.device import select_device
from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.protocols import Engine
from pyvecmat.backends.cpu import CPUEngine


BackendChoice = Literal['auto', 'cpu', 'gpu']

CPU_ENGINE = CPUEngine()


def get_engine(backend: Union[BackendChoice, Engine] = 'cpu') -> Engine:
    """
    Select an engine based on preference.

    Parameters
    ----------
    backend : str or Engine
        'cpu' for NumPy/SciPy, 'gpu' to require a CUDA/MPS torch engine,
        'auto' for GPU when available and CPU otherwise. An Engine
        instance is returned unchanged.

    Raises
    ------
    RuntimeError
        If 'gpu' is requested and no GPU is available.
    ValidationError
        If the backend name is unknown.
    """
    if not isinstance(backend, str):
        if not isinstance(backend, Engine):
            raise ValidationError(f"backend: expected a name or an Engine, got {backend!r}")
        return backend

    if backend == 'cpu':
        return CPU_ENGINE

    if backend == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            try:
                from pyvecmat.backends.gpu import GPUEngine
                return GPUEngine.from_device(device)
            except ImportError:
                return CPU_ENGINE
        return CPU_ENGINE

    if backend == 'gpu':
        device = select_device('gpu')
        from pyvecmat.backends.gpu import GPUEngine
        return GPUEngine.from_device(device)

    raise ValidationError(f"Unknown backend: {backend!r}")


def _is_tensor(obj: Any) -> bool:
    return type(obj).__module__.split('.')[0] == 'torch'


def engine_for(native: Any) -> Engine:
    """
    Engine that owns ``native``.

    torch tensors map to a GPUEngine on the tensor's device; everything
    else (ndarrays, buffer-protocol objects) maps to the CPU engine.
    """
    if _is_tensor(native):
        from pyvecmat.backends.gpu import GPUEngine
        return GPUEngine.for_tensor(native)
    return CPU_ENGINE


__all__ = [
    "BackendChoice",
    "CPUEngine",
    "CPU_ENGINE",
    "get_engine",
    "engine_for",
]
