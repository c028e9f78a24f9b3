"""
Core protocols for PyVecMat.

The containers in pyvecmat.dense never compute anything themselves.
Every kernel call is forwarded to an Engine: the dense library that owns
the native array type (NumPy/SciPy on CPU, PyTorch on GPU).

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object providing these kernels can stand in as an engine.
"""

from __future__ import annotations

from typing import Protocol, Any, Callable, Sequence, runtime_checkable


@runtime_checkable
class Engine(Protocol):
    """
    Protocol for dense linear-algebra engines.
    
    An engine owns one native array type and exposes the kernels the
    adapter layer forwards to. Plain arithmetic (``+``, ``-``, scalar
    ``*`` and ``/``, ``@``) is not part of the protocol: it goes straight
    to the native type's own operators.
    
    Engines are stateless apart from their configuration (device,
    precision), so a single instance can be shared by every container.
    
    Error contract:
        Engines never translate failures. A singular matrix, a shape
        mismatch or a zero divisor surfaces as the library reports it.
    """
    
    @property
    def name(self) -> str:
        """
        Engine identifier.
        
        Convention: '{device}_{library}[_{precision}]'
        Examples: 'cpu_numpy', 'gpu_torch_fp32', 'cpu_torch_fp64'
        """
        ...
    
    def asarray(self, data: Any, dtype: Any = None) -> Any:
        """Copy array-like ``data`` into a new native array."""
        ...
    
    def copy(self, native: Any) -> Any:
        """Return an independent copy of a native array."""
        ...
    
    def view(
        self,
        buffer: Any,
        shape: tuple[int, ...] | None,
        strides: Sequence[int],
        offset: int,
        dtype: Any = None,
    ) -> Any:
        """
        Build a non-owning native view over an external buffer.
        
        Args:
            buffer: Externally owned storage
            shape: View shape, or None for a 1D view over the rest of the buffer
            strides: Strides in elements, one per dimension
            offset: Index of the first element in the buffer
            dtype: Element type, or None to use the buffer's own
        """
        ...
    
    def transpose(self, native: Any) -> Any: ...
    
    def inverse(self, native: Any) -> Any: ...
    
    def dot(self, lhs: Any, rhs: Any) -> Any: ...
    
    def cprod(self, lhs: Any, rhs: Any) -> Any: ...
    
    def cdiv(self, lhs: Any, rhs: Any) -> Any: ...
    
    def unary(self, native: Any, func: Callable[[Any], Any]) -> Any: ...
    
    def lp_norm(self, native: Any, p: float) -> Any: ...
    
    def frobenius_norm(self, native: Any) -> Any: ...
    
    def sum(self, native: Any) -> Any: ...
    
    def format(self, native: Any) -> str: ...
