"""
Shared behaviour of every dense container.

A container is a native engine array plus the engine that owns it.
Owned containers and views differ only in how the native array was
obtained (copied vs. aliased); everything defined here works on both.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterator

from pyvecmat.core.exceptions import EngineMismatchError
from pyvecmat.core.protocols import Engine


def is_scalar(value: Any) -> bool:
    """
    True for Python and NumPy numbers and for 0-d native arrays
    (ndarray or tensor). Bools are excluded.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Number):
        return True
    return not isinstance(value, DenseBase) and getattr(value, 'ndim', None) == 0


class DenseBase:
    """
    Native array + engine pair.

    Subclasses add the algebraic operators. Results of arithmetic are
    always owned containers, even when every operand is a view.
    """

    # numpy must defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    _native: Any
    _engine: Engine

    @classmethod
    def _adopt(cls, native: Any, engine: Engine) -> Any:
        obj = cls.__new__(cls)
        obj._native = native
        obj._engine = engine
        return obj

    # === Accessors ===

    @property
    def native(self) -> Any:
        """The engine's array (ndarray or tensor). Mutations are visible."""
        return self._native

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def dtype(self) -> Any:
        return self._native.dtype

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._native.shape)

    @property
    def is_view(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self._native)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._native)

    def __getitem__(self, key: Any) -> Any:
        return self._native[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._native[key] = value

    def tolist(self) -> list:
        return self._native.tolist()

    def __str__(self) -> str:
        return self._engine.format(self._native)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"

    # === Operand plumbing ===

    def _operand(self, other: DenseBase) -> Any:
        """Native array of ``other``, provided it lives on the same engine."""
        if type(other._engine) is not type(self._engine):
            raise EngineMismatchError(
                f"Cannot combine {self._engine.name} operand with "
                f"{other._engine.name} operand",
                left=self._engine.name,
                right=other._engine.name,
            )
        return other._native
