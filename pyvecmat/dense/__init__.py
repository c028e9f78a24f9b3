"""
Dense containers.

    Vector, Matrix        - owned storage
    VectorMap, MatrixMap  - non-owning views over external buffers

Owned and view containers accept each other as operands everywhere.
"""

from pyvecmat.dense.vector import Vector, VectorBase, VectorMap
from pyvecmat.dense.matrix import Matrix, MatrixBase, MatrixMap

__all__ = [
    "Vector",
    "VectorMap",
    "VectorBase",
    "Matrix",
    "MatrixMap",
    "MatrixBase",
]
