"""
PyVecMat: operator syntax for dense vectors and matrices.

A thin adapter over dense linear-algebra engines (NumPy/SciPy on CPU,
optionally PyTorch on GPU). Containers wrap the engine's native arrays
and every operator forwards directly to the engine.

Submodules:
    dense: Vector, Matrix and their non-owning views
    operators: transpose, inverse, norm, normalize, sum, cprod, cdiv, unary, write
    backends: Engine selection
    core: Exceptions, validation, device detection, tolerances
"""

__version__ = "0.1.0"

from pyvecmat.dense import Vector, VectorMap, Matrix, MatrixMap
from pyvecmat.operators import (
    NormOrder,
    write,
    transpose,
    inverse,
    norm,
    normalize,
    sum,
    cprod,
    cdiv,
    unary,
)
from pyvecmat.backends import get_engine, engine_for
from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    EngineMismatchError,
)

__all__ = [
    "__version__",
    # Containers
    "Vector",
    "VectorMap",
    "Matrix",
    "MatrixMap",
    # Functions
    "NormOrder",
    "write",
    "transpose",
    "inverse",
    "norm",
    "normalize",
    "sum",
    "cprod",
    "cdiv",
    "unary",
    # Engines
    "get_engine",
    "engine_for",
    # Exceptions
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "EngineMismatchError",
]
