"""
Core infrastructure for PyVecMat.

Key components:
    protocols: Engine protocol implemented by every dense backend
    exceptions: Exception hierarchy
    validation: Input validators for container construction
    compute: Device detection and tolerance tiers
"""

from pyvecmat.core.protocols import Engine
from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    EngineMismatchError,
)

__all__ = [
    # Protocols
    "Engine",
    # Exceptions
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "EngineMismatchError",
]
