"""
Exception hierarchy for PyVecMat.

All exceptions inherit from PyVecMatError to allow catching any
library-specific error.

Scope:
    These are raised only at the container and configuration boundary
    (building a Vector/Matrix, choosing a norm order, naming a backend,
    combining operands from different engines). Arithmetic itself never
    raises them: shape mismatches, singular matrices and division by zero
    surface exactly as the engine (NumPy/SciPy or PyTorch) reports them.
"""


class PyVecMatError(Exception):
    """Base exception for all PyVecMat errors."""
    pass


class ValidationError(PyVecMatError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array has the wrong number of dimensions for the container.
    
    Raised when a Vector is built from non-1D data or a Matrix from
    non-2D data.
    """
    pass


class EngineMismatchError(ValidationError):
    """
    Operands belong to different engines.
    
    A NumPy-backed operand cannot be combined with a torch-backed one:
    neither engine can consume the other's native array.
    
    Attributes:
        left: Name of the left operand's engine
        right: Name of the right operand's engine
    """
    
    def __init__(self, message: str, left: str | None = None, right: str | None = None):
        super().__init__(message)
        self.left = left
        self.right = right
