"""
Contracts — предусловия ядра и JSON Schema контракты сериализации.
"""

from .validators import (
    ContractValidator,
    MatrixValidator,
    SchemaLoader,
    TupleValidator,
    validate_matrix,
    validate_tuple,
)
from .violations import ContractViolation

__all__ = [
    # Exceptions
    "ContractViolation",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TupleValidator",
    "MatrixValidator",
    # Functions
    "validate_tuple",
    "validate_matrix",
]
