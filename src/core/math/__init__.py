"""
Core math modules

Скалярные примитивы, однородные координаты (Tuple) и матрицы (Matrix).
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPSILON,
    clamp,
    epsilon_equal,
    is_valid_float,
    round_to,
)

# Tuple
from src.core.math.tuples import (
    POINT_W,
    VECTOR_W,
    Tuple,
    color,
    point,
    tuple4,
    vector,
)

# Matrix
from src.core.math.matrix import Matrix

__all__ = [
    # Numerical Safeguards
    "EPSILON",
    "clamp",
    "epsilon_equal",
    "is_valid_float",
    "round_to",
    # Tuple — Constants
    "POINT_W",
    "VECTOR_W",
    # Tuple — Types
    "Tuple",
    # Tuple — Factories
    "color",
    "point",
    "tuple4",
    "vector",
    # Matrix
    "Matrix",
]
