"""
Core math modules

Пространство параметров гомотопии и операции над осями.
"""

from src.core.math.parameters import (
    # Constants
    CIRCLE_CANONICAL_TURNS,
    MIN_DIMENSION,
    PARAM_END,
    PARAM_START,
    VEC_ARITIES,
    # Exceptions
    ParameterShapeError,
    # Validation
    validate_dimension,
    # Axis algebra
    corner,
    from_axes,
    pin_axis,
    reverse_axes,
    split_axes,
    to_axes,
)

__all__ = [
    # Parameters — Constants
    "CIRCLE_CANONICAL_TURNS",
    "MIN_DIMENSION",
    "PARAM_END",
    "PARAM_START",
    "VEC_ARITIES",
    # Parameters — Exceptions
    "ParameterShapeError",
    # Parameters — Validation
    "validate_dimension",
    # Parameters — Axis algebra
    "corner",
    "from_axes",
    "pin_axis",
    "reverse_axes",
    "split_axes",
    "to_axes",
]
