"""
Domain models and value objects.

Contains the Homotopy abstraction and the validated parameter records
used by primitives and combinators.
"""

from src.core.domain.geometry import AxisPin, CircleGeometry, TranslationOffset
from src.core.domain.homotopy import Homotopy, HomotopyShapeError

__all__ = [
    # Homotopy
    "Homotopy",
    "HomotopyShapeError",
    # Geometry records
    "AxisPin",
    "CircleGeometry",
    "TranslationOffset",
]
