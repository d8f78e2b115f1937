"""Primitives — листовые гомотопии.

- Identity, Dirac, DiracFrom
- Lerp, QuadraticBezier, CubicBezier, Circle
- Translate
- HomotopyList (последовательность гомотопий, индексированная позицией)
"""

from .basic import Dirac, DiracFrom, Identity
from .collection import HomotopyIndexError, HomotopyList
from .curves import Circle, CubicBezier, Lerp, QuadraticBezier
from .translate import Translate

__all__ = [
    "Identity",
    "Dirac",
    "DiracFrom",
    "Lerp",
    "QuadraticBezier",
    "CubicBezier",
    "Circle",
    "Translate",
    "HomotopyList",
    "HomotopyIndexError",
]
