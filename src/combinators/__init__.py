"""Combinators — построение гомотопий из гомотопий.

- Повышение размерности: Square, Cube, Cube4, Product, Compose, SMap
- Понижение размерности: грани, срезы, Diagonal
- Адаптеры формы: AsVec, Inverse, Map
- sweep: развёртка между двумя окружностями
"""

from .adapters import AsVec, Inverse, Map
from .compose import Compose
from .products import Cube, Cube4, Product, Square
from .scalar_map import SMap
from .sides import (
    Back,
    Bottom,
    Diagonal,
    Face,
    Front,
    FrontBack,
    Future,
    Left,
    LeftRight,
    Past,
    PastFuture,
    Right,
    Top,
    TopBottom,
)
from .sweep import sweep

__all__ = [
    # Dimension raising
    "Product",
    "Square",
    "Cube",
    "Cube4",
    "Compose",
    "SMap",
    # Dimension lowering
    "Face",
    "Left",
    "Right",
    "Top",
    "Bottom",
    "Front",
    "Back",
    "Past",
    "Future",
    "LeftRight",
    "TopBottom",
    "FrontBack",
    "PastFuture",
    "Diagonal",
    # Shape adapters
    "AsVec",
    "Inverse",
    "Map",
    # Sweep
    "sweep",
]
