"""
Sweep — Развёртка между двумя окружностями

Диагональ квадрата двух окружностей заставляет их вращаться вместе,
управляясь одним параметром. SMap добавляет вторую ось, которая
интерполирует между двумя вращающимися точками.

Результат — 2D гомотопия над входом ((), ()):
    ось 0: угол поворота обеих окружностей
    ось 1: положение между точкой на a (0.0) и точкой на b (1.0)
"""

from src.combinators.products import Square
from src.core.domain.homotopy import Homotopy
from src.primitives.curves import Circle


def _interpolate_points(points: tuple[list[float], list[float]], s: float) -> list[float]:
    a, b = points
    return [a[0] + (b[0] - a[0]) * s, a[1] + (b[1] - a[1]) * s]


def sweep(a: Circle, b: Circle) -> Homotopy:
    """
    Развёртка от окружности a к окружности b.

    Args:
        a: Внутренняя окружность
        b: Внешняя окружность

    Returns:
        2D гомотопия с выходом [x, y]
    """
    return Square(a, b).diagonal().smap(_interpolate_points)
