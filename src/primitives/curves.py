"""
Curves — Кривые над unit-входом

- Lerp: линейная интерполяция A → B
- QuadraticBezier: квадратичная кривая Безье A → C с контрольной точкой B
- CubicBezier: кубическая кривая Безье A → D (редуцированная двухуровневая форма)
- Circle: параметризация окружности (замкнутая кривая, f == g)

Арифметика обобщённая: значения должны поддерживать сложение и умножение
на вещественный скаляр (value * float).

ФОРМУЛЫ:
    Lerp:       h(s) = A * (1 - s) + B * s
    Quadratic:  h(s) = lerp(lerp(A, B, s), lerp(B, C, s), s)
    Cubic:      h(s) = lerp(lerp(A, B, s), lerp(C, D, s), s)
    Circle:     h(s) = center + radius * (cos 2πs, sin 2πs)
"""

import math
from dataclasses import dataclass
from typing import Any

from src.core.domain.geometry import CircleGeometry
from src.core.domain.homotopy import Homotopy
from src.core.math.parameters import CIRCLE_CANONICAL_TURNS, PARAM_END, PARAM_START


def _lerp(a: Any, b: Any, s: float) -> Any:
    return a * (PARAM_END - s) + b * s


# =============================================================================
# LINEAR INTERPOLATION
# =============================================================================


@dataclass(frozen=True)
class Lerp(Homotopy):
    """
    Линейная интерполяция.

    f и g — константы над unit-входом, параметр управляет
    положением на отрезке.
    """

    start: Any
    end: Any

    def f(self, x: Any) -> Any:
        return self.start

    def g(self, x: Any) -> Any:
        return self.end

    def h(self, x: Any, s: float) -> Any:
        return _lerp(self.start, self.end, s)


# =============================================================================
# BEZIER CURVES
# =============================================================================


@dataclass(frozen=True)
class QuadraticBezier(Homotopy):
    """Квадратичная кривая Безье из a в c с контрольной точкой b."""

    a: Any
    b: Any
    c: Any

    @classmethod
    def from_linear(cls, a: Any, b: Any) -> "QuadraticBezier":
        """
        Квадратичная кривая, совпадающая с линейной интерполяцией.

        Контрольная точка — середина отрезка [a, b].
        """
        return cls(a, a * 0.5 + b * 0.5, b)

    @classmethod
    def from_lerp(cls, lerp: Lerp) -> "QuadraticBezier":
        return cls.from_linear(lerp.start, lerp.end)

    def f(self, x: Any) -> Any:
        return self.a

    def g(self, x: Any) -> Any:
        return self.c

    def h(self, x: Any, s: float) -> Any:
        return _lerp(_lerp(self.a, self.b, s), _lerp(self.b, self.c, s), s)


@dataclass(frozen=True)
class CubicBezier(Homotopy):
    """
    Кубическая кривая Безье из a в d с контрольными точками b и c.

    ВНИМАНИЕ: h использует редуцированную двухуровневую форму
    lerp(lerp(a, b), lerp(c, d)), а не полный алгоритм де Кастельжо.
    Для кривых, построенных через from_quadratic (b == c), это точная
    квадратичная кривая; для независимых b и c форма не является
    общей кубической кривой Безье.
    """

    a: Any
    b: Any
    c: Any
    d: Any

    @classmethod
    def from_quadratic(cls, a: Any, b: Any, c: Any) -> "CubicBezier":
        """Кубическая кривая, совпадающая с квадратичной (b повторяется)."""
        return cls(a, b, b, c)

    @classmethod
    def from_quadratic_bezier(cls, curve: QuadraticBezier) -> "CubicBezier":
        return cls.from_quadratic(curve.a, curve.b, curve.c)

    def f(self, x: Any) -> Any:
        return self.a

    def g(self, x: Any) -> Any:
        return self.d

    def h(self, x: Any, s: float) -> Any:
        return _lerp(_lerp(self.a, self.b, s), _lerp(self.c, self.d, s), s)


# =============================================================================
# CIRCLE
# =============================================================================


@dataclass(frozen=True)
class Circle(Homotopy):
    """
    Точки на окружности.

    Замкнутая кривая: f == g == точка при угле 0.
    В долях оборота 0, 1/4, 1/2, 3/4, 1 возвращаются точные координаты,
    без погрешности cos/sin — проверки контракта сравнивают точно.

    Attributes:
        center: Центр (x, y)
        radius: Радиус
    """

    center: tuple[float, float]
    radius: float

    def __post_init__(self) -> None:
        geometry = CircleGeometry(center=self.center, radius=self.radius)
        object.__setattr__(self, "center", geometry.center)
        object.__setattr__(self, "radius", geometry.radius)

    def _canonical_point(self, s: float) -> list[float]:
        cx, cy = self.center
        r = self.radius
        if s == 0.25:
            return [cx, cy + r]
        if s == 0.5:
            return [cx - r, cy]
        if s == 0.75:
            return [cx, cy - r]
        return [cx + r, cy]

    def f(self, x: Any) -> list[float]:
        return self._canonical_point(PARAM_START)

    def g(self, x: Any) -> list[float]:
        return self._canonical_point(PARAM_END)

    def h(self, x: Any, s: float) -> list[float]:
        if s in CIRCLE_CANONICAL_TURNS:
            return self._canonical_point(s)

        angle = s * math.pi * 2.0
        cx, cy = self.center
        return [cx + self.radius * math.cos(angle), cy + self.radius * math.sin(angle)]
