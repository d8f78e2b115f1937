"""
Adapters — Комбинаторы, не меняющие размерность

- AsVec: кортежи фиксированной арности (2/3/4) ↔ векторы (списки)
- Inverse: обращение направления гомотопии
- Map: отображение выхода чистой функцией
"""

from dataclasses import dataclass
from typing import Any, Callable

from src.core.domain.homotopy import Homotopy, HomotopyShapeError
from src.core.math.parameters import VEC_ARITIES, from_axes, reverse_axes, to_axes


def _require_homotopy(value: Any) -> None:
    if not isinstance(value, Homotopy):
        raise HomotopyShapeError(f"inner is not a homotopy: {value!r}")


# =============================================================================
# AS VEC
# =============================================================================


@dataclass(frozen=True)
class AsVec(Homotopy):
    """
    Мост представлений: вход и выход — векторы вместо кортежей.

    Значения не меняются. Позволяет обрабатывать покоординатные типы
    (точки 2D/3D) как векторы.
    """

    inner: Homotopy

    def __post_init__(self) -> None:
        _require_homotopy(self.inner)

        unit = self.inner.default_input
        if not isinstance(unit, tuple) or len(unit) not in VEC_ARITIES:
            raise HomotopyShapeError(
                f"as_vec requires a tuple input of arity {VEC_ARITIES}, got {unit!r}"
            )

    @property
    def dim(self) -> int:
        return self.inner.dim

    @property
    def default_input(self) -> list:
        return list(self.inner.default_input)

    def f(self, x: list) -> list:
        return list(self.inner.f(tuple(x)))

    def g(self, x: list) -> list:
        return list(self.inner.g(tuple(x)))

    def h(self, x: list, s: Any) -> list:
        return list(self.inner.h(tuple(x), s))


# =============================================================================
# INVERSE
# =============================================================================


@dataclass(frozen=True)
class Inverse(Homotopy):
    """
    Обращение направления: f' = g, g' = f, h'(x, s) = h(x, 1 - s).

    Для N-мерной гомотопии обращается каждая ось.
    Обращение — инволюция: inverse(inverse(H)) вычисляется как H.
    """

    inner: Homotopy

    def __post_init__(self) -> None:
        _require_homotopy(self.inner)

    @property
    def dim(self) -> int:
        return self.inner.dim

    @property
    def default_input(self) -> Any:
        return self.inner.default_input

    def inverse(self) -> Homotopy:
        """Повторное обращение возвращает исходную гомотопию."""
        return self.inner

    def f(self, x: Any) -> Any:
        return self.inner.g(x)

    def g(self, x: Any) -> Any:
        return self.inner.f(x)

    def h(self, x: Any, s: Any) -> Any:
        return self.inner.h(x, from_axes(reverse_axes(to_axes(s, self.dim))))


# =============================================================================
# MAP
# =============================================================================


@dataclass(frozen=True)
class Map(Homotopy):
    """Отображение выхода: transform применяется в каждой точке вычисления."""

    inner: Homotopy
    transform: Callable[[Any], Any]

    def __post_init__(self) -> None:
        _require_homotopy(self.inner)
        if not callable(self.transform):
            raise TypeError(f"transform must be callable, got {self.transform!r}")

    @property
    def dim(self) -> int:
        return self.inner.dim

    @property
    def default_input(self) -> Any:
        return self.inner.default_input

    def f(self, x: Any) -> Any:
        return self.transform(self.inner.f(x))

    def g(self, x: Any) -> Any:
        return self.transform(self.inner.g(x))

    def h(self, x: Any, s: Any) -> Any:
        return self.transform(self.inner.h(x, s))
