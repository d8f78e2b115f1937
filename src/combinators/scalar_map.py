"""
Scalar Map — Подъём N-мерной гомотопии в N+1 измерение

Функция transform получает выход внутренней гомотопии и значение
новой (последней) оси. Используется, когда выход содержит структуру,
по которой нужно интерполировать, или когда форму нужно продолжить
вдоль нового измерения.

ФОРМУЛЫ:
    f(x)    = transform(inner.f(x), 0.0)
    g(x)    = transform(inner.g(x), 1.0)
    h(x, s) = transform(inner.h(x, s[:N]), s[N])
"""

from dataclasses import dataclass
from typing import Any, Callable

from src.core.domain.homotopy import Homotopy, HomotopyShapeError
from src.core.math.parameters import PARAM_END, PARAM_START, from_axes, to_axes


@dataclass(frozen=True)
class SMap(Homotopy):
    """
    Отображение выхода в гомотопию размерности N+1.

    Attributes:
        inner: Исходная N-мерная гомотопия
        transform: (value, s_new) -> новое значение
    """

    inner: Homotopy
    transform: Callable[[Any, float], Any]

    def __post_init__(self) -> None:
        if not isinstance(self.inner, Homotopy):
            raise HomotopyShapeError(f"inner is not a homotopy: {self.inner!r}")
        if not callable(self.transform):
            raise TypeError(f"transform must be callable, got {self.transform!r}")

    @property
    def dim(self) -> int:
        return self.inner.dim + 1

    @property
    def default_input(self) -> Any:
        return self.inner.default_input

    def f(self, x: Any) -> Any:
        return self.transform(self.inner.f(x), PARAM_START)

    def g(self, x: Any) -> Any:
        return self.transform(self.inner.g(x), PARAM_END)

    def h(self, x: Any, s: Any) -> Any:
        axes = to_axes(s, self.dim)
        return self.transform(self.inner.h(x, from_axes(axes[:-1])), axes[-1])
