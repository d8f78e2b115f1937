"""
Compose — Последовательная композиция гомотопий

Выход первой гомотопии подаётся на вход второй. Оси параметра
не сливаются, а конкатенируются: префикс управляет первой гомотопией,
суффикс — второй. Так последовательные стадии превращаются в
независимо управляемые оси.

ФОРМУЛЫ:
    f(x)    = second.f(first.f(x))
    g(x)    = second.g(first.g(x))
    h(x, s) = second.h(first.h(x, s[:n1]), s[n1:])
    dim     = first.dim + second.dim
"""

from dataclasses import dataclass
from typing import Any

from src.core.domain.homotopy import Homotopy, HomotopyShapeError
from src.core.math.parameters import split_axes, to_axes


@dataclass(frozen=True)
class Compose(Homotopy):
    """
    Композиция first → second.

    Attributes:
        first: Гомотопия X → Y с dim == n1
        second: Гомотопия Y → Z с dim == n2
    """

    first: Homotopy
    second: Homotopy

    def __post_init__(self) -> None:
        for name in ("first", "second"):
            if not isinstance(getattr(self, name), Homotopy):
                raise HomotopyShapeError(f"{name} is not a homotopy: {getattr(self, name)!r}")

    @property
    def dim(self) -> int:
        return self.first.dim + self.second.dim

    @property
    def default_input(self) -> Any:
        return self.first.default_input

    def f(self, x: Any) -> Any:
        return self.second.f(self.first.f(x))

    def g(self, x: Any) -> Any:
        return self.second.g(self.first.g(x))

    def h(self, x: Any, s: Any) -> Any:
        head, tail = split_axes(to_axes(s, self.dim), self.first.dim)
        return self.second.h(self.first.h(x, head), tail)
