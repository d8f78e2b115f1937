"""
Products — Произведение независимых гомотопий

N независимых одномерных гомотопий образуют одну N-мерную:
- вход — кортеж входов множителей
- ось k параметра управляет k-м множителем
- выход — кортеж выходов множителей

Square, Cube, Cube4 — именованные точки входа для N = 2, 3, 4.
Product — общая форма для произвольного N.
"""

from dataclasses import dataclass
from typing import Any, Iterable

from src.core.domain.homotopy import Homotopy, HomotopyShapeError
from src.core.math.parameters import to_axes


@dataclass(frozen=True, init=False)
class Product(Homotopy):
    """
    Произведение одномерных гомотопий.

    Attributes:
        factors: Множители (каждый с dim == 1)
    """

    factors: tuple[Homotopy, ...]

    def __init__(self, factors: Iterable[Homotopy]):
        object.__setattr__(self, "factors", tuple(factors))
        self._validate()

    def _validate(self) -> None:
        if not self.factors:
            raise HomotopyShapeError("product requires at least one factor")

        for position, factor in enumerate(self.factors):
            if not isinstance(factor, Homotopy):
                raise HomotopyShapeError(f"factor {position} is not a homotopy: {factor!r}")
            if factor.dim != 1:
                raise HomotopyShapeError(
                    f"factor {position} must have one parameter axis, got {factor.dim}"
                )

    @property
    def dim(self) -> int:
        return len(self.factors)

    @property
    def default_input(self) -> tuple:
        return tuple(factor.default_input for factor in self.factors)

    def f(self, x: tuple) -> tuple:
        return tuple(factor.f(xi) for factor, xi in zip(self.factors, x, strict=True))

    def g(self, x: tuple) -> tuple:
        return tuple(factor.g(xi) for factor, xi in zip(self.factors, x, strict=True))

    def h(self, x: tuple, s: Any) -> tuple:
        axes = to_axes(s, self.dim)
        return tuple(
            factor.h(xi, si) for factor, xi, si in zip(self.factors, x, axes, strict=True)
        )


class Square(Product):
    """Квадрат двух гомотопий — 2D гомотопия."""

    def __init__(self, h1: Homotopy, h2: Homotopy):
        super().__init__((h1, h2))


class Cube(Product):
    """Куб трёх гомотопий — 3D гомотопия."""

    def __init__(self, h1: Homotopy, h2: Homotopy, h3: Homotopy):
        super().__init__((h1, h2, h3))


class Cube4(Product):
    """4-куб четырёх гомотопий — 4D гомотопия."""

    def __init__(self, h1: Homotopy, h2: Homotopy, h3: Homotopy, h4: Homotopy):
        super().__init__((h1, h2, h3, h4))
