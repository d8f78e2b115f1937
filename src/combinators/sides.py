"""
Sides — Понижение размерности: грани, срезы, диагональ

Грань (face) фиксирует одну ось N-мерной гомотопии на границе и
возвращает (N-1)-мерную гомотопию над оставшимися осями:

    ось 0: Left   = 0.0, Right  = 1.0
    ось 1: Top    = 0.0, Bottom = 1.0
    ось 2: Front  = 0.0, Back   = 1.0
    ось 3: Past   = 0.0, Future = 1.0

Срез (slice) — обобщение грани: ось фиксируется на произвольном
значении s из [0, 1] (LeftRight, TopBottom, FrontBack, PastFuture).

Диагональ (Diagonal) сводит все оси к одному общему скаляру.

Все варианты реализованы через одну форму Face(inner, axis, value),
независимую от размерности; именованные классы — точки входа.
"""

from dataclasses import dataclass, field
from typing import Any

from src.core.domain.geometry import AxisPin
from src.core.domain.homotopy import Homotopy, HomotopyShapeError
from src.core.math.parameters import (
    PARAM_END,
    PARAM_START,
    corner,
    from_axes,
    pin_axis,
    to_axes,
)


# =============================================================================
# FACE
# =============================================================================


@dataclass(frozen=True)
class Face(Homotopy):
    """
    Гомотопия с зафиксированной осью.

    ФОРМУЛЫ (N = inner.dim, k = axis, v = value):
        h(x, s) = inner.h(x, s[:k] + (v,) + s[k:])
        f(x)    = h(x, all-zero)
        g(x)    = h(x, all-one)

    Attributes:
        inner: Исходная гомотопия (dim >= 2)
        axis: Фиксируемая ось (0 <= axis < inner.dim)
        value: Значение оси в [0, 1]
        pin: Провалидированная фиксация оси
    """

    inner: Homotopy
    axis: int
    value: float
    pin: AxisPin = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.inner, Homotopy):
            raise HomotopyShapeError(f"inner is not a homotopy: {self.inner!r}")

        pin = AxisPin(axis=self.axis, value=self.value)
        object.__setattr__(self, "pin", pin)
        object.__setattr__(self, "value", pin.value)

        if self.inner.dim < 2:
            raise HomotopyShapeError(
                f"cannot pin an axis of a homotopy with {self.inner.dim} axis"
            )
        if self.axis >= self.inner.dim:
            raise HomotopyShapeError(
                f"axis {self.axis} out of range for a {self.inner.dim}-axis homotopy"
            )

    @property
    def dim(self) -> int:
        return self.inner.dim - 1

    @property
    def default_input(self) -> Any:
        return self.inner.default_input

    def _pinned(self, axes: tuple[float, ...]) -> Any:
        return from_axes(pin_axis(axes, self.axis, self.value))

    def f(self, x: Any) -> Any:
        return self.inner.h(x, self._pinned((PARAM_START,) * self.dim))

    def g(self, x: Any) -> Any:
        return self.inner.h(x, self._pinned((PARAM_END,) * self.dim))

    def h(self, x: Any, s: Any) -> Any:
        return self.inner.h(x, self._pinned(to_axes(s, self.dim)))


# =============================================================================
# NAMED FACES
# =============================================================================


class Left(Face):
    """Левая грань: ось 0 = 0.0."""

    def __init__(self, inner: Homotopy):
        super().__init__(inner, 0, PARAM_START)


class Right(Face):
    """Правая грань: ось 0 = 1.0."""

    def __init__(self, inner: Homotopy):
        super().__init__(inner, 0, PARAM_END)


class Top(Face):
    """Верхняя грань: ось 1 = 0.0."""

    def __init__(self, inner: Homotopy):
        super().__init__(inner, 1, PARAM_START)


class Bottom(Face):
    """Нижняя грань: ось 1 = 1.0."""

    def __init__(self, inner: Homotopy):
        super().__init__(inner, 1, PARAM_END)


class Front(Face):
    """Передняя грань: ось 2 = 0.0."""

    def __init__(self, inner: Homotopy):
        super().__init__(inner, 2, PARAM_START)


class Back(Face):
    """Задняя грань: ось 2 = 1.0."""

    def __init__(self, inner: Homotopy):
        super().__init__(inner, 2, PARAM_END)


class Past(Face):
    """Грань прошлого: ось 3 = 0.0."""

    def __init__(self, inner: Homotopy):
        super().__init__(inner, 3, PARAM_START)


class Future(Face):
    """Грань будущего: ось 3 = 1.0."""

    def __init__(self, inner: Homotopy):
        super().__init__(inner, 3, PARAM_END)


# =============================================================================
# NAMED SLICES
# =============================================================================


class LeftRight(Face):
    """Срез между левой и правой гранью: ось 0 = s."""

    def __init__(self, inner: Homotopy, s: float):
        super().__init__(inner, 0, s)


class TopBottom(Face):
    """Срез между верхней и нижней гранью: ось 1 = s."""

    def __init__(self, inner: Homotopy, s: float):
        super().__init__(inner, 1, s)


class FrontBack(Face):
    """Срез между передней и задней гранью: ось 2 = s."""

    def __init__(self, inner: Homotopy, s: float):
        super().__init__(inner, 2, s)


class PastFuture(Face):
    """Срез между прошлым и будущим: ось 3 = s."""

    def __init__(self, inner: Homotopy, s: float):
        super().__init__(inner, 3, s)


# =============================================================================
# DIAGONAL
# =============================================================================


@dataclass(frozen=True)
class Diagonal(Homotopy):
    """
    Диагональ N-мерной гомотопии.

    Все оси управляются одним скаляром: h(x, s) = inner.h(x, (s, ..., s)).
    Концы диагонали совпадают с углами куба параметров, поэтому
    f и g не меняются.
    """

    inner: Homotopy

    def __post_init__(self) -> None:
        if not isinstance(self.inner, Homotopy):
            raise HomotopyShapeError(f"inner is not a homotopy: {self.inner!r}")

    @property
    def default_input(self) -> Any:
        return self.inner.default_input

    def f(self, x: Any) -> Any:
        return self.inner.f(x)

    def g(self, x: Any) -> Any:
        return self.inner.g(x)

    def h(self, x: Any, s: float) -> Any:
        return self.inner.h(x, corner(self.inner.dim, s))
