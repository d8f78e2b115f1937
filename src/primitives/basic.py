"""
Basic — Элементарные гомотопии

- Identity: f, g и h — тождественные функции
- Dirac: ступенька 1.0 → 0.0 над unit-входом
- DiracFrom: ступенька между двумя пользовательскими функциями

Все три тривиально удовлетворяют граничному контракту:
значение в s == 0.0 выбирается отдельно, а во всех остальных точках
(включая s == 1.0) совпадает с g.
"""

from dataclasses import dataclass
from typing import Any, Callable

from src.core.domain.homotopy import Homotopy
from src.core.math.parameters import PARAM_START, validate_dimension


# =============================================================================
# IDENTITY
# =============================================================================


@dataclass(frozen=True)
class Identity(Homotopy):
    """
    Тождественная гомотопия.

    Игнорирует параметр, поэтому допускает любую размерность (axes).
    """

    axes: int = 1
    default_input: Any = ()

    def __post_init__(self) -> None:
        validate_dimension(self.axes, "axes")

    @property
    def dim(self) -> int:
        return self.axes

    def f(self, x: Any) -> Any:
        return x

    def g(self, x: Any) -> Any:
        return x

    def h(self, x: Any, s: Any) -> Any:
        return x


# =============================================================================
# DIRAC
# =============================================================================


@dataclass(frozen=True)
class Dirac(Homotopy):
    """Функция Дирака: 1.0 в s == 0.0, иначе 0.0."""

    def f(self, x: Any) -> float:
        return 1.0

    def g(self, x: Any) -> float:
        return 0.0

    def h(self, x: Any, s: float) -> float:
        return 1.0 if s == PARAM_START else 0.0


@dataclass(frozen=True)
class DiracFrom(Homotopy):
    """
    Ступенька между двумя функциями.

    h равна start_fn в s == 0.0 и end_fn во всех остальных точках.
    Так как h(x, 1.0) == end_fn(x), это гомотопия.

    Attributes:
        start_fn: Функция f
        end_fn: Функция g
        default_input: Вход для hu (по умолчанию unit-вход)
    """

    start_fn: Callable[[Any], Any]
    end_fn: Callable[[Any], Any]
    default_input: Any = ()

    def __post_init__(self) -> None:
        if not callable(self.start_fn) or not callable(self.end_fn):
            raise TypeError("DiracFrom requires two callables")

    def f(self, x: Any) -> Any:
        return self.start_fn(x)

    def g(self, x: Any) -> Any:
        return self.end_fn(x)

    def h(self, x: Any, s: float) -> Any:
        if s == PARAM_START:
            return self.start_fn(x)
        return self.end_fn(x)
