"""
Translate — Сдвиг на фиксированное смещение

f(x) = x, g(x) = x + Δ, h(x, s) = x + s·Δ

Смещение Δ — скаляр (вход и выход float) или вектор из 2/3/4 компонент
(вход и выход — список той же длины, сдвиг покомпонентный).
"""

from dataclasses import dataclass, field
from typing import Any

from src.core.domain.geometry import TranslationOffset
from src.core.domain.homotopy import Homotopy
from src.core.math.parameters import PARAM_END


@dataclass(frozen=True)
class Translate(Homotopy):
    """
    Сдвиг на offset.

    Attributes:
        offset: Скаляр или последовательность из 2/3/4 скаляров
            (после построения — провалидированный float или tuple)
        translation: Провалидированная запись смещения
    """

    offset: Any
    translation: TranslationOffset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        translation = TranslationOffset(delta=self.offset)
        object.__setattr__(self, "translation", translation)
        object.__setattr__(self, "offset", translation.delta)

    @property
    def arity(self) -> int | None:
        """Число компонент векторного смещения (None для скаляра)."""
        return self.translation.arity

    @property
    def default_input(self) -> Any:
        if self.arity is None:
            return 0.0
        return [0.0] * self.arity

    def _shift(self, x: Any, s: float) -> Any:
        if self.arity is None:
            return x + s * self.offset

        if len(x) != self.arity:
            raise ValueError(
                f"translation of arity {self.arity} applied to input of length {len(x)}"
            )
        return [xi + s * di for xi, di in zip(x, self.offset)]

    def f(self, x: Any) -> Any:
        if self.arity is None:
            return x
        return list(x)

    def g(self, x: Any) -> Any:
        if self.arity is None:
            return x + self.offset
        return self._shift(x, PARAM_END)

    def h(self, x: Any, s: float) -> Any:
        return self._shift(x, s)
