"""
Collection — Последовательность гомотопий как одна гомотопия

Вход — позиция в последовательности:
- index: элемент вычисляется на своём входе по умолчанию
- (index, x): элемент вычисляется на входе x

Вложенные списки индексируются кортежами: для [[lerp]] вход (0, 0)
выбирает внешний элемент 0, затем внутренний элемент 0.

Индекс вне диапазона (включая отрицательный), а также нецелый индекс
или bool → HomotopyIndexError.
"""

from dataclasses import dataclass
from typing import Any, Iterable

from src.core.domain.homotopy import Homotopy, HomotopyShapeError


class HomotopyIndexError(IndexError):
    """Индекс за пределами последовательности гомотопий."""

    pass


@dataclass(frozen=True, init=False)
class HomotopyList(Homotopy):
    """
    Гомотопия, индексированная позицией в последовательности.

    Все элементы обязаны иметь одну размерность (проверяется при построении).
    """

    items: tuple[Homotopy, ...]

    def __init__(self, items: Iterable[Homotopy]):
        object.__setattr__(self, "items", tuple(items))
        self.__post_init__()

    def __post_init__(self) -> None:
        if not self.items:
            raise HomotopyShapeError("HomotopyList requires at least one item")

        for position, item in enumerate(self.items):
            if not isinstance(item, Homotopy):
                raise HomotopyShapeError(f"item {position} is not a homotopy: {item!r}")

        dims = {item.dim for item in self.items}
        if len(dims) != 1:
            raise HomotopyShapeError(f"items must share one dimension, got {sorted(dims)}")

    def __len__(self) -> int:
        return len(self.items)

    @property
    def dim(self) -> int:
        return self.items[0].dim

    @property
    def default_input(self) -> Any:
        return 0

    def _resolve(self, x: Any) -> tuple[Homotopy, Any]:
        if isinstance(x, tuple):
            index, inner = x
        else:
            index = x
            inner = None

        if isinstance(index, bool) or not isinstance(index, int):
            raise HomotopyIndexError(f"index must be an integer, got {index!r}")

        if not 0 <= index < len(self.items):
            raise HomotopyIndexError(
                f"index {index} out of range for {len(self.items)} homotopies"
            )

        item = self.items[index]
        if inner is None:
            inner = item.default_input
        return item, inner

    def f(self, x: Any) -> Any:
        item, inner = self._resolve(x)
        return item.f(inner)

    def g(self, x: Any) -> Any:
        item, inner = self._resolve(x)
        return item.g(inner)

    def h(self, x: Any, s: Any) -> Any:
        item, inner = self._resolve(x)
        return item.h(inner, s)
