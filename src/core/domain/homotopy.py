"""
Homotopy — Базовая абстракция непрерывной деформации

Гомотопия связывает две функции f и g над одной областью через третью
функцию h с дополнительным параметром s:

    h(x, 0) == f(x)
    h(x, 1) == g(x)

Это граничный контракт — единственный инвариант, который сохраняет
каждый комбинатор библиотеки при композиции.

Все гомотопии — неизменяемые значения (frozen dataclasses):
- Строятся один раз, вычисляются произвольное число раз
- Не кэшируют и не изменяют состояние между вычислениями
- Могут вычисляться конкурентно без синхронизации

Fluent API (left(), diagonal(), as_vec(), ...) строит новые комбинаторы
поверх текущей гомотопии, не изменяя её.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


# =============================================================================
# EXCEPTIONS
# =============================================================================


class HomotopyShapeError(ValueError):
    """
    Несовместимое дерево комбинаторов.

    Возникает при построении (не при вычислении), например:
    - Множитель Square/Cube с размерностью > 1
    - Грань гомотопии с одной осью
    - Ось за пределами размерности
    - AsVec над входом, не являющимся кортежем арности 2/3/4
    """

    pass


# =============================================================================
# HOMOTOPY
# =============================================================================


class Homotopy(ABC):
    """
    Непрерывное отображение между двумя функциями.

    Подклассы реализуют f, g и h. Размерность (dim) — число осей
    параметра; для dim == 1 параметр скалярный, иначе tuple из dim скаляров.
    """

    @property
    def dim(self) -> int:
        """Число осей параметра."""
        return 1

    @property
    def default_input(self) -> Any:
        """Вход по умолчанию для hu (unit-вход для большинства примитивов)."""
        return ()

    @abstractmethod
    def f(self, x: Any) -> Any:
        """Функция, из которой деформируем."""

    @abstractmethod
    def g(self, x: Any) -> Any:
        """Функция, в которую деформируем."""

    @abstractmethod
    def h(self, x: Any, s: Any) -> Any:
        """Непрерывное отображение: h(x, 0) == f(x), h(x, 1) == g(x)."""

    def hu(self, s: Any) -> Any:
        """
        Вычисление h на входе по умолчанию.

        Используется, когда вход — unit-значение (например, ((), ()))
        и форма целиком задаётся параметром.
        """
        return self.h(self.default_input, s)

    # -------------------------------------------------------------------------
    # Shape adapters
    # -------------------------------------------------------------------------

    def inverse(self) -> "Homotopy":
        """Гомотопия в обратном направлении."""
        from src.combinators.adapters import Inverse

        return Inverse(self)

    def as_vec(self) -> "Homotopy":
        """Представление входа и выхода как векторов вместо кортежей."""
        from src.combinators.adapters import AsVec

        return AsVec(self)

    def map(self, transform: Callable[[Any], Any]) -> "Homotopy":
        """Отображение выхода чистой функцией."""
        from src.combinators.adapters import Map

        return Map(self, transform)

    # -------------------------------------------------------------------------
    # Dimension raising
    # -------------------------------------------------------------------------

    def smap(self, transform: Callable[[Any, float], Any]) -> "Homotopy":
        """Отображение выхода в гомотопию размерности N+1."""
        from src.combinators.scalar_map import SMap

        return SMap(self, transform)

    def compose(self, other: "Homotopy") -> "Homotopy":
        """Последовательная композиция: выход self — вход other."""
        from src.combinators.compose import Compose

        return Compose(self, other)

    # -------------------------------------------------------------------------
    # Dimension lowering
    # -------------------------------------------------------------------------

    def diagonal(self) -> "Homotopy":
        """Диагональ: все оси управляются одним скаляром."""
        from src.combinators.sides import Diagonal

        return Diagonal(self)

    def left(self) -> "Homotopy":
        """Левая грань (ось 0 = 0.0)."""
        from src.combinators.sides import Left

        return Left(self)

    def right(self) -> "Homotopy":
        """Правая грань (ось 0 = 1.0)."""
        from src.combinators.sides import Right

        return Right(self)

    def top(self) -> "Homotopy":
        """Верхняя грань (ось 1 = 0.0)."""
        from src.combinators.sides import Top

        return Top(self)

    def bottom(self) -> "Homotopy":
        """Нижняя грань (ось 1 = 1.0)."""
        from src.combinators.sides import Bottom

        return Bottom(self)

    def front(self) -> "Homotopy":
        """Передняя грань (ось 2 = 0.0)."""
        from src.combinators.sides import Front

        return Front(self)

    def back(self) -> "Homotopy":
        """Задняя грань (ось 2 = 1.0)."""
        from src.combinators.sides import Back

        return Back(self)

    def past(self) -> "Homotopy":
        """Грань прошлого (ось 3 = 0.0), для 4D гомотопий."""
        from src.combinators.sides import Past

        return Past(self)

    def future(self) -> "Homotopy":
        """Грань будущего (ось 3 = 1.0), для 4D гомотопий."""
        from src.combinators.sides import Future

        return Future(self)

    def left_right(self, s: float) -> "Homotopy":
        """Срез между левой и правой гранью, управляемый s."""
        from src.combinators.sides import LeftRight

        return LeftRight(self, s)

    def top_bottom(self, s: float) -> "Homotopy":
        """Срез между верхней и нижней гранью, управляемый s."""
        from src.combinators.sides import TopBottom

        return TopBottom(self, s)

    def front_back(self, s: float) -> "Homotopy":
        """Срез между передней и задней гранью, управляемый s."""
        from src.combinators.sides import FrontBack

        return FrontBack(self, s)

    def past_future(self, s: float) -> "Homotopy":
        """Срез между прошлым и будущим, управляемый s."""
        from src.combinators.sides import PastFuture

        return PastFuture(self, s)
