"""
Parameters — Пространство параметров гомотопии

Параметр гомотопии с одной осью — скаляр из [0, 1].
Параметр N-мерной гомотопии (N >= 2) — последовательность из N скаляров,
по одному на ось. Начало — все нули, конец — все единицы.

Модуль содержит единственный допустимый способ работы с осями:
- Приведение параметра к кортежу осей и обратно (scalar ↔ tuple)
- Углы куба параметров (all-zero / all-one)
- Фиксация оси (pin), конкатенация и разбиение (split), обращение осей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Параметр с одной осью всегда передаётся как скаляр, с N >= 2 — как tuple
2. Число осей параметра всегда равно размерности гомотопии
3. Все операции чистые: входные последовательности не изменяются
"""

from collections.abc import Iterable, Sized
from typing import Any, Final, Sequence

# =============================================================================
# КОНСТАНТЫ ПРОСТРАНСТВА ПАРАМЕТРОВ
# =============================================================================

# Начало интервала параметра: h(x, 0) == f(x)
PARAM_START: Final[float] = 0.0

# Конец интервала параметра: h(x, 1) == g(x)
PARAM_END: Final[float] = 1.0

# Минимальная размерность гомотопии (скалярный параметр)
MIN_DIMENSION: Final[int] = 1

# Допустимые арности для представления tuple ↔ vector
VEC_ARITIES: Final[tuple[int, ...]] = (2, 3, 4)

# Доли полного оборота, в которых окружность возвращает точные координаты
CIRCLE_CANONICAL_TURNS: Final[tuple[float, ...]] = (0.0, 0.25, 0.5, 0.75, 1.0)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParameterShapeError(ValueError):
    """
    Число осей параметра не совпадает с размерностью гомотопии.

    Также возникает, когда проверка контракта вызвана для гомотопии
    неподходящей размерности (например, check2 для 3D гомотопии).
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_dimension(dim: int, name: str = "dim") -> None:
    """
    Валидация размерности пространства параметров.

    Args:
        dim: Число осей
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ParameterShapeError: Если dim не целое или dim < MIN_DIMENSION
    """
    if isinstance(dim, bool) or not isinstance(dim, int):
        raise ParameterShapeError(f"{name} must be an integer, got {dim!r}")

    if dim < MIN_DIMENSION:
        raise ParameterShapeError(f"{name} must be >= {MIN_DIMENSION}, got {dim}")


# =============================================================================
# ПРЕОБРАЗОВАНИЯ ПАРАМЕТРА
# =============================================================================


def _is_axis_sequence(s: Any) -> bool:
    return isinstance(s, Iterable) and isinstance(s, Sized) and not isinstance(s, (str, bytes))


def to_axes(s: Any, dim: int) -> tuple[float, ...]:
    """
    Приведение параметра к кортежу осей.

    Args:
        s: Скаляр (dim == 1) или любая конечная последовательность из dim скаляров
            (list, tuple, массив NumPy и т.п.; строки не принимаются)
        dim: Размерность гомотопии

    Returns:
        Кортеж длины dim

    Raises:
        ParameterShapeError: Если форма параметра не совпадает с dim

    Examples:
        >>> to_axes(0.5, 1)
        (0.5,)
        >>> to_axes([0.0, 1.0], 2)
        (0.0, 1.0)
    """
    if dim == 1:
        if _is_axis_sequence(s) or isinstance(s, (str, bytes)):
            raise ParameterShapeError(f"expected a scalar parameter, got {s!r}")
        return (s,)

    if not _is_axis_sequence(s):
        raise ParameterShapeError(f"expected {dim} parameter axes, got scalar {s!r}")

    if len(s) != dim:
        raise ParameterShapeError(f"expected {dim} parameter axes, got {len(s)}: {s!r}")

    return tuple(s)


def from_axes(axes: Sequence[float]) -> Any:
    """
    Обратное преобразование: одна ось → скаляр, несколько → tuple.

    Examples:
        >>> from_axes((0.5,))
        0.5
        >>> from_axes([0.0, 1.0])
        (0.0, 1.0)
    """
    if len(axes) == 1:
        return axes[0]
    return tuple(axes)


def corner(dim: int, value: float) -> Any:
    """
    Угол куба параметров: все оси равны value.

    corner(dim, PARAM_START) — начало, corner(dim, PARAM_END) — конец.

    Examples:
        >>> corner(1, 0.0)
        0.0
        >>> corner(3, 1.0)
        (1.0, 1.0, 1.0)
    """
    validate_dimension(dim)
    return from_axes((value,) * dim)


def pin_axis(axes: Sequence[float], axis: int, value: float) -> tuple[float, ...]:
    """
    Вставка зафиксированной оси в позицию axis.

    Остальные оси сдвигаются вправо, сохраняя порядок.

    Examples:
        >>> pin_axis((0.3,), 0, 1.0)
        (1.0, 0.3)
        >>> pin_axis((0.3, 0.7), 1, 0.0)
        (0.3, 0.0, 0.7)
    """
    if axis < 0 or axis > len(axes):
        raise ParameterShapeError(f"axis {axis} out of range for {len(axes) + 1} axes")

    return tuple(axes[:axis]) + (value,) + tuple(axes[axis:])


def split_axes(axes: Sequence[float], head: int) -> tuple[Any, Any]:
    """
    Разбиение конкатенированного параметра на префикс и суффикс.

    Каждая часть возвращается в форме, ожидаемой своей гомотопией
    (скаляр для одной оси, tuple для нескольких).

    Args:
        axes: Полный кортеж осей
        head: Число осей в префиксе (1 <= head < len(axes))

    Returns:
        (prefix, suffix)

    Examples:
        >>> split_axes((0.1, 0.2, 0.3), 2)
        ((0.1, 0.2), 0.3)
    """
    if head < MIN_DIMENSION or head >= len(axes):
        raise ParameterShapeError(f"cannot split {len(axes)} axes at {head}")

    return from_axes(axes[:head]), from_axes(axes[head:])


def reverse_axes(axes: Sequence[float]) -> tuple[float, ...]:
    """Обращение направления по каждой оси: s → 1 - s."""
    return tuple(PARAM_END - a for a in axes)
