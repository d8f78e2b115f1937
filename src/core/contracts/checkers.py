"""
Boundary Contract Checkers

Проверка граничного контракта гомотопии:

    h(x, all-zero) == f(x)
    h(x, all-one)  == g(x)

Для N-мерной гомотопии (N >= 2) контракт дополнительно проверяется
рекурсивно на каждой паре противоположных граней (left/right, top/bottom,
front/back, past/future), каждая из которых — (N-1)-мерная гомотопия.

Сравнение точное (==), без толерантности. Если нужна приближённая
проверка, её реализует вызывающий код.

Функции:
- check, check2, check3, check4 — для заданного входа x
- checku, checku2, checku3, checku4 — для входа по умолчанию
- check_n, checku_n — для гомотопии любой размерности
"""

import logging
from typing import Any

from src.combinators.sides import Face
from src.core.domain.homotopy import Homotopy
from src.core.math.parameters import PARAM_END, PARAM_START, ParameterShapeError, corner

logger = logging.getLogger(__name__)

_FACE_NAMES = (
    ("left", "right"),
    ("top", "bottom"),
    ("front", "back"),
    ("past", "future"),
)


def _face_name(face: Face) -> str:
    if face.pin.is_boundary() and face.axis < len(_FACE_NAMES):
        return _FACE_NAMES[face.axis][0 if face.value == PARAM_START else 1]
    return f"axis{face.axis}={face.value}"


def _require_dim(h: Homotopy, dim: int, checker: str) -> None:
    if h.dim != dim:
        raise ParameterShapeError(f"{checker} expects a {dim}-axis homotopy, got {h.dim}")


# =============================================================================
# RECURSIVE CHECK
# =============================================================================


def _check_corners(h: Homotopy, x: Any) -> bool:
    if h.h(x, corner(h.dim, PARAM_START)) != h.f(x):
        logger.debug("boundary contract failed at start corner of %r", h)
        return False

    if h.h(x, corner(h.dim, PARAM_END)) != h.g(x):
        logger.debug("boundary contract failed at end corner of %r", h)
        return False

    return True


def _check_recursive(h: Homotopy, x: Any) -> bool:
    if not _check_corners(h, x):
        return False

    if h.dim == 1:
        return True

    for axis in range(h.dim):
        for value in (PARAM_START, PARAM_END):
            face = Face(h, axis, value)
            if not _check_recursive(face, x):
                logger.debug(
                    "boundary contract failed on %s face of %d-axis homotopy",
                    _face_name(face),
                    h.dim,
                )
                return False

    return True


def check_n(h: Homotopy, x: Any) -> bool:
    """
    Проверка контракта для гомотопии любой размерности.

    Args:
        h: Гомотопия
        x: Вход

    Returns:
        True если контракт выполняется в углах и на всех гранях
    """
    return _check_recursive(h, x)


def checku_n(h: Homotopy) -> bool:
    """Проверка контракта любой размерности для входа по умолчанию."""
    return _check_recursive(h, h.default_input)


# =============================================================================
# NAMED CHECKERS
# =============================================================================


def check(h: Homotopy, x: Any) -> bool:
    """
    Проверка контракта одномерной гомотопии для входа x.

    Raises:
        ParameterShapeError: Если h.dim != 1
    """
    _require_dim(h, 1, "check")
    return _check_recursive(h, x)


def checku(h: Homotopy) -> bool:
    """Проверка контракта одномерной гомотопии для входа по умолчанию."""
    _require_dim(h, 1, "checku")
    return _check_recursive(h, h.default_input)


def check2(h: Homotopy, x: Any) -> bool:
    """Проверка контракта 2D гомотопии: углы + left/right/top/bottom."""
    _require_dim(h, 2, "check2")
    return _check_recursive(h, x)


def checku2(h: Homotopy) -> bool:
    _require_dim(h, 2, "checku2")
    return _check_recursive(h, h.default_input)


def check3(h: Homotopy, x: Any) -> bool:
    """Проверка контракта 3D гомотопии: углы + шесть граней (check2 на каждой)."""
    _require_dim(h, 3, "check3")
    return _check_recursive(h, x)


def checku3(h: Homotopy) -> bool:
    _require_dim(h, 3, "checku3")
    return _check_recursive(h, h.default_input)


def check4(h: Homotopy, x: Any) -> bool:
    """Проверка контракта 4D гомотопии: углы + восемь граней (check3 на каждой)."""
    _require_dim(h, 4, "check4")
    return _check_recursive(h, x)


def checku4(h: Homotopy) -> bool:
    _require_dim(h, 4, "checku4")
    return _check_recursive(h, h.default_input)
