"""
Тесты для проверки граничного контракта

Проверяет:
1. Отклонение гомотопии неподходящей размерности
2. Обнаружение нарушенного контракта и запись в лог
3. check_n / checku_n для произвольной размерности
4. Конкурентное вычисление одной гомотопии
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

import pytest

from src.combinators import Face, Product, Square, sweep
from src.core.contracts import (
    check,
    check2,
    check3,
    check4,
    check_n,
    checku,
    checku2,
    checku_n,
)
from src.core.contracts.checkers import _face_name
from src.core.domain import Homotopy
from src.core.math.parameters import ParameterShapeError
from src.primitives import Circle, Lerp

CHECKER_LOGGER = "src.core.contracts.checkers"


@dataclass(frozen=True)
class OvershootingLine(Homotopy):
    """Отрезок, чей h заканчивается не в g: нарушает контракт."""

    def f(self, x: Any) -> float:
        return 0.0

    def g(self, x: Any) -> float:
        return 1.0

    def h(self, x: Any, s: float) -> float:
        return 2.0 * s


@dataclass(frozen=True)
class ShiftedPlane(Homotopy):
    """2D гомотопия, чей f не совпадает с h в начальном углу."""

    @property
    def dim(self) -> int:
        return 2

    def f(self, x: Any) -> float:
        return -1.0

    def g(self, x: Any) -> float:
        return 2.0

    def h(self, x: Any, s: Any) -> float:
        return s[0] + s[1]


class TestDimensionMismatch:
    """Проверка с неподходящей размерностью — ошибка, а не False"""

    @pytest.mark.parametrize("checker", [check2, check3, check4])
    def test_one_axis_homotopy(self, checker) -> None:
        with pytest.raises(ParameterShapeError, match="expects a"):
            checker(Lerp(0.0, 1.0), ())

    def test_square_to_one_axis_checker(self) -> None:
        square = Square(Lerp(0.0, 1.0), Lerp(0.0, 1.0))
        with pytest.raises(ParameterShapeError, match="checku expects a 1-axis homotopy, got 2"):
            checku(square)


class TestBrokenContract:
    """Нарушенный контракт обнаруживается и логируется"""

    def test_end_corner_violation(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=CHECKER_LOGGER):
            assert not checku(OvershootingLine())
        assert "end corner" in caplog.text

    def test_start_corner_violation(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=CHECKER_LOGGER):
            assert not check2(ShiftedPlane(), ())
        assert "start corner" in caplog.text

    def test_valid_homotopy_logs_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=CHECKER_LOGGER):
            assert check(Lerp(0.0, 1.0), ())
        assert caplog.records == []

    def test_check_n_detects_violation(self) -> None:
        assert not check_n(ShiftedPlane(), ())


class TestFaceNames:
    """Имена граней в сообщениях лога"""

    def test_boundary_faces_named(self) -> None:
        square = Square(Lerp(0.0, 1.0), Lerp(0.0, 1.0))
        assert _face_name(Face(square, 0, 0.0)) == "left"
        assert _face_name(Face(square, 1, 1.0)) == "bottom"

    def test_slices_and_high_axes_use_position(self) -> None:
        square = Square(Lerp(0.0, 1.0), Lerp(0.0, 1.0))
        product = Product(Lerp(0.0, 1.0) for _ in range(5))
        assert _face_name(Face(square, 0, 0.5)) == "axis0=0.5"
        assert _face_name(Face(product, 4, 1.0)) == "axis4=1.0"


class TestAnyDimension:
    """check_n и checku_n"""

    def test_five_axis_product(self) -> None:
        product = Product(Lerp(float(k), float(k + 1)) for k in range(5))
        assert checku_n(product)

    def test_matches_named_checkers(self) -> None:
        square = Square(Lerp(1.0, 5.0), Lerp(11.0, 15.0))
        assert check_n(square, ((), ())) == check2(square, ((), ()))
        assert checku_n(Lerp(0.0, 1.0)) == checku(Lerp(0.0, 1.0))


class TestConcurrentEvaluation:
    """Одна гомотопия вычисляется из нескольких потоков без синхронизации"""

    def test_threads_match_sequential(self) -> None:
        inner = Circle(center=(0.0, 0.0), radius=1.0)
        outer = Circle(center=(0.0, 0.0), radius=2.0)
        swept = sweep(inner, outer)
        params = [[i / 16.0, j / 16.0] for i in range(17) for j in range(17)]

        expected = [swept.hu(s) for s in params]
        with ThreadPoolExecutor(max_workers=4) as pool:
            actual = list(pool.map(swept.hu, params))

        assert actual == expected
        assert checku2(swept)
