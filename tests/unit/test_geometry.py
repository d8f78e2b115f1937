"""
Tests for Pydantic Geometry Records

Покрывает:
- CircleGeometry: центр и радиус
- AxisPin: фиксация оси (грань/срез)
- TranslationOffset: скаляр или вектор 2/3/4
- Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import AxisPin, CircleGeometry, TranslationOffset


class TestCircleGeometry:
    """Тесты CircleGeometry"""

    def test_valid_circle(self) -> None:
        geometry = CircleGeometry(center=(1.0, 2.0), radius=3.0)
        assert geometry.center == (1.0, 2.0)
        assert geometry.radius == 3.0

    def test_list_center_coerced_to_tuple(self) -> None:
        """Центр, заданный списком, приводится к кортежу"""
        geometry = CircleGeometry(center=[0.0, 0.0], radius=1.0)
        assert geometry.center == (0.0, 0.0)

    def test_center_wrong_arity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CircleGeometry(center=(0.0, 0.0, 0.0), radius=1.0)

    def test_string_numbers_rejected(self) -> None:
        """Строки не приводятся к числам"""
        with pytest.raises(ValidationError):
            CircleGeometry(center=(0.0, 0.0), radius="1.0")
        with pytest.raises(ValidationError):
            CircleGeometry(center=("0", "0"), radius=1.0)

    def test_nan_radius_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CircleGeometry(center=(0.0, 0.0), radius=float("nan"))

    def test_frozen(self) -> None:
        geometry = CircleGeometry(center=(0.0, 0.0), radius=1.0)
        with pytest.raises(ValidationError):
            geometry.radius = 2.0


class TestAxisPin:
    """Тесты AxisPin"""

    def test_boundary_pin(self) -> None:
        """Фиксация на 0.0 или 1.0 — грань"""
        assert AxisPin(axis=0, value=0.0).is_boundary()
        assert AxisPin(axis=3, value=1.0).is_boundary()

    def test_slice_pin(self) -> None:
        """Фиксация внутри интервала — срез"""
        assert not AxisPin(axis=1, value=0.5).is_boundary()

    def test_value_out_of_interval_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AxisPin(axis=0, value=1.5)
        with pytest.raises(ValidationError):
            AxisPin(axis=0, value=-0.25)

    def test_nan_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AxisPin(axis=0, value=float("nan"))

    def test_string_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AxisPin(axis=0, value="0.5")

    def test_non_integer_axis_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AxisPin(axis="1", value=0.0)
        with pytest.raises(ValidationError):
            AxisPin(axis=True, value=0.0)

    def test_negative_axis_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AxisPin(axis=-1, value=0.0)


class TestTranslationOffset:
    """Тесты TranslationOffset"""

    def test_scalar_offset(self) -> None:
        offset = TranslationOffset(delta=3.0)
        assert offset.delta == 3.0
        assert offset.arity is None

    @pytest.mark.parametrize("arity", [2, 3, 4])
    def test_vector_offset(self, arity: int) -> None:
        offset = TranslationOffset(delta=[1.0] * arity)
        assert offset.delta == (1.0,) * arity
        assert offset.arity == arity

    @pytest.mark.parametrize("arity", [1, 5])
    def test_unsupported_arity_rejected(self, arity: int) -> None:
        with pytest.raises(ValidationError, match="offset arity must be one of"):
            TranslationOffset(delta=[1.0] * arity)

    @pytest.mark.parametrize("delta", ["1.0", "12", ["1.0", "2.0"]])
    def test_string_offset_rejected(self, delta: object) -> None:
        """Строка не считается ни скаляром, ни вектором"""
        with pytest.raises(ValidationError):
            TranslationOffset(delta=delta)

    def test_infinite_offset_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TranslationOffset(delta=float("inf"))
