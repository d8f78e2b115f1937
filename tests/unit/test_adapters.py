"""
Тесты для адаптеров формы (AsVec, Inverse, Map)

Проверяет:
1. Обращение направления по каждой оси и инволюцию
2. Отображение выхода чистой функцией
3. AsVec: кортежи арности 2/3/4 ↔ списки
"""

import pytest

from src.combinators import AsVec, Inverse, Map, Product, Square
from src.core.contracts import checku, checku2
from src.core.domain import HomotopyShapeError
from src.primitives import Circle, Lerp


# =============================================================================
# INVERSE
# =============================================================================


class TestInverse:
    """Тесты Inverse"""

    def test_swaps_endpoints(self) -> None:
        inverse = Lerp(2.0, 4.0).inverse()
        assert inverse.f(()) == 4.0
        assert inverse.g(()) == 2.0
        assert checku(inverse)

    def test_reverses_parameter(self) -> None:
        inverse = Inverse(Lerp(2.0, 4.0))
        assert inverse.hu(0.0) == 4.0
        assert inverse.hu(0.25) == 3.5
        assert inverse.hu(1.0) == 2.0

    def test_reverses_every_axis(self) -> None:
        square = Square(Lerp(1.0, 5.0), Lerp(11.0, 15.0))
        inverse = square.inverse()
        assert inverse.dim == 2
        assert inverse.hu([0.25, 1.0]) == (4.0, 11.0)
        assert checku2(inverse)

    def test_fluent_inverse_is_involution(self) -> None:
        lerp = Lerp(2.0, 4.0)
        assert lerp.inverse().inverse() is lerp

    def test_nested_inverse_matches_inner(self) -> None:
        lerp = Lerp(2.0, 4.0)
        twice = Inverse(Inverse(lerp))
        for s in (0.0, 0.25, 0.5, 0.75, 1.0):
            assert twice.hu(s) == lerp.hu(s)

    def test_non_homotopy_rejected(self) -> None:
        with pytest.raises(HomotopyShapeError):
            Inverse(None)


# =============================================================================
# MAP
# =============================================================================


class TestMap:
    """Тесты Map"""

    def test_transforms_every_point(self) -> None:
        scaled = Lerp(1.0, 2.0).map(lambda v: v * 10.0)
        assert scaled.f(()) == 10.0
        assert scaled.g(()) == 20.0
        assert scaled.hu(0.5) == 15.0
        assert checku(scaled)

    def test_preserves_dimension(self) -> None:
        square = Square(Lerp(1.0, 5.0), Lerp(11.0, 15.0))
        summed = Map(square, sum)
        assert summed.dim == 2
        assert summed.hu([0.5, 0.5]) == 16.0
        assert checku2(summed)

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError, match="transform must be callable"):
            Map(Lerp(0.0, 1.0), "double")


# =============================================================================
# AS VEC
# =============================================================================


class TestAsVec:
    """Тесты AsVec"""

    def test_square_as_vec(self) -> None:
        vec = Square(Lerp(1.0, 5.0), Lerp(11.0, 15.0)).as_vec()
        assert vec.default_input == [(), ()]
        assert vec.f([(), ()]) == [1.0, 11.0]
        assert vec.g([(), ()]) == [5.0, 15.0]
        assert vec.hu([0.5, 0.5]) == [3.0, 13.0]
        assert checku2(vec)

    def test_circles_as_vec(self) -> None:
        """Квадрат двух окружностей как вектор точек"""
        inner = Circle(center=(0.0, 0.0), radius=1.0)
        outer = Circle(center=(0.0, 0.0), radius=2.0)
        vec = Square(inner, outer).as_vec()
        assert checku2(vec)
        assert vec.hu([0.0, 0.0]) == [[1.0, 0.0], [2.0, 0.0]]
        assert vec.hu([0.5, 0.25]) == [[-1.0, 0.0], [0.0, 2.0]]

    def test_values_unchanged(self) -> None:
        square = Square(Lerp(1.0, 5.0), Lerp(11.0, 15.0))
        vec = AsVec(square)
        for s in ([0.0, 0.0], [0.25, 0.75], [1.0, 0.5]):
            assert vec.hu(s) == list(square.hu(s))

    def test_non_tuple_input_rejected(self) -> None:
        with pytest.raises(HomotopyShapeError, match="as_vec requires a tuple input"):
            Lerp(0.0, 1.0).as_vec()

    def test_unsupported_arity_rejected(self) -> None:
        product = Product(Lerp(0.0, 1.0) for _ in range(5))
        with pytest.raises(HomotopyShapeError):
            product.as_vec()
