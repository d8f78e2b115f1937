"""
Boundary Contract Module

Проверка граничного контракта h(x, 0) == f(x), h(x, 1) == g(x)
для гомотопий размерности 1..4 и выше.
"""

from .checkers import (
    check,
    check2,
    check3,
    check4,
    check_n,
    checku,
    checku2,
    checku3,
    checku4,
    checku_n,
)

__all__ = [
    # Explicit input
    "check",
    "check2",
    "check3",
    "check4",
    "check_n",
    # Default input
    "checku",
    "checku2",
    "checku3",
    "checku4",
    "checku_n",
]
