"""
Geometry — Валидируемые параметры примитивов и комбинаторов

Immutable Pydantic модели для числовых параметров, которые задаются
пользователем при построении дерева комбинаторов:
- CircleGeometry: центр и радиус окружности
- AxisPin: фиксация оси N-мерной гомотопии (грань или срез)
- TranslationOffset: смещение сдвига (скаляр или вектор 2/3/4)

Числа принимаются строго (StrictFloat/StrictInt): строки вроде "0.5"
и bool отклоняются, а не приводятся. Последовательность (список или
кортеж) приводится к кортежу.

Невалидные параметры отклоняются при построении (ValidationError),
а не при вычислении гомотопии. Владелец записи хранит уже
провалидированные значения.
"""

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator

from src.core.math.parameters import PARAM_END, PARAM_START, VEC_ARITIES


# =============================================================================
# CIRCLE
# =============================================================================


class CircleGeometry(BaseModel):
    """Центр и радиус окружности."""

    center: tuple[StrictFloat, StrictFloat] = Field(..., description="Центр окружности (x, y)")
    radius: StrictFloat = Field(..., description="Радиус окружности")

    model_config = {"frozen": True, "allow_inf_nan": False}


# =============================================================================
# AXIS PIN
# =============================================================================


class AxisPin(BaseModel):
    """
    Фиксация одной оси пространства параметров.

    Грань фиксирует ось на границе (0.0 или 1.0),
    срез — на произвольном значении из [0, 1].
    """

    axis: StrictInt = Field(..., ge=0, description="Индекс фиксируемой оси")
    value: StrictFloat = Field(
        ..., ge=PARAM_START, le=PARAM_END, description="Значение оси в [0, 1]"
    )

    model_config = {"frozen": True, "allow_inf_nan": False}

    def is_boundary(self) -> bool:
        """True если ось зафиксирована на границе (грань, а не срез)."""
        return self.value in (PARAM_START, PARAM_END)


# =============================================================================
# TRANSLATION
# =============================================================================


class TranslationOffset(BaseModel):
    """Смещение сдвига: скаляр или вектор из 2/3/4 компонент."""

    delta: StrictFloat | tuple[StrictFloat, ...] = Field(..., description="Величина смещения")

    model_config = {"frozen": True, "allow_inf_nan": False}

    @field_validator("delta")
    @classmethod
    def validate_arity(cls, v: float | tuple[float, ...]) -> float | tuple[float, ...]:
        """Векторное смещение допускается только арностей 2, 3, 4."""
        if isinstance(v, tuple) and len(v) not in VEC_ARITIES:
            raise ValueError(f"offset arity must be one of {VEC_ARITIES}, got {len(v)}")
        return v

    @property
    def arity(self) -> int | None:
        """Число компонент векторного смещения (None для скаляра)."""
        if isinstance(self.delta, tuple):
            return len(self.delta)
        return None
