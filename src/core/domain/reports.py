"""
Reports: результаты инспекции значений

Immutable Pydantic модели, описывающие результат классификации одного
значения и результат сравнения пары значений.
Полная совместимость с JSON Schema (src/core/contracts/schema/).

Значения хранятся в текстовом виде (NAN, INF, -INF, repr для конечных),
поскольку JSON не представляет NaN и бесконечности.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.math.float_classifier import EXPONENT_SPECIAL, MANTISSA_MASK, FloatClass


# =============================================================================
# CLASSIFICATION
# =============================================================================


class ClassificationReport(BaseModel):
    """
    Результат классификации одного значения.

    Содержит:
    - label, value_text: что инспектировалось
    - float_class и предикаты is_nan / is_infinite / is_finite
    - поля битового представления
    """

    label: str = Field(..., min_length=1, description="Подпись значения")
    value_text: str = Field(..., min_length=1, description="Значение в текстовом виде")
    float_class: FloatClass = Field(..., description="Класс значения")

    is_nan: bool
    is_infinite: bool
    is_finite: bool

    sign: int = Field(..., ge=0, le=1)
    exponent: int = Field(..., ge=0, le=EXPONENT_SPECIAL)
    mantissa: int = Field(..., ge=0, le=MANTISSA_MASK)
    bits_hex: str = Field(..., pattern="^[0-9a-f]{16}$", description="64 бита в hex")

    model_config = {"frozen": True}


# =============================================================================
# COMPARISON
# =============================================================================


class ComparisonReport(BaseModel):
    """
    Результат сравнения пары значений и их обратных величин.

    ordering = None означает неупорядоченную пару (хотя бы один NaN).
    """

    a_text: str = Field(..., min_length=1)
    b_text: str = Field(..., min_length=1)

    equals: bool = Field(..., description="a == b по IEEE 754")
    unordered: bool = Field(..., description="Хотя бы один операнд NaN")
    ordering: Optional[int] = Field(None, ge=-1, le=1, description="-1/0/+1 или None")

    reciprocal_a_text: str = Field(..., min_length=1)
    reciprocal_b_text: str = Field(..., min_length=1)
    reciprocals_equal: bool = Field(..., description="1/a == 1/b по IEEE 754")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_ordering(self) -> "ComparisonReport":
        if self.unordered != (self.ordering is None):
            raise ValueError(
                f"unordered={self.unordered} is inconsistent with ordering={self.ordering}"
            )
        return self
