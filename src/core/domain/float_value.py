"""
FloatValue: модель значения binary64

Immutable Pydantic модель, хранящая значение вместе с полями его битового
представления и классом. Поля согласованы валидатором модели: нельзя
построить FloatValue, у которого класс или биты не соответствуют value.
"""

from pydantic import BaseModel, Field, model_validator

from src.core.math.float_classifier import (
    EXPONENT_BITS,
    EXPONENT_SPECIAL,
    MANTISSA_BITS,
    MANTISSA_MASK,
    FloatBits,
    FloatClass,
    as_float,
    classify,
    classify_bits,
    decompose,
)


class FloatValue(BaseModel):
    """
    Значение с плавающей точкой двойной точности.

    Immutable модель (frozen=True). Создаётся через from_float(); прямой
    конструктор проверяет согласованность всех полей.
    """

    value: float = Field(..., description="Значение (NaN/Inf допустимы)")
    sign: int = Field(..., ge=0, le=1, description="Знаковый бит")
    exponent: int = Field(
        ..., ge=0, le=EXPONENT_SPECIAL, description="Смещённая экспонента (11 бит)"
    )
    mantissa: int = Field(
        ..., ge=0, le=MANTISSA_MASK, description="Дробная часть мантиссы (52 бита)"
    )
    float_class: FloatClass = Field(..., description="Класс значения")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_consistency(self) -> "FloatValue":
        bits = FloatBits(self.sign, self.exponent, self.mantissa)

        if classify_bits(bits) != self.float_class:
            raise ValueError(
                f"float_class {self.float_class.value} does not match bit fields {bits}"
            )
        if classify(self.value) != self.float_class:
            raise ValueError(
                f"float_class {self.float_class.value} does not match value {self.value!r}"
            )
        # Биты NaN не сравниваются: payload может отличаться между платформами
        if self.float_class != FloatClass.NAN and decompose(self.value) != bits:
            raise ValueError(f"bit fields {bits} do not match value {self.value!r}")

        return self

    @classmethod
    def from_float(cls, value: float) -> "FloatValue":
        """
        Построение модели из float.

        Raises:
            TypeError: Если value не является вещественным числом
        """
        value = as_float(value)
        bits = decompose(value)
        return cls(
            value=value,
            sign=bits.sign,
            exponent=bits.exponent,
            mantissa=bits.mantissa,
            float_class=classify_bits(bits),
        )

    @property
    def bits(self) -> FloatBits:
        return FloatBits(self.sign, self.exponent, self.mantissa)

    @property
    def bits_hex(self) -> str:
        """Битовое представление: 16 hex-цифр."""
        bits = (
            (self.sign << (EXPONENT_BITS + MANTISSA_BITS))
            | (self.exponent << MANTISSA_BITS)
            | self.mantissa
        )
        return f"{bits:016x}"

    @property
    def is_nan(self) -> bool:
        return self.float_class == FloatClass.NAN

    @property
    def is_infinite(self) -> bool:
        return self.float_class in (FloatClass.POS_INF, FloatClass.NEG_INF)

    @property
    def is_finite(self) -> bool:
        return self.float_class == FloatClass.FINITE
