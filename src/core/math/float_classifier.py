"""
Float Classifier: IEEE 754 special values

Модуль классифицирует значения binary64 (Python float) и вычисляет
"неопределённые" математические операции как тотальные функции:
- Классификация: NaN / +Inf / -Inf / finite
- Разбор битового представления (sign, exponent, mantissa)
- Сравнения по правилам IEEE 754 (NaN неупорядочен и не равен ничему)
- Деление, acos и log без исключений: результат кодируется спецзначением

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое значение относится ровно к одному FloatClass
2. classify(x) и classify_bits(decompose(x)) всегда совпадают
3. Ни одна операция не выбрасывает исключение для float входа
4. Знак нуля сохраняется: 1/+0.0 = +Inf, 1/-0.0 = -Inf
"""

import math
import numbers
import struct
from enum import Enum
from typing import Final, NamedTuple

# =============================================================================
# КОНСТАНТЫ IEEE 754 (binary64)
# =============================================================================

NAN: Final[float] = float("nan")
POS_INF: Final[float] = float("inf")
NEG_INF: Final[float] = float("-inf")

SIGN_BITS: Final[int] = 1
EXPONENT_BITS: Final[int] = 11
MANTISSA_BITS: Final[int] = 52

# Смещение экспоненты для нормализованных чисел
EXPONENT_BIAS: Final[int] = 1023

# Экспонента из одних единиц: Inf (mantissa == 0) или NaN (mantissa != 0)
EXPONENT_SPECIAL: Final[int] = (1 << EXPONENT_BITS) - 1

MANTISSA_MASK: Final[int] = (1 << MANTISSA_BITS) - 1


# =============================================================================
# TYPES
# =============================================================================


class FloatClass(str, Enum):
    """Класс значения с плавающей точкой."""

    NAN = "NAN"
    POS_INF = "POS_INF"
    NEG_INF = "NEG_INF"
    FINITE = "FINITE"


class FloatBits(NamedTuple):
    """
    Поля битового представления binary64.

    Attributes:
        sign: Знаковый бит (0 или 1)
        exponent: Смещённая экспонента (0..2047)
        mantissa: Дробная часть мантиссы без неявной единицы (52 бита)
    """

    sign: int
    exponent: int
    mantissa: int


# =============================================================================
# ПРИВЕДЕНИЕ ВХОДА
# =============================================================================


def as_float(value: float) -> float:
    """
    Приведение входа к float.

    Принимает float и любые numbers.Real (int, Fraction, Decimal-совместимые
    через float()). bool отвергается: True/False не являются числами в
    контексте классификации.

    Значения вне диапазона binary64 (большие int, Fraction) округляются
    до бесконечности со знаком value, как при переполнении в IEEE 754.

    Raises:
        TypeError: Если value не является вещественным числом

    Examples:
        >>> as_float(10**400)
        inf
        >>> as_float(-10**400)
        -inf
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        return POS_INF if value > 0 else NEG_INF


# =============================================================================
# БИТОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def float_to_bits(value: float) -> int:
    """
    64-битное целое с битовым представлением value (big-endian порядок полей).

    Examples:
        >>> hex(float_to_bits(1.0))
        '0x3ff0000000000000'
        >>> hex(float_to_bits(-0.0))
        '0x8000000000000000'
    """
    return struct.unpack(">Q", struct.pack(">d", as_float(value)))[0]


def bits_to_float(bits: int) -> float:
    """
    Обратное преобразование: 64-битное целое -> float.

    Raises:
        ValueError: Если bits вне диапазона [0, 2**64)
    """
    if not 0 <= bits < (1 << 64):
        raise ValueError(f"bits must fit in 64 bits, got {bits}")
    return struct.unpack(">d", struct.pack(">Q", bits))[0]


def decompose(value: float) -> FloatBits:
    """
    Разбор float на поля sign / exponent / mantissa.

    Examples:
        >>> decompose(1.0)
        FloatBits(sign=0, exponent=1023, mantissa=0)
        >>> decompose(float('-inf'))
        FloatBits(sign=1, exponent=2047, mantissa=0)
    """
    bits = float_to_bits(value)
    return FloatBits(
        sign=bits >> (EXPONENT_BITS + MANTISSA_BITS),
        exponent=(bits >> MANTISSA_BITS) & EXPONENT_SPECIAL,
        mantissa=bits & MANTISSA_MASK,
    )


def classify_bits(bits: FloatBits) -> FloatClass:
    """
    Классификация по полям битового представления.

    Экспонента из одних единиц: NaN при ненулевой мантиссе, иначе
    бесконечность со знаком sign. Всё остальное конечно (включая
    субнормальные числа и оба нуля).
    """
    if bits.exponent != EXPONENT_SPECIAL:
        return FloatClass.FINITE
    if bits.mantissa != 0:
        return FloatClass.NAN
    return FloatClass.NEG_INF if bits.sign else FloatClass.POS_INF


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def is_nan(value: float) -> bool:
    """
    Проверка на NaN.

    NaN неупорядочен и не равен ничему, включая себя, поэтому проверка
    через == невозможна.
    """
    return math.isnan(as_float(value))


def is_infinite(value: float) -> bool:
    """True если value равно +Inf или -Inf."""
    return math.isinf(as_float(value))


def is_finite(value: float) -> bool:
    """True если value не NaN и не бесконечность."""
    return math.isfinite(as_float(value))


def is_pos_inf(value: float) -> bool:
    return as_float(value) == POS_INF


def is_neg_inf(value: float) -> bool:
    return as_float(value) == NEG_INF


def is_negative_zero(value: float) -> bool:
    """
    Проверка на -0.0.

    -0.0 == 0.0 по IEEE 754, различить их можно только по знаковому биту.
    """
    value = as_float(value)
    return value == 0.0 and math.copysign(1.0, value) < 0


def classify(value: float) -> FloatClass:
    """
    Классификация значения.

    Returns:
        FloatClass.NAN / POS_INF / NEG_INF / FINITE

    Examples:
        >>> classify(float('nan'))
        <FloatClass.NAN: 'NAN'>
        >>> classify(-0.0)
        <FloatClass.FINITE: 'FINITE'>
    """
    value = as_float(value)
    if math.isnan(value):
        return FloatClass.NAN
    if math.isinf(value):
        return FloatClass.POS_INF if value > 0 else FloatClass.NEG_INF
    return FloatClass.FINITE


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def equals(a: float, b: float) -> bool:
    """
    Равенство по IEEE 754.

    - NaN не равен ничему, включая себя
    - +Inf == +Inf, -Inf == -Inf, +Inf != -Inf
    - +0.0 == -0.0

    Examples:
        >>> equals(float('nan'), float('nan'))
        False
        >>> equals(0.0, -0.0)
        True
    """
    return as_float(a) == as_float(b)


def is_unordered(a: float, b: float) -> bool:
    """True если хотя бы один операнд NaN (пара неупорядочена)."""
    return math.isnan(as_float(a)) or math.isnan(as_float(b))


def compare(a: float, b: float) -> int | None:
    """
    Упорядочивающее сравнение по IEEE 754.

    Returns:
        -1 если a < b
         0 если a == b (включая +0.0 и -0.0)
        +1 если a > b
        None если пара неупорядочена (NaN)
    """
    a = as_float(a)
    b = as_float(b)

    if is_unordered(a, b):
        return None
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


# =============================================================================
# ТОТАЛЬНЫЕ ОПЕРАЦИИ
# =============================================================================


def total_divide(a: float, b: float) -> float:
    """
    Деление a / b по IEEE 754 без ZeroDivisionError.

    Python float выбрасывает ZeroDivisionError при делении на ноль; здесь
    результат кодируется спецзначением:
    - nonzero / ±0.0: бесконечность со знаком sign(a) xor sign(b)
    - 0 / 0, NaN / 0: NaN
    - остальные случаи: обычное деление (Inf/Inf = NaN, x/Inf = ±0.0)

    Examples:
        >>> total_divide(1.0, -0.0)
        -inf
        >>> total_divide(0.0, 0.0)
        nan
    """
    a = as_float(a)
    b = as_float(b)

    if b == 0.0:
        if math.isnan(a) or a == 0.0:
            return NAN
        return math.copysign(POS_INF, a) * math.copysign(1.0, b)

    return a / b


def reciprocal(value: float) -> float:
    """
    Обратное значение 1 / value.

    Знак нуля определяет знак бесконечности:
        >>> reciprocal(0.0)
        inf
        >>> reciprocal(-0.0)
        -inf
        >>> reciprocal(float('-inf'))
        -0.0
    """
    return total_divide(1.0, value)


def total_acos(value: float) -> float:
    """
    arccos без ValueError.

    Для |value| > 1 (включая ±Inf) результат не определён и равен NaN.

    Examples:
        >>> total_acos(1.0)
        0.0
        >>> total_acos(2.0)
        nan
    """
    value = as_float(value)
    if math.isnan(value) or abs(value) > 1.0:
        return NAN
    return math.acos(value)


def total_log(value: float) -> float:
    """
    Натуральный логарифм без ValueError.

    - log(±0.0) = -Inf
    - log(x < 0) = NaN (включая -Inf)
    - log(+Inf) = +Inf
    - log(NaN) = NaN

    Examples:
        >>> total_log(0.0)
        -inf
        >>> total_log(-1.0)
        nan
    """
    value = as_float(value)
    if math.isnan(value):
        return NAN
    if value == 0.0:
        return NEG_INF
    if value < 0.0:
        return NAN
    return math.log(value)
