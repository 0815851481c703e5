"""
Core math modules

Классификация и тотальная арифметика для спецзначений IEEE 754.
"""

from src.core.math.float_classifier import (
    # IEEE 754 constants
    EXPONENT_BIAS,
    EXPONENT_BITS,
    EXPONENT_SPECIAL,
    MANTISSA_BITS,
    MANTISSA_MASK,
    NAN,
    NEG_INF,
    POS_INF,
    SIGN_BITS,
    # Types
    FloatBits,
    FloatClass,
    # Bit representation
    as_float,
    bits_to_float,
    classify_bits,
    decompose,
    float_to_bits,
    # Classification
    classify,
    is_finite,
    is_infinite,
    is_nan,
    is_neg_inf,
    is_negative_zero,
    is_pos_inf,
    # Comparisons
    compare,
    equals,
    is_unordered,
    # Total operations
    reciprocal,
    total_acos,
    total_divide,
    total_log,
)

__all__ = [
    # Float Classifier: constants
    "EXPONENT_BIAS",
    "EXPONENT_BITS",
    "EXPONENT_SPECIAL",
    "MANTISSA_BITS",
    "MANTISSA_MASK",
    "NAN",
    "NEG_INF",
    "POS_INF",
    "SIGN_BITS",
    # Float Classifier: types
    "FloatBits",
    "FloatClass",
    # Float Classifier: bit representation
    "as_float",
    "bits_to_float",
    "classify_bits",
    "decompose",
    "float_to_bits",
    # Float Classifier: classification
    "classify",
    "is_finite",
    "is_infinite",
    "is_nan",
    "is_neg_inf",
    "is_negative_zero",
    "is_pos_inf",
    # Float Classifier: comparisons
    "compare",
    "equals",
    "is_unordered",
    # Float Classifier: total operations
    "reciprocal",
    "total_acos",
    "total_divide",
    "total_log",
]
