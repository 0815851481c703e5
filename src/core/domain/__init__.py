"""
Domain models and value objects.

Contains the FloatValue entity and the inspection report models.
"""

from src.core.domain.float_value import FloatValue
from src.core.domain.reports import ClassificationReport, ComparisonReport
from src.core.math.float_classifier import FloatBits, FloatClass

__all__ = [
    # FloatValue model
    "FloatValue",
    "FloatBits",
    "FloatClass",
    # Reports
    "ClassificationReport",
    "ComparisonReport",
]
