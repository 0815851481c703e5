"""
Contract Validation Module

JSON Schema контракты для отчётов инспекции значений с плавающей точкой.
"""

from .validators import (
    REPORT_SCHEMAS,
    ClassificationReportValidator,
    ComparisonReportValidator,
    ContractValidator,
    SchemaLoader,
    report_to_contract,
    validate_classification_report,
    validate_comparison_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ClassificationReportValidator",
    "ComparisonReportValidator",
    # Serialization
    "REPORT_SCHEMAS",
    "report_to_contract",
    # Functions
    "validate_classification_report",
    "validate_comparison_report",
]
