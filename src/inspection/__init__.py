"""Inspection: отчёты и CLI для спецзначений IEEE 754.

Печать классификации и результатов сравнения в stdout.
"""

from .report import (
    ReportConfig,
    build_classification_report,
    build_comparison_report,
    format_classification,
    format_comparison,
    format_float,
    format_json,
    print_classification,
    print_comparison,
)
from .scenarios import DemoResult, run_demo

__all__ = [
    "ReportConfig",
    "build_classification_report",
    "build_comparison_report",
    "format_classification",
    "format_comparison",
    "format_float",
    "format_json",
    "print_classification",
    "print_comparison",
    "DemoResult",
    "run_demo",
]
