"""Демонстрационные сценарии спецзначений IEEE 754.

- acos(2.0): аргумент вне [-1, 1], результат NaN
- log(0.0): результат -Inf
- 1.0 и -1.0: конечные значения
- 1/1.0 vs 1/-1.0 и 1/+0.0 vs 1/-0.0: обратные величины не равны
"""

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from src.core.domain.reports import ClassificationReport, ComparisonReport
from src.core.math.float_classifier import total_acos, total_log
from src.inspection.report import ReportConfig, print_classification, print_comparison

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValueScenario:
    """Значение, полученное вычислением выражения."""

    label: str
    compute: Callable[[], float]


@dataclass(frozen=True)
class ComparisonScenario:
    a: float
    b: float


@dataclass(frozen=True)
class DemoResult:
    classifications: tuple[ClassificationReport, ...]
    comparisons: tuple[ComparisonReport, ...]


VALUE_SCENARIOS: tuple[ValueScenario, ...] = (
    ValueScenario("acos(2.0)", lambda: total_acos(2.0)),
    ValueScenario("log(0.0)", lambda: total_log(0.0)),
    ValueScenario("1.0", lambda: 1.0),
    ValueScenario("-1.0", lambda: -1.0),
)

COMPARISON_SCENARIOS: tuple[ComparisonScenario, ...] = (
    ComparisonScenario(1.0, -1.0),
    ComparisonScenario(0.0, -0.0),
)


def run_demo(
    config: Optional[ReportConfig] = None,
    stream: Optional[TextIO] = None,
) -> DemoResult:
    """Печать всех сценариев. Возвращает построенные отчёты."""
    stream = stream or sys.stdout

    classifications = []
    for scenario in VALUE_SCENARIOS:
        logger.debug("running scenario %s", scenario.label)
        classifications.append(
            print_classification(scenario.compute(), scenario.label, config, stream)
        )

    comparisons = [
        print_comparison(scenario.a, scenario.b, config, stream)
        for scenario in COMPARISON_SCENARIOS
    ]

    return DemoResult(
        classifications=tuple(classifications),
        comparisons=tuple(comparisons),
    )
