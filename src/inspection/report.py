"""Report: построение и печать отчётов инспекции

Строит ClassificationReport / ComparisonReport и выводит их в
фиксированном человекочитаемом формате (по умолчанию в stdout).

Формат вывода:
    <label> = <value>  [<FloatClass>]
      is_nan=<bool> is_infinite=<bool> is_finite=<bool>
      bits=<hex> sign=<s> exponent=<e> mantissa=<m>

Спецзначения выводятся как NAN, INF, -INF; -0.0 сохраняет знак.

При ReportConfig(json_output=True) каждый отчёт печатается одной строкой
JSON, проверенной против контракта (src/core/contracts).
"""

import json
import logging
import sys
from dataclasses import dataclass
from typing import Final, Optional, TextIO

from src.core.contracts.validators import report_to_contract
from src.core.domain.float_value import FloatValue
from src.core.domain.reports import ClassificationReport, ComparisonReport
from src.core.math.float_classifier import (
    FloatClass,
    as_float,
    classify,
    compare,
    equals,
    is_unordered,
    reciprocal,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

NAN_TEXT: Final[str] = "NAN"
POS_INF_TEXT: Final[str] = "INF"
NEG_INF_TEXT: Final[str] = "-INF"

_SPECIAL_TEXT: Final[dict] = {
    FloatClass.NAN: NAN_TEXT,
    FloatClass.POS_INF: POS_INF_TEXT,
    FloatClass.NEG_INF: NEG_INF_TEXT,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ReportConfig:
    """Конфигурация вывода отчётов.

    Attributes:
        show_bits: печатать строку с битовым представлением
        label_width: минимальная ширина колонки подписи
        json_output: печатать отчёт как JSON вместо текста
    """

    show_bits: bool = True
    label_width: int = 12
    json_output: bool = False

    def __post_init__(self) -> None:
        if self.label_width < 0:
            raise ValueError(f"label_width must be non-negative, got {self.label_width}")


# =============================================================================
# FORMATTING
# =============================================================================


def format_float(value: float) -> str:
    """
    Текстовое представление значения.

    Examples:
        >>> format_float(float('-inf'))
        '-INF'
        >>> format_float(-0.0)
        '-0.0'
    """
    value = as_float(value)
    special = _SPECIAL_TEXT.get(classify(value))
    if special is not None:
        return special
    return repr(value)


def _format_bool(flag: bool) -> str:
    return "true" if flag else "false"


def format_classification(
    report: ClassificationReport, config: Optional[ReportConfig] = None
) -> str:
    """Форматирование ClassificationReport в многострочный текст."""
    config = config or ReportConfig()

    lines = [
        f"{report.label:<{config.label_width}} = {report.value_text}  "
        f"[{report.float_class.value}]",
        f"  is_nan={_format_bool(report.is_nan)} "
        f"is_infinite={_format_bool(report.is_infinite)} "
        f"is_finite={_format_bool(report.is_finite)}",
    ]
    if config.show_bits:
        lines.append(
            f"  bits={report.bits_hex} sign={report.sign} "
            f"exponent={report.exponent} mantissa={report.mantissa}"
        )
    return "\n".join(lines)


def format_comparison(report: ComparisonReport) -> str:
    """Форматирование ComparisonReport в многострочный текст."""
    ordering = "unordered" if report.ordering is None else str(report.ordering)
    return "\n".join(
        [
            f"{report.a_text} == {report.b_text}: {_format_bool(report.equals)} "
            f"(ordering={ordering})",
            f"1/{report.a_text} == 1/{report.b_text}: "
            f"{report.reciprocal_a_text} == {report.reciprocal_b_text}: "
            f"{_format_bool(report.reciprocals_equal)}",
        ]
    )


# =============================================================================
# REPORT BUILDERS
# =============================================================================


def build_classification_report(
    value: float, label: Optional[str] = None
) -> ClassificationReport:
    """
    Классификация значения и сборка отчёта.

    Args:
        value: Инспектируемое значение
        label: Подпись (по умолчанию текстовое представление value)

    Raises:
        TypeError: Если value не является вещественным числом
    """
    fv = FloatValue.from_float(value)
    value_text = format_float(fv.value)

    report = ClassificationReport(
        label=label or value_text,
        value_text=value_text,
        float_class=fv.float_class,
        is_nan=fv.is_nan,
        is_infinite=fv.is_infinite,
        is_finite=fv.is_finite,
        sign=fv.sign,
        exponent=fv.exponent,
        mantissa=fv.mantissa,
        bits_hex=fv.bits_hex,
    )
    logger.debug("classified %s as %s", report.label, report.float_class.value)
    return report


def build_comparison_report(a: float, b: float) -> ComparisonReport:
    """
    Сравнение пары значений и их обратных величин.

    Raises:
        TypeError: Если a или b не является вещественным числом
    """
    recip_a = reciprocal(a)
    recip_b = reciprocal(b)

    report = ComparisonReport(
        a_text=format_float(a),
        b_text=format_float(b),
        equals=equals(a, b),
        unordered=is_unordered(a, b),
        ordering=compare(a, b),
        reciprocal_a_text=format_float(recip_a),
        reciprocal_b_text=format_float(recip_b),
        reciprocals_equal=equals(recip_a, recip_b),
    )
    logger.debug(
        "compared %s and %s: equals=%s reciprocals_equal=%s",
        report.a_text,
        report.b_text,
        report.equals,
        report.reciprocals_equal,
    )
    return report


# =============================================================================
# PRINTING
# =============================================================================


def format_json(report: ClassificationReport | ComparisonReport) -> str:
    """Отчёт одной строкой JSON (после проверки по контракту)."""
    return json.dumps(report_to_contract(report), ensure_ascii=False)


def print_classification(
    value: float,
    label: Optional[str] = None,
    config: Optional[ReportConfig] = None,
    stream: Optional[TextIO] = None,
) -> ClassificationReport:
    """Классификация и печать значения. Возвращает построенный отчёт."""
    config = config or ReportConfig()
    report = build_classification_report(value, label)

    if config.json_output:
        text = format_json(report)
    else:
        text = format_classification(report, config)
    print(text, file=stream or sys.stdout)
    return report


def print_comparison(
    a: float,
    b: float,
    config: Optional[ReportConfig] = None,
    stream: Optional[TextIO] = None,
) -> ComparisonReport:
    """Сравнение и печать пары значений. Возвращает построенный отчёт."""
    config = config or ReportConfig()
    report = build_comparison_report(a, b)

    if config.json_output:
        text = format_json(report)
    else:
        text = format_comparison(report)
    print(text, file=stream or sys.stdout)
    return report
