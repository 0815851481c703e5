"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (enum/pattern/min/max)
- Интеграция с Pydantic моделями отчётов
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    ClassificationReportValidator,
    ComparisonReportValidator,
    SchemaLoader,
    report_to_contract,
    validate_classification_report,
    validate_comparison_report,
)
from src.core.domain import FloatValue
from src.core.math.float_classifier import NAN, NEG_INF, POS_INF
from src.inspection.report import build_classification_report, build_comparison_report


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_classification_report():
    """Валидный classification_report (acos(2.0))."""
    return {
        "label": "acos(2.0)",
        "value_text": "NAN",
        "float_class": "NAN",
        "is_nan": True,
        "is_infinite": False,
        "is_finite": False,
        "sign": 0,
        "exponent": 2047,
        "mantissa": 2251799813685248,
        "bits_hex": "7ff8000000000000",
    }


@pytest.fixture
def valid_comparison_report():
    """Валидный comparison_report (1.0 vs -1.0)."""
    return {
        "a_text": "1.0",
        "b_text": "-1.0",
        "equals": False,
        "unordered": False,
        "ordering": 1,
        "reciprocal_a_text": "1.0",
        "reciprocal_b_text": "-1.0",
        "reciprocals_equal": False,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("schema_name", ["classification_report", "comparison_report"])
    def test_schemas_load(self, schema_name: str) -> None:
        """Схемы загружаются и проходят meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["title"] == schema_name
        assert schema["type"] == "object"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("comparison_report") is loader.load_schema("comparison_report")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path) -> None:
        """Невалидная JSON Schema отвергается"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# CLASSIFICATION REPORT
# =============================================================================


class TestClassificationReportContract:
    """Тесты classification_report контракта"""

    def test_valid(self, valid_classification_report) -> None:
        validate_classification_report(valid_classification_report)
        assert ClassificationReportValidator().is_valid(valid_classification_report)

    def test_missing_required(self, valid_classification_report) -> None:
        del valid_classification_report["float_class"]
        with pytest.raises(ValidationError, match="'float_class' is a required property"):
            validate_classification_report(valid_classification_report)

    def test_unknown_class(self, valid_classification_report) -> None:
        valid_classification_report["float_class"] = "ZERO"
        with pytest.raises(ValidationError):
            validate_classification_report(valid_classification_report)

    def test_bad_bits_hex(self, valid_classification_report) -> None:
        valid_classification_report["bits_hex"] = "7FF8000000000000"
        with pytest.raises(ValidationError):
            validate_classification_report(valid_classification_report)

    def test_exponent_out_of_range(self, valid_classification_report) -> None:
        valid_classification_report["exponent"] = 2048
        with pytest.raises(ValidationError):
            validate_classification_report(valid_classification_report)

    def test_extra_property(self, valid_classification_report) -> None:
        valid_classification_report["value"] = 1.0
        assert not ClassificationReportValidator().is_valid(valid_classification_report)

    def test_collects_all_errors(self, valid_classification_report) -> None:
        valid_classification_report["is_nan"] = "yes"
        valid_classification_report["sign"] = 2
        errors = list(ClassificationReportValidator().iter_errors(valid_classification_report))
        assert len(errors) == 2

    @pytest.mark.parametrize("value", [NAN, POS_INF, NEG_INF, 0.0, -0.0, 1.0, -1.0, 5e-324])
    def test_built_reports_comply(self, value: float) -> None:
        """Отчёты, построенные из значений, соответствуют схеме"""
        report = build_classification_report(value)
        validate_classification_report(report.model_dump(mode="json"))


# =============================================================================
# COMPARISON REPORT
# =============================================================================


class TestComparisonReportContract:
    """Тесты comparison_report контракта"""

    def test_valid(self, valid_comparison_report) -> None:
        validate_comparison_report(valid_comparison_report)

    def test_null_ordering_allowed(self, valid_comparison_report) -> None:
        valid_comparison_report["ordering"] = None
        valid_comparison_report["unordered"] = True
        validate_comparison_report(valid_comparison_report)

    def test_ordering_out_of_range(self, valid_comparison_report) -> None:
        valid_comparison_report["ordering"] = -2
        with pytest.raises(ValidationError):
            validate_comparison_report(valid_comparison_report)

    def test_missing_required(self, valid_comparison_report) -> None:
        del valid_comparison_report["reciprocals_equal"]
        assert not ComparisonReportValidator().is_valid(valid_comparison_report)

    @pytest.mark.parametrize(
        "a, b",
        [(1.0, -1.0), (0.0, -0.0), (NAN, NAN), (POS_INF, NEG_INF), (NAN, 1.0)],
    )
    def test_built_reports_comply(self, a: float, b: float) -> None:
        report = build_comparison_report(a, b)
        validate_comparison_report(report.model_dump(mode="json"))


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestReportToContract:
    """Тесты для report_to_contract"""

    def test_classification(self) -> None:
        data = report_to_contract(build_classification_report(NEG_INF, "log(0.0)"))
        assert data["float_class"] == "NEG_INF"
        assert isinstance(data["float_class"], str)
        assert json.loads(json.dumps(data)) == data

    def test_comparison(self) -> None:
        data = report_to_contract(build_comparison_report(0.0, -0.0))
        assert data["equals"] is True
        assert data["reciprocals_equal"] is False

    def test_unregistered_model(self) -> None:
        """Модель без схемы отвергается"""
        with pytest.raises(TypeError, match="no contract registered"):
            report_to_contract(FloatValue.from_float(1.0))

    def test_schema_violation_detected(self) -> None:
        """model_copy(update=...) обходит pydantic, нарушение ловит схема"""
        report = build_classification_report(1.0).model_copy(update={"bits_hex": ""})
        with pytest.raises(ValidationError):
            report_to_contract(report)
