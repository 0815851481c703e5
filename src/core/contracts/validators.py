"""
JSON Schema Contract Validators

Отчёты инспекции выводятся в JSON (режим --json в CLI). Каждый отчёт перед
выводом проверяется против своей JSON Schema, поэтому потребители вывода
могут полагаться на формат:

- ClassificationReport -> schema/classification_report.json
- ComparisonReport     -> schema/comparison_report.json

NaN и бесконечности в JSON не представимы, поэтому схемы описывают только
текстовые поля значений (value_text, a_text, ...).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from src.core.domain.reports import ClassificationReport, ComparisonReport

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

CLASSIFICATION_SCHEMA: Final[str] = "classification_report"
COMPARISON_SCHEMA: Final[str] = "comparison_report"

# Модель отчёта -> имя схемы
REPORT_SCHEMAS: Final[Dict[type, str]] = {
    ClassificationReport: CLASSIFICATION_SCHEMA,
    ComparisonReport: COMPARISON_SCHEMA,
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение схем из каталога с meta-validation и кэшем по имени.

    По умолчанию используется каталог schema/, поставляемый с пакетом.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не является JSON Schema (Draft 2020-12)
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка JSON-данных отчёта против одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class ClassificationReportValidator(ContractValidator):
    def __init__(self):
        super().__init__(CLASSIFICATION_SCHEMA)


class ComparisonReportValidator(ContractValidator):
    def __init__(self):
        super().__init__(COMPARISON_SCHEMA)


@lru_cache(maxsize=None)
def _validator_for(schema_name: str) -> ContractValidator:
    return ContractValidator(schema_name)


# =============================================================================
# SERIALIZATION
# =============================================================================


def report_to_contract(report: BaseModel) -> Dict[str, Any]:
    """
    JSON-представление отчёта, проверенное против его схемы.

    Args:
        report: ClassificationReport или ComparisonReport

    Returns:
        dict, пригодный для json.dumps

    Raises:
        TypeError: Для модели без зарегистрированной схемы
        ValidationError: Если данные отчёта нарушают схему
    """
    schema_name = REPORT_SCHEMAS.get(type(report))
    if schema_name is None:
        raise TypeError(f"no contract registered for {type(report).__name__}")

    data = report.model_dump(mode="json")
    _validator_for(schema_name).validate(data)
    return data


def validate_classification_report(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют classification_report
    """
    _validator_for(CLASSIFICATION_SCHEMA).validate(data)


def validate_comparison_report(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют comparison_report
    """
    _validator_for(COMPARISON_SCHEMA).validate(data)
