"""
JSON Schema контракты ответов ledger

Схемы поставляются в schema/ рядом с этим модулем:
- asset_info.json (get_asset_info)
- listing.json (get_listing)
- compliance_record.json (get_compliance_record)
- call_result.json (конверт любого вызова)

OutputContracts проверяет CallResult целиком: конверт и, если значение —
доменная модель, её JSON представление.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from rwa_ledger.core.domain.asset import Asset
from rwa_ledger.core.domain.compliance import ComplianceRecord
from rwa_ledger.core.domain.listing import Listing


CALL_RESULT_SCHEMA = "call_result"

# Модель значения → схема её JSON представления
MODEL_SCHEMAS: Dict[type, str] = {
    Asset: "asset_info",
    Listing: "listing",
    ComplianceRecord: "compliance_record",
}


class SchemaLoader:
    """Загрузка и кэш JSON Schema файлов (Draft 2020-12)."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения.

        Raises:
            FileNotFoundError: файла нет
            ValueError: схема не проходит meta-validation
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


_DEFAULT_LOADER: Optional[SchemaLoader] = None


def default_loader() -> SchemaLoader:
    """Общий загрузчик схем пакета (создаётся при первом обращении)."""
    global _DEFAULT_LOADER
    if _DEFAULT_LOADER is None:
        _DEFAULT_LOADER = SchemaLoader()
    return _DEFAULT_LOADER


class ContractValidator:
    """Проверка JSON данных против одной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self._validator = Draft202012Validator(
            (loader or default_loader()).load_schema(schema_name)
        )

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: данные не соответствуют схеме
        """
        self._validator.validate(data)


class OutputContracts:
    """
    Контракты ответов engine.

    Используется при LedgerConfig.validate_outputs: нарушение контракта —
    ошибка программирования, поэтому ValidationError пробрасывается.
    """

    def __init__(self, loader: Optional[SchemaLoader] = None):
        self._envelope = ContractValidator(CALL_RESULT_SCHEMA, loader)
        self._values = {
            model: ContractValidator(name, loader) for model, name in MODEL_SCHEMAS.items()
        }

    def validate_value(self, value: Any) -> None:
        """JSON представление доменной модели; прочие значения не проверяются."""
        if isinstance(value, BaseModel):
            validator = self._values.get(type(value))
            if validator is not None:
                validator.validate(value.model_dump(mode="json"))

    def validate_envelope(self, data: Dict[str, Any]) -> None:
        """JSON представление CallResult (to_dict())."""
        self._envelope.validate(data)
