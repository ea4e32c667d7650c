"""
JSON Schema Contract Validators

Структурная проверка входных документов по JSON Schema (Draft 2020-12)
до построения pydantic моделей.

Схемы:
- evidence_document.json (помеченные записи {base, value} + "keys")
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы из schema/.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return schema


class ContractValidator:
    """Валидатор данных против одной схемы."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(load_schema(schema_name))

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение схемы
        """
        self.validator.validate(data)


def error_location(error: ValidationError) -> str:
    """JSON путь нарушения, например "keys/k"; "<root>" для документа целиком."""
    return "/".join(str(p) for p in error.absolute_path) or "<root>"


def validate_evidence_document(data: Any) -> None:
    """
    Валидация структуры входного документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ContractValidator("evidence_document").validate(data)
