"""
JSON Schema Contract Validators

Validation of JSON payloads exchanged with the integer speller against the
formal JSON Schema contracts. Uses the jsonschema library (Draft 2020-12).

Schemas:
- schema/spelling_request.json (scalar integer or digit sequence)
- schema/spelling_result.json (SpellingResult.to_dict())
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator


# Schemas are package data (see pyproject.toml)
DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Schemas ship inside the package, in schema/ next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'spelling_request')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid Draft 2020-12 schema
            json.JSONDecodeError: If the file is not valid JSON
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика, создаётся при первом обращении
_SCHEMA_LOADER: SchemaLoader | None = None


def get_schema_loader() -> SchemaLoader:
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps a Draft 2020-12 validator for one named schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over every validation error (no exception)."""
        return self.validator.iter_errors(data)


class SpellingRequestValidator(ContractValidator):
    """Validator for the spelling_request contract."""

    def __init__(self):
        super().__init__("spelling_request")


class SpellingResultValidator(ContractValidator):
    """Validator for the spelling_result contract."""

    def __init__(self):
        super().__init__("spelling_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_spelling_request(data: Dict[str, Any]) -> None:
    """
    Валидация spelling_request данных.

    Raises:
        ValidationError: If data does not match the schema
    """
    SpellingRequestValidator().validate(data)


def validate_spelling_result(data: Dict[str, Any]) -> None:
    """
    Валидация spelling_result данных.

    Raises:
        ValidationError: If data does not match the schema
    """
    SpellingResultValidator().validate(data)
