"""
JSON Schema Contract Validators

Validates batch documents against the Transaction Builder contract before
they leave the process. Uses the jsonschema library (Draft 2020-12).

Schemas:
- batch.json (Transaction Builder batch, version 1.0)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Schemas ship inside the package, next to this module, under schema/.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'batch')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Module-wide loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of plain data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            jsonschema.ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over every validation error, for reports listing all of them."""
        return self.validator.iter_errors(data)


class BatchValidator(ContractValidator):
    """Validator for the Transaction Builder batch contract."""

    def __init__(self):
        super().__init__("batch")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_batch(data: Dict[str, Any]) -> None:
    """
    Validate a batch document.

    Args:
        data: Batch as plain JSON data (camelCase keys)

    Raises:
        jsonschema.ValidationError: If the document does not match the schema
    """
    BatchValidator().validate(data)
