"""Schema validation utilities.

Schemas are stored as YAML files (JSON Schema expressed in YAML) under
``envchain.data/schemas/`` and validated with ``jsonschema``.
"""
from __future__ import annotations

from typing import Any, Dict

import jsonschema

from envchain.core.utils.io import read_yaml
from envchain.data import get_data_path


class SchemaValidationError(ValueError):
    """Raised when schema validation fails."""

    pass


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema dict.

    Automatically appends ``.yaml`` if no extension is present.

    Raises:
        FileNotFoundError: If schema file doesn't exist.
        ValueError: If schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.yaml"

    schema_path = get_data_path("schemas", schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name}")

    schema = read_yaml(schema_path, default=None, raise_on_error=True)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def validate_payload(payload: Dict[str, Any], schema_name: str) -> None:
    """Validate a payload against a bundled schema.

    Raises:
        SchemaValidationError: If validation fails.
        FileNotFoundError: If schema doesn't exist.
    """
    schema = load_schema(schema_name)

    try:
        jsonschema.validate(instance=payload, schema=schema)
    except jsonschema.ValidationError as exc:
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}': {exc.message}"
        ) from exc


__all__ = [
    "load_schema",
    "validate_payload",
    "SchemaValidationError",
]
