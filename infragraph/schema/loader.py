"""Loading and parsing of infrastructure graph documents.

Graph documents are JSON. Files ending in ``.yaml`` or ``.yml`` are read
as YAML instead.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import InfrastructureData

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_document(path: str | Path) -> dict:
    """Load a graph file and return the raw data.

    Args:
        path: Path to a JSON file, or a YAML file by suffix.

    Returns:
        The parsed document as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    if path.suffix.lower() in YAML_SUFFIXES:
        return _load_yaml_text(text, str(path))
    return _load_json_text(text, str(path))


def _load_json_text(text: str, path: str | None = None) -> dict:
    """Parse JSON text; blank text is an empty document."""
    if not text.strip():
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON: {e}", path) from e

    return _require_mapping(data, path)


def _load_yaml_text(text: str, path: str | None = None) -> dict:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}
    return _require_mapping(data, path)


def _require_mapping(data: Any, path: str | None) -> dict:
    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected mapping at root, got {type(data).__name__}", path
        )
    return data


def parse_graph(path: str | Path) -> InfrastructureData:
    """Load and parse a graph file into InfrastructureData.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    data = load_document(path)
    return parse_graph_data(data)


def parse_graph_from_string(text: str) -> InfrastructureData:
    """Parse a JSON string into InfrastructureData.

    Raises:
        SchemaLoadError: If the text is not a JSON object.
        SchemaValidationError: If the data fails validation.
    """
    return parse_graph_data(_load_json_text(text))


def parse_graph_from_yaml_string(text: str) -> InfrastructureData:
    """Parse a YAML string into InfrastructureData.

    Raises:
        SchemaLoadError: If the text is not a YAML mapping.
        SchemaValidationError: If the data fails validation.
    """
    return parse_graph_data(_load_yaml_text(text))


def parse_graph_data(data: dict[str, Any]) -> InfrastructureData:
    """Validate raw data into InfrastructureData.

    Raises:
        SchemaValidationError: If the data fails validation.
    """
    try:
        return InfrastructureData.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e
