"""Validation runner that orchestrates all validators."""

from pathlib import Path

from ..schema.loader import parse_graph
from ..schema.models import InfrastructureData
from .base import ValidationResult
from .dependency_integrity import check_dependency_integrity
from .hierarchy_integrity import check_hierarchy_integrity
from .isolation import check_isolated_resources


def run_validators(data: InfrastructureData) -> ValidationResult:
    """Run all validators on a graph.

    Args:
        data: The graph to check.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    result.merge(check_hierarchy_integrity(data))
    result.merge(check_dependency_integrity(data))
    result.merge(check_isolated_resources(data))

    return result


def validate_graph_file(path: str | Path) -> ValidationResult:
    """Load and validate a graph file.

    Args:
        path: Path to the JSON graph file.

    Returns:
        ValidationResult from all validators.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the document fails schema validation.
    """
    data = parse_graph(path)
    return run_validators(data)
