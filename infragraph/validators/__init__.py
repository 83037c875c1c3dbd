"""Validators for structural integrity of infrastructure graphs."""

from .base import Severity, Subject, ValidationIssue, ValidationResult
from .errors import GraphIntegrityError
from .dependency_integrity import check_dependency_integrity
from .hierarchy_integrity import check_hierarchy_integrity
from .isolation import check_isolated_resources
from .runner import run_validators, validate_graph_file

__all__ = [
    "Severity",
    "Subject",
    "ValidationIssue",
    "ValidationResult",
    "GraphIntegrityError",
    "check_dependency_integrity",
    "check_hierarchy_integrity",
    "check_isolated_resources",
    "run_validators",
    "validate_graph_file",
]
