"""Rendering of integrity reports and node listings for the CLI."""

import json
from typing import Any, Literal

from ..schema.models import Node
from ..validators.base import Severity, ValidationIssue, ValidationResult

SEVERITY_LABELS = {
    Severity.ERROR: "error",
    Severity.WARNING: "warn ",
}


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Render an integrity report.

    Args:
        result: Issues found by the validators.
        format: "text" groups issues under the node or edge they concern;
            "json" emits a flat issue list with counts.
    """
    if format == "json":
        return json.dumps(_report_dict(result), indent=2)
    return _format_text(result)


def _format_text(result: ValidationResult) -> str:
    lines: list[str] = []

    for subject, issues in _graph_level_first(result):
        lines.append(str(subject) if subject else "graph")
        lines.extend(f"  {_issue_line(issue)}" for issue in issues)
        lines.append("")

    if not lines:
        lines.append("No issues found.")
        lines.append("")

    lines.append(_summary(result))
    return "\n".join(lines)


def _graph_level_first(result: ValidationResult):
    grouped = result.by_subject()
    if None in grouped:
        yield None, grouped.pop(None)
    yield from grouped.items()


def _issue_line(issue: ValidationIssue) -> str:
    return f"{SEVERITY_LABELS[issue.severity]}  {issue.code}  {issue.message}"


def _summary(result: ValidationResult) -> str:
    n_errors = len(result.errors)
    n_warnings = len(result.warnings)
    if n_errors:
        return f"Validation failed: {n_errors} error(s), {n_warnings} warning(s)"
    if n_warnings:
        return f"Validation passed with {n_warnings} warning(s)"
    return "Validation passed"


def _report_dict(result: ValidationResult) -> dict[str, Any]:
    return {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [_issue_dict(issue) for issue in result.issues],
    }


def _issue_dict(issue: ValidationIssue) -> dict[str, Any]:
    return {
        "code": issue.code,
        "severity": issue.severity.value,
        "node": issue.node,
        "edge": issue.edge,
        "message": issue.message,
        "details": issue.details,
    }


def format_node_line(node: Node) -> str:
    """Format a node as "<id>  <type>  <name>"."""
    return f"{node.id}  {node.type.value}  {node.data.name}"
