"""Output formatting."""

from .formatter import format_node_line, format_validation_result

__all__ = ["format_node_line", "format_validation_result"]
