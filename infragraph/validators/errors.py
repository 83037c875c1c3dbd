"""Integrity-related exceptions."""

from .base import ValidationResult


class GraphIntegrityError(Exception):
    """Raised when graph data violates structural invariants."""

    def __init__(self, message: str, result: ValidationResult | None = None):
        self.result = result or ValidationResult()
        super().__init__(message)
