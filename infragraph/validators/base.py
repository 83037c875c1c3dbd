"""Issue and result types shared by the graph integrity checks.

Every issue is attached to at most one subject: a node id, an edge id, or
neither for problems that concern the graph as a whole (such as a
dependency cycle spanning several edges).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """How serious an integrity issue is."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Subject:
    """The node or edge an issue is reported against."""

    kind: str
    id: str

    def __str__(self) -> str:
        return f"{self.kind} {self.id}"


@dataclass
class ValidationIssue:
    """One integrity problem found in a graph."""

    code: str
    message: str
    severity: Severity
    node: str | None = None
    edge: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def subject(self) -> Subject | None:
        if self.node is not None:
            return Subject("node", self.node)
        if self.edge is not None:
            return Subject("edge", self.edge)
        return None

    def __str__(self) -> str:
        where = f" on {self.subject}" if self.subject else ""
        return f"{self.code}{where}: {self.message}"


@dataclass
class ValidationResult:
    """Issues collected by one or more integrity checks, in report order."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def _of(self, severity: Severity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self._of(Severity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self._of(Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return any(issue.severity is Severity.ERROR for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(issue.severity is Severity.WARNING for issue in self.issues)

    @property
    def is_valid(self) -> bool:
        """A graph with warnings only is still valid."""
        return not self.has_errors

    def codes(self) -> set[str]:
        return {issue.code for issue in self.issues}

    def by_subject(self) -> dict[Subject | None, list[ValidationIssue]]:
        """Group issues by the node or edge they concern.

        Graph-level issues are keyed by None. Subjects keep the order in
        which their first issue was reported, and issues keep their order
        within a subject.
        """
        grouped: dict[Subject | None, list[ValidationIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.subject, []).append(issue)
        return grouped

    def add_error(
        self,
        code: str,
        message: str,
        node: str | None = None,
        edge: str | None = None,
        **details: Any,
    ) -> None:
        self._add(Severity.ERROR, code, message, node, edge, details)

    def add_warning(
        self,
        code: str,
        message: str,
        node: str | None = None,
        edge: str | None = None,
        **details: Any,
    ) -> None:
        self._add(Severity.WARNING, code, message, node, edge, details)

    def _add(
        self,
        severity: Severity,
        code: str,
        message: str,
        node: str | None,
        edge: str | None,
        details: dict[str, Any],
    ) -> None:
        self.issues.append(
            ValidationIssue(code, message, severity, node=node, edge=edge, details=details)
        )

    def merge(self, other: "ValidationResult") -> None:
        """Append another result's issues after this one's."""
        self.issues.extend(other.issues)
