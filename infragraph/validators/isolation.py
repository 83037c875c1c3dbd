"""Isolated resource detection validator."""

from ..schema.models import InfrastructureData
from .base import ValidationResult


def check_isolated_resources(data: InfrastructureData) -> ValidationResult:
    """Check for root-level nodes that are connected to nothing.

    A node with no parent, no children and no dependency edges may be a
    leftover from editing, or may be missing a dependency.

    Args:
        data: The graph to check.

    Returns:
        ValidationResult with warnings for isolated nodes.
    """
    result = ValidationResult()

    connected: set[str] = set()
    for edge in data.edges:
        connected.add(edge.source)
        connected.add(edge.target)

    for node in data.nodes:
        if node.parent is None and not node.children and node.id not in connected:
            result.add_warning(
                code="ISOLATED_RESOURCE",
                message=(
                    f"Node '{node.data.name}' has no container, children "
                    "or dependencies"
                ),
                node=node.id,
            )

    return result
