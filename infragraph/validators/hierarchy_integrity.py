"""Containment hierarchy integrity validator."""

from collections import Counter

import networkx as nx

from ..graph.dependencies import build_containment_graph
from ..graph.hierarchy import can_place
from ..schema.models import InfrastructureData
from .base import ValidationResult


def check_hierarchy_integrity(data: InfrastructureData) -> ValidationResult:
    """Check parent/children back-references and containment rules.

    This validator checks:
    - Node ids are unique
    - Parent pointers and children lists reference existing nodes
    - Every child lists its parent, and every parent lists its children
    - The containment relation is a forest (no cycles)
    - Each placement obeys the containment table

    Args:
        data: The graph to check.

    Returns:
        ValidationResult with errors for each violation.
    """
    result = ValidationResult()

    id_counts = Counter(node.id for node in data.nodes)
    for node_id, count in id_counts.items():
        if count > 1:
            result.add_error(
                code="DUPLICATE_NODE_ID",
                message=f"Node id '{node_id}' is used {count} times",
                node=node_id,
                count=count,
            )

    nodes = {node.id: node for node in data.nodes}

    for node in data.nodes:
        if node.parent is not None:
            parent = nodes.get(node.parent)
            if parent is None:
                result.add_error(
                    code="MISSING_PARENT",
                    message=f"Parent '{node.parent}' does not exist",
                    node=node.id,
                    parent=node.parent,
                )
            elif node.id not in parent.children:
                result.add_error(
                    code="MISSING_CHILD_REF",
                    message=f"Parent '{parent.id}' does not list this node as a child",
                    node=node.id,
                    parent=parent.id,
                )

        for child_id in node.children:
            child = nodes.get(child_id)
            if child is None:
                result.add_error(
                    code="DANGLING_CHILD_REF",
                    message=f"Child '{child_id}' does not exist",
                    node=node.id,
                    child=child_id,
                )
            elif child.parent != node.id:
                result.add_error(
                    code="CHILD_PARENT_MISMATCH",
                    message=(
                        f"Child '{child_id}' has parent '{child.parent}', "
                        f"expected '{node.id}'"
                    ),
                    node=node.id,
                    child=child_id,
                )

    containment = build_containment_graph(data.nodes)
    try:
        cycle = nx.find_cycle(containment)
    except nx.NetworkXNoCycle:
        cycle = None
    if cycle:
        members = [source for source, _ in cycle]
        result.add_error(
            code="CONTAINMENT_CYCLE",
            message=f"Containment cycle: {' -> '.join(members + [members[0]])}",
            node=members[0],
            cycle=members,
        )

    for node in data.nodes:
        if node.parent is not None and node.parent not in nodes:
            continue  # Already reported as MISSING_PARENT
        if not can_place(node.type, node.parent, nodes):
            where = f"inside '{node.parent}'" if node.parent else "at root level"
            result.add_error(
                code="ILLEGAL_CONTAINMENT",
                message=f"A {node.type.value} node cannot be placed {where}",
                node=node.id,
                parent=node.parent,
                resource_type=node.type.value,
            )

    return result
