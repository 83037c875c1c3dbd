"""Containment rules for placing and moving nodes.

All functions here are pure predicates: they never raise and never mutate
the nodes they are given. A False or empty result means the operation
should be refused.
"""

from typing import Iterable, Mapping

from ..schema.models import Node, ResourceType
from .node_types import (
    ROOT_CONTAINER_TYPES,
    ROOT_TARGET,
    allowed_children,
    coerce_resource_type,
    is_global_type,
)

NodeCollection = Mapping[str, Node] | Iterable[Node]


def index_nodes(all_nodes: NodeCollection) -> dict[str, Node]:
    """Build an id -> node index from a mapping or an iterable of nodes."""
    if isinstance(all_nodes, Mapping):
        return dict(all_nodes)
    return {node.id: node for node in all_nodes}


def can_place(
    node_type: ResourceType | str,
    parent_id: str | None,
    all_nodes: NodeCollection,
) -> bool:
    """Check whether a node of the given type may be placed under a parent.

    Args:
        node_type: The type of the node being placed.
        parent_id: The prospective parent id, or None for root level.
        all_nodes: The current nodes.

    Returns:
        True if the placement is legal.
    """
    resource_type = coerce_resource_type(node_type)
    if resource_type is None:
        return False

    if parent_id is None:
        return is_global_type(resource_type) or resource_type in ROOT_CONTAINER_TYPES

    parent = index_nodes(all_nodes).get(parent_id)
    if parent is None:
        return False

    return resource_type in allowed_children(parent.type)


def is_descendant(
    ancestor_id: str, candidate_id: str, all_nodes: NodeCollection
) -> bool:
    """Check whether candidate_id sits somewhere below ancestor_id.

    Walks parent pointers upward from the candidate. Stops on a repeated
    node so corrupted (cyclic) data cannot loop forever.
    """
    nodes = index_nodes(all_nodes)
    seen: set[str] = set()
    current = nodes.get(candidate_id)

    while current is not None and current.parent is not None:
        if current.parent == ancestor_id:
            return True
        if current.parent in seen:
            return False
        seen.add(current.parent)
        current = nodes.get(current.parent)

    return False


def can_move(
    node_id: str, new_parent_id: str | None, all_nodes: NodeCollection
) -> bool:
    """Check whether an existing node may be re-parented.

    Args:
        node_id: The node being moved.
        new_parent_id: The new parent id, or None for root level.
        all_nodes: The current nodes.

    Returns:
        True if the move keeps the containment forest legal.
    """
    nodes = index_nodes(all_nodes)
    node = nodes.get(node_id)
    if node is None:
        return False

    if new_parent_id == node_id:
        return False

    if new_parent_id is not None and is_descendant(node_id, new_parent_id, nodes):
        return False

    return can_place(node.type, new_parent_id, nodes)


def valid_drop_targets(
    node_type: ResourceType | str, all_nodes: NodeCollection
) -> list[str]:
    """Get every location where a node of the given type may be dropped.

    Returns:
        Ids of nodes that accept the type, in node order, followed by the
        root marker if the type may sit at root level.
    """
    nodes = index_nodes(all_nodes)
    targets = [
        node_id for node_id in nodes if can_place(node_type, node_id, nodes)
    ]

    if can_place(node_type, None, nodes):
        targets.append(ROOT_TARGET)

    return targets


def collect_descendants(node_id: str, all_nodes: NodeCollection) -> list[str]:
    """Get all ids below a node by following children lists.

    Returns:
        Descendant ids in depth-first order, excluding node_id itself.
    """
    nodes = index_nodes(all_nodes)
    descendants: list[str] = []
    seen = {node_id}
    stack = list(reversed(nodes[node_id].children)) if node_id in nodes else []

    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        descendants.append(current)

        child = nodes.get(current)
        if child is not None:
            stack.extend(reversed(child.children))

    return descendants
