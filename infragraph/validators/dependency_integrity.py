"""Dependency edge integrity validator."""

from collections import Counter

import networkx as nx

from ..graph.dependencies import build_dependency_graph
from ..schema.models import InfrastructureData
from .base import ValidationResult


def check_dependency_integrity(data: InfrastructureData) -> ValidationResult:
    """Check that dependency edges form a DAG over existing nodes.

    This validator checks:
    - Edge ids are unique
    - Edge endpoints reference defined nodes
    - No edge is a self-loop
    - No two edges share a (source, target) pair
    - The dependency graph has no cycles

    Args:
        data: The graph to check.

    Returns:
        ValidationResult with errors for each violation.
    """
    result = ValidationResult()

    id_counts = Counter(edge.id for edge in data.edges)
    for edge_id, count in id_counts.items():
        if count > 1:
            result.add_error(
                code="DUPLICATE_EDGE_ID",
                message=f"Edge id '{edge_id}' is used {count} times",
                edge=edge_id,
                count=count,
            )

    node_ids = set(data.get_all_node_ids())
    seen_pairs: set[tuple[str, str]] = set()

    for edge in data.edges:
        for endpoint in (edge.source, edge.target):
            if endpoint not in node_ids:
                result.add_error(
                    code="DANGLING_EDGE",
                    message=f"Edge references undefined node '{endpoint}'",
                    edge=edge.id,
                    referenced_node=endpoint,
                )

        if edge.source == edge.target:
            result.add_error(
                code="SELF_LOOP",
                message=f"Node '{edge.source}' depends on itself",
                edge=edge.id,
            )

        pair = (edge.source, edge.target)
        if pair in seen_pairs:
            result.add_error(
                code="DUPLICATE_EDGE",
                message=f"Duplicate dependency {edge.source} -> {edge.target}",
                edge=edge.id,
            )
        seen_pairs.add(pair)

    # Self-loops are reported above
    graph = build_dependency_graph(e for e in data.edges if e.source != e.target)
    try:
        cycle = nx.find_cycle(graph)
    except nx.NetworkXNoCycle:
        cycle = None
    if cycle:
        members = [source for source, _ in cycle]
        result.add_error(
            code="DEPENDENCY_CYCLE",
            message=f"Dependency cycle: {' -> '.join(members + [members[0]])}",
            edge=graph.edges[cycle[0]]["edge_id"],
            cycle=members,
        )

    return result
