"""Dependency and containment graphs built on networkx."""

from typing import Iterable

import networkx as nx

from ..schema.models import Edge, Node


def build_dependency_graph(edges: Iterable[Edge]) -> nx.DiGraph:
    """Build a directed graph of source -> target dependencies.

    Args:
        edges: The dependency edges.

    Returns:
        A DiGraph whose edges carry the originating edge id.
    """
    graph = nx.DiGraph()
    for edge in edges:
        graph.add_edge(edge.source, edge.target, edge_id=edge.id)
    return graph


def would_create_cycle(edges: Iterable[Edge], source: str, target: str) -> bool:
    """Check whether adding source -> target would close a dependency cycle.

    Runs a depth-first search from target along outgoing edges; the new
    edge closes a cycle exactly when source is reachable.
    """
    if source == target:
        return True

    graph = build_dependency_graph(edges)
    if not graph.has_node(target):
        return False

    return any(node == source for node in nx.dfs_preorder_nodes(graph, target))


def build_containment_graph(nodes: Iterable[Node]) -> nx.DiGraph:
    """Build a directed graph of parent -> child containment links.

    Both parent pointers and children lists contribute edges, so the
    result exposes inconsistencies between the two.
    """
    graph = nx.DiGraph()
    for node in nodes:
        graph.add_node(node.id)
        if node.parent is not None:
            graph.add_edge(node.parent, node.id)
        for child_id in node.children:
            graph.add_edge(node.id, child_id)
    return graph
