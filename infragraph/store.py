"""In-memory store for an infrastructure graph.

The store owns the authoritative node and edge collections and is the only
mutation surface. Every structural mutation consults the hierarchy and
dependency rules first; a refused operation returns False and leaves the
state untouched.

Operations run synchronously to completion. The store is not thread-safe:
callers sharing one store across threads must serialize access.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .graph.defaults import create_default_node_data, new_id
from .graph.dependencies import would_create_cycle
from .graph.hierarchy import can_move, collect_descendants
from .schema.loader import parse_graph_data, parse_graph_from_string
from .schema.models import (
    Edge,
    EdgeType,
    InfrastructureData,
    Node,
    NodeStatus,
    Position,
    ResourceType,
)
from .validators.errors import GraphIntegrityError
from .validators.runner import run_validators

logger = logging.getLogger(__name__)

# Fields that only move_node may change
STRUCTURAL_FIELDS = frozenset({"id", "parent", "children"})


@dataclass
class GraphState:
    """Mutable state held by a GraphStore.

    Nodes and edges are indexed by id; dict order is insertion order.
    """

    nodes: dict[str, Node] = field(default_factory=dict)
    edges: dict[str, Edge] = field(default_factory=dict)
    selected_node_id: str | None = None
    node_statuses: dict[str, NodeStatus] = field(default_factory=dict)
    search_query: str = ""
    highlighted_node_ids: list[str] = field(default_factory=list)


class GraphStore:
    """Mutation surface over a GraphState.

    Construct one per session and pass it to whatever needs it.
    """

    def __init__(
        self,
        state: GraphState | None = None,
        *,
        validate_on_import: bool = False,
    ):
        """Initialize the store.

        Args:
            state: Existing state to operate on. A fresh one is created
                when omitted.
            validate_on_import: Default for import_graph's validate flag.
        """
        self.state = state if state is not None else GraphState()
        self.validate_on_import = validate_on_import

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """Get all nodes in insertion order."""
        return list(self.state.nodes.values())

    @property
    def edges(self) -> list[Edge]:
        """Get all edges in insertion order."""
        return list(self.state.edges.values())

    @property
    def selected_node_id(self) -> str | None:
        return self.state.selected_node_id

    @property
    def search_query(self) -> str:
        return self.state.search_query

    @property
    def highlighted_node_ids(self) -> list[str]:
        return list(self.state.highlighted_node_ids)

    def get_node(self, node_id: str) -> Node | None:
        return self.state.nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Edge | None:
        return self.state.edges.get(edge_id)

    def get_selected_node(self) -> Node | None:
        """Get the selected node, or None if nothing is selected."""
        if self.state.selected_node_id is None:
            return None
        return self.state.nodes.get(self.state.selected_node_id)

    def get_node_children(self, node_id: str) -> list[Node]:
        """Get the child nodes of a node, in children order."""
        node = self.state.nodes.get(node_id)
        if node is None:
            return []
        return [
            self.state.nodes[child_id]
            for child_id in node.children
            if child_id in self.state.nodes
        ]

    def get_node_parent(self, node_id: str) -> Node | None:
        node = self.state.nodes.get(node_id)
        if node is None or node.parent is None:
            return None
        return self.state.nodes.get(node.parent)

    def get_node_status(self, node_id: str) -> NodeStatus | None:
        return self.state.node_statuses.get(node_id)

    # -------------------------------------------------------------------------
    # Node mutations
    # -------------------------------------------------------------------------

    def add_node(
        self,
        node_type: ResourceType | str,
        position: Position | Mapping[str, float] | None = None,
        parent_id: str | None = None,
        *,
        name: str | None = None,
    ) -> str:
        """Create a node with type-derived default data.

        Placement legality is not checked here; callers are expected to
        consult can_place (or valid_drop_targets) beforehand.

        Args:
            node_type: The resource type.
            position: Canvas position; defaults to the origin.
            parent_id: Optional containing node.
            name: Optional display name overriding the type-derived one.

        Returns:
            The new node's id.
        """
        resource_type = ResourceType(node_type)

        parent = None
        if parent_id is not None:
            parent = self.state.nodes.get(parent_id)
            if parent is None:
                logger.warning(
                    "Parent %s not found, adding %s at root level",
                    parent_id,
                    resource_type.value,
                )

        node_id = new_id()
        self.state.nodes[node_id] = Node(
            id=node_id,
            type=resource_type,
            parent=parent.id if parent is not None else None,
            children=[],
            data=create_default_node_data(resource_type, name),
            position=_coerce_position(position) or Position(x=0, y=0),
        )
        if parent is not None:
            parent.children.append(node_id)

        self.state.node_statuses[node_id] = NodeStatus.NOT_APPLIED
        logger.debug("Added node %s (%s)", node_id, resource_type.value)
        return node_id

    def update_node(self, node_id: str, updates: Mapping[str, Any]) -> None:
        """Shallow-merge fields into a node.

        The structural fields id, parent and children are ignored; use
        move_node to re-parent. Unknown ids are a no-op.

        Raises:
            pydantic.ValidationError: If the merged node is malformed.
        """
        node = self.state.nodes.get(node_id)
        if node is None:
            return

        ignored = STRUCTURAL_FIELDS.intersection(updates)
        if ignored:
            logger.info(
                "Ignoring structural fields %s on update of %s",
                sorted(ignored),
                node_id,
            )

        merged = node.model_dump()
        merged.update(
            {k: v for k, v in updates.items() if k not in STRUCTURAL_FIELDS}
        )
        self.state.nodes[node_id] = Node.model_validate(merged)
        logger.debug("Updated node %s", node_id)

    def delete_node(self, node_id: str) -> None:
        """Delete a node, its containment subtree, and every touching edge.

        Unknown ids are a no-op.
        """
        node = self.state.nodes.get(node_id)
        if node is None:
            return

        to_delete = {node_id, *collect_descendants(node_id, self.state.nodes)}

        if node.parent is not None:
            parent = self.state.nodes.get(node.parent)
            if parent is not None:
                parent.children = [c for c in parent.children if c != node_id]

        for doomed in to_delete:
            self.state.nodes.pop(doomed, None)
            self.state.node_statuses.pop(doomed, None)

        self.state.edges = {
            edge_id: edge
            for edge_id, edge in self.state.edges.items()
            if edge.source not in to_delete and edge.target not in to_delete
        }

        if self.state.selected_node_id in to_delete:
            self.state.selected_node_id = None
        self.state.highlighted_node_ids = [
            h for h in self.state.highlighted_node_ids if h not in to_delete
        ]

        logger.debug("Deleted node %s and %d descendant(s)", node_id, len(to_delete) - 1)

    def move_node(
        self,
        node_id: str,
        position: Position | Mapping[str, float],
        new_parent_id: str | None = None,
    ) -> bool:
        """Reposition a node and optionally re-parent it.

        Args:
            node_id: The node to move.
            position: The new canvas position.
            new_parent_id: The new parent id, or None for root level.

        Returns:
            True if the move was applied, False if it was refused.

        Raises:
            pydantic.ValidationError: If the position is malformed. Nothing
                is changed in that case.
        """
        node = self.state.nodes.get(node_id)
        if node is None:
            return False

        position = _coerce_position(position)

        if new_parent_id != node.parent:
            if not can_move(node_id, new_parent_id, self.state.nodes):
                logger.info(
                    "Refused move of %s (%s) under %s",
                    node_id,
                    node.type.value,
                    new_parent_id or "root",
                )
                return False

            old_parent = self.state.nodes.get(node.parent) if node.parent else None
            if old_parent is not None:
                old_parent.children = [c for c in old_parent.children if c != node_id]

            if new_parent_id is not None:
                self.state.nodes[new_parent_id].children.append(node_id)

            node.parent = new_parent_id

        node.position = position
        logger.debug("Moved node %s", node_id)
        return True

    # -------------------------------------------------------------------------
    # Edge mutations
    # -------------------------------------------------------------------------

    def add_edge(self, source_id: str, target_id: str) -> bool:
        """Add a dependency edge from source to target.

        Refuses duplicates, self-loops, edges touching unknown nodes, and
        edges that would close a dependency cycle.

        Returns:
            True if the edge was added.
        """
        reason = self._edge_refusal(source_id, target_id)
        if reason is not None:
            logger.info("Refused edge %s -> %s: %s", source_id, target_id, reason)
            return False

        edge_id = new_id()
        self.state.edges[edge_id] = Edge(
            id=edge_id,
            source=source_id,
            target=target_id,
            type=EdgeType.DEPENDENCY.value,
        )
        logger.debug("Added edge %s: %s -> %s", edge_id, source_id, target_id)
        return True

    def _edge_refusal(self, source_id: str, target_id: str) -> str | None:
        """Get the reason an edge would be refused, or None if it is legal."""
        if any(
            edge.source == source_id and edge.target == target_id
            for edge in self.state.edges.values()
        ):
            return "duplicate"
        if source_id == target_id:
            return "self-loop"
        if source_id not in self.state.nodes or target_id not in self.state.nodes:
            return "unknown node"
        if would_create_cycle(self.state.edges.values(), source_id, target_id):
            return "cycle"
        return None

    def delete_edge(self, edge_id: str) -> None:
        """Remove an edge. Unknown ids are a no-op."""
        if self.state.edges.pop(edge_id, None) is not None:
            logger.debug("Deleted edge %s", edge_id)

    # -------------------------------------------------------------------------
    # Selection, status and search
    # -------------------------------------------------------------------------

    def select_node(self, node_id: str | None) -> None:
        self.state.selected_node_id = node_id

    def focus_node(self, node_id: str) -> None:
        """Select a node so the view can bring it into focus."""
        self.state.selected_node_id = node_id

    def set_node_status(self, node_id: str, status: NodeStatus | str) -> None:
        """Record a node's provisioning status. Unknown ids are a no-op."""
        if node_id not in self.state.nodes:
            return
        self.state.node_statuses[node_id] = NodeStatus(status)

    def search(self, query: str) -> list[str]:
        """Find nodes whose id, type or name contains the query.

        Matching is case-insensitive. The query and the matching ids are
        recorded as the current highlight; a blank query clears it.

        Returns:
            Matching node ids in insertion order.
        """
        needle = query.strip().lower()
        if not needle:
            matches: list[str] = []
        else:
            matches = [
                node.id
                for node in self.state.nodes.values()
                if needle in node.id.lower()
                or needle in node.type.value.lower()
                or needle in node.data.name.lower()
            ]

        self.state.search_query = query
        self.state.highlighted_node_ids = matches
        return matches

    # -------------------------------------------------------------------------
    # Whole-graph operations
    # -------------------------------------------------------------------------

    def export_graph(self) -> InfrastructureData:
        """Snapshot the current nodes and edges."""
        return InfrastructureData(
            nodes=[node.model_copy(deep=True) for node in self.state.nodes.values()],
            edges=[edge.model_copy(deep=True) for edge in self.state.edges.values()],
        )

    def export_json(self, indent: int = 2) -> str:
        return self.export_graph().to_json(indent=indent)

    def import_graph(
        self,
        data: InfrastructureData | Mapping[str, Any],
        *,
        validate: bool | None = None,
    ) -> None:
        """Replace the whole graph with the given nodes and edges.

        Every node's status is reset to not_applied and selection and
        search state are cleared.

        Args:
            data: The graph to load, as a model or a raw mapping.
            validate: Check structural invariants before loading. Defaults
                to the store's validate_on_import setting.

        Raises:
            SchemaValidationError: If a raw mapping fails schema validation.
            GraphIntegrityError: If validation is on and the graph violates
                an invariant. The store is left unchanged.
        """
        if not isinstance(data, InfrastructureData):
            data = parse_graph_data(dict(data))

        if validate is None:
            validate = self.validate_on_import
        if validate:
            result = run_validators(data)
            if result.has_errors:
                raise GraphIntegrityError(
                    f"Graph has {len(result.errors)} integrity error(s)", result
                )

        nodes = {node.id: node.model_copy(deep=True) for node in data.nodes}
        self.state.nodes = nodes
        self.state.edges = {edge.id: edge.model_copy(deep=True) for edge in data.edges}
        self.state.node_statuses = {
            node_id: NodeStatus.NOT_APPLIED for node_id in nodes
        }
        self.state.selected_node_id = None
        self.state.search_query = ""
        self.state.highlighted_node_ids = []
        logger.debug(
            "Imported graph with %d node(s), %d edge(s)",
            len(self.state.nodes),
            len(self.state.edges),
        )

    def import_json(self, text: str, *, validate: bool | None = None) -> None:
        """Parse a JSON document and import it.

        Raises:
            SchemaLoadError: If the text cannot be parsed.
            SchemaValidationError: If the document fails schema validation.
            GraphIntegrityError: If validation is on and fails.
        """
        self.import_graph(parse_graph_from_string(text), validate=validate)

    def clear_graph(self) -> None:
        """Remove every node and edge and reset selection and search."""
        self.state.nodes = {}
        self.state.edges = {}
        self.state.node_statuses = {}
        self.state.selected_node_id = None
        self.state.search_query = ""
        self.state.highlighted_node_ids = []
        logger.debug("Cleared graph")


def _coerce_position(position: Position | Mapping[str, float] | None) -> Position | None:
    if position is None or isinstance(position, Position):
        return position
    return Position.model_validate(dict(position))
