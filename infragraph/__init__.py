"""infragraph: an infrastructure graph model with containment and dependency rules."""

from .graph.hierarchy import can_move, can_place, valid_drop_targets
from .schema.models import (
    Edge,
    InfrastructureData,
    Node,
    NodeData,
    NodeStatus,
    Position,
    ResourceType,
)
from .store import GraphState, GraphStore

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "InfrastructureData",
    "Node",
    "NodeData",
    "NodeStatus",
    "Position",
    "ResourceType",
    "GraphState",
    "GraphStore",
    "can_move",
    "can_place",
    "valid_drop_targets",
]
