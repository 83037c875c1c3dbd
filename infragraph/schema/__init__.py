"""Schema layer for infrastructure graph documents."""

from .errors import SchemaLoadError, SchemaValidationError
from .models import (
    Edge,
    EdgeType,
    InfrastructureData,
    Node,
    NodeData,
    NodeStatus,
    Position,
    ResourceType,
)
from .loader import (
    load_document,
    parse_graph,
    parse_graph_data,
    parse_graph_from_string,
    parse_graph_from_yaml_string,
)

__all__ = [
    "SchemaLoadError",
    "SchemaValidationError",
    "Edge",
    "EdgeType",
    "InfrastructureData",
    "Node",
    "NodeData",
    "NodeStatus",
    "Position",
    "ResourceType",
    "load_document",
    "parse_graph",
    "parse_graph_data",
    "parse_graph_from_string",
    "parse_graph_from_yaml_string",
]
