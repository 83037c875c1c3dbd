"""Graph layer: placement policy, defaults and structural checks."""

from .node_types import (
    CONTAINMENT_RULES,
    GLOBAL_TYPES,
    ROOT_CONTAINER_TYPES,
    ROOT_TARGET,
)
from .defaults import create_default_node_data, new_id
from .hierarchy import (
    can_move,
    can_place,
    collect_descendants,
    is_descendant,
    valid_drop_targets,
)
from .dependencies import (
    build_containment_graph,
    build_dependency_graph,
    would_create_cycle,
)

__all__ = [
    "CONTAINMENT_RULES",
    "GLOBAL_TYPES",
    "ROOT_CONTAINER_TYPES",
    "ROOT_TARGET",
    "create_default_node_data",
    "new_id",
    "can_move",
    "can_place",
    "collect_descendants",
    "is_descendant",
    "valid_drop_targets",
    "build_containment_graph",
    "build_dependency_graph",
    "would_create_cycle",
]
