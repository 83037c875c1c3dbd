"""Placement policy for resource types."""

from ..schema.models import ResourceType

# Resources that exist outside any network container.
GLOBAL_TYPES = frozenset({ResourceType.S3_BUCKET, ResourceType.IAM_ROLE})

# Non-global types that may still sit at root level.
ROOT_CONTAINER_TYPES = frozenset({ResourceType.VPC})

# parent type -> child types it may contain
CONTAINMENT_RULES: dict[ResourceType, frozenset[ResourceType]] = {
    ResourceType.VPC: frozenset({ResourceType.SUBNET, ResourceType.ELB}),
    ResourceType.SUBNET: frozenset({ResourceType.INSTANCE, ResourceType.RDS}),
    ResourceType.INSTANCE: frozenset(),
    ResourceType.RDS: frozenset(),
    ResourceType.ELB: frozenset(),
    ResourceType.S3_BUCKET: frozenset(),
    ResourceType.IAM_ROLE: frozenset(),
}

# Marker used in drop-target lists for "no parent".
ROOT_TARGET = "root"


def coerce_resource_type(value: ResourceType | str) -> ResourceType | None:
    """Convert a type tag to a ResourceType, or None if it is unknown."""
    if isinstance(value, ResourceType):
        return value
    try:
        return ResourceType(value)
    except ValueError:
        return None


def is_global_type(resource_type: ResourceType) -> bool:
    return resource_type in GLOBAL_TYPES


def allowed_children(parent_type: ResourceType) -> frozenset[ResourceType]:
    """Get the child types a parent of the given type may contain."""
    return CONTAINMENT_RULES.get(parent_type, frozenset())
