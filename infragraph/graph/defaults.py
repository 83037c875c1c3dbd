"""Default configuration for newly created nodes."""

import uuid
from typing import Any

from ..schema.models import NodeData, ResourceType


def new_id() -> str:
    """Generate a fresh opaque identifier."""
    return uuid.uuid4().hex


def default_name(resource_type: ResourceType) -> str:
    """Derive a display name from a type tag (aws_s3_bucket -> "s3 bucket")."""
    return resource_type.value.replace("aws_", "", 1).replace("_", " ", 1)


def default_params(resource_type: ResourceType, name: str) -> dict[str, Any]:
    """Build the default params mapping for a resource type.

    Args:
        resource_type: The resource type.
        name: The node name, used to derive generated identifiers.

    Returns:
        A fresh params dictionary.
    """
    if resource_type == ResourceType.VPC:
        return {
            "cidr_block": "10.0.0.0/16",
            "enable_dns_hostnames": True,
            "enable_dns_support": True,
        }
    if resource_type == ResourceType.SUBNET:
        return {
            "subnet_type": "public",
            "cidr_block": "10.0.1.0/24",
            "availability_zone": "us-west-2a",
        }
    if resource_type == ResourceType.INSTANCE:
        return {
            "ami": "ami-0c02fb55956c7d316",
            "instance_type": "t2.micro",
            "key_name": "my-key-pair",
        }
    if resource_type == ResourceType.RDS:
        return {
            "engine": "mysql",
            "instance_class": "db.t3.micro",
            "allocated_storage": 20,
        }
    if resource_type == ResourceType.ELB:
        return {
            "load_balancer_type": "application",
            "scheme": "internet-facing",
        }
    if resource_type == ResourceType.IAM_ROLE:
        return {
            "assume_role_policy": '{"Version":"2012-10-17","Statement":[]}',
        }
    if resource_type == ResourceType.S3_BUCKET:
        # Bucket names are global, so add a random suffix
        slug = name.lower().replace(" ", "-")
        return {
            "bucket_name": f"{slug}-{uuid.uuid4().hex[:8]}",
            "versioning": False,
        }
    return {}


def create_default_node_data(
    resource_type: ResourceType, name: str | None = None
) -> NodeData:
    """Create the default data for a node of the given type.

    Args:
        resource_type: The resource type.
        name: Optional display name; derived from the type when omitted.

    Returns:
        A NodeData with type-specific default params.
    """
    name = name or default_name(resource_type)
    return NodeData(name=name, params=default_params(resource_type, name))
