"""Pydantic models for infrastructure graphs."""

import json
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class ResourceType(str, Enum):
    """Kinds of cloud resources that can be placed on the canvas."""

    VPC = "aws_vpc"
    SUBNET = "aws_subnet"
    INSTANCE = "aws_instance"
    RDS = "aws_rds"
    ELB = "aws_elb"
    IAM_ROLE = "aws_iam_role"
    S3_BUCKET = "aws_s3_bucket"


class EdgeType(str, Enum):
    """Kinds of edges between nodes."""

    DEPENDENCY = "dependency"


class NodeStatus(str, Enum):
    """Provisioning status tracked per node."""

    NOT_APPLIED = "not_applied"
    CREATING = "creating"
    CREATED = "created"
    FAILED = "failed"


class Position(BaseModel):
    """A canvas coordinate."""

    x: float
    y: float


class NodeData(BaseModel):
    """Resource configuration carried by a node."""

    name: str
    params: dict[str, Any] = Field(default_factory=dict)


class Node(BaseModel):
    """A resource placed on the canvas."""

    id: str
    type: ResourceType
    parent: str | None = None
    children: list[str] = Field(default_factory=list)
    data: NodeData
    position: Position | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the exchange format, omitting an absent position."""
        data = self.model_dump(mode="json")
        if data["position"] is None:
            del data["position"]
        return data


class Edge(BaseModel):
    """A directed dependency between two nodes."""

    id: str
    source: str
    target: str
    type: Literal["dependency"] = EdgeType.DEPENDENCY.value

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class InfrastructureData(BaseModel):
    """Root model for an exported infrastructure graph."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def get_node(self, node_id: str) -> Node | None:
        """Get a node by id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def get_all_node_ids(self) -> list[str]:
        """Get all node ids in document order."""
        return [node.id for node in self.nodes]
