"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from infragraph.schema.loader import parse_graph_from_string
from infragraph.schema.models import ResourceType
from infragraph.store import GraphStore


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def minimal_graph_json() -> str:
    """Return a small valid graph: a VPC with a subnet holding an instance."""
    return """
{
  "nodes": [
    {"id": "vpc", "type": "aws_vpc", "parent": null, "children": ["subnet"],
     "data": {"name": "main", "params": {"cidr_block": "10.0.0.0/16"}},
     "position": {"x": 0, "y": 0}},
    {"id": "subnet", "type": "aws_subnet", "parent": "vpc", "children": ["vm"],
     "data": {"name": "public", "params": {}}},
    {"id": "vm", "type": "aws_instance", "parent": "subnet", "children": [],
     "data": {"name": "web", "params": {"instance_type": "t2.micro"}},
     "position": {"x": 10, "y": 20}},
    {"id": "bucket", "type": "aws_s3_bucket", "parent": null, "children": [],
     "data": {"name": "assets", "params": {}}}
  ],
  "edges": [
    {"id": "e1", "source": "vm", "target": "bucket", "type": "dependency"}
  ]
}
"""


@pytest.fixture
def minimal_graph(minimal_graph_json):
    """Return the parsed minimal graph."""
    return parse_graph_from_string(minimal_graph_json)


@pytest.fixture
def store() -> GraphStore:
    """Return an empty store."""
    return GraphStore()


@pytest.fixture
def network(store):
    """Populate the store with VPC > subnet > instance and return the ids."""
    vpc = store.add_node(ResourceType.VPC, {"x": 0, "y": 0})
    subnet = store.add_node(ResourceType.SUBNET, {"x": 10, "y": 10}, vpc)
    instance = store.add_node(ResourceType.INSTANCE, {"x": 20, "y": 20}, subnet)
    return {"vpc": vpc, "subnet": subnet, "instance": instance}
