"""Tests for default node data."""

import pytest

from infragraph.graph.defaults import (
    create_default_node_data,
    default_name,
    new_id,
)
from infragraph.schema.models import ResourceType


class TestDefaultName:
    @pytest.mark.parametrize(
        "resource_type,expected",
        [
            (ResourceType.VPC, "vpc"),
            (ResourceType.S3_BUCKET, "s3 bucket"),
            (ResourceType.IAM_ROLE, "iam role"),
            (ResourceType.INSTANCE, "instance"),
        ],
    )
    def test_names(self, resource_type, expected):
        assert default_name(resource_type) == expected


class TestCreateDefaultNodeData:
    def test_every_type_has_params(self):
        for resource_type in ResourceType:
            data = create_default_node_data(resource_type)
            assert data.name
            assert data.params

    def test_vpc_params(self):
        data = create_default_node_data(ResourceType.VPC)
        assert data.params["cidr_block"] == "10.0.0.0/16"
        assert data.params["enable_dns_support"] is True

    def test_rds_params(self):
        data = create_default_node_data(ResourceType.RDS)
        assert data.params == {
            "engine": "mysql",
            "instance_class": "db.t3.micro",
            "allocated_storage": 20,
        }

    def test_explicit_name(self):
        data = create_default_node_data(ResourceType.SUBNET, "private a")
        assert data.name == "private a"

    def test_bucket_name_is_unique(self):
        first = create_default_node_data(ResourceType.S3_BUCKET, "Static Assets")
        second = create_default_node_data(ResourceType.S3_BUCKET, "Static Assets")

        assert first.params["bucket_name"].startswith("static-assets-")
        assert len(first.params["bucket_name"]) == len("static-assets-") + 8
        assert first.params["bucket_name"] != second.params["bucket_name"]
        assert first.params["versioning"] is False

    def test_params_are_not_shared(self):
        first = create_default_node_data(ResourceType.ELB)
        first.params["scheme"] = "internal"

        assert create_default_node_data(ResourceType.ELB).params["scheme"] == (
            "internet-facing"
        )


def test_new_id_is_fresh():
    assert new_id() != new_id()
