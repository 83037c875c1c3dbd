"""Tests for the validation runner."""

import pytest

from infragraph.schema.errors import SchemaLoadError, SchemaValidationError
from infragraph.validators.runner import run_validators, validate_graph_file


class TestRunValidators:
    def test_valid_graph(self, minimal_graph):
        result = run_validators(minimal_graph)

        assert result.is_valid
        assert not result.has_warnings

    def test_combines_validators(self, examples_dir):
        result = validate_graph_file(examples_dir / "invalid" / "illegal_containment.json")

        assert not result.is_valid
        assert "ILLEGAL_CONTAINMENT" in result.codes()


class TestValidateGraphFile:
    def test_example_file(self, examples_dir):
        result = validate_graph_file(examples_dir / "minimal_valid.json")
        assert result.is_valid
        assert result.issues == []

    def test_missing_file(self):
        with pytest.raises(SchemaLoadError):
            validate_graph_file("/nonexistent/graph.json")

    def test_schema_error(self, examples_dir):
        with pytest.raises(SchemaValidationError):
            validate_graph_file(examples_dir / "invalid" / "bad_schema.json")
