"""Tests for graph document loading."""

import json

import pytest

from infragraph.schema.errors import SchemaLoadError, SchemaValidationError
from infragraph.schema.loader import (
    load_document,
    parse_graph,
    parse_graph_data,
    parse_graph_from_string,
    parse_graph_from_yaml_string,
)


class TestLoadDocument:
    def test_load_valid_file(self, examples_dir):
        data = load_document(examples_dir / "minimal_valid.json")
        assert "nodes" in data
        assert "edges" in data

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_document(tmp_path / "nope.json")
        assert "File not found" in str(exc_info.value)
        assert exc_info.value.path is not None

    def test_directory_rejected(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="Not a file"):
            load_document(tmp_path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("")
        assert load_document(path) == {}

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(SchemaLoadError, match="Expected mapping"):
            load_document(path)


class TestParseGraph:
    def test_parse_example(self, examples_dir):
        data = parse_graph(examples_dir / "minimal_valid.json")
        assert len(data.nodes) == 6
        assert len(data.edges) == 3

    def test_parse_from_string(self, minimal_graph_json):
        data = parse_graph_from_string(minimal_graph_json)
        assert data.get_node("vm").parent == "subnet"

    def test_invalid_syntax(self):
        with pytest.raises(SchemaLoadError, match="Invalid JSON"):
            parse_graph_from_string('{"nodes": [')

    def test_unknown_type_reports_location(self, examples_dir):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_graph(examples_dir / "invalid" / "bad_schema.json")

        locs = [err["loc"] for err in exc_info.value.errors]
        assert "nodes.0.type" in locs

    def test_missing_edge_fields(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_graph_data({"nodes": [], "edges": [{"id": "e1"}]})

        locs = {err["loc"] for err in exc_info.value.errors}
        assert {"edges.0.source", "edges.0.target"} <= locs

    def test_empty_string_is_empty_graph(self):
        data = parse_graph_from_string("")
        assert data.nodes == []
        assert data.edges == []


class TestJsonSyntax:
    def test_tab_indented_json_string(self, minimal_graph_json):
        text = json.dumps(json.loads(minimal_graph_json), indent="\t")
        data = parse_graph_from_string(text)
        assert data.get_node("vm").parent == "subnet"

    def test_tab_indented_json_file(self, tmp_path, minimal_graph_json):
        path = tmp_path / "tabs.json"
        path.write_text(json.dumps(json.loads(minimal_graph_json), indent="\t"))
        data = parse_graph(path)
        assert len(data.nodes) == 4

    def test_exponent_numbers_stay_numbers(self):
        text = (
            '{"nodes": [{"id": "b", "type": "aws_s3_bucket",'
            ' "data": {"name": "logs", "params": {"size": 1e5}}}]}'
        )
        data = parse_graph_from_string(text)
        size = data.get_node("b").data.params["size"]
        assert size == 100000.0
        assert isinstance(size, float)

    def test_trailing_garbage_rejected(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"nodes": []} extra')
        with pytest.raises(SchemaLoadError, match="Invalid JSON") as exc_info:
            load_document(path)
        assert exc_info.value.path == str(path)


class TestYamlDocuments:
    def test_yaml_file_by_suffix(self, tmp_path):
        path = tmp_path / "graph.yaml"
        path.write_text(
            "nodes:\n"
            "  - id: b\n"
            "    type: aws_s3_bucket\n"
            "    data:\n"
            "      name: assets\n"
        )
        data = parse_graph(path)
        assert data.get_node("b").data.name == "assets"

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_document(path) == {}

    def test_yaml_string(self):
        data = parse_graph_from_yaml_string("nodes: []\nedges: []\n")
        assert data.nodes == []

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("nodes: [\n")
        with pytest.raises(SchemaLoadError, match="Invalid YAML"):
            load_document(path)
