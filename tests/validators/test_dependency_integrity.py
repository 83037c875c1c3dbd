"""Tests for the dependency edge validator."""

from infragraph.schema.loader import parse_graph_data
from infragraph.validators.dependency_integrity import check_dependency_integrity


def _graph(node_ids, edges):
    return parse_graph_data(
        {
            "nodes": [
                {"id": node_id, "type": "aws_s3_bucket", "data": {"name": node_id}}
                for node_id in node_ids
            ],
            "edges": [
                {"id": edge_id, "source": source, "target": target}
                for edge_id, source, target in edges
            ],
        }
    )


class TestDependencyIntegrity:
    def test_valid_dag(self):
        data = _graph(
            ["a", "b", "c"],
            [("e1", "a", "b"), ("e2", "a", "c"), ("e3", "b", "c")],
        )

        assert check_dependency_integrity(data).issues == []

    def test_cycle(self, examples_dir):
        from infragraph.schema.loader import parse_graph

        data = parse_graph(examples_dir / "invalid" / "dependency_cycle.json")

        result = check_dependency_integrity(data)

        assert result.codes() == {"DEPENDENCY_CYCLE"}
        assert set(result.errors[0].details["cycle"]) == {"a", "b", "c"}
        assert result.errors[0].edge in {"e1", "e2", "e3"}

    def test_self_loop(self):
        data = _graph(["a"], [("e1", "a", "a")])

        result = check_dependency_integrity(data)

        assert result.codes() == {"SELF_LOOP"}

    def test_duplicate_pair(self):
        data = _graph(["a", "b"], [("e1", "a", "b"), ("e2", "a", "b")])

        result = check_dependency_integrity(data)

        assert result.codes() == {"DUPLICATE_EDGE"}
        assert result.errors[0].edge == "e2"

    def test_dangling_edge(self):
        data = _graph(["a"], [("e1", "a", "ghost")])

        result = check_dependency_integrity(data)

        assert result.codes() == {"DANGLING_EDGE"}
        assert result.errors[0].details["referenced_node"] == "ghost"

    def test_duplicate_edge_id(self):
        data = _graph(["a", "b", "c"], [("e1", "a", "b"), ("e1", "b", "c")])

        result = check_dependency_integrity(data)

        assert result.codes() == {"DUPLICATE_EDGE_ID"}
