"""
Tests for the DAG graph representation.

This module contains tests for graph construction, cycle detection,
self-loop handling and the structural queries of DAG.
"""

import pytest

from dag_lca import (
    DAG,
    CycleDetectedError,
    ErrorMode,
    InvalidVertexError,
    LCAConfig,
)


class TestConstruction:
    """Tests for building a DAG."""

    def test_from_edges(self):
        """Test building a graph from an edge list."""
        dag = DAG.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)])

        assert len(dag) == 4
        assert dag.vertices() == [1, 2, 3, 4]
        assert sorted(dag.edges()) == [(1, 2), (1, 3), (2, 4), (3, 4)]

    def test_isolated_vertices_first(self):
        """Test that explicit vertices fix the insertion order."""
        dag = DAG.from_edges([("a", "b")], vertices=["z", "b"])

        assert dag.vertices() == ["z", "b", "a"]
        assert dag.insertion_index("a") == 2

    def test_add_vertex_attributes(self):
        """Test that vertex attributes are stored on the graph."""
        dag = DAG()
        dag.add_vertex("a", label="first")
        dag.add_vertex("a", weight=3)

        assert dag.graph.nodes["a"] == {"label": "first", "weight": 3}
        assert dag.vertices() == ["a"]

    def test_contains(self):
        """Test vertex membership."""
        dag = DAG.from_edges([(1, 2)])

        assert 1 in dag
        assert dag.has_vertex(2)
        assert 3 not in dag
        assert [1] not in dag

    def test_repr(self):
        """Test string representation."""
        dag = DAG.from_edges([(1, 2), (2, 3)])

        assert repr(dag) == "DAG(vertices=3, edges=2)"


class TestCycleDetection:
    """Tests for the acyclicity invariant."""

    def test_closing_edge_rejected(self):
        """Test that an edge closing a cycle raises and is not added."""
        dag = DAG.from_edges([(1, 2), (2, 3)])

        with pytest.raises(CycleDetectedError, match="would create a cycle") as exc_info:
            dag.add_edge(3, 1)

        assert exc_info.value.cycle == [(3, 1), (1, 2), (2, 3)]
        assert sorted(dag.edges()) == [(1, 2), (2, 3)]

    def test_two_cycle_rejected(self):
        """Test that a back edge between two vertices is rejected."""
        dag = DAG.from_edges([("a", "b")])

        with pytest.raises(CycleDetectedError):
            dag.add_edge("b", "a")

    def test_duplicate_edge_allowed(self):
        """Test that repeating an edge is not a cycle."""
        dag = DAG.from_edges([(1, 2), (1, 2)])

        assert dag.edges() == [(1, 2)]

    def test_validation_disabled(self):
        """Test that cycles are accepted without validation."""
        dag = DAG.from_edges(
            [(1, 2), (2, 1)], config=LCAConfig(validate_acyclic=False)
        )

        assert not dag.is_acyclic()
        with pytest.raises(CycleDetectedError, match="not acyclic") as exc_info:
            dag.validate()
        assert len(exc_info.value.cycle) == 2

    def test_validate_acyclic_graph(self):
        """Test that validate passes on a DAG."""
        dag = DAG.from_edges([(1, 2), (1, 3)])

        dag.validate()
        assert dag.is_acyclic()


class TestSelfLoops:
    """Tests for self-loop handling modes."""

    def test_warn(self):
        """Test that WARN skips the edge and records a warning."""
        dag = DAG.from_edges([(1, 1), (1, 2)])

        assert dag.edges() == [(1, 2)]
        warnings = dag.warnings.get_all()
        assert len(warnings) == 1
        assert warnings[0].context == "edge (1, 1)"

    def test_fail(self):
        """Test that FAIL raises CycleDetectedError."""
        dag = DAG(config=LCAConfig(on_self_loop=ErrorMode.FAIL))

        with pytest.raises(CycleDetectedError, match="Self-loop") as exc_info:
            dag.add_edge("x", "x")

        assert exc_info.value.cycle == [("x", "x")]
        assert "x" not in dag

    def test_ignore(self):
        """Test that IGNORE skips the edge silently."""
        dag = DAG(config=LCAConfig(on_self_loop=ErrorMode.IGNORE))
        dag.add_edge("x", "x")

        assert "x" in dag
        assert dag.edges() == []
        assert len(dag.warnings) == 0


class TestQueries:
    """Tests for structural queries."""

    def setup_method(self):
        """Create the diamond 1 -> {2, 3} -> 4."""
        self.dag = DAG.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)])

    def test_parents_and_children(self):
        """Test direct neighbours."""
        assert sorted(self.dag.parents(4)) == [2, 3]
        assert sorted(self.dag.children(1)) == [2, 3]
        assert self.dag.parents(1) == []

    def test_roots_and_leaves(self):
        """Test roots and leaves."""
        assert self.dag.roots() == [1]
        assert self.dag.leaves() == [4]

    def test_ancestors(self):
        """Test reflexive ancestor enumeration with distances."""
        assert self.dag.ancestors(4) == {4: 0, 2: 1, 3: 1, 1: 2}
        assert self.dag.ancestors(1) == {1: 0}

    def test_ancestors_bounded(self):
        """Test ancestor enumeration with a depth bound."""
        assert self.dag.ancestors(4, max_depth=1) == {4: 0, 2: 1, 3: 1}
        assert self.dag.ancestors(4, max_depth=0) == {4: 0}

    def test_is_ancestor(self):
        """Test the ancestor relation."""
        assert self.dag.is_ancestor(1, 4)
        assert self.dag.is_ancestor(4, 4)
        assert not self.dag.is_ancestor(4, 1)
        assert not self.dag.is_ancestor(2, 3)

    def test_shortest_path(self):
        """Test the shortest path from an ancestor."""
        assert self.dag.shortest_path(1, 4) in ([1, 2, 4], [1, 3, 4])
        assert self.dag.shortest_path(2, 2) == [2]

    def test_depth_and_branching(self):
        """Test depth and branching factor."""
        assert self.dag.depth() == 2
        assert self.dag.branching_factor() == 2

    def test_unknown_vertex(self):
        """Test that queries on unknown vertices raise."""
        with pytest.raises(InvalidVertexError, match="Known vertices"):
            self.dag.parents(99)
        with pytest.raises(InvalidVertexError):
            self.dag.ancestors("x")
        with pytest.raises(InvalidVertexError):
            self.dag.is_ancestor(1, 99)

    def test_statistics(self):
        """Test graph statistics."""
        stats = self.dag.get_statistics()

        assert stats == {
            "total_vertices": 4,
            "total_edges": 4,
            "roots": 1,
            "leaves": 1,
            "components": 1,
            "depth": 2,
            "branching_factor": 2,
        }

    def test_empty_statistics(self):
        """Test statistics of an empty graph."""
        stats = DAG().get_statistics()

        assert stats["total_vertices"] == 0
        assert stats["components"] == 0
        assert stats["depth"] == 0
        assert stats["branching_factor"] == 0

    def test_to_dict(self):
        """Test dictionary export."""
        data = DAG.from_edges([(1, 2)]).to_dict()

        assert data == {"vertices": [1, 2], "edges": [{"parent": 1, "child": 2}]}

    def test_to_dot(self):
        """Test DOT export."""
        dot = self.dag.to_dot()

        assert dot.startswith("digraph G {")
        assert '"1" -> "2";' in dot
        assert dot.endswith("}")

    def test_to_dot_escapes_labels(self):
        """Test that quotes and backslashes in labels are escaped."""
        dot = DAG.from_edges([('a"b', "c\\d")]).to_dot()

        assert '  "a\\"b";' in dot
        assert '  "a\\"b" -> "c\\\\d";' in dot

    def test_cyclic_statistics(self):
        """Test statistics of a cyclic graph built without validation."""
        dag = DAG.from_edges(
            [(1, 2), (2, 1)], config=LCAConfig(validate_acyclic=False)
        )

        stats = dag.get_statistics()

        assert stats["depth"] is None
        assert stats["total_edges"] == 2
        assert stats["branching_factor"] == 1


class TestRejectedVertex:
    """Tests that a vertex networkx refuses leaves the DAG consistent."""

    def test_none_vertex(self):
        """Test that a None vertex is rejected without being recorded."""
        dag = DAG.from_edges([(1, 2)])

        with pytest.raises(ValueError):
            dag.add_vertex(None)

        assert dag.vertices() == [1, 2]
        assert dag.to_dict()["vertices"] == [1, 2]
        with pytest.raises(InvalidVertexError):
            dag.insertion_index(None)

    def test_none_edge_endpoint(self):
        """Test that an edge to None adds nothing."""
        dag = DAG.from_edges([(1, 2)])

        with pytest.raises(ValueError):
            dag.add_edge(None, 3)

        assert dag.vertices() == [1, 2]
        assert 3 not in dag
