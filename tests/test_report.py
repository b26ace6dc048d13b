"""
Tests for tabular reports.
"""

from dag_lca import DAG, LCAConfig, LCASolver, format_result, format_statistics


class TestFormatResult:
    """Tests for format_result."""

    def test_single_candidate(self):
        """Test a result with one LCA."""
        result = LCASolver(DAG.from_edges([(1, 2), (1, 3)])).query(2, 3)

        lines = format_result(result).splitlines()

        assert lines[0] == "lca(2, 3) = 1"
        assert "distance_a" in lines[1]
        assert lines[-1].split() == ["1", "1", "1", "*"]

    def test_several_candidates(self):
        """Test that only the chosen candidate is marked."""
        dag = DAG.from_edges([(1, 3), (2, 3), (1, 4), (2, 4)])
        result = LCASolver(dag).query(3, 4)

        text = format_result(result)

        assert text.count("*") == 1
        assert text.splitlines()[-1].split() == ["2", "1", "1"]

    def test_no_ancestor(self):
        """Test a result without a common ancestor."""
        dag = DAG.from_edges([], vertices=["a", "b"])
        result = LCASolver(dag).query("a", "b")

        assert format_result(result) == "lca('a', 'b') = None (no common ancestor)"

    def test_truncated(self):
        """Test that truncation is noted."""
        dag = DAG.from_edges([(1, 2), (2, 3), (2, 4)])
        result = LCASolver(dag, config=LCAConfig(max_depth=1)).query(3, 4)

        assert format_result(result).endswith("(search truncated by max_depth)")

    def test_table_format(self):
        """Test passing a tabulate format."""
        result = LCASolver(DAG.from_edges([(1, 2), (1, 3)])).query(2, 3)

        assert "|" in format_result(result, tablefmt="github")


def test_format_statistics():
    """Test the statistics table."""
    text = format_statistics(DAG.from_edges([(1, 2), (1, 3)]))

    assert "total_vertices" in text
    assert "branching_factor" in text


def test_format_statistics_cyclic():
    """Test the statistics table of an unvalidated cyclic graph."""
    dag = DAG.from_edges([(1, 2), (2, 1)], config=LCAConfig(validate_acyclic=False))

    text = format_statistics(dag)

    assert "depth" in text
    assert "total_edges" in text
