"""
Tabular reports for LCA results and graph statistics.

This module renders LCAResult candidates and DAG statistics as plain-text
tables using tabulate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tabulate import tabulate

if TYPE_CHECKING:
    from dag_lca.graph.dag import DAG
    from dag_lca.models.result import LCAResult

CANDIDATE_HEADERS = ["vertex", "distance_a", "distance_b", "chosen"]


def format_result(result: LCAResult, tablefmt: str = "simple") -> str:
    """Render the candidates of an LCA query as a table.

    Args:
        result: Query result to render.
        tablefmt: Any table format supported by tabulate.

    Returns:
        A heading line followed by one row per minimal common ancestor,
        or a single line when no common ancestor exists.

    Example:
        >>> from dag_lca import DAG, LCASolver
        >>> result = LCASolver(DAG.from_edges([(1, 2), (1, 3)])).query(2, 3)
        >>> format_result(result).splitlines()[0]
        'lca(2, 3) = 1'
    """
    heading = f"lca({result.vertex_a!r}, {result.vertex_b!r}) = {result.lca!r}"
    if not result.found:
        return f"{heading} (no common ancestor)"

    rows = [
        [
            candidate,
            result.distances[candidate][0],
            result.distances[candidate][1],
            "*" if candidate == result.lca else "",
        ]
        for candidate in result.candidates
    ]
    lines = [heading, tabulate(rows, headers=CANDIDATE_HEADERS, tablefmt=tablefmt)]
    if result.truncated:
        lines.append("(search truncated by max_depth)")
    return "\n".join(lines)


def format_statistics(dag: DAG, tablefmt: str = "simple") -> str:
    """Render DAG.get_statistics() as a two-column table."""
    rows = list(dag.get_statistics().items())
    return tabulate(rows, headers=["statistic", "value"], tablefmt=tablefmt)
