"""
Search complexity analyzer for LCA queries.

This module estimates the cost of the exhaustive ancestor search, which
grows as O(V * b^d), and checks it against the configured limit before a
query runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from dag_lca.exceptions import SearchLimitError
from dag_lca.models.config import ErrorMode, LCAConfig
from dag_lca.utils.warnings import WarningCollector

if TYPE_CHECKING:
    from dag_lca.graph.dag import DAG

logger = logging.getLogger(__name__)


@dataclass
class SearchMetrics:
    """Search complexity metrics."""

    num_vertices: int  # V
    num_edges: int
    branching_factor: int  # b, maximum parent count
    depth: int  # d, hops the search may walk

    @property
    def estimated_cost(self) -> int:
        """Worst-case number of vertex visits, V * b^d."""
        return self.num_vertices * self.branching_factor**self.depth

    def exceeds(self, max_cost: Optional[int]) -> bool:
        """Check if the estimated cost is above ``max_cost``.

        Args:
            max_cost: Maximum allowed cost, or None for no limit.

        Returns:
            True if a limit is set and the estimate exceeds it.
        """
        return max_cost is not None and self.estimated_cost > max_cost

    def to_dict(self) -> dict[str, int]:
        return {
            "num_vertices": self.num_vertices,
            "num_edges": self.num_edges,
            "branching_factor": self.branching_factor,
            "depth": self.depth,
            "estimated_cost": self.estimated_cost,
        }


def analyze_graph(dag: DAG, max_depth: Optional[int] = None) -> SearchMetrics:
    """Compute search metrics for a graph.

    The depth is the longest path in the graph, capped by ``max_depth``.
    For a graph built without validation that turns out to be cyclic, the
    vertex count bounds the depth instead.

    Args:
        dag: Graph to analyze.
        max_depth: Optional search depth bound.

    Returns:
        SearchMetrics for the graph.
    """
    num_vertices = len(dag)
    if dag.is_acyclic():
        depth = dag.depth()
    else:
        depth = max(num_vertices - 1, 0)
    if max_depth is not None:
        depth = min(depth, max_depth)

    return SearchMetrics(
        num_vertices=num_vertices,
        num_edges=dag.graph.number_of_edges(),
        branching_factor=dag.branching_factor(),
        depth=depth,
    )


def check_complexity_limits(
    metrics: SearchMetrics,
    config: LCAConfig,
    collector: Optional[WarningCollector] = None,
) -> bool:
    """Check search metrics against the configured cost limit.

    Args:
        metrics: Metrics of the graph about to be searched.
        config: Configuration holding the limit and its error mode.
        collector: Optional collector receiving a warning under WARN.

    Returns:
        True if the search is within limits, False if it exceeds them
        and the error mode allows proceeding.

    Raises:
        SearchLimitError: If the limit is exceeded under ErrorMode.FAIL.
    """
    if not metrics.exceeds(config.max_search_cost):
        return True

    logger.debug(
        "Estimated search cost %d exceeds limit %d",
        metrics.estimated_cost,
        config.max_search_cost,
    )
    if config.on_limit_exceeded == ErrorMode.FAIL:
        raise SearchLimitError(
            f"Estimated search cost {metrics.estimated_cost} exceeds "
            f"limit {config.max_search_cost}",
            metrics=metrics.to_dict(),
        )
    if config.on_limit_exceeded == ErrorMode.WARN and collector is not None:
        collector.add_limit_warning(
            metrics.estimated_cost, config.max_search_cost
        )
    return False


def generate_complexity_report(metrics: SearchMetrics) -> str:
    """Generate a short human-readable complexity summary.

    Example:
        >>> metrics = SearchMetrics(4, 4, 2, 2)
        >>> print(generate_complexity_report(metrics))
        Search Complexity
          Vertices (V):         4
          Branching factor (b): 2
          Depth (d):            2
          Estimated cost:       16
    """
    lines = [
        "Search Complexity",
        f"  Vertices (V):         {metrics.num_vertices}",
        f"  Branching factor (b): {metrics.branching_factor}",
        f"  Depth (d):            {metrics.depth}",
        f"  Estimated cost:       {metrics.estimated_cost}",
    ]
    return "\n".join(lines)
