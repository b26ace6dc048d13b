"""
Lowest common ancestor solver for directed acyclic graphs.

This module defines the LCASolver class, which finds the lowest common
ancestors of two vertices by exhaustive ancestor-set enumeration, and the
find_lca/find_all_lca convenience functions built on it.
"""

from __future__ import annotations

import logging
from typing import Hashable, Optional

from dag_lca.graph.dag import DAG
from dag_lca.models.ancestor_path import AncestorPath
from dag_lca.models.config import LCAConfig, TieBreak
from dag_lca.models.result import LCAResult
from dag_lca.utils.complexity import analyze_graph, check_complexity_limits
from dag_lca.utils.warnings import WarningCollector

logger = logging.getLogger(__name__)


class LCASolver:
    """Lowest common ancestor solver.

    Responsibilities:
    1. Find the single LCA of two vertices (find_lca)
    2. Find every minimal common ancestor (find_all_lca)
    3. Report the full query outcome (query)
    4. Explain the paths from the LCA to both vertices (explain)

    Core algorithm: exhaustive ancestor enumeration
    1. Walk upward from each query vertex (breadth-first, against edge
       direction), recording the shortest distance to every ancestor
    2. Intersect the two ancestor sets
    3. Keep the common ancestors none of whose children is also common
    4. Order the survivors by the configured tie-break policy

    Usage:
        solver = LCASolver(DAG.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)]))

        solver.find_lca(2, 3)        # 1
        solver.find_all_lca(4, 4)    # [4]

        for path in solver.explain(2, 3):
            print(path.to_string())
    """

    def __init__(self, graph: DAG, config: Optional[LCAConfig] = None) -> None:
        """Initialize an LCASolver.

        Args:
            graph: Graph to query. It is never modified by the solver.
            config: Optional configuration. Defaults to the graph's own.
        """
        self.graph = graph
        self.config = config or graph.config
        self.warnings = WarningCollector()

    def find_lca(self, vertex_a: Hashable, vertex_b: Hashable) -> Optional[Hashable]:
        """Find the lowest common ancestor of two vertices.

        When several minimal common ancestors exist, the configured
        tie-break policy picks one.

        Args:
            vertex_a: First query vertex.
            vertex_b: Second query vertex.

        Returns:
            The lowest common ancestor, or None if there is none.

        Raises:
            InvalidVertexError: If either vertex is not in the graph.
            SearchLimitError: If the search exceeds its cost limit under
                ErrorMode.FAIL.
        """
        return self.query(vertex_a, vertex_b).lca

    def find_all_lca(
        self, vertex_a: Hashable, vertex_b: Hashable
    ) -> list[Hashable]:
        """Find every minimal common ancestor of two vertices.

        Returns:
            Minimal common ancestors ordered by the tie-break policy;
            empty if the vertices share no ancestor.
        """
        return self.query(vertex_a, vertex_b).candidates

    def query(self, vertex_a: Hashable, vertex_b: Hashable) -> LCAResult:
        """Run an LCA query and return its full outcome.

        Args:
            vertex_a: First query vertex.
            vertex_b: Second query vertex.

        Returns:
            LCAResult with the chosen LCA, all candidates, their
            distances, and the warnings collected by this query.

        Raises:
            InvalidVertexError: If either vertex is not in the graph.
            SearchLimitError: If the search exceeds its cost limit under
                ErrorMode.FAIL.
        """
        # Validate query vertices before doing any work
        self.graph.require_vertex(vertex_a)
        self.graph.require_vertex(vertex_b)

        collector = WarningCollector()

        if self.config.max_search_cost is not None:
            metrics = analyze_graph(self.graph, self.config.max_depth)
            check_complexity_limits(metrics, self.config, collector)

        ancestors_a, truncated_a = self._enumerate_ancestors(vertex_a, collector)
        if vertex_b == vertex_a:
            ancestors_b, truncated_b = ancestors_a, truncated_a
        else:
            ancestors_b, truncated_b = self._enumerate_ancestors(
                vertex_b, collector
            )

        common = ancestors_a.keys() & ancestors_b.keys()
        minimal = [
            vertex
            for vertex in common
            if not any(
                child in common for child in self.graph.children(vertex)
            )
        ]
        candidates = self._order_candidates(minimal, ancestors_a, ancestors_b)

        result = LCAResult(
            vertex_a=vertex_a,
            vertex_b=vertex_b,
            lca=candidates[0] if candidates else None,
            candidates=candidates,
            distances={
                vertex: (ancestors_a[vertex], ancestors_b[vertex])
                for vertex in candidates
            },
            common_ancestors=set(common),
            truncated=truncated_a or truncated_b,
        )

        if result.is_ambiguous:
            collector.add_ambiguity_warning(
                vertex_a,
                vertex_b,
                candidates,
                result.lca,
                self.config.tie_break.value,
            )

        result.warnings = collector.get_all()
        self.warnings.extend(result.warnings)

        logger.debug(
            "lca(%r, %r) = %r (%d candidate(s), %d common ancestor(s))",
            vertex_a,
            vertex_b,
            result.lca,
            len(candidates),
            len(common),
        )
        return result

    def explain(
        self, vertex_a: Hashable, vertex_b: Hashable
    ) -> list[AncestorPath]:
        """Explain an LCA by the paths leading down to both vertices.

        Returns:
            Two AncestorPath objects, from the chosen LCA to ``vertex_a``
            and to ``vertex_b``, or an empty list if there is no LCA.
        """
        lca = self.find_lca(vertex_a, vertex_b)
        if lca is None:
            return []

        return [
            AncestorPath(vertices=self.graph.shortest_path(lca, vertex))
            for vertex in (vertex_a, vertex_b)
        ]

    def _enumerate_ancestors(
        self, vertex: Hashable, collector: WarningCollector
    ) -> tuple[dict[Hashable, int], bool]:
        """Enumerate ancestors of ``vertex`` within the depth bound.

        Returns:
            (ancestor-to-distance mapping, whether the bound cut the
            search short).
        """
        max_depth = self.config.max_depth
        ancestors = self.graph.ancestors(vertex, max_depth=max_depth)

        truncated = max_depth is not None and any(
            parent not in ancestors
            for ancestor, distance in ancestors.items()
            if distance == max_depth
            for parent in self.graph.parents(ancestor)
        )
        if truncated:
            collector.add_truncation_warning(vertex, max_depth)

        return ancestors, truncated

    def _order_candidates(
        self,
        candidates: list[Hashable],
        ancestors_a: dict[Hashable, int],
        ancestors_b: dict[Hashable, int],
    ) -> list[Hashable]:
        """Order minimal common ancestors by the tie-break policy."""
        if self.config.tie_break == TieBreak.INSERTION_ORDER:
            return sorted(candidates, key=self.graph.insertion_index)

        return sorted(
            candidates,
            key=lambda v: (
                ancestors_a[v] + ancestors_b[v],
                max(ancestors_a[v], ancestors_b[v]),
                self.graph.insertion_index(v),
            ),
        )


def find_lca(
    graph: DAG,
    vertex_a: Hashable,
    vertex_b: Hashable,
    config: Optional[LCAConfig] = None,
) -> Optional[Hashable]:
    """Find the lowest common ancestor of two vertices in a DAG.

    Args:
        graph: Graph to query.
        vertex_a: First query vertex.
        vertex_b: Second query vertex.
        config: Optional configuration overriding the graph's own.

    Returns:
        The lowest common ancestor, or None if the vertices share none.

    Raises:
        InvalidVertexError: If either vertex is not in the graph.

    Example:
        >>> dag = DAG.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)])
        >>> find_lca(dag, 2, 3)
        1
        >>> find_lca(dag, 4, 4)
        4
    """
    return LCASolver(graph, config=config).find_lca(vertex_a, vertex_b)


def find_all_lca(
    graph: DAG,
    vertex_a: Hashable,
    vertex_b: Hashable,
    config: Optional[LCAConfig] = None,
) -> list[Hashable]:
    """Find every minimal common ancestor of two vertices in a DAG.

    Example:
        >>> dag = DAG.from_edges([(1, 3), (2, 3), (1, 4), (2, 4)])
        >>> find_all_lca(dag, 3, 4)
        [1, 2]
    """
    return LCASolver(graph, config=config).find_all_lca(vertex_a, vertex_b)
