"""
Directed acyclic graph for LCA queries.

This module defines the DAG class, which uses networkx to store vertices
and (parent, child) edges, enforces the acyclicity invariant while the
graph is built, and answers the structural queries the LCA search needs.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Iterator, Optional

import networkx as nx

from dag_lca.exceptions import CycleDetectedError, InvalidVertexError
from dag_lca.models.config import ErrorMode, LCAConfig
from dag_lca.utils.warnings import WarningCollector

logger = logging.getLogger(__name__)

# Number of known vertices listed in an InvalidVertexError message
_VERTEX_SAMPLE_SIZE = 5


class DAG:
    """Directed acyclic graph of vertices and (parent, child) edges.

    An edge ``(parent, child)`` makes ``parent`` an ancestor of ``child``.
    The graph is built once and then queried read-only; every mutation
    goes through ``add_vertex``/``add_edge`` so the acyclicity invariant
    is checked as edges arrive.

    Attributes:
        graph: networkx DiGraph holding the vertices and edges.
        config: LCAConfig controlling validation and self-loop handling.
        warnings: WarningCollector for non-fatal construction issues.

    Example:
        >>> dag = DAG.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)])
        >>> sorted(dag.parents(4))
        [2, 3]
        >>> dag.depth()
        2
    """

    def __init__(self, config: Optional[LCAConfig] = None) -> None:
        """Initialize an empty DAG.

        Args:
            config: Optional configuration. Defaults to LCAConfig().
        """
        self.graph = nx.DiGraph()
        self.config = config or LCAConfig()
        self.warnings = WarningCollector()
        self._order: dict[Hashable, int] = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[Hashable, Hashable]],
        vertices: Optional[Iterable[Hashable]] = None,
        config: Optional[LCAConfig] = None,
    ) -> DAG:
        """Build a DAG from an edge list.

        Args:
            edges: Iterable of (parent, child) pairs.
            vertices: Optional vertices to add first, including isolated
                ones. Their order fixes the insertion order.
            config: Optional configuration.

        Returns:
            The constructed DAG.

        Raises:
            CycleDetectedError: If an edge closes a cycle while
                validation is enabled.

        Example:
            >>> dag = DAG.from_edges([("a", "b")], vertices=["z"])
            >>> dag.vertices()
            ['z', 'a', 'b']
        """
        dag = cls(config=config)
        for vertex in vertices or ():
            dag.add_vertex(vertex)
        dag.add_edges(edges)
        return dag

    def __contains__(self, vertex: object) -> bool:
        # networkx answers False for unhashable objects
        return vertex in self.graph

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.graph)

    def __repr__(self) -> str:
        return (
            f"DAG(vertices={self.graph.number_of_nodes()}, "
            f"edges={self.graph.number_of_edges()})"
        )

    def add_vertex(self, vertex: Hashable, **attrs: Any) -> None:
        """Add a vertex, with optional attributes.

        Adding an existing vertex updates its attributes and keeps its
        original insertion position.

        Args:
            vertex: Hashable vertex identifier.
            **attrs: Attributes stored on the vertex.
        """
        self.graph.add_node(vertex, **attrs)
        if vertex not in self._order:
            self._order[vertex] = len(self._order)

    def add_edge(self, parent: Hashable, child: Hashable) -> None:
        """Add a directed (parent, child) edge.

        Missing endpoints are added as vertices. When validation is
        enabled, an edge whose child already reaches its parent is
        rejected and the graph is left unchanged.

        Args:
            parent: Ancestor end of the edge.
            child: Descendant end of the edge.

        Raises:
            CycleDetectedError: If the edge is a self-loop under
                ErrorMode.FAIL, or closes a cycle while validation is
                enabled.
        """
        if parent == child:
            self._handle_self_loop(parent)
            return

        if (
            self.config.validate_acyclic
            and parent in self.graph
            and child in self.graph
            and nx.has_path(self.graph, child, parent)
        ):
            back_path = nx.shortest_path(self.graph, child, parent)
            cycle = [(parent, child)] + list(zip(back_path, back_path[1:]))
            logger.debug("Rejected edge %r -> %r: closes a cycle", parent, child)
            raise CycleDetectedError(
                f"Edge ({parent!r}, {child!r}) would create a cycle",
                cycle=cycle,
            )

        self.add_vertex(parent)
        self.add_vertex(child)
        self.graph.add_edge(parent, child)

    def add_edges(self, edges: Iterable[tuple[Hashable, Hashable]]) -> None:
        """Add several (parent, child) edges in order."""
        for parent, child in edges:
            self.add_edge(parent, child)

    def _handle_self_loop(self, vertex: Hashable) -> None:
        """Apply the configured self-loop policy to an edge (v, v)."""
        mode = self.config.on_self_loop
        if mode == ErrorMode.FAIL:
            raise CycleDetectedError(
                f"Self-loop on vertex {vertex!r}", cycle=[(vertex, vertex)]
            )

        # The vertex itself is valid even though the edge is not
        self.add_vertex(vertex)
        if mode == ErrorMode.WARN:
            self.warnings.add_self_loop_warning(vertex)
        logger.debug("Skipped self-loop on %r", vertex)

    def validate(self) -> None:
        """Check the acyclicity invariant over the whole graph.

        Useful for graphs built with ``validate_acyclic=False``.

        Raises:
            CycleDetectedError: If the graph contains a cycle.
        """
        try:
            cycle = nx.find_cycle(self.graph)
        except nx.NetworkXNoCycle:
            return
        raise CycleDetectedError(
            "Graph is not acyclic", cycle=[(u, v) for u, v in cycle]
        )

    def is_acyclic(self) -> bool:
        """Return True if the graph contains no cycle."""
        return nx.is_directed_acyclic_graph(self.graph)

    def require_vertex(self, vertex: Hashable) -> None:
        """Raise InvalidVertexError unless ``vertex`` is in the graph."""
        if vertex in self:
            return
        sample = list(self._order)[:_VERTEX_SAMPLE_SIZE]
        raise InvalidVertexError(
            f"Vertex {vertex!r} not found in graph", vertex, available=sample
        )

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self

    def vertices(self) -> list[Hashable]:
        """Return all vertices in insertion order."""
        return list(self._order)

    def edges(self) -> list[tuple[Hashable, Hashable]]:
        """Return all (parent, child) edges."""
        return list(self.graph.edges())

    def insertion_index(self, vertex: Hashable) -> int:
        """Return the position at which ``vertex`` was first added."""
        self.require_vertex(vertex)
        return self._order[vertex]

    def parents(self, vertex: Hashable) -> list[Hashable]:
        """Return the direct parents of a vertex."""
        self.require_vertex(vertex)
        return list(self.graph.predecessors(vertex))

    def children(self, vertex: Hashable) -> list[Hashable]:
        """Return the direct children of a vertex."""
        self.require_vertex(vertex)
        return list(self.graph.successors(vertex))

    def roots(self) -> list[Hashable]:
        """Return vertices without parents, in insertion order."""
        return [v for v in self._order if self.graph.in_degree(v) == 0]

    def leaves(self) -> list[Hashable]:
        """Return vertices without children, in insertion order."""
        return [v for v in self._order if self.graph.out_degree(v) == 0]

    def ancestors(
        self, vertex: Hashable, max_depth: Optional[int] = None
    ) -> dict[Hashable, int]:
        """Enumerate the ancestors of a vertex with their distances.

        Ancestry is reflexive: the vertex itself is included at distance
        0. Each ancestor maps to the length of the shortest directed path
        from it down to ``vertex``.

        Args:
            vertex: Vertex whose ancestors are enumerated.
            max_depth: Optional maximum number of hops to walk upward.

        Returns:
            Mapping of ancestor to hop distance.

        Raises:
            InvalidVertexError: If the vertex is not in the graph.

        Example:
            >>> dag = DAG.from_edges([(1, 2), (2, 3)])
            >>> dag.ancestors(3)
            {3: 0, 2: 1, 1: 2}
        """
        self.require_vertex(vertex)
        upward = self.graph.reverse(copy=False)
        return dict(
            nx.single_source_shortest_path_length(upward, vertex, cutoff=max_depth)
        )

    def is_ancestor(self, ancestor: Hashable, descendant: Hashable) -> bool:
        """Return True if ``ancestor`` reaches ``descendant`` (reflexive)."""
        self.require_vertex(ancestor)
        self.require_vertex(descendant)
        return ancestor == descendant or nx.has_path(
            self.graph, ancestor, descendant
        )

    def shortest_path(
        self, ancestor: Hashable, descendant: Hashable
    ) -> list[Hashable]:
        """Return the shortest directed path from ancestor to descendant.

        Raises:
            InvalidVertexError: If either vertex is not in the graph.
            networkx.NetworkXNoPath: If ``ancestor`` does not reach
                ``descendant``.
        """
        self.require_vertex(ancestor)
        self.require_vertex(descendant)
        return nx.shortest_path(self.graph, ancestor, descendant)

    def depth(self) -> int:
        """Return the longest path length from a root to any vertex.

        Raises:
            CycleDetectedError: If the graph is not acyclic.
        """
        self.validate()
        if self.graph.number_of_nodes() == 0:
            return 0
        return nx.dag_longest_path_length(self.graph)

    def branching_factor(self) -> int:
        """Return the maximum number of parents of any vertex."""
        return max((deg for _, deg in self.graph.in_degree()), default=0)

    def to_dict(self) -> dict[str, list[Any]]:
        """Export graph to dictionary format.

        Returns:
            Dictionary containing vertices (in insertion order) and edges.

        Example:
            >>> DAG.from_edges([(1, 2)]).to_dict()
            {'vertices': [1, 2], 'edges': [{'parent': 1, 'child': 2}]}
        """
        return {
            "vertices": self.vertices(),
            "edges": [
                {"parent": u, "child": v} for u, v in self.graph.edges()
            ],
        }

    def get_statistics(self) -> dict[str, Optional[int]]:
        """Get graph statistics.

        Returns:
            Dictionary with vertex, edge, root, leaf and component counts,
            plus the depth and branching factor of the graph. Depth is
            None for a graph built without validation that holds a cycle.
        """
        components = (
            nx.number_weakly_connected_components(self.graph)
            if self.graph.number_of_nodes()
            else 0
        )
        return {
            "total_vertices": self.graph.number_of_nodes(),
            "total_edges": self.graph.number_of_edges(),
            "roots": len(self.roots()),
            "leaves": len(self.leaves()),
            "components": components,
            "depth": self.depth() if self.is_acyclic() else None,
            "branching_factor": self.branching_factor(),
        }

    def to_dot(self) -> str:
        """Export graph to Graphviz DOT format.

        Example:
            >>> print(DAG.from_edges([(1, 2)]).to_dot())
            digraph G {
              "1";
              "2";
              "1" -> "2";
            }
        """
        lines = ["digraph G {"]
        for vertex in self._order:
            lines.append(f"  {_dot_id(vertex)};")
        for u, v in self.graph.edges():
            lines.append(f"  {_dot_id(u)} -> {_dot_id(v)};")
        lines.append("}")
        return "\n".join(lines)


def _dot_id(vertex: Hashable) -> str:
    """Quote a vertex as a DOT identifier, escaping backslashes and quotes."""
    label = str(vertex).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{label}"'
