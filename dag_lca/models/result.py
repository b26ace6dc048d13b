"""
LCA query result model.

This module defines the LCAResult class, which represents the full outcome
of a lowest common ancestor query: the chosen ancestor, every minimal
candidate, their distances, and the warnings raised along the way.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

from dag_lca.utils.warnings import LCAWarning


@dataclass
class LCAResult:
    """Result of a lowest common ancestor query.

    Attributes:
        vertex_a: First query vertex.
        vertex_b: Second query vertex.
        lca: The chosen lowest common ancestor, or None if the vertices
            share no ancestor.
        candidates: Every minimal common ancestor, ordered by the
            tie-break policy. ``lca`` is the first entry.
        distances: For each candidate, its distance in hops to
            ``vertex_a`` and to ``vertex_b``.
        common_ancestors: Every vertex that is an ancestor of both query
            vertices (reflexive), minimal or not.
        truncated: True when a depth bound cut either ancestor search
            short, so the result may miss ancestors above the bound.
        warnings: Warnings collected while answering this query.

    Example:
        >>> from dag_lca import DAG, LCASolver
        >>> solver = LCASolver(DAG.from_edges([(1, 2), (1, 3)]))
        >>> result = solver.query(2, 3)
        >>> result.lca
        1
        >>> result.distances[1]
        (1, 1)
    """

    vertex_a: Hashable
    vertex_b: Hashable
    lca: Optional[Hashable] = None
    candidates: list[Hashable] = field(default_factory=list)
    distances: dict[Hashable, tuple[int, int]] = field(default_factory=dict)
    common_ancestors: set[Hashable] = field(default_factory=set)
    truncated: bool = False
    warnings: list[LCAWarning] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Whether the query vertices share a common ancestor."""
        return self.lca is not None

    @property
    def is_ambiguous(self) -> bool:
        """Whether more than one minimal common ancestor exists."""
        return len(self.candidates) > 1

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary format.

        Vertices are emitted as-is, so the output is JSON-serializable
        when the vertex identifiers are.

        Returns:
            Dictionary representation of the result.
        """
        return {
            "vertex_a": self.vertex_a,
            "vertex_b": self.vertex_b,
            "lca": self.lca,
            "found": self.found,
            "ambiguous": self.is_ambiguous,
            "candidates": [
                {
                    "vertex": candidate,
                    "distance_a": self.distances[candidate][0],
                    "distance_b": self.distances[candidate][1],
                }
                for candidate in self.candidates
            ],
            "common_ancestor_count": len(self.common_ancestors),
            "truncated": self.truncated,
            "warnings": [warning.to_dict() for warning in self.warnings],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Convert result to JSON string.

        Args:
            indent: Number of spaces to use for indentation. Defaults to 2.

        Returns:
            JSON string representation of the result.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
