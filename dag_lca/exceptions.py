"""
Custom exception classes for DAG lowest common ancestor queries.

This module defines all custom exceptions used throughout the dag_lca
package. These exceptions provide specific error types for the failure
scenarios of graph construction and LCA search.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional


class LCAError(Exception):
    """Base exception class for all LCA errors.

    This exception serves as the base class for all custom exceptions in the
    dag_lca package. It can be used to catch any LCA-related error.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize an LCAError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class InvalidVertexError(LCAError):
    """Exception raised when a query vertex does not exist in the graph.

    The search never substitutes a default for a missing vertex; the
    error is surfaced to the caller as-is.

    Attributes:
        message: Error message describing the missing vertex.
        vertex: The vertex that was not found.
        available: Optional sample of vertices present in the graph.
    """

    def __init__(
        self,
        message: str,
        vertex: Hashable,
        available: Optional[list[Hashable]] = None,
    ) -> None:
        """Initialize an InvalidVertexError.

        Args:
            message: Error message describing the missing vertex.
            vertex: The vertex that was not found.
            available: Optional sample of vertices present in the graph.
        """
        self.vertex = vertex
        self.available = available or []

        if available:
            message = self._build_message(message)

        super().__init__(message)

    def _build_message(self, message: str) -> str:
        """Build detailed error message listing known vertices."""
        msg = [message, "Known vertices:"]
        for vertex in self.available:
            msg.append(f"  • {vertex!r}")
        return "\n".join(msg)


class CycleDetectedError(LCAError):
    """Exception raised when a graph violates the acyclicity invariant.

    Cycles are rejected while the graph is built (or when it is validated
    explicitly), never while it is being queried.

    Attributes:
        message: Error message describing the cycle.
        cycle: Edges forming the cycle, as (parent, child) pairs.
    """

    def __init__(
        self,
        message: str,
        cycle: Optional[list[tuple[Hashable, Hashable]]] = None,
    ) -> None:
        """Initialize a CycleDetectedError.

        Args:
            message: Error message describing the cycle.
            cycle: Optional list of edges forming the cycle.
        """
        self.cycle = cycle or []

        if self.cycle:
            path = " -> ".join(repr(u) for u, _ in self.cycle)
            message = f"{message} (cycle: {path} -> {self.cycle[-1][1]!r})"

        super().__init__(message)


class SearchLimitError(LCAError):
    """Exception raised when an LCA search would exceed its cost limit.

    Attributes:
        message: Error message describing the exceeded limit.
        metrics: Dictionary of the search metrics that were checked.
    """

    def __init__(
        self, message: str, metrics: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.metrics = metrics or {}
