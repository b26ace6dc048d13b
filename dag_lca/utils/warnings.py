"""
Warning system for LCA queries.

This module defines warning collection for graph construction and LCA
search, allowing non-fatal conditions (skipped self-loops, ambiguous
results, truncated searches) to be recorded and reported to users.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable, Optional

VALID_LEVELS = ("INFO", "WARNING", "ERROR")


@dataclass
class LCAWarning:
    """Warning or error message recorded during construction or search.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Warning or error message text.
        context: Optional context information (e.g., the query pair).

    Example:
        >>> warning = LCAWarning(
        ...     level="WARNING",
        ...     message="Self-loop skipped",
        ...     context="edge (2, 2)"
        ... )
        >>> warning.level
        'WARNING'
    """

    level: str
    message: str
    context: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        if self.level not in VALID_LEVELS:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {list(VALID_LEVELS)}"
            )

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "level": self.level,
            "message": self.message,
            "context": self.context,
        }


class WarningCollector:
    """Collects warnings and errors during graph construction and search.

    Attributes:
        warnings: List of LCAWarning objects collected so far.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add("WARNING", "Self-loop skipped")
        >>> collector.has_errors()
        False
        >>> collector.add("ERROR", "Search limit exceeded")
        >>> collector.has_errors()
        True
        >>> len(collector.get_all())
        2
    """

    def __init__(self) -> None:
        """Initialize a WarningCollector."""
        self.warnings: list[LCAWarning] = []

    def __len__(self) -> int:
        return len(self.warnings)

    def add(
        self, level: str, message: str, context: Optional[str] = None
    ) -> None:
        """Add a warning or error message.

        Args:
            level: Severity level ("INFO", "WARNING", "ERROR").
            message: Warning or error message text.
            context: Optional context information.
        """
        warning = LCAWarning(level=level, message=message, context=context)
        self.warnings.append(warning)

    def extend(self, warnings: Iterable[LCAWarning]) -> None:
        """Append already-built warnings, e.g. from another collector."""
        self.warnings.extend(warnings)

    def has_errors(self) -> bool:
        """Check if any error-level warnings exist."""
        return any(warning.level == "ERROR" for warning in self.warnings)

    def get_all(self) -> list[LCAWarning]:
        """Get all collected warnings in the order they were added."""
        return self.warnings.copy()

    def get_by_level(self, level: str) -> list[LCAWarning]:
        """Get warnings and errors by severity level.

        Args:
            level: Severity level to filter by ("INFO", "WARNING", "ERROR").

        Returns:
            List of LCAWarning objects with the specified level.
        """
        return [
            warning for warning in self.warnings if warning.level == level
        ]

    def clear(self) -> None:
        """Clear all collected warnings and errors."""
        self.warnings.clear()

    def add_self_loop_warning(self, vertex: Hashable) -> None:
        """Add a warning for a self-loop edge that was skipped.

        Args:
            vertex: Vertex the self-loop was declared on.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add_self_loop_warning(2)
            >>> collector.get_all()[0].context
            'edge (2, 2)'
        """
        message = (
            f"Self-loop on vertex {vertex!r} violates acyclicity. "
            f"Edge skipped."
        )
        self.add("WARNING", message, f"edge ({vertex!r}, {vertex!r})")

    def add_ambiguity_warning(
        self,
        vertex_a: Hashable,
        vertex_b: Hashable,
        candidates: list[Hashable],
        chosen: Hashable,
        policy: str,
    ) -> None:
        """Add a warning when several minimal common ancestors exist.

        Args:
            vertex_a: First query vertex.
            vertex_b: Second query vertex.
            candidates: All minimal common ancestors.
            chosen: Candidate selected by the tie-break policy.
            policy: Name of the tie-break policy used.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add_ambiguity_warning(4, 5, [2, 3], 2, "nearest")
            >>> collector.get_by_level("WARNING")[0].context
            'lca(4, 5)'
        """
        message = (
            f"Vertices {vertex_a!r} and {vertex_b!r} have "
            f"{len(candidates)} lowest common ancestors: "
            f"{', '.join(repr(c) for c in candidates)}. "
            f"Using {chosen!r} ({policy} tie-break)."
        )
        self.add("WARNING", message, f"lca({vertex_a!r}, {vertex_b!r})")

    def add_truncation_warning(
        self, vertex: Hashable, max_depth: int
    ) -> None:
        """Add a warning when the depth bound cut an ancestor search short.

        Args:
            vertex: Query vertex whose search was truncated.
            max_depth: The depth bound that was reached.
        """
        message = (
            f"Ancestor search from {vertex!r} stopped at depth {max_depth}. "
            f"Ancestors beyond that depth were not considered."
        )
        self.add("WARNING", message, f"max_depth={max_depth}")

    def add_limit_warning(self, estimated_cost: int, limit: int) -> None:
        """Add a warning when the estimated search cost exceeds its limit.

        Args:
            estimated_cost: Estimated V * b^d cost of the search.
            limit: Configured maximum search cost.
        """
        message = (
            f"Estimated search cost {estimated_cost} exceeds limit {limit}. "
            f"Proceeding with exhaustive search."
        )
        self.add("WARNING", message)

    def get_summary(self) -> dict[str, int]:
        """Get a summary of warnings by level.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add("INFO", "Info 1")
            >>> collector.add("WARNING", "Warning 1")
            >>> collector.get_summary() == {"INFO": 1, "WARNING": 1, "ERROR": 0}
            True
        """
        summary: dict[str, int] = {level: 0 for level in VALID_LEVELS}
        for warning in self.warnings:
            summary[warning.level] = summary.get(warning.level, 0) + 1
        return summary
