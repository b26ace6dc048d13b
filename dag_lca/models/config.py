"""
Configuration model for LCA queries.

This module defines the LCAConfig class and the ErrorMode and TieBreak
enums, which control graph validation, how ties between several lowest
common ancestors are broken, and how far the ancestor search may go.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional


class ErrorMode(str, Enum):
    """Enumeration of handling modes for non-fatal conditions.

    Attributes:
        FAIL: Raise an exception immediately when the condition occurs.
        WARN: Record a warning and continue.
        IGNORE: Silently continue.

    Example:
        >>> mode = ErrorMode.FAIL
        >>> mode.value
        'fail'
        >>> ErrorMode.values()
        ['fail', 'warn', 'ignore']
    """

    FAIL = "fail"
    WARN = "warn"
    IGNORE = "ignore"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible error mode values."""
        return [member.value for member in cls]


class TieBreak(str, Enum):
    """Policy for choosing one LCA when several minimal ones exist.

    A DAG, unlike a tree, can have several common ancestors none of which
    is below another. The policy makes the single-result query
    deterministic.

    Attributes:
        NEAREST: Prefer the smallest combined distance to both query
            vertices, then the smallest of the two distances' maximum,
            then the earliest vertex in graph insertion order.
        INSERTION_ORDER: Prefer the earliest vertex in graph insertion
            order.

    Example:
        >>> TieBreak("nearest")
        <TieBreak.NEAREST: 'nearest'>
    """

    NEAREST = "nearest"
    INSERTION_ORDER = "insertion_order"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible tie-break values."""
        return [member.value for member in cls]


@dataclass
class LCAConfig:
    """Configuration settings for graph construction and LCA search.

    Attributes:
        validate_acyclic: If True, every added edge is checked and an edge
            closing a cycle raises CycleDetectedError. Defaults to True.
        on_self_loop: Handling of (v, v) edges. FAIL raises
            CycleDetectedError, WARN skips the edge with a warning,
            IGNORE skips it silently. Defaults to ErrorMode.WARN.
        tie_break: Policy choosing one LCA among several minimal ones.
            Defaults to TieBreak.NEAREST.
        max_depth: Maximum number of hops the ancestor search walks up
            from a query vertex. None means unbounded (the graph's depth).
        max_search_cost: Maximum estimated search cost (V * b^d) allowed
            before a query. None disables the check.
        on_limit_exceeded: Handling when the estimated cost exceeds
            max_search_cost. Defaults to ErrorMode.FAIL.

    Example:
        >>> config = LCAConfig(tie_break=TieBreak.INSERTION_ORDER)
        >>> config.on_self_loop
        <ErrorMode.WARN: 'warn'>
        >>> LCAConfig.from_dict({"max_depth": 3, "tie_break": "nearest"}).max_depth
        3
    """

    validate_acyclic: bool = True
    on_self_loop: ErrorMode = ErrorMode.WARN
    tie_break: TieBreak = TieBreak.NEAREST

    # Search limits
    max_depth: Optional[int] = None  # Hops walked up from a query vertex
    max_search_cost: Optional[int] = None  # Upper bound on V * b^d
    on_limit_exceeded: ErrorMode = ErrorMode.FAIL

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.validate_acyclic, bool):
            raise TypeError("validate_acyclic must be a boolean")
        if not isinstance(self.on_self_loop, ErrorMode):
            raise TypeError("on_self_loop must be an ErrorMode instance")
        if not isinstance(self.tie_break, TieBreak):
            raise TypeError("tie_break must be a TieBreak instance")
        if not isinstance(self.on_limit_exceeded, ErrorMode):
            raise TypeError("on_limit_exceeded must be an ErrorMode instance")
        for name in ("max_depth", "max_search_cost"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer or None")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LCAConfig:
        """Build a configuration from a plain mapping.

        Enum fields accept their string values, so settings loaded from
        JSON or similar sources can be passed through unchanged.

        Args:
            data: Mapping of field names to values.

        Returns:
            A validated LCAConfig.

        Raises:
            ValueError: If a key is unknown or an enum value is invalid.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown configuration keys: {sorted(unknown)}. "
                f"Valid keys are {sorted(known)}"
            )

        values = dict(data)
        for name in ("on_self_loop", "on_limit_exceeded"):
            if isinstance(values.get(name), str):
                values[name] = ErrorMode(values[name])
        if isinstance(values.get("tie_break"), str):
            values["tie_break"] = TieBreak(values["tie_break"])

        return cls(**values)
