"""
Ancestor path model.

This module defines the AncestorPath class, which represents the chain of
edges leading from a common ancestor down to one of the query vertices.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional


@dataclass
class AncestorPath:
    """A directed path from an ancestor down to a descendant.

    Attributes:
        vertices: All vertices on the path (in order: ancestor → descendant).

    Example:
        1 → 2 → 4
        vertices = [1, 2, 4]
        hops = 2
    """

    vertices: List[Hashable] = field(default_factory=list)

    @property
    def hops(self) -> int:
        """Path length (number of edges)."""
        return len(self.vertices) - 1 if self.vertices else 0

    @property
    def ancestor(self) -> Optional[Hashable]:
        """Ancestor vertex (path start), or None if empty."""
        return self.vertices[0] if self.vertices else None

    @property
    def descendant(self) -> Optional[Hashable]:
        """Descendant vertex (path end), or None if empty."""
        return self.vertices[-1] if self.vertices else None

    def to_string(self, use_ascii: bool = False) -> str:
        """Generate human-readable path string.

        Args:
            use_ascii: If True, use ASCII characters (->) instead of Unicode arrow (→)

        Returns:
            String representation, e.g., "1 → 2 → 4"
            or (use_ascii=True): "1 -> 2 -> 4"
        """
        if not self.vertices:
            return "(empty path)"

        separator = " -> " if use_ascii else " → "
        return separator.join(str(vertex) for vertex in self.vertices)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "path": self.to_string(),
            "hops": self.hops,
            "ancestor": self.ancestor,
            "descendant": self.descendant,
            "vertices": list(self.vertices),
        }
