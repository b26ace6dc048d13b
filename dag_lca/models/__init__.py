"""
Data models for LCA queries.

This package contains the configuration, result and path structures used
to describe lowest common ancestor queries and their outcomes.
"""

from dag_lca.models.ancestor_path import AncestorPath
from dag_lca.models.config import ErrorMode, LCAConfig, TieBreak
from dag_lca.models.result import LCAResult

__all__ = [
    "AncestorPath",
    "ErrorMode",
    "LCAConfig",
    "LCAResult",
    "TieBreak",
]
