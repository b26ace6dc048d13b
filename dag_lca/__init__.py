"""
DAG Lowest Common Ancestor v1.0

Find the lowest common ancestor of two vertices in a directed acyclic
graph, with an explicit policy for graphs where several exist.

Example:
    >>> from dag_lca import DAG, find_lca
    >>> dag = DAG.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)])
    >>> find_lca(dag, 2, 3)
    1
"""

from dag_lca.version import __version__, __version_info__

__author__ = "DAG LCA Contributors"

from dag_lca.exceptions import (
    CycleDetectedError,
    InvalidVertexError,
    LCAError,
    SearchLimitError,
)
from dag_lca.graph.dag import DAG
from dag_lca.models.ancestor_path import AncestorPath
from dag_lca.models.config import ErrorMode, LCAConfig, TieBreak
from dag_lca.models.result import LCAResult
from dag_lca.solver.lca_solver import LCASolver, find_all_lca, find_lca
from dag_lca.utils.report import format_result, format_statistics
from dag_lca.utils.warnings import LCAWarning, WarningCollector

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Core
    "DAG",
    "LCASolver",
    "find_lca",
    "find_all_lca",
    # Configuration
    "LCAConfig",
    "ErrorMode",
    "TieBreak",
    # Results
    "LCAResult",
    "AncestorPath",
    "LCAWarning",
    "WarningCollector",
    # Reporting
    "format_result",
    "format_statistics",
    # Exceptions
    "LCAError",
    "InvalidVertexError",
    "CycleDetectedError",
    "SearchLimitError",
]
