"""
Utility functions and helpers for LCA queries.

This package contains the warning collector, search complexity checks and
tabular reporting that support the LCA solver.
"""

from dag_lca.utils.complexity import (
    SearchMetrics,
    analyze_graph,
    check_complexity_limits,
    generate_complexity_report,
)
from dag_lca.utils.report import format_result, format_statistics
from dag_lca.utils.warnings import LCAWarning, WarningCollector

__all__ = [
    "SearchMetrics",
    "analyze_graph",
    "check_complexity_limits",
    "generate_complexity_report",
    "format_result",
    "format_statistics",
    "LCAWarning",
    "WarningCollector",
]
