"""
Graph module.

This package contains the graph representation queried by the LCA solver,
the networkx-backed DAG class.
"""

from dag_lca.graph.dag import DAG

__all__ = [
    "DAG",
]
