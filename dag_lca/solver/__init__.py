"""
Solver module for lowest common ancestor queries.
"""

from dag_lca.solver.lca_solver import LCASolver, find_all_lca, find_lca

__all__ = ["LCASolver", "find_all_lca", "find_lca"]
