"""Version information."""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Version history
CHANGELOG = """
# Changelog

## v1.0.0

**DAG Lowest Common Ancestor**

- Exhaustive ancestor-set LCA search
- Explicit tie-break policy for multiple minimal ancestors
- find_all_lca for the full set of minimal common ancestors
- Cycle detection at graph construction
- Depth bound and search cost limits
- Tabular result reports

### Known Limitations

- No precomputation (binary lifting, Euler tour) for repeated queries
"""
