#!/usr/bin/env python3
"""
Quick Start Script - Demonstrates dag-lca core features

This script provides a quick demonstration of the main features
of dag-lca v1.0.
"""

from dag_lca import (
    DAG,
    CycleDetectedError,
    LCAConfig,
    LCASolver,
    TieBreak,
    format_result,
    format_statistics,
)


def main():
    print("=" * 60)
    print("DAG LCA v1.0 - Quick Start Demo")
    print("=" * 60)
    print()

    # Package dependency graph: an edge (a, b) means a is required by b
    dag = DAG.from_edges(
        [
            ("base", "core"),
            ("base", "utils"),
            ("core", "web"),
            ("utils", "web"),
            ("core", "cli"),
            ("utils", "cli"),
            ("web", "app"),
        ]
    )

    print("Graph statistics:")
    print(format_statistics(dag))
    print()

    solver = LCASolver(dag)

    # 1. Single LCA
    print("1. Lowest common ancestor of 'app' and 'cli'")
    print(format_result(solver.query("app", "cli")))
    print()

    # 2. Several minimal ancestors
    print("2. All lowest common ancestors of 'web' and 'cli'")
    result = solver.query("web", "cli")
    print(format_result(result))
    for warning in result.warnings:
        print(f"  [{warning.level}] {warning.message}")
    print()

    # 3. A different tie-break policy
    print("3. Insertion-order tie-break")
    ordered = LCASolver(dag, config=LCAConfig(tie_break=TieBreak.INSERTION_ORDER))
    print(f"  lca('web', 'cli') = {ordered.find_lca('web', 'cli')!r}")
    print()

    # 4. Explain
    print("4. Paths from the LCA of 'app' and 'cli'")
    for path in solver.explain("app", "cli"):
        print(f"  {path.to_string(use_ascii=True)}")
    print()

    # 5. Cycles are rejected while building
    print("5. Cycle detection")
    try:
        dag.add_edge("app", "base")
    except CycleDetectedError as e:
        print(f"  Rejected: {e}")

    print()
    print("=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
