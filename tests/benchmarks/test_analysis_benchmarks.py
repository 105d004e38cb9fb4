"""Scalability benchmarks for network analysis.

Each benchmark builds its facility from scratch so that cached results
on the Topology do not hide the cost being measured.

Run with:
    uv run pytest tests/benchmarks/ -v
"""

from __future__ import annotations

import math

import pytest

from network_analysis import Medium, Topology
from network_analysis.algorithms import (
    MediumConnectivityChecker,
    MinimumSpanningForest,
    RobustnessAnalyzer,
    ShortestPathTree,
)

# ---------------------------------------------------------------------------
# Topology generators
# ---------------------------------------------------------------------------


def _medium(i: int) -> Medium:
    return Medium.COPPER if i % 2 == 0 else Medium.FIBER


def make_ring(n: int) -> Topology:
    """Ring topology with n vertices and alternating media."""
    return Topology.from_links(
        n,
        [(i, (i + 1) % n, _medium(i), 1000 + i, 10 + i % 7) for i in range(n)],
    )


def make_complete(n: int) -> Topology:
    """Complete topology with n vertices."""
    links = []
    for i in range(n):
        for j in range(i + 1, n):
            links.append((i, j, _medium(i + j), 100 * (1 + (i * j) % 9), 1 + (i + 3 * j) % 50))
    return Topology.from_links(n, links)


def make_grid(n: int) -> Topology:
    """Grid topology with side length ~ sqrt(n)."""
    side = int(math.isqrt(n))
    links = []
    for r in range(side):
        for c in range(side):
            v = r * side + c
            if c + 1 < side:
                links.append((v, v + 1, Medium.COPPER, 1000, 23 + c))
            if r + 1 < side:
                links.append((v, v + side, Medium.FIBER, 500, 20 + r))
    return Topology.from_links(side * side, links)


# ---------------------------------------------------------------------------
# Benchmarks: parameterized over topology size
# ---------------------------------------------------------------------------

SIZES = [50, 100, 500]
DENSE_SIZES = [20, 50, 100]


@pytest.mark.benchmark
@pytest.mark.parametrize("n", SIZES, ids=[f"n={s}" for s in SIZES])
def test_bench_grid_shortest_path_tree(benchmark, n):
    """Benchmark Dijkstra from one corner of a grid."""
    topology = make_grid(n)
    tree = benchmark(ShortestPathTree, topology, 0)
    assert all(tree.has_path_to(v) for v in topology.vertices())


@pytest.mark.benchmark
@pytest.mark.parametrize("n", DENSE_SIZES, ids=[f"n={s}" for s in DENSE_SIZES])
def test_bench_complete_spanning_forest(benchmark, n):
    """Benchmark Prim on a complete topology."""
    topology = make_complete(n)
    forest = benchmark(MinimumSpanningForest, topology)
    assert len(forest.edges()) == n - 1
    assert len(forest.roots) == 1


@pytest.mark.benchmark
@pytest.mark.parametrize("n", SIZES, ids=[f"n={s}" for s in SIZES])
def test_bench_ring_medium_connectivity(benchmark, n):
    """Benchmark the copper-only traversal of a mixed-media ring."""
    topology = make_ring(n)
    checker = benchmark(MediumConnectivityChecker, topology, Medium.COPPER)
    assert not checker.is_connected()


@pytest.mark.benchmark
@pytest.mark.parametrize("n", SIZES, ids=[f"n={s}" for s in SIZES])
def test_bench_grid_robustness(benchmark, n):
    """Benchmark robustness on a grid (a corner fails with its two neighbours)."""
    topology = make_grid(n)
    analysis = benchmark(lambda: RobustnessAnalyzer(topology).analyze())
    assert not analysis.is_robust


@pytest.mark.benchmark
@pytest.mark.parametrize("n", DENSE_SIZES, ids=[f"n={s}" for s in DENSE_SIZES])
def test_bench_complete_robustness(benchmark, n):
    """Benchmark robustness on a complete topology (every trial runs)."""
    topology = make_complete(n)
    analysis = benchmark(lambda: RobustnessAnalyzer(topology).analyze())
    assert analysis.is_robust
    assert analysis.trials == n


@pytest.mark.benchmark
@pytest.mark.parametrize("n", DENSE_SIZES, ids=[f"n={s}" for s in DENSE_SIZES])
def test_bench_all_pairs_latency(benchmark, n):
    """Benchmark the all-pairs latency matrix on a ring."""

    def run():
        return make_ring(n).all_pairs_latency()

    matrix = benchmark(run)
    assert matrix.shape == (n, n)
