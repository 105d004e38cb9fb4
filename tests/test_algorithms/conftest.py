"""Test fixtures for graph algorithm tests."""

from __future__ import annotations

import pytest

from network_analysis import Medium, Topology


@pytest.fixture
def square_topology():
    """Four sites on a cycle, alternating copper and fiber.

    0 -copper(1000, w=1)- 1 -fiber(500, w=1)- 2 -copper(800, w=2)- 3 -fiber(300, w=2)- 0
    """
    return Topology.from_links(
        4,
        [
            (0, 1, Medium.COPPER, 1000, 23),
            (1, 2, Medium.FIBER, 500, 20),
            (2, 3, Medium.COPPER, 800, 46),
            (0, 3, Medium.FIBER, 300, 40),
        ],
    )


@pytest.fixture
def complete_topology():
    """K4 over fiber with distinct integer weights 1..6.

    Minimum spanning tree: 0-1 (1), 1-2 (2), 2-3 (3), total 6.
    """
    return Topology.from_links(
        4,
        [
            (0, 1, Medium.FIBER, 100, 20),
            (1, 2, Medium.FIBER, 200, 40),
            (2, 3, Medium.FIBER, 300, 60),
            (0, 2, Medium.FIBER, 400, 80),
            (1, 3, Medium.FIBER, 500, 100),
            (0, 3, Medium.FIBER, 600, 120),
        ],
    )


@pytest.fixture
def split_topology():
    """Two components: copper triangle {0, 1, 2} and fiber pair {3, 4}."""
    return Topology.from_links(
        5,
        [
            (0, 1, Medium.COPPER, 100, 23),
            (1, 2, Medium.COPPER, 100, 23),
            (0, 2, Medium.COPPER, 100, 69),
            (3, 4, Medium.FIBER, 100, 20),
        ],
    )


@pytest.fixture
def all_copper_ring():
    """Ring of six copper links, each with weight 1."""
    return Topology.from_links(
        6,
        [(i, (i + 1) % 6, Medium.COPPER, 1000, 23) for i in range(6)],
    )
