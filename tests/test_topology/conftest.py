"""Test fixtures for topology model tests."""

from __future__ import annotations

import pytest

from network_analysis import Medium, Topology

SQUARE_TEXT = """4
0 1 copper 1000 23
1 2 fiber 500 20
2 3 copper 800 46
0 3 fiber 300 40
"""


@pytest.fixture
def square_topology():
    """Four sites on a cycle, alternating copper and fiber."""
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
def square_file(tmp_path):
    """The square topology written to a file."""
    path = tmp_path / "square.txt"
    path.write_text(SQUARE_TEXT, encoding="utf-8")
    return path
