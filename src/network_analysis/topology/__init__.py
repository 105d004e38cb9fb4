"""Network topology model.

This module provides the link and topology types of the analysis engine
and a reader for the plain-text topology format.

Key features:
- Latency weights derived from link length and medium
- Insertion-ordered adjacency over an arena of links
- Lazily built, cached analytic facilities
"""

from __future__ import annotations

from network_analysis.topology.graph import Topology
from network_analysis.topology.link import WeightedLink
from network_analysis.topology.loader import load_topology, parse_topology

__all__ = [
    "WeightedLink",
    "Topology",
    "parse_topology",
    "load_topology",
]
