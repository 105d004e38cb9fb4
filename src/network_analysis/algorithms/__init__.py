"""Graph algorithms over a Topology.

This module provides the analytic facilities of the engine, each a
self-contained pass over a topology's adjacency lists:

- Indexed min-priority queue with decrease-key
- Dijkstra shortest-path trees with bottleneck bandwidth
- Prim minimum spanning forest
- Medium-restricted reachability
- Double-failure robustness via articulation points
"""

from __future__ import annotations

from network_analysis.algorithms.connectivity import MediumConnectivityChecker
from network_analysis.algorithms.priority_queue import IndexMinPQ
from network_analysis.algorithms.robustness import RobustnessAnalysis, RobustnessAnalyzer
from network_analysis.algorithms.shortest_path import ShortestPath, ShortestPathTree
from network_analysis.algorithms.spanning_forest import MinimumSpanningForest, SpanningForest

__all__ = [
    # Priority queue
    "IndexMinPQ",
    # Shortest paths
    "ShortestPath",
    "ShortestPathTree",
    # Spanning forest
    "SpanningForest",
    "MinimumSpanningForest",
    # Connectivity
    "MediumConnectivityChecker",
    # Robustness
    "RobustnessAnalysis",
    "RobustnessAnalyzer",
]
