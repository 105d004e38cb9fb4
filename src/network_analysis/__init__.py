"""
network-analysis -- latency, bandwidth and failure analysis for
copper/fiber network topologies.

Lowest-latency paths with bottleneck bandwidth | Minimum spanning forest |
Single-medium connectivity | Double-failure robustness

Graph algorithms implemented from primitives. NumPy for matrix output.
"""

from network_analysis._version import __version__
from network_analysis.algorithms import (
    IndexMinPQ,
    MediumConnectivityChecker,
    MinimumSpanningForest,
    RobustnessAnalysis,
    RobustnessAnalyzer,
    ShortestPath,
    ShortestPathTree,
    SpanningForest,
)
from network_analysis.config import AnalysisConfig, ReportConfig
from network_analysis.errors import InvalidVertexError, TopologyFormatError
from network_analysis.topology import Topology, WeightedLink, load_topology, parse_topology
from network_analysis.types import COPPER_SPEED, FIBER_SPEED, Medium

# NOTE: Full subpackage APIs are accessible via direct imports:
#   from network_analysis.complexity import complexity, get_complexity, ...
#   from network_analysis.serialization import topology_to_dict, ...

__all__ = [
    "__version__",
    # Model
    "Medium",
    "COPPER_SPEED",
    "FIBER_SPEED",
    "WeightedLink",
    "Topology",
    # Loading
    "parse_topology",
    "load_topology",
    # Algorithms
    "IndexMinPQ",
    "ShortestPath",
    "ShortestPathTree",
    "SpanningForest",
    "MinimumSpanningForest",
    "MediumConnectivityChecker",
    "RobustnessAnalysis",
    "RobustnessAnalyzer",
    # Configuration
    "AnalysisConfig",
    "ReportConfig",
    # Errors
    "InvalidVertexError",
    "TopologyFormatError",
]
