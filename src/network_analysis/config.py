"""Configuration for topology analysis and reporting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a Topology's analytic facilities."""

    cache_path_trees: bool = True
    """Keep one shortest-path tree per queried source"""

    precompute_path_trees: bool = False
    """Build a shortest-path tree for every vertex on the first path query"""


@dataclass(frozen=True)
class ReportConfig:
    """Configuration for human-readable reports."""

    bandwidth_divisor: float = 1000.0
    """Divisor from link bandwidth units (Mbps) to reported Gbps"""

    latency_unit_seconds: float = 1e-7
    """Seconds represented by one unit of link weight"""

    max_listed_links: int = 50
    """Maximum number of links listed in a summary"""


__all__ = [
    "AnalysisConfig",
    "ReportConfig",
]
