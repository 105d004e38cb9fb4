"""Serialization for links, topologies and analysis results.

Round-trip guarantee: ``topology_from_dict(topology_to_dict(t))`` has the
same vertex count, the same links in the same order, and therefore the
same adjacency order and the same query answers as ``t``.

Supported types:
- WeightedLink, Topology (to and from dict)
- ShortestPath, SpanningForest, RobustnessAnalysis (to dict)

Infinite distances and bandwidths are emitted as ``None`` so the output
is valid JSON.
"""

from __future__ import annotations

import math
from typing import Any

from network_analysis.algorithms.robustness import RobustnessAnalysis
from network_analysis.algorithms.shortest_path import ShortestPath
from network_analysis.algorithms.spanning_forest import SpanningForest
from network_analysis.config import AnalysisConfig
from network_analysis.topology.graph import Topology
from network_analysis.topology.link import WeightedLink
from network_analysis.types import Medium


def _finite_or_none(value: float) -> float | None:
    return None if math.isinf(value) else value


# ── Link serialization ────────────────────────────────────────────────


def link_to_dict(link: WeightedLink) -> dict[str, Any]:
    """Serialize a WeightedLink.

    ``weight`` is included for readers but ignored on the way back, since
    it is derived from length and medium.
    """
    return {
        "source": link.source,
        "target": link.target,
        "medium": link.medium.value,
        "bandwidth": link.bandwidth,
        "length": link.length,
        "weight": link.weight,
    }


def link_from_dict(data: dict[str, Any]) -> WeightedLink:
    """Deserialize a WeightedLink.

    Raises:
        KeyError: If a required field is missing
        ValueError: If the medium is unknown
    """
    return WeightedLink(
        source=int(data["source"]),
        target=int(data["target"]),
        medium=Medium.parse(data["medium"]),
        bandwidth=int(data["bandwidth"]),
        length=float(data["length"]),
    )


# ── Topology serialization ────────────────────────────────────────────


def topology_to_dict(topology: Topology) -> dict[str, Any]:
    """Serialize a Topology to a plain dict."""
    return {
        "type": "Topology",
        "vertex_count": topology.vertex_count,
        "links": [link_to_dict(link) for link in topology.links],
    }


def topology_from_dict(data: dict[str, Any], config: AnalysisConfig | None = None) -> Topology:
    """Deserialize a Topology.

    Raises:
        ValueError: If the dict does not describe a Topology
    """
    if data.get("type", "Topology") != "Topology":
        raise ValueError(f"Expected a Topology dict, got type {data.get('type')!r}")
    topology = Topology(int(data["vertex_count"]), config=config)
    for entry in data.get("links", []):
        link = link_from_dict(entry)
        topology.add_link(link.source, link.target, link.medium, link.bandwidth, link.length)
    return topology


# ── Result serialization ──────────────────────────────────────────────


def shortest_path_to_dict(path: ShortestPath) -> dict[str, Any]:
    """Serialize a ShortestPath result."""
    return {
        "source": path.source,
        "target": path.target,
        "exists": path.exists,
        "vertices": path.vertices,
        "links": [link_to_dict(link) for link in path.links],
        "distance": _finite_or_none(path.distance),
        "bottleneck_bandwidth": _finite_or_none(path.bottleneck_bandwidth),
    }


def spanning_forest_to_dict(forest: SpanningForest) -> dict[str, Any]:
    """Serialize a SpanningForest result."""
    return {
        "links": [link_to_dict(link) for link in forest.links],
        "total_weight": forest.total_weight,
        "roots": list(forest.roots),
        "num_trees": forest.num_trees,
    }


def robustness_to_dict(analysis: RobustnessAnalysis) -> dict[str, Any]:
    """Serialize a RobustnessAnalysis result."""
    return analysis.to_dict()


__all__ = [
    "link_to_dict",
    "link_from_dict",
    "topology_to_dict",
    "topology_from_dict",
    "shortest_path_to_dict",
    "spanning_forest_to_dict",
    "robustness_to_dict",
]
