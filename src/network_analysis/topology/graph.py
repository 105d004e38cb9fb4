"""Network topology model and query surface.

A Topology owns a fixed set of vertices ``0 .. V-1`` and an arena of
WeightedLinks. Each vertex keeps an adjacency list of link indices in
insertion order; that order drives every tie-break in the analytic
facilities, so loading the same links in the same order always produces
the same answers.

The analytic facilities (shortest-path trees, spanning forest, medium
connectivity, robustness) are built lazily on first use and cached until
the next link is added.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from network_analysis.algorithms.connectivity import MediumConnectivityChecker
from network_analysis.algorithms.robustness import RobustnessAnalysis, RobustnessAnalyzer
from network_analysis.algorithms.shortest_path import ShortestPath, ShortestPathTree
from network_analysis.algorithms.spanning_forest import MinimumSpanningForest, SpanningForest
from network_analysis.config import AnalysisConfig, ReportConfig
from network_analysis.errors import InvalidVertexError, check_vertex
from network_analysis.types import Medium

from .link import WeightedLink

if TYPE_CHECKING:
    import numpy as np

logger = logging.getLogger(__name__)


class Topology:
    """
    Undirected multigraph of sites joined by copper and fiber links.

    Self-loops are stored once in their vertex's adjacency list; every
    other link appears once in each endpoint's list.

    Usage:
        topo = Topology(4)
        topo.add_link(0, 1, Medium.COPPER, 1000, 23)
        topo.add_link(1, 2, Medium.FIBER, 500, 20)
        route = topo.shortest_path(0, 2)
        route.distance, route.bottleneck_bandwidth  # (2.0, 500)
    """

    def __init__(self, vertex_count: int, config: AnalysisConfig | None = None):
        """
        Initialize a topology with no links.

        Args:
            vertex_count: Number of vertices V (fixed for the topology's lifetime)
            config: Analysis configuration

        Raises:
            ValueError: If vertex_count is not positive
        """
        if vertex_count < 1:
            raise ValueError(f"vertex_count must be >= 1, got {vertex_count}")
        self._vertex_count = vertex_count
        self._config = config or AnalysisConfig()
        self._links: list[WeightedLink] = []
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

        # Lazily built facilities
        self._path_trees: dict[int, ShortestPathTree] = {}
        self._spanning_forest: MinimumSpanningForest | None = None
        self._medium_checks: dict[Medium, MediumConnectivityChecker] = {}
        self._robustness: RobustnessAnalyzer | None = None

    @classmethod
    def from_links(
        cls,
        vertex_count: int,
        links: Iterable[tuple[int, int, Medium | str, int, float]],
        config: AnalysisConfig | None = None,
    ) -> Topology:
        """
        Build a topology from an edge list.

        Args:
            vertex_count: Number of vertices
            links: ``(source, target, medium, bandwidth, length)`` tuples
            config: Analysis configuration

        Returns:
            The populated Topology
        """
        topology = cls(vertex_count, config=config)
        for source, target, medium, bandwidth, length in links:
            topology.add_link(source, target, medium, bandwidth, length)
        return topology

    # ── structure ─────────────────────────────────────────────────────

    @property
    def vertex_count(self) -> int:
        """Number of vertices V."""
        return self._vertex_count

    @property
    def link_count(self) -> int:
        """Number of links E (a self-loop counts once)."""
        return len(self._links)

    @property
    def links(self) -> tuple[WeightedLink, ...]:
        """All links in insertion order; index i is link id i."""
        return tuple(self._links)

    @property
    def config(self) -> AnalysisConfig:
        """Analysis configuration."""
        return self._config

    def vertices(self) -> range:
        """Vertex ids ``0 .. V-1``."""
        return range(self._vertex_count)

    def validate_vertex(self, v: int) -> int:
        """
        Check that ``v`` names a vertex of this topology.

        Any integer type is accepted (numpy integers included); ``bool`` is not.

        Returns:
            v as a plain int

        Raises:
            InvalidVertexError: If v is not an integer in ``[0, V)``
        """
        return check_vertex(v, self._vertex_count)

    def add_link(
        self,
        source: int,
        target: int,
        medium: Medium | str,
        bandwidth: int,
        length: float,
    ) -> WeightedLink:
        """
        Add a link between two vertices.

        Args:
            source: One endpoint
            target: The other endpoint (may equal source)
            medium: Link medium
            bandwidth: Link capacity
            length: Physical length

        Returns:
            The created WeightedLink

        Raises:
            InvalidVertexError: If either endpoint is not a vertex
            ValueError: If medium is not a known medium
        """
        source = self.validate_vertex(source)
        target = self.validate_vertex(target)
        link = WeightedLink(
            source=source,
            target=target,
            medium=medium if isinstance(medium, Medium) else Medium.parse(medium),
            bandwidth=bandwidth,
            length=length,
        )
        link_id = len(self._links)
        self._links.append(link)
        self._adjacency[source].append(link_id)
        if target != source:
            self._adjacency[target].append(link_id)

        self._invalidate()
        logger.debug(
            f"Added link {link_id}: {link} ({link.medium.value}, weight {link.weight:.4f})"
        )
        return link

    def link(self, link_id: int) -> WeightedLink:
        """Return the link with id ``link_id``."""
        return self._links[link_id]

    def adjacency(self, v: int) -> tuple[int, ...]:
        """Ids of the links touching ``v``, in insertion order."""
        v = self.validate_vertex(v)
        return tuple(self._adjacency[v])

    def incident_links(self, v: int) -> list[WeightedLink]:
        """Links touching ``v``, in insertion order."""
        v = self.validate_vertex(v)
        return [self._links[link_id] for link_id in self._adjacency[v]]

    def neighbors(self, v: int) -> list[int]:
        """Vertices adjacent to ``v``, one entry per link, in insertion order."""
        v = self.validate_vertex(v)
        return [link.other(v) for link in self.incident_links(v)]

    def degree(self, v: int) -> int:
        """Number of adjacency entries of ``v``."""
        v = self.validate_vertex(v)
        return len(self._adjacency[v])

    def __iter__(self) -> Iterator[WeightedLink]:
        return iter(self._links)

    def __repr__(self) -> str:
        return f"Topology(V={self._vertex_count}, E={len(self._links)})"

    def _invalidate(self) -> None:
        if self._path_trees or self._spanning_forest or self._medium_checks or self._robustness:
            logger.debug("Topology changed; discarding cached analyses")
        self._path_trees.clear()
        self._spanning_forest = None
        self._medium_checks.clear()
        self._robustness = None

    # ── analytic facilities ───────────────────────────────────────────

    def path_tree(self, source: int) -> ShortestPathTree:
        """
        Shortest-path tree rooted at ``source``.

        Cached per source when ``config.cache_path_trees`` is set; with
        ``config.precompute_path_trees`` every tree is built on the first
        call.
        """
        source = self.validate_vertex(source)
        if self._config.precompute_path_trees and not self._path_trees:
            for v in self.vertices():
                self._path_trees[v] = ShortestPathTree(self, v)

        tree = self._path_trees.get(source)
        if tree is None:
            tree = ShortestPathTree(self, source)
            if self._config.cache_path_trees:
                self._path_trees[source] = tree
        return tree

    def spanning_forest(self) -> MinimumSpanningForest:
        """Minimum spanning forest (built once)."""
        if self._spanning_forest is None:
            self._spanning_forest = MinimumSpanningForest(self)
        return self._spanning_forest

    def medium_checker(self, medium: Medium | str) -> MediumConnectivityChecker:
        """Single-medium reachability from vertex 0 (built once per medium)."""
        key = medium if isinstance(medium, Medium) else Medium.parse(medium)
        checker = self._medium_checks.get(key)
        if checker is None:
            checker = MediumConnectivityChecker(self, key)
            self._medium_checks[key] = checker
        return checker

    def robustness(self) -> RobustnessAnalysis:
        """Double-failure robustness analysis (built once)."""
        if self._robustness is None:
            self._robustness = RobustnessAnalyzer(self)
        return self._robustness.analyze()

    # ── query surface ─────────────────────────────────────────────────

    def shortest_path(self, source: int, target: int) -> ShortestPath:
        """
        Lowest-latency path between two vertices and its bottleneck bandwidth.

        Args:
            source: Source vertex
            target: Target vertex

        Returns:
            ShortestPath; ``exists`` is False when target is unreachable

        Raises:
            InvalidVertexError: If either vertex is out of range
        """
        try:
            source = self.validate_vertex(source)
            target = self.validate_vertex(target)
        except InvalidVertexError as e:
            logger.warning(f"Rejected path query {source!r} -> {target!r}: {e}")
            raise
        return self.path_tree(source).result(target)

    def path_exists(self, source: int, target: int) -> bool:
        """Check if target is reachable from source."""
        return self.shortest_path(source, target).exists

    def is_medium_connected(self, medium: Medium | str = Medium.COPPER) -> bool:
        """
        Whether every vertex is reachable from vertex 0 over one medium only.

        Args:
            medium: Medium whose links may be used

        Returns:
            True if the medium-restricted traversal reaches all V vertices
        """
        return self.medium_checker(medium).is_connected()

    def is_copper_connected(self) -> bool:
        """Whether the copper links alone connect the network."""
        return self.is_medium_connected(Medium.COPPER)

    def minimum_spanning_forest(self) -> SpanningForest:
        """Minimum-latency spanning forest and its total weight."""
        return self.spanning_forest().result()

    def is_robust_to_double_failure(self) -> bool:
        """Whether the network stays connected if any two vertices fail."""
        return self.robustness().is_robust

    def all_pairs_latency(self) -> np.ndarray:
        """
        Lowest latency between every pair of vertices.

        Builds (or reuses) one shortest-path tree per vertex.

        Returns:
            V x V float array; ``inf`` where no path exists
        """
        import numpy as np

        n = self._vertex_count
        matrix = np.full((n, n), np.inf, dtype=np.float64)
        for source in self.vertices():
            tree = self.path_tree(source)
            for target in self.vertices():
                matrix[source, target] = tree.dist_to(target)
        return matrix

    # ── reporting ─────────────────────────────────────────────────────

    def get_statistics(self) -> dict[str, Any]:
        """
        Get topology statistics.

        Returns:
            Dictionary of statistics
        """
        links_per_medium = dict.fromkeys((m.value for m in Medium), 0)
        for link in self._links:
            links_per_medium[link.medium.value] += 1

        degrees = [len(adj) for adj in self._adjacency]
        return {
            "num_vertices": self._vertex_count,
            "num_links": len(self._links),
            "links_per_medium": links_per_medium,
            "self_loops": sum(1 for link in self._links if link.is_self_loop),
            "degree_min": min(degrees),
            "degree_max": max(degrees),
            "degree_avg": sum(degrees) / len(degrees),
            "total_bandwidth": sum(link.bandwidth for link in self._links),
            "min_bandwidth": min((link.bandwidth for link in self._links), default=None),
        }

    def summary(self, report: ReportConfig | None = None) -> str:
        """Generate human-readable summary."""
        report = report or ReportConfig()
        stats = self.get_statistics()
        lines = [
            "Network Topology",
            "=" * 40,
            f"Vertices: {stats['num_vertices']}",
            f"Links: {stats['num_links']}",
        ]
        for medium, count in stats["links_per_medium"].items():
            lines.append(f"  {medium}: {count}")
        lines.append(
            f"Degree: min {stats['degree_min']}, avg {stats['degree_avg']:.2f}, "
            f"max {stats['degree_max']}"
        )

        if self._links:
            lines.append("")
            lines.append("Links:")
            for link in self._links[: report.max_listed_links]:
                lines.append(
                    f"  - {link} {link.medium.value} "
                    f"{link.bandwidth / report.bandwidth_divisor} Gbps, weight {link.weight:.4f}"
                )
            hidden = len(self._links) - report.max_listed_links
            if hidden > 0:
                lines.append(f"  ... {hidden} more")

        return "\n".join(lines)


__all__ = [
    "Topology",
]
