"""Single-source lowest-latency paths with bottleneck tracking.

Dijkstra's algorithm over the link arena of a Topology, carrying, besides
the distance, the link that reached each vertex and the minimum bandwidth
along the chosen path.

Ties between equal-latency paths resolve to whichever path relaxation
discovers first, which follows adjacency (link insertion) order.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from network_analysis.complexity import ComplexityClass, complexity
from network_analysis.errors import check_vertex

from .priority_queue import IndexMinPQ

if TYPE_CHECKING:
    from network_analysis.topology.graph import Topology
    from network_analysis.topology.link import WeightedLink

logger = logging.getLogger(__name__)


@dataclass
class ShortestPath:
    """
    Result of a lowest-latency path query.

    For ``source == target`` the path exists, has no links, zero distance
    and an unbounded (``math.inf``) bottleneck. For an unreachable target
    ``exists`` is False and both distance and bottleneck are ``math.inf``.
    """

    source: int
    """Source vertex"""

    target: int
    """Target vertex"""

    exists: bool
    """Whether target is reachable from source"""

    links: list[WeightedLink] = field(default_factory=list)
    """Links from source to target, in travel order"""

    distance: float = math.inf
    """Total latency weight of the path"""

    bottleneck_bandwidth: float = math.inf
    """Minimum bandwidth over the path's links"""

    @property
    def num_hops(self) -> int:
        """Number of links on the path."""
        return len(self.links)

    @property
    def vertices(self) -> list[int]:
        """Vertices visited from source to target (empty if no path)."""
        if not self.exists:
            return []
        visited = [self.source]
        for link in self.links:
            visited.append(link.other(visited[-1]))
        return visited

    def get_summary(self) -> dict[str, Any]:
        """Get path summary."""
        return {
            "source": self.source,
            "target": self.target,
            "exists": self.exists,
            "vertices": self.vertices,
            "distance": self.distance,
            "bottleneck_bandwidth": self.bottleneck_bandwidth,
            "num_hops": self.num_hops,
        }


class ShortestPathTree:
    """
    Shortest-path tree rooted at one source vertex.

    Built once at construction and read-only afterwards. Per vertex v it
    records:

    - ``dist_to(v)``: total latency from the source (``inf`` if unreached)
    - ``edge_to(v)``: index of the last link on the path to v
    - ``bottleneck(v)``: minimum bandwidth over the path to v

    A vertex's path is final when it is extracted from the queue, so the
    path to a newly relaxed vertex w through v is always the path to v
    followed by the relaxing link; it replaces whatever path w had before.

    Usage:
        tree = ShortestPathTree(topology, 0)
        if tree.has_path_to(2):
            print(tree.path_to(2), tree.bottleneck(2))
    """

    def __init__(self, topology: Topology, source: int):
        """
        Build the tree.

        Args:
            topology: Topology to search
            source: Root vertex of the tree
        """
        source = topology.validate_vertex(source)
        self._source = source
        n = topology.vertex_count
        self._links = topology.links
        self._dist_to: list[float] = [math.inf] * n
        self._edge_to: list[int] = [-1] * n
        self._bottleneck: list[float] = [math.inf] * n
        self._build(topology)
        logger.debug(f"Built shortest-path tree from vertex {source}")

    @complexity(
        time=ComplexityClass.LOG_LINEAR,
        space="O(V)",
        notes=["link weights > 0"],
        reference="Dijkstra 1959",
    )
    def _build(self, topology: Topology) -> None:
        """Run Dijkstra from the source, relaxing links in adjacency order."""
        dist_to = self._dist_to
        edge_to = self._edge_to
        bottleneck = self._bottleneck
        links = self._links

        dist_to[self._source] = 0.0
        pq = IndexMinPQ(topology.vertex_count)
        pq.insert(self._source, 0.0)

        while not pq.is_empty():
            v = pq.extract_min()
            for link_id in topology.adjacency(v):
                link = links[link_id]
                w = link.other(v)
                candidate = dist_to[v] + link.weight
                if candidate < dist_to[w]:
                    dist_to[w] = candidate
                    edge_to[w] = link_id
                    bottleneck[w] = min(bottleneck[v], link.bandwidth)
                    if pq.contains(w):
                        pq.decrease_key(w, candidate)
                    else:
                        pq.insert(w, candidate)

    @property
    def source(self) -> int:
        """Root vertex of the tree."""
        return self._source

    def _check(self, v: int) -> int:
        return check_vertex(v, len(self._dist_to))

    def dist_to(self, v: int) -> float:
        """Latency of the shortest path to v (``inf`` if unreachable)."""
        v = self._check(v)
        return self._dist_to[v]

    def has_path_to(self, v: int) -> bool:
        """Check if v is reachable from the source."""
        v = self._check(v)
        return self._dist_to[v] < math.inf

    def edge_to(self, v: int) -> WeightedLink | None:
        """Last link on the shortest path to v, or None for the source and unreached vertices."""
        v = self._check(v)
        link_id = self._edge_to[v]
        return self._links[link_id] if link_id >= 0 else None

    def bottleneck(self, v: int) -> float:
        """
        Minimum bandwidth along the shortest path to v.

        ``math.inf`` for the source itself and for unreachable vertices.
        """
        v = self._check(v)
        return self._bottleneck[v]

    def path_to(self, v: int) -> list[WeightedLink]:
        """
        Links of the shortest path from the source to v, in travel order.

        The first link touches the source, the last touches v, and
        consecutive links share an endpoint. Empty for the source itself
        and for unreachable vertices.
        """
        v = self._check(v)
        path: list[WeightedLink] = []
        current = v
        while self._edge_to[current] >= 0:
            link = self._links[self._edge_to[current]]
            path.append(link)
            current = link.other(current)
        path.reverse()
        return path

    def result(self, target: int) -> ShortestPath:
        """Package the path to ``target`` as a ShortestPath result."""
        target = self._check(target)
        if target == self._source:
            return ShortestPath(
                source=self._source,
                target=target,
                exists=True,
                links=[],
                distance=0.0,
                bottleneck_bandwidth=math.inf,
            )
        if not self.has_path_to(target):
            return ShortestPath(source=self._source, target=target, exists=False)
        return ShortestPath(
            source=self._source,
            target=target,
            exists=True,
            links=self.path_to(target),
            distance=self._dist_to[target],
            bottleneck_bandwidth=self._bottleneck[target],
        )


__all__ = [
    "ShortestPath",
    "ShortestPathTree",
]
