"""Minimum spanning forest (Prim's algorithm, eager variant).

Prim is restarted from every vertex not yet reached, so a disconnected
topology yields one tree per connected component rather than an error.
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
class SpanningForest:
    """Result of a minimum spanning forest computation."""

    links: list[WeightedLink] = field(default_factory=list)
    """Forest links, ordered by the vertex each one attaches"""

    total_weight: float = 0.0
    """Sum of forest link weights"""

    roots: list[int] = field(default_factory=list)
    """Root vertex of each tree, in discovery order"""

    @property
    def num_trees(self) -> int:
        """Number of trees (connected components)."""
        return len(self.roots)

    @property
    def is_spanning_tree(self) -> bool:
        """Whether the forest is a single tree."""
        return len(self.roots) == 1

    def get_summary(self) -> dict[str, Any]:
        """Get forest summary."""
        return {
            "num_links": len(self.links),
            "num_trees": self.num_trees,
            "total_weight": self.total_weight,
            "roots": list(self.roots),
        }


class MinimumSpanningForest:
    """
    Minimum spanning forest of a Topology.

    State per vertex v:
        edge_to(v): forest link connecting v to its parent (None for roots)
        _dist_to[v]: weight of the lightest known link into v (heap key)
        _marked[v]: whether v is already in the forest

    Self-loops never enter the forest: by the time a vertex's links are
    scanned, the vertex itself is marked.
    """

    def __init__(self, topology: Topology):
        """
        Build the forest.

        Args:
            topology: Topology to span
        """
        n = topology.vertex_count
        self._links = topology.links
        self._edge_to: list[int] = [-1] * n
        self._dist_to: list[float] = [math.inf] * n
        self._marked: list[bool] = [False] * n
        self._roots: list[int] = []
        self._build(topology)
        logger.debug(
            f"Built spanning forest: {len(self._roots)} tree(s), weight {self.weight():.4f}"
        )

    @complexity(
        time=ComplexityClass.LOG_LINEAR,
        space="O(V)",
        reference="Prim 1957",
    )
    def _build(self, topology: Topology) -> None:
        """Run Prim from every unmarked vertex."""
        pq = IndexMinPQ(topology.vertex_count)
        for v in range(topology.vertex_count):
            if not self._marked[v]:
                self._roots.append(v)
                self._prim(topology, pq, v)

    def _prim(self, topology: Topology, pq: IndexMinPQ, root: int) -> None:
        self._dist_to[root] = 0.0
        pq.insert(root, 0.0)
        while not pq.is_empty():
            self._scan(topology, pq, pq.extract_min())

    def _scan(self, topology: Topology, pq: IndexMinPQ, v: int) -> None:
        self._marked[v] = True
        for link_id in topology.adjacency(v):
            link = self._links[link_id]
            w = link.other(v)
            if self._marked[w]:
                continue
            if link.weight < self._dist_to[w]:
                self._dist_to[w] = link.weight
                self._edge_to[w] = link_id
                if pq.contains(w):
                    pq.decrease_key(w, link.weight)
                else:
                    pq.insert(w, link.weight)

    def edge_to(self, v: int) -> WeightedLink | None:
        """Forest link attaching v to its parent, or None if v is a root."""
        v = check_vertex(v, len(self._edge_to))
        link_id = self._edge_to[v]
        return self._links[link_id] if link_id >= 0 else None

    def edges(self) -> list[WeightedLink]:
        """Forest links, ordered by the vertex each one attaches."""
        return [self._links[link_id] for link_id in self._edge_to if link_id >= 0]

    def weight(self) -> float:
        """Total latency weight of the forest."""
        return sum(link.weight for link in self.edges())

    @property
    def roots(self) -> list[int]:
        """Root of each tree, in discovery order."""
        return list(self._roots)

    def result(self) -> SpanningForest:
        """Package the forest as a SpanningForest result."""
        return SpanningForest(
            links=self.edges(),
            total_weight=self.weight(),
            roots=self.roots,
        )


__all__ = [
    "SpanningForest",
    "MinimumSpanningForest",
]
