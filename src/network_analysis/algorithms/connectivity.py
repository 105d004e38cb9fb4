"""Medium-restricted reachability.

Checks whether every site can be reached from vertex 0 using links of a
single medium only (e.g. whether the network is copper-connected).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from network_analysis.complexity import ComplexityClass, complexity
from network_analysis.errors import check_vertex
from network_analysis.types import Medium

if TYPE_CHECKING:
    from network_analysis.topology.graph import Topology

logger = logging.getLogger(__name__)


class MediumConnectivityChecker:
    """
    Depth-first reachability restricted to links of one medium.

    The traversal starts at ``start`` (vertex 0 by default), ignores every
    link whose medium differs, and counts the vertices it reaches. The
    topology is medium-connected iff that count equals the vertex count.

    Usage:
        checker = MediumConnectivityChecker(topology, Medium.COPPER)
        checker.is_connected()
    """

    def __init__(self, topology: Topology, medium: Medium | str, start: int = 0):
        """
        Run the traversal.

        Args:
            topology: Topology to traverse
            medium: Medium whose links may be followed
            start: Vertex the traversal starts from
        """
        start = topology.validate_vertex(start)
        self._medium = medium if isinstance(medium, Medium) else Medium.parse(medium)
        self._vertex_count = topology.vertex_count
        self._marked: list[bool] = [False] * topology.vertex_count
        self._count = self._dfs(topology, start)
        logger.debug(
            f"{self._medium.value}-only traversal from {start} reached "
            f"{self._count}/{self._vertex_count} vertices"
        )

    @complexity(time=ComplexityClass.LINEAR, space="O(V)")
    def _dfs(self, topology: Topology, start: int) -> int:
        """Iterative DFS over links of the target medium; returns vertices reached."""
        links = topology.links
        marked = self._marked
        marked[start] = True
        count = 1
        stack = [start]
        while stack:
            v = stack.pop()
            for link_id in topology.adjacency(v):
                link = links[link_id]
                if link.medium is not self._medium:
                    continue
                w = link.other(v)
                if not marked[w]:
                    marked[w] = True
                    count += 1
                    stack.append(w)
        return count

    @property
    def medium(self) -> Medium:
        """Medium the traversal was restricted to."""
        return self._medium

    @property
    def count(self) -> int:
        """Number of vertices reached."""
        return self._count

    def reached(self, v: int) -> bool:
        """Check if v was reached using only the target medium."""
        v = check_vertex(v, self._vertex_count)
        return self._marked[v]

    def unreached(self) -> list[int]:
        """Vertices the traversal could not reach, in id order."""
        return [v for v, seen in enumerate(self._marked) if not seen]

    def is_connected(self) -> bool:
        """Whether every vertex is reachable over the target medium."""
        return self._count == self._vertex_count


__all__ = [
    "MediumConnectivityChecker",
]
