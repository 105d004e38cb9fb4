"""Double-failure robustness analysis.

Determines whether a network stays connected no matter which two sites
fail at the same time. For every vertex i the analyzer excludes i (and
every link touching it) and searches the remainder for an articulation
point with a low-link depth-first search. The network is robust iff no
exclusion exposes one.

Key concepts:
- discovery[v]: DFS preorder number of v
- low[v]: smallest discovery number reachable from v's DFS subtree using
  at most one back link
- A non-root vertex v is an articulation point if some DFS child c has
  low[c] >= discovery[v]; the DFS root is one if it has more than one child

The remainder must also be connected: if the search from the first
non-excluded vertex does not reach every remaining vertex, some pair of
failures already splits the network.

References:
- Hopcroft, J. & Tarjan, R. (1973). Efficient algorithms for graph manipulation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from network_analysis.complexity import ComplexityClass, complexity

if TYPE_CHECKING:
    from network_analysis.topology.graph import Topology
    from network_analysis.topology.link import WeightedLink

logger = logging.getLogger(__name__)


@dataclass
class RobustnessAnalysis:
    """Results of double-failure robustness analysis.

    Attributes:
        is_robust: Whether the network survives any two simultaneous failures
        failure_pair: Two vertices whose joint failure disconnects the
            network, or None if robust
        trials: Number of single-vertex exclusions examined
    """

    is_robust: bool
    failure_pair: tuple[int, int] | None = None
    trials: int = 0

    def summary(self) -> str:
        """Generate human-readable summary."""
        if self.is_robust:
            return "The network remains connected if any two vertices fail."
        if self.failure_pair is None:
            return "The network would not remain connected."
        a, b = self.failure_pair
        return f"The network would not remain connected: failing {a} and {b} disconnects it."

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "is_robust": self.is_robust,
            "failure_pair": list(self.failure_pair) if self.failure_pair else None,
            "trials": self.trials,
        }


@dataclass
class _TrialOutcome:
    """Outcome of one articulation-point search with a vertex excluded."""

    root: int
    reached: int
    articulation_point: int | None = None


class RobustnessAnalyzer:
    """
    Analyzes whether a topology survives any two simultaneous vertex failures.

    The ``discovery``/``low`` arrays are allocated once and reset for each
    of the V exclusion trials. The search stops at the first trial that
    finds a failure. Links are read when :meth:`analyze` first runs; the
    result is cached from then on.

    Usage:
        analyzer = RobustnessAnalyzer(topology)
        analysis = analyzer.analyze()
        if not analysis.is_robust:
            print(analysis.failure_pair)
    """

    def __init__(self, topology: Topology):
        """Initialize analyzer with topology.

        Args:
            topology: Topology to analyze
        """
        self._topology = topology
        n = topology.vertex_count
        self._discovery: list[int] = [-1] * n
        self._low: list[int] = [-1] * n
        self._analysis: RobustnessAnalysis | None = None

    @complexity(
        time=ComplexityClass.QUADRATIC,
        space="O(V)",
        notes=["one articulation-point search per excluded vertex"],
        reference="Hopcroft & Tarjan 1973",
    )
    def analyze(self) -> RobustnessAnalysis:
        """Run every exclusion trial (cached after the first call).

        Returns:
            RobustnessAnalysis with results
        """
        if self._analysis is not None:
            return self._analysis

        n = self._topology.vertex_count
        if n <= 2:
            # Fewer than two vertices can remain; nothing left to disconnect.
            self._analysis = RobustnessAnalysis(is_robust=True, trials=0)
            return self._analysis

        links = self._topology.links
        trials = 0
        for excluded in range(n):
            trials += 1
            outcome = self._search_without(excluded, links)
            pair = self._failure_pair(excluded, outcome)
            if pair is not None:
                logger.debug(f"Failing vertices {pair[0]} and {pair[1]} disconnects the topology")
                self._analysis = RobustnessAnalysis(
                    is_robust=False, failure_pair=pair, trials=trials
                )
                return self._analysis

        self._analysis = RobustnessAnalysis(is_robust=True, trials=trials)
        return self._analysis

    def is_robust(self) -> bool:
        """Whether the topology survives any two simultaneous failures."""
        return self.analyze().is_robust

    def _failure_pair(self, excluded: int, outcome: _TrialOutcome) -> tuple[int, int] | None:
        if outcome.articulation_point is not None:
            return (excluded, outcome.articulation_point)

        remaining = self._topology.vertex_count - 1
        # A second failure needs at least two survivors to disconnect.
        if outcome.reached == remaining or remaining < 3:
            return None

        # Remainder already disconnected. Failing the root splits it further
        # when its component has other vertices; otherwise any unreached
        # vertex leaves the root isolated from the rest.
        if outcome.reached > 1:
            return (excluded, outcome.root)
        unreached = next(
            v for v, d in enumerate(self._discovery) if v != excluded and d == -1
        )
        return (excluded, unreached)

    def _search_without(
        self, excluded: int, links: tuple[WeightedLink, ...]
    ) -> _TrialOutcome:
        """Iterative low-link DFS over the topology with ``excluded`` removed.

        Returns at the first articulation point found.
        """
        topology = self._topology
        discovery = self._discovery
        low = self._low
        for v in range(len(discovery)):
            discovery[v] = -1
            low[v] = -1

        root = 1 if excluded == 0 else 0
        counter = 0
        discovery[root] = low[root] = counter
        counter += 1
        reached = 1
        root_children = 0

        # Frames: (vertex, link id used to enter it, iterator over its link ids)
        stack = [(root, -1, iter(topology.adjacency(root)))]
        while stack:
            v, via, pending = stack[-1]
            descended = False
            for link_id in pending:
                if link_id == via:
                    continue
                w = links[link_id].other(v)
                if w == excluded:
                    continue
                if discovery[w] == -1:
                    discovery[w] = low[w] = counter
                    counter += 1
                    reached += 1
                    stack.append((w, link_id, iter(topology.adjacency(w))))
                    descended = True
                    break
                low[v] = min(low[v], discovery[w])
            if descended:
                continue

            stack.pop()
            if not stack:
                break
            parent = stack[-1][0]
            low[parent] = min(low[parent], low[v])
            if parent == root:
                root_children += 1
            elif low[v] >= discovery[parent]:
                return _TrialOutcome(root=root, reached=reached, articulation_point=parent)

        if root_children > 1:
            return _TrialOutcome(root=root, reached=reached, articulation_point=root)

        return _TrialOutcome(root=root, reached=reached)


__all__ = [
    "RobustnessAnalysis",
    "RobustnessAnalyzer",
]
