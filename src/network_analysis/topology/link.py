"""Weighted link model.

A link connects two sites over one physical medium. Its latency weight is
derived from the physical length and the medium's propagation speed and is
never set independently.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from network_analysis.types import Medium


@dataclass(frozen=True)
class WeightedLink:
    """
    Undirected link between two vertices.

    The same instance is shared by both endpoints' adjacency lists, so
    ``source``/``target`` record insertion orientation only; use
    :meth:`other` to walk the link from either end.
    """

    source: int
    """First endpoint"""

    target: int
    """Second endpoint"""

    medium: Medium
    """Physical medium (copper or fiber)"""

    bandwidth: int
    """Capacity of the link (Mbps)"""

    length: float
    """Physical length of the link"""

    weight: float = field(init=False)
    """Propagation latency: length / medium speed"""

    def __post_init__(self) -> None:
        medium = self.medium if isinstance(self.medium, Medium) else Medium.parse(self.medium)
        object.__setattr__(self, "medium", medium)
        object.__setattr__(self, "weight", self.length / medium.propagation_speed)

    @property
    def is_self_loop(self) -> bool:
        """Whether both endpoints are the same vertex."""
        return self.source == self.target

    def other(self, vertex: int) -> int:
        """
        Return the endpoint opposite ``vertex``.

        For a self-loop the vertex itself is returned.
        """
        if vertex == self.source:
            return self.target
        return self.source

    def touches(self, vertex: int) -> bool:
        """Check if ``vertex`` is an endpoint of this link."""
        return vertex == self.source or vertex == self.target

    def __str__(self) -> str:
        return f"{self.source} <-> {self.target}"


__all__ = [
    "WeightedLink",
]
