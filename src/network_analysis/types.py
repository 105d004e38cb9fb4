"""
Foundation Types for network topology analysis.

Core type definitions shared by the topology model, the graph algorithms
and the I/O layer, kept here so none of them has to import another.

Propagation speeds are expressed in length units per 1e-7 seconds, so a
link's weight ``length / speed`` is a latency in units of 1e-7 s.
"""

from __future__ import annotations

from enum import Enum

COPPER_SPEED = 23.0
"""Propagation speed of a copper link."""

FIBER_SPEED = 20.0
"""Propagation speed of a fiber link."""


class Medium(str, Enum):
    """
    Physical medium of a link.

    Each medium has a fixed propagation speed which, together with the
    physical length of a link, determines its latency weight.

    Media:
        COPPER: Electrical copper cabling
        FIBER: Optical fiber
    """

    COPPER = "copper"
    """Copper cabling."""

    FIBER = "fiber"
    """Optical fiber."""

    @property
    def propagation_speed(self) -> float:
        """Propagation speed constant for this medium."""
        return _SPEEDS[self]

    @classmethod
    def parse(cls, token: str) -> Medium:
        """Parse a medium token such as ``"copper"`` or ``"fiber"``.

        Args:
            token: Medium name, case-insensitive

        Returns:
            The matching Medium

        Raises:
            ValueError: If the token names no known medium
        """
        try:
            return cls(token.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown medium {token!r} (expected one of: {choices})") from None


_SPEEDS: dict[Medium, float] = {
    Medium.COPPER: COPPER_SPEED,
    Medium.FIBER: FIBER_SPEED,
}


__all__ = [
    "COPPER_SPEED",
    "FIBER_SPEED",
    "Medium",
]
