"""Reader for the plain-text topology format.

Format:
    line 1:  vertex count V (positive integer)
    line 2+: ``from to medium bandwidth length`` separated by spaces, where
             ``from``/``to`` are vertex ids in [0, V), ``medium`` is
             ``copper`` or ``fiber``, ``bandwidth`` a positive integer and
             ``length`` a positive number

Blank lines are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from network_analysis.config import AnalysisConfig
from network_analysis.errors import TopologyFormatError
from network_analysis.types import Medium

from .graph import Topology

logger = logging.getLogger(__name__)

FIELDS_PER_LINK = 5


def _parse_int(token: str, name: str, line_number: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise TopologyFormatError(f"{name} must be an integer, got {token!r}", line_number) from None


def _parse_length(token: str, line_number: int) -> float:
    try:
        return float(token)
    except ValueError:
        raise TopologyFormatError(f"length must be a number, got {token!r}", line_number) from None


def parse_topology(lines: Iterable[str], config: AnalysisConfig | None = None) -> Topology:
    """Build a Topology from the lines of a topology description.

    Args:
        lines: Input lines (trailing newlines allowed)
        config: Analysis configuration for the new topology

    Returns:
        The populated Topology

    Raises:
        TopologyFormatError: If the description is empty or any line is malformed
    """
    topology: Topology | None = None

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        if topology is None:
            vertex_count = _parse_int(line, "vertex count", line_number)
            if vertex_count < 1:
                raise TopologyFormatError(
                    f"vertex count must be positive, got {vertex_count}", line_number
                )
            topology = Topology(vertex_count, config=config)
            continue

        fields = line.split()
        if len(fields) != FIELDS_PER_LINK:
            raise TopologyFormatError(
                f"expected {FIELDS_PER_LINK} fields "
                f"'from to medium bandwidth length', got {len(fields)}",
                line_number,
            )

        source = _parse_int(fields[0], "from", line_number)
        target = _parse_int(fields[1], "to", line_number)
        for name, vertex in (("from", source), ("to", target)):
            if not 0 <= vertex < topology.vertex_count:
                raise TopologyFormatError(
                    f"{name} vertex {vertex} out of range [0, {topology.vertex_count})",
                    line_number,
                )

        try:
            medium = Medium.parse(fields[2])
        except ValueError as e:
            raise TopologyFormatError(str(e), line_number) from None

        bandwidth = _parse_int(fields[3], "bandwidth", line_number)
        if bandwidth <= 0:
            raise TopologyFormatError(f"bandwidth must be positive, got {bandwidth}", line_number)

        length = _parse_length(fields[4], line_number)
        if not length > 0:
            raise TopologyFormatError(f"length must be positive, got {fields[4]}", line_number)

        topology.add_link(source, target, medium, bandwidth, length)

    if topology is None:
        raise TopologyFormatError("empty topology description: missing vertex count")

    logger.debug(f"Parsed {topology!r}")
    return topology


def load_topology(path: str | Path, config: AnalysisConfig | None = None) -> Topology:
    """Read a topology description from a file.

    Args:
        path: Path of the topology file
        config: Analysis configuration for the new topology

    Returns:
        The populated Topology

    Raises:
        OSError: If the file cannot be read
        TopologyFormatError: If the file is malformed
    """
    path = Path(path)
    with path.open(encoding="utf-8") as handle:
        topology = parse_topology(handle, config=config)
    logger.debug(f"Loaded topology from {path}")
    return topology


__all__ = [
    "parse_topology",
    "load_topology",
]
