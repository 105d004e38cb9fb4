"""Error types raised by the topology model and its loader."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any


@dataclass
class InvalidVertexError(ValueError):
    """A vertex id that is not an integer in ``[0, vertex_count)`` was passed to a query.

    Attributes:
        vertex: The offending vertex id
        vertex_count: Number of vertices in the topology
    """

    vertex: Any
    vertex_count: int

    def __str__(self) -> str:
        if isinstance(self.vertex, int) and not isinstance(self.vertex, bool):
            return f"Vertex {self.vertex} out of range [0, {self.vertex_count})"
        return f"Vertex {self.vertex!r} is not an integer vertex id"


def check_vertex(v: Any, vertex_count: int) -> int:
    """Normalize a vertex id to a plain int in ``[0, vertex_count)``.

    Accepts any integer type (including numpy integers) but not ``bool``.

    Raises:
        InvalidVertexError: If v is not an integer or is out of range
    """
    if isinstance(v, bool):
        raise InvalidVertexError(vertex=v, vertex_count=vertex_count)
    try:
        index = operator.index(v)
    except TypeError:
        raise InvalidVertexError(vertex=v, vertex_count=vertex_count) from None
    if not 0 <= index < vertex_count:
        raise InvalidVertexError(vertex=index, vertex_count=vertex_count)
    return index


@dataclass
class TopologyFormatError(ValueError):
    """Malformed topology description.

    Attributes:
        message: Error message
        line_number: 1-based line of the input where the error occurred
    """

    message: str
    line_number: int | None = None

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


__all__ = [
    "InvalidVertexError",
    "TopologyFormatError",
    "check_vertex",
]
