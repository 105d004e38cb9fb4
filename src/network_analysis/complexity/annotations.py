"""Complexity annotations for the graph algorithms.

Decorators and a registry for documenting the asymptotic cost of each
algorithm entry point, so that callers (and benchmarks) can look up the
bound an implementation claims.

Example:
    @complexity(
        time="O((V + E) log V)",
        space="O(V)",
        reference="Dijkstra 1959",
    )
    def build(self) -> None:
        ...
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


class ComplexityClass(str, Enum):
    """Complexity classes used by the graph algorithms."""

    CONSTANT = "O(1)"
    LOGARITHMIC = "O(log V)"
    LINEAR = "O(V + E)"
    LOG_LINEAR = "O((V + E) log V)"
    QUADRATIC = "O(V * (V + E))"


@dataclass(frozen=True)
class ComplexityBound:
    """A complexity bound.

    Attributes:
        expression: The complexity expression (e.g., "O(V + E)")
        tight: Whether this is a tight bound (Theta vs O)
        amortized: Whether this is amortized complexity
        worst_case: Whether this is worst-case complexity
    """

    expression: str
    tight: bool = False
    amortized: bool = False
    worst_case: bool = True

    def __str__(self) -> str:
        """Format the complexity bound as a string."""
        qualifiers = []
        if self.amortized:
            qualifiers.append("amortized")
        if not self.worst_case:
            qualifiers.append("best-case")

        qualifier_str = f" ({', '.join(qualifiers)})" if qualifiers else ""
        return f"{self.expression}{qualifier_str}"

    @classmethod
    def parse(cls, expr: str | ComplexityClass) -> ComplexityBound:
        """Parse a complexity expression string.

        Args:
            expr: Complexity expression like "O(V + E)" or "Theta(V)"

        Returns:
            ComplexityBound instance
        """
        text = expr.value if isinstance(expr, ComplexityClass) else expr
        tight = text.startswith("Theta") or text.startswith("Θ")
        return cls(expression=text, tight=tight)


@dataclass
class AlgorithmComplexity:
    """Complexity metadata attached to an algorithm.

    Attributes:
        time: Time complexity
        space: Auxiliary space complexity
        notes: Additional assumptions (e.g. "weights > 0")
        reference: Reference to the algorithm's source
    """

    time: ComplexityBound | str | None = None
    space: ComplexityBound | str | None = None
    notes: list[str] = field(default_factory=list)
    reference: str | None = None

    def __post_init__(self) -> None:
        """Convert string bounds to ComplexityBound objects."""
        for attr in ["time", "space"]:
            value = getattr(self, attr)
            if isinstance(value, str):
                object.__setattr__(self, attr, ComplexityBound.parse(value))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {}
        if self.time is not None:
            result["time"] = str(self.time)
        if self.space is not None:
            result["space"] = str(self.space)
        if self.notes:
            result["notes"] = list(self.notes)
        if self.reference:
            result["reference"] = self.reference
        return result

    def format_docstring(self) -> str:
        """Format complexity information for docstring inclusion."""
        lines = ["Complexity:"]
        if self.time:
            lines.append(f"    Time: {self.time}")
        if self.space:
            lines.append(f"    Space: {self.space}")
        if self.notes:
            lines.append(f"    Notes: {', '.join(self.notes)}")
        if self.reference:
            lines.append(f"    Reference: {self.reference}")
        return "\n".join(lines)


# Registry to store complexity annotations
_complexity_registry: dict[str, AlgorithmComplexity] = {}


def get_complexity(func: Callable[..., Any]) -> AlgorithmComplexity | None:
    """Get complexity annotation for a function.

    Args:
        func: The annotated function

    Returns:
        AlgorithmComplexity if annotated, None otherwise
    """
    info = getattr(func, "__complexity__", None)
    if info is not None:
        return info
    key = f"{func.__module__}.{func.__qualname__}"
    return _complexity_registry.get(key)


def get_all_complexities() -> dict[str, AlgorithmComplexity]:
    """Get all registered complexity annotations.

    Returns:
        Dictionary mapping function keys to complexity info
    """
    return _complexity_registry.copy()


def complexity(
    time: str | ComplexityClass | ComplexityBound | None = None,
    space: str | ComplexityClass | ComplexityBound | None = None,
    notes: list[str] | None = None,
    reference: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to annotate function with complexity information.

    Stores the annotation in a registry keyed by the function's qualified
    name and appends it to the function's docstring.

    Args:
        time: Time complexity (e.g., "O(V + E)")
        space: Auxiliary space complexity
        notes: Additional assumptions
        reference: Reference to the algorithm's source

    Returns:
        Decorated function with complexity metadata
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        complexity_info = AlgorithmComplexity(
            time=ComplexityBound.parse(time) if isinstance(time, ComplexityClass) else time,
            space=ComplexityBound.parse(space) if isinstance(space, ComplexityClass) else space,
            notes=notes or [],
            reference=reference,
        )

        key = f"{func.__module__}.{func.__qualname__}"
        _complexity_registry[key] = complexity_info

        original_doc = func.__doc__ or ""
        complexity_doc = complexity_info.format_docstring()
        if original_doc:
            func.__doc__ = f"{original_doc}\n\n{complexity_doc}"
        else:
            func.__doc__ = complexity_doc

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            return func(*args, **kwargs)

        # Preserve complexity attribute on wrapper
        wrapper.__complexity__ = complexity_info  # type: ignore[attr-defined]

        return wrapper

    return decorator


__all__ = [
    "ComplexityClass",
    "ComplexityBound",
    "AlgorithmComplexity",
    "complexity",
    "get_complexity",
    "get_all_complexities",
]
