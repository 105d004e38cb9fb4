"""Complexity annotations for the graph algorithms.

This module provides a decorator for documenting the asymptotic cost of
algorithm entry points and a registry for looking the annotations up.
"""

from __future__ import annotations

from network_analysis.complexity.annotations import (
    AlgorithmComplexity,
    ComplexityBound,
    ComplexityClass,
    complexity,
    get_all_complexities,
    get_complexity,
)

__all__ = [
    "ComplexityClass",
    "ComplexityBound",
    "AlgorithmComplexity",
    "complexity",
    "get_complexity",
    "get_all_complexities",
]
