from __future__ import annotations

from enum import Enum


class AlgorithmFamily(str, Enum):
    EXACT = "exact"
    HEURISTIC = "heuristic"


class OptimizationMode(str, Enum):
    """Caller preference. Every solver currently optimizes travel time only."""

    FASTEST = "fastest"
    CHEAPEST = "cheapest"
    BALANCED = "balanced"


__all__ = ["AlgorithmFamily", "OptimizationMode"]
