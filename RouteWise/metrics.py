from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from RouteWise.matrix import CostMatrix

SECONDS_PER_MINUTE = 60


@dataclass(frozen=True)
class CostRange:
    min: float = 0.0
    max: float = 0.0


@dataclass(frozen=True)
class OptimizationResult:
    """Final ordered route with its aggregated travel metrics."""

    ordered_stops: Tuple[int, ...]
    total_duration: int  # minutes
    total_distance: float  # meters
    total_cost: CostRange
    algorithm: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Render the shape collaborators exchange: stop ids as strings, camelCase keys."""
        return {
            "orderedStops": [str(stop) for stop in self.ordered_stops],
            "totalDuration": self.total_duration,
            "totalDistance": self.total_distance,
            "totalCost": {"min": self.total_cost.min, "max": self.total_cost.max},
        }


def seconds_to_minutes(seconds: float) -> int:
    # Half-up rounding; round() would round halves to even.
    return int(math.floor(seconds / SECONDS_PER_MINUTE + 0.5))


def summarize_route(route: Sequence[int], matrix: CostMatrix, algorithm: str = "") -> OptimizationResult:
    total_duration = 0.0
    total_distance = 0.0
    min_cost = 0.0
    max_cost = 0.0
    for a, b in zip(route[:-1], route[1:]):
        total_duration += float(matrix.durations[a, b])
        total_distance += float(matrix.distances[a, b])
        min_cost += float(matrix.cost_min[a, b])
        max_cost += float(matrix.cost_max[a, b])

    return OptimizationResult(
        ordered_stops=tuple(int(stop) for stop in route),
        total_duration=seconds_to_minutes(total_duration),
        total_distance=total_distance,
        total_cost=CostRange(min=min_cost, max=max_cost),
        algorithm=algorithm,
    )


__all__ = ["CostRange", "OptimizationResult", "SECONDS_PER_MINUTE", "seconds_to_minutes", "summarize_route"]
