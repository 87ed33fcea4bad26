from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Type

import numpy as np

from RouteWise.errors import InfeasibleSizeError
from RouteWise.matrix import EndConstraint
from RouteWise.utils.taxonomy import AlgorithmFamily


@dataclass
class AlgorithmResult:
    """Container capturing the outcome of running a route solver."""

    name: str
    path: List[int]
    cost: float
    elapsed: float
    status: str
    metadata: Dict[str, Any] = field(default_factory=dict)


def current_time() -> float:
    return time.perf_counter()


def compute_route_cost(dist_matrix: np.ndarray, route: Sequence[int]) -> float:
    """Sum directed edge costs along ``route`` (no implicit return leg)."""
    cost = 0.0
    for i in range(len(route) - 1):
        cost += float(dist_matrix[route[i], route[i + 1]])
    return cost


def free_stops(n: int, start_index: int, end_index: Optional[int]) -> List[int]:
    """Stops whose position in the route is up to the solver."""
    end = EndConstraint.resolve(start_index, end_index)
    reserved = {start_index}
    if end is EndConstraint.FIXED_END:
        reserved.add(end_index)
    return [city for city in range(n) if city not in reserved]


def closing_stop(start_index: int, end_index: Optional[int]) -> int:
    if EndConstraint.resolve(start_index, end_index).closes_loop:
        return start_index
    return end_index


def close_route(points: Sequence[int], start_index: int, end_index: Optional[int]) -> List[int]:
    route = list(points)
    route.append(closing_stop(start_index, end_index))
    return route


@dataclass(frozen=True)
class SolverSpec:
    """Metadata describing a solver implementation."""

    name: str
    cls: Type["BaseSolver"]
    family: AlgorithmFamily
    max_stops: Optional[int] = None


class BaseSolver:
    """Common interface for route solvers.

    Solvers read a square ``float`` matrix of directed travel durations and
    return a complete route: the start first, every other stop once, then the
    closing stop (the start again, or the distinct fixed end).
    """

    name: str
    family: AlgorithmFamily
    max_stops: Optional[int] = None

    def solve(self, graph: np.ndarray, start_index: int = 0, end_index: Optional[int] = None) -> AlgorithmResult:
        raise NotImplementedError

    def check_size(self, n: int) -> None:
        if self.max_stops is not None and n > self.max_stops:
            raise InfeasibleSizeError(f"{self.name} supports at most {self.max_stops} stops, got {n}.")

    def __call__(self, graph: np.ndarray, start_index: int = 0, end_index: Optional[int] = None) -> AlgorithmResult:
        return self.solve(graph, start_index=start_index, end_index=end_index)


__all__ = [
    "AlgorithmResult",
    "AlgorithmFamily",
    "BaseSolver",
    "SolverSpec",
    "close_route",
    "closing_stop",
    "compute_route_cost",
    "current_time",
    "free_stops",
]
