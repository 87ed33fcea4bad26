from __future__ import annotations

from typing import List, Optional

import numpy as np

from RouteWise.solvers.base import (
    AlgorithmResult,
    BaseSolver,
    close_route,
    compute_route_cost,
    current_time,
    free_stops,
)
from RouteWise.utils.taxonomy import AlgorithmFamily


def nearest_neighbor_route(dist_matrix: np.ndarray, start_index: int, end_index: Optional[int]) -> List[int]:
    """Greedy construction: always move to the closest unvisited free stop."""
    n = dist_matrix.shape[0]
    remaining = free_stops(n, start_index, end_index)
    visited = [start_index]
    while remaining:
        last = visited[-1]
        # min() keeps the lowest index on ties since ``remaining`` is sorted.
        next_city = min(remaining, key=lambda city: float(dist_matrix[last, city]))
        visited.append(next_city)
        remaining.remove(next_city)
    return close_route(visited, start_index, end_index)


class NearestNeighborSolver(BaseSolver):
    name = "nearest_neighbor"
    family = AlgorithmFamily.HEURISTIC

    def solve(self, graph: np.ndarray, start_index: int = 0, end_index: Optional[int] = None) -> AlgorithmResult:
        dist_matrix = np.asarray(graph, dtype=float)
        start_time = current_time()
        self.check_size(dist_matrix.shape[0])
        route = nearest_neighbor_route(dist_matrix, start_index, end_index)
        return AlgorithmResult(
            name=self.name,
            path=route,
            cost=compute_route_cost(dist_matrix, route),
            elapsed=current_time() - start_time,
            status="complete",
            metadata={"nodes_visited": len(route) - 1},
        )


__all__ = ["NearestNeighborSolver", "nearest_neighbor_route"]
