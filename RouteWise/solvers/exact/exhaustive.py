from __future__ import annotations

import itertools
from typing import Optional

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


class ExhaustiveSearchSolver(BaseSolver):
    """Try every ordering of the free stops. O(n!), exact."""

    name = "exhaustive"
    family = AlgorithmFamily.EXACT
    max_stops = 11

    def solve(self, graph: np.ndarray, start_index: int = 0, end_index: Optional[int] = None) -> AlgorithmResult:
        dist_matrix = np.asarray(graph, dtype=float)
        start_time = current_time()
        n = dist_matrix.shape[0]
        self.check_size(n)

        best_cost = float("inf")
        best_route: list[int] | None = None
        permutations = 0

        for perm in itertools.permutations(free_stops(n, start_index, end_index)):
            permutations += 1
            route = close_route([start_index, *perm], start_index, end_index)
            cost = compute_route_cost(dist_matrix, route)
            # Strict comparison keeps the first optimum in permutation order.
            if best_route is None or cost < best_cost:
                best_cost = cost
                best_route = route

        return AlgorithmResult(
            name=self.name,
            path=best_route,
            cost=best_cost,
            elapsed=current_time() - start_time,
            status="complete",
            metadata={"permutations": permutations},
        )


__all__ = ["ExhaustiveSearchSolver"]
