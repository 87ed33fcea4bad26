from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from RouteWise.solvers.base import (
    AlgorithmResult,
    BaseSolver,
    compute_route_cost,
    current_time,
)
from RouteWise.solvers.heuristics.nearest_neighbor import nearest_neighbor_route
from RouteWise.utils.taxonomy import AlgorithmFamily

IMPROVEMENT_TOLERANCE = 1e-9


def two_opt_improve(dist_matrix: np.ndarray, route: List[int]) -> Tuple[List[int], float, int]:
    """First-improvement 2-opt over the interior of ``route``.

    The first and last positions are never moved. After every accepted
    reversal the scan starts over; it ends once a full pass finds nothing.
    Returns the improved route, its cost and the number of accepted moves.
    """
    best_route = list(route)
    best_cost = compute_route_cost(dist_matrix, best_route)
    size = len(best_route)
    improvements = 0

    improved = True
    while improved:
        improved = False
        for i in range(1, size - 2):
            for j in range(i + 1, size - 1):
                candidate = best_route[:i] + best_route[i : j + 1][::-1] + best_route[j + 1 :]
                cost = compute_route_cost(dist_matrix, candidate)
                if cost + IMPROVEMENT_TOLERANCE < best_cost:
                    best_route = candidate
                    best_cost = cost
                    improvements += 1
                    improved = True
                    break
            if improved:
                break
    return best_route, best_cost, improvements


class TwoOptSolver(BaseSolver):
    """Nearest-neighbour construction refined by 2-opt.

    Deterministic, but a local optimum only: there is no bound on the gap to
    the true optimum.
    """

    name = "two_opt"
    family = AlgorithmFamily.HEURISTIC

    def solve(self, graph: np.ndarray, start_index: int = 0, end_index: Optional[int] = None) -> AlgorithmResult:
        dist_matrix = np.asarray(graph, dtype=float)
        start_time = current_time()
        self.check_size(dist_matrix.shape[0])

        initial = nearest_neighbor_route(dist_matrix, start_index, end_index)
        initial_cost = compute_route_cost(dist_matrix, initial)
        route, cost, improvements = two_opt_improve(dist_matrix, initial)

        return AlgorithmResult(
            name=self.name,
            path=route,
            cost=cost,
            elapsed=current_time() - start_time,
            status="complete",
            metadata={"initial_cost": initial_cost, "improvements": improvements},
        )


__all__ = ["IMPROVEMENT_TOLERANCE", "TwoOptSolver", "two_opt_improve"]
