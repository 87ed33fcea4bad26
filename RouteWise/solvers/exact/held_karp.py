from __future__ import annotations

import itertools
from typing import Optional

import numpy as np

from RouteWise.solvers.base import (
    AlgorithmResult,
    BaseSolver,
    closing_stop,
    current_time,
    free_stops,
)
from RouteWise.utils.taxonomy import AlgorithmFamily


class HeldKarpSolver(BaseSolver):
    """Subset dynamic programming over (visited set, last stop) states.

    ``dp[mask, c]`` is the cheapest way to leave the start, visit exactly the
    free stops in ``mask`` and stop at free stop ``c``. Bit ``k`` of ``mask``
    refers to ``cities[k]``, so the start does not have to be stop 0.
    Time O(n^2 * 2^n), memory O(n * 2^n).
    """

    name = "held_karp"
    family = AlgorithmFamily.EXACT
    max_stops = 20

    def solve(self, graph: np.ndarray, start_index: int = 0, end_index: Optional[int] = None) -> AlgorithmResult:
        dist_matrix = np.asarray(graph, dtype=float)
        start_time = current_time()
        n = dist_matrix.shape[0]
        self.check_size(n)

        cities = free_stops(n, start_index, end_index)
        closing = closing_stop(start_index, end_index)
        m = len(cities)
        if m == 0:
            path = [start_index, closing]
            return AlgorithmResult(
                name=self.name,
                path=path,
                cost=float(dist_matrix[start_index, closing]),
                elapsed=current_time() - start_time,
                status="complete",
                metadata={"states": 0},
            )

        dp = np.full((1 << m, m), np.inf)
        parent = np.full((1 << m, m), -1, dtype=np.int64)
        for k, city in enumerate(cities):
            dp[1 << k, k] = float(dist_matrix[start_index, city])

        for subset_size in range(2, m + 1):
            for subset in itertools.combinations(range(m), subset_size):
                mask = 0
                for k in subset:
                    mask |= 1 << k
                for k in subset:
                    prev_mask = mask & ~(1 << k)
                    best_cost = float("inf")
                    best_prev = -1
                    for p in subset:
                        if p == k:
                            continue
                        cost = dp[prev_mask, p] + float(dist_matrix[cities[p], cities[k]])
                        # Unreachable states still get a predecessor so the walk back never stalls.
                        if best_prev < 0 or cost < best_cost:
                            best_cost = cost
                            best_prev = p
                    dp[mask, k] = best_cost
                    parent[mask, k] = best_prev

        full_mask = (1 << m) - 1
        best_cost = float("inf")
        best_last = -1
        for k, city in enumerate(cities):
            cost = dp[full_mask, k] + float(dist_matrix[city, closing])
            if best_last < 0 or cost < best_cost:
                best_cost = float(cost)
                best_last = k

        reversed_path = []
        mask = full_mask
        last = best_last
        while last >= 0:
            reversed_path.append(cities[last])
            prev = int(parent[mask, last])
            mask &= ~(1 << last)
            last = prev
        path = [start_index, *reversed(reversed_path), closing]

        return AlgorithmResult(
            name=self.name,
            path=path,
            cost=best_cost,
            elapsed=current_time() - start_time,
            status="complete",
            metadata={"states": int(m * (1 << m))},
        )


__all__ = ["HeldKarpSolver"]
