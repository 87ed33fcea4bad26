"""Tests for the exhaustive and subset-DP solvers."""
import itertools

import numpy as np
import pytest

from RouteWise.errors import InfeasibleSizeError
from RouteWise.solvers import ExhaustiveSearchSolver, HeldKarpSolver
from RouteWise.solvers.base import compute_route_cost
from tests.factories import assert_valid_route, random_durations

RING_4 = np.array(
    [
        [0, 60, 180, 60],
        [60, 0, 60, 180],
        [180, 60, 0, 60],
        [60, 180, 60, 0],
    ],
    dtype=float,
)


def brute_force_best(durations, start, end):
    n = durations.shape[0]
    free = [c for c in range(n) if c != start and (end is None or c != end)]
    closing = start if end is None or end == start else end
    return min(
        compute_route_cost(durations, [start, *perm, closing]) for perm in itertools.permutations(free)
    )


class TestExhaustiveSearch:
    def test_ring_prefers_first_found_order(self):
        result = ExhaustiveSearchSolver().solve(RING_4, 0, None)
        assert result.path == [0, 1, 2, 3, 0]
        assert result.cost == 240
        assert result.metadata["permutations"] == 6

    def test_open_route_takes_cheaper_detour(self):
        durations = np.array([[0, 5, 20], [5, 0, 5], [20, 5, 0]], dtype=float)
        result = ExhaustiveSearchSolver().solve(durations, 0, 2)
        assert result.path == [0, 1, 2]
        assert result.cost == 10

    def test_single_stop_closes_on_itself(self):
        result = ExhaustiveSearchSolver().solve(np.zeros((1, 1)), 0, None)
        assert result.path == [0, 0]
        assert result.cost == 0

    def test_two_stops_open(self):
        result = ExhaustiveSearchSolver().solve(np.array([[0, 7], [9, 0]], dtype=float), 0, 1)
        assert result.path == [0, 1]

    def test_respects_direction(self):
        durations = np.array([[0, 1, 100], [100, 0, 1], [1, 100, 0]], dtype=float)
        result = ExhaustiveSearchSolver().solve(durations, 0, None)
        assert result.path == [0, 1, 2, 0]
        assert result.cost == 3

    def test_refuses_oversized_instance(self):
        with pytest.raises(InfeasibleSizeError):
            ExhaustiveSearchSolver().solve(np.zeros((12, 12)), 0, None)


class TestHeldKarp:
    def test_ring(self):
        result = HeldKarpSolver().solve(RING_4, 0, None)
        assert result.cost == 240
        assert result.path in ([0, 1, 2, 3, 0], [0, 3, 2, 1, 0])

    def test_open_route(self):
        durations = np.array([[0, 5, 20], [5, 0, 5], [20, 5, 0]], dtype=float)
        result = HeldKarpSolver().solve(durations, 0, 2)
        assert result.path == [0, 1, 2]

    def test_no_free_stops(self):
        result = HeldKarpSolver().solve(np.array([[0, 4], [6, 0]], dtype=float), 0, 1)
        assert result.path == [0, 1]
        assert result.cost == 4

    def test_single_stop(self):
        result = HeldKarpSolver().solve(np.zeros((1, 1)), 0, None)
        assert result.path == [0, 0]

    def test_start_other_than_zero(self):
        durations = random_durations(6, seed=3)
        result = HeldKarpSolver().solve(durations, 4, 1)
        assert_valid_route(result.path, 6, start=4, end=1)
        assert result.cost == pytest.approx(brute_force_best(durations, 4, 1))

    def test_reconstructs_through_unreachable_edges(self):
        inf = float("inf")
        durations = np.array([[0, 1, inf], [inf, 0, 1], [1, inf, 0]])
        result = HeldKarpSolver().solve(durations, 0, None)
        assert result.path == [0, 1, 2, 0]
        assert result.cost == 3

    def test_path_cost_matches_reported_cost(self):
        durations = random_durations(9, seed=11)
        result = HeldKarpSolver().solve(durations, 0, None)
        assert_valid_route(result.path, 9)
        assert compute_route_cost(durations, result.path) == pytest.approx(result.cost)

    def test_refuses_oversized_instance(self):
        with pytest.raises(InfeasibleSizeError):
            HeldKarpSolver().solve(np.zeros((21, 21)), 0, None)


class TestExactSolversAgree:
    @pytest.mark.parametrize("n", range(2, 8))
    @pytest.mark.parametrize("end", [None, 0, "last"])
    def test_same_optimum(self, n, end):
        end_index = n - 1 if end == "last" else end
        for seed in range(3):
            durations = random_durations(n, seed=seed * 100 + n)
            exhaustive = ExhaustiveSearchSolver().solve(durations, 0, end_index)
            held_karp = HeldKarpSolver().solve(durations, 0, end_index)
            assert_valid_route(exhaustive.path, n, end=end_index)
            assert_valid_route(held_karp.path, n, end=end_index)
            assert held_karp.cost == pytest.approx(exhaustive.cost)
            assert exhaustive.cost == pytest.approx(brute_force_best(durations, 0, end_index))
