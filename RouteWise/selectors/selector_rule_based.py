from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from RouteWise.errors import InfeasibleSizeError
from RouteWise.selectors.base import BaseSelector
from RouteWise.solvers import ExhaustiveSearchSolver, HeldKarpSolver, TwoOptSolver

EXHAUSTIVE_MAX_STOPS = 7
HELD_KARP_MAX_STOPS = 10
MAX_STOPS = 250


@dataclass(frozen=True)
class SelectionThresholds:
    """Size cut-offs between strategies.

    Instances of up to ``exhaustive_max_stops`` stops are searched
    exhaustively, up to ``held_karp_max_stops`` by subset DP, anything larger
    by nearest neighbour + 2-opt. ``max_stops`` rejects instances outright;
    ``None`` lifts that cap.
    """

    exhaustive_max_stops: int = EXHAUSTIVE_MAX_STOPS
    held_karp_max_stops: int = HELD_KARP_MAX_STOPS
    max_stops: Optional[int] = MAX_STOPS

    def __post_init__(self) -> None:
        if self.exhaustive_max_stops < 0 or self.held_karp_max_stops < 0:
            raise ValueError("Selection thresholds must be non-negative.")
        if self.held_karp_max_stops < self.exhaustive_max_stops:
            raise ValueError(
                f"held_karp_max_stops ({self.held_karp_max_stops}) must not be below "
                f"exhaustive_max_stops ({self.exhaustive_max_stops})."
            )
        if self.exhaustive_max_stops > ExhaustiveSearchSolver.max_stops:
            raise ValueError(f"exhaustive_max_stops is capped at {ExhaustiveSearchSolver.max_stops}.")
        if self.held_karp_max_stops > HeldKarpSolver.max_stops:
            raise ValueError(f"held_karp_max_stops is capped at {HeldKarpSolver.max_stops}.")
        if self.max_stops is not None and self.max_stops < 1:
            raise ValueError("max_stops must be positive or None.")


class RuleBasedSelector(BaseSelector):
    """Pick a strategy from the number of stops alone."""

    def __init__(self, thresholds: SelectionThresholds | None = None):
        self.thresholds = thresholds or SelectionThresholds()

    def predict(self, n_stops: int):
        n = int(n_stops)
        limits = self.thresholds
        if limits.max_stops is not None and n > limits.max_stops:
            raise InfeasibleSizeError(f"{n} stops exceeds the configured limit of {limits.max_stops}.")

        if n <= limits.exhaustive_max_stops:
            return ExhaustiveSearchSolver
        if n <= limits.held_karp_max_stops:
            return HeldKarpSolver
        return TwoOptSolver


__all__ = [
    "EXHAUSTIVE_MAX_STOPS",
    "HELD_KARP_MAX_STOPS",
    "MAX_STOPS",
    "RuleBasedSelector",
    "SelectionThresholds",
]
