from __future__ import annotations

from RouteWise.solvers.base import BaseSolver


class BaseSelector:
    """Interface for strategy selection."""

    def predict(self, n_stops: int) -> type[BaseSolver]:
        raise NotImplementedError


__all__ = ["BaseSelector"]
