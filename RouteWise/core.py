from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from RouteWise.errors import InvalidInputError
from RouteWise.matrix import CostMatrix, EndConstraint
from RouteWise.metrics import OptimizationResult, summarize_route
from RouteWise.selectors import SelectionThresholds, get_selector
from RouteWise.solvers import get_solver
from RouteWise.utils.taxonomy import OptimizationMode

logger = logging.getLogger(__name__)


class RouteOptimizer:
    """End-to-end pipeline: validate matrix -> pick strategy -> solve -> summarize."""

    def __init__(
        self,
        selector: object | None = None,
        selector_name: str = "rule_based",
        thresholds: SelectionThresholds | None = None,
    ):
        if selector is not None:
            self.selector = selector
        else:
            self.selector = get_selector(selector_name, thresholds=thresholds)

    def optimize(
        self,
        matrix: Sequence[Sequence[Any]] | CostMatrix,
        start_index: int = 0,
        end_index: Optional[int] = None,
        mode: OptimizationMode | str = OptimizationMode.FASTEST,
    ) -> OptimizationResult:
        mode = self._resolve_mode(mode)
        cost_matrix = CostMatrix.from_cells(matrix)
        cost_matrix.validate_indices(start_index, end_index)
        start_index = int(start_index)
        end_index = None if end_index is None else int(end_index)
        n = cost_matrix.size

        solver_cls = self.selector.predict(n)
        if mode is not OptimizationMode.FASTEST:
            logger.debug("Mode %r is not differentiated; optimizing travel time.", mode.value)

        solver = get_solver(solver_cls.name)
        result = solver.solve(cost_matrix.durations, start_index=start_index, end_index=end_index)
        logger.debug(
            "%s solved %d stops (%s) in %.4fs: cost=%.1fs %s",
            result.name,
            n,
            EndConstraint.resolve(start_index, end_index).value,
            result.elapsed,
            result.cost,
            result.metadata,
        )
        return summarize_route(result.path, cost_matrix, algorithm=result.name)

    @staticmethod
    def _resolve_mode(mode: OptimizationMode | str) -> OptimizationMode:
        try:
            return OptimizationMode(mode)
        except ValueError as exc:
            choices = ", ".join(m.value for m in OptimizationMode)
            raise InvalidInputError(f"Unknown optimization mode {mode!r}; expected one of: {choices}.") from exc


def optimize(
    matrix: Sequence[Sequence[Any]] | CostMatrix,
    start_index: int = 0,
    end_index: Optional[int] = None,
    mode: OptimizationMode | str = OptimizationMode.FASTEST,
    thresholds: SelectionThresholds | None = None,
) -> OptimizationResult:
    """Order the stops of ``matrix`` to minimise total travel time.

    ``end_index=None`` and ``end_index=start_index`` both close the route back
    at the start; any other ``end_index`` produces an open route ending there.
    Raises ``InvalidInputError`` for malformed input and
    ``InfeasibleSizeError`` when the instance exceeds ``thresholds.max_stops``.
    """
    return RouteOptimizer(thresholds=thresholds).optimize(matrix, start_index, end_index, mode=mode)


__all__ = ["RouteOptimizer", "optimize"]
