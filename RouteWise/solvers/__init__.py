from __future__ import annotations

from RouteWise.solvers.base import AlgorithmResult, BaseSolver, SolverSpec
from RouteWise.solvers.exact import ExhaustiveSearchSolver, HeldKarpSolver
from RouteWise.solvers.heuristics import NearestNeighborSolver, TwoOptSolver
from RouteWise.utils.taxonomy import AlgorithmFamily

SOLVER_SPECS: dict[str, SolverSpec] = {
    solver_cls.name: SolverSpec(
        name=solver_cls.name,
        cls=solver_cls,
        family=solver_cls.family,
        max_stops=solver_cls.max_stops,
    )
    for solver_cls in (ExhaustiveSearchSolver, HeldKarpSolver, NearestNeighborSolver, TwoOptSolver)
}

SOLVER_REGISTRY: dict[str, type[BaseSolver]] = {name: spec.cls for name, spec in SOLVER_SPECS.items()}
SOLVER_FAMILIES: dict[str, AlgorithmFamily] = {name: spec.family for name, spec in SOLVER_SPECS.items()}


def get_solver(name: str) -> BaseSolver:
    solver_cls = SOLVER_REGISTRY.get(name)
    if solver_cls is None:
        raise KeyError(f"Unknown solver: {name}")
    return solver_cls()


__all__ = [
    "AlgorithmResult",
    "BaseSolver",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "AlgorithmFamily",
    "SolverSpec",
    "get_solver",
    "ExhaustiveSearchSolver",
    "HeldKarpSolver",
    "NearestNeighborSolver",
    "TwoOptSolver",
]
