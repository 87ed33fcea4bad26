from RouteWise.solvers.exact.exhaustive import ExhaustiveSearchSolver
from RouteWise.solvers.exact.held_karp import HeldKarpSolver

__all__ = [
    "ExhaustiveSearchSolver",
    "HeldKarpSolver",
]
