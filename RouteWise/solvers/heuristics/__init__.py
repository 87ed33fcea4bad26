from RouteWise.solvers.heuristics.nearest_neighbor import NearestNeighborSolver
from RouteWise.solvers.heuristics.two_opt import TwoOptSolver

__all__ = [
    "NearestNeighborSolver",
    "TwoOptSolver",
]
