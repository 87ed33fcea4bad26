import logging

from RouteWise.core import RouteOptimizer, optimize
from RouteWise.errors import InfeasibleSizeError, InvalidInputError, RouteWiseError
from RouteWise.matrix import CostMatrix, EndConstraint
from RouteWise.metrics import CostRange, OptimizationResult, summarize_route
from RouteWise.selectors import BaseSelector, RuleBasedSelector, SelectionThresholds, get_selector
from RouteWise.solvers import (
    AlgorithmResult,
    BaseSolver,
    SOLVER_FAMILIES,
    SOLVER_REGISTRY,
    SOLVER_SPECS,
    get_solver,
)
from RouteWise.utils.taxonomy import AlgorithmFamily, OptimizationMode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AlgorithmFamily",
    "AlgorithmResult",
    "BaseSelector",
    "BaseSolver",
    "CostMatrix",
    "CostRange",
    "EndConstraint",
    "InfeasibleSizeError",
    "InvalidInputError",
    "OptimizationMode",
    "OptimizationResult",
    "RouteOptimizer",
    "RouteWiseError",
    "RuleBasedSelector",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "SelectionThresholds",
    "get_selector",
    "get_solver",
    "optimize",
    "summarize_route",
]
