from __future__ import annotations


class RouteWiseError(Exception):
    """Base class for errors raised by the route optimizer."""


class InvalidInputError(RouteWiseError, ValueError):
    """Raised when the cost matrix or the requested stop indices are malformed."""


class InfeasibleSizeError(RouteWiseError, ValueError):
    """Raised when an instance is too large for the selected strategy."""


__all__ = ["InfeasibleSizeError", "InvalidInputError", "RouteWiseError"]
