from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import numpy as np

from RouteWise.errors import InvalidInputError


class EndConstraint(str, Enum):
    """How a route terminates."""

    RETURN_TO_START = "return_to_start"  # no end requested
    CLOSED = "closed"  # end requested and equal to start
    FIXED_END = "fixed_end"  # end is a distinct stop

    @classmethod
    def resolve(cls, start_index: int, end_index: Optional[int]) -> "EndConstraint":
        if end_index is None:
            return cls.RETURN_TO_START
        if end_index == start_index:
            return cls.CLOSED
        return cls.FIXED_END

    @property
    def closes_loop(self) -> bool:
        return self is not EndConstraint.FIXED_END


@dataclass(frozen=True, eq=False)
class CostMatrix:
    """Read-only numeric view over a caller-supplied matrix of travel costs.

    ``durations`` are seconds, ``distances`` meters. Every value must be
    finite and the diagonal is always zero. Cells without cost information
    contribute ``0`` to both ``cost_min`` and ``cost_max``.
    """

    durations: np.ndarray
    distances: np.ndarray
    cost_min: np.ndarray
    cost_max: np.ndarray

    @property
    def size(self) -> int:
        return int(self.durations.shape[0])

    @classmethod
    def from_cells(cls, matrix: Sequence[Sequence[Any]]) -> "CostMatrix":
        if isinstance(matrix, CostMatrix):
            return matrix
        if isinstance(matrix, (str, bytes)) or not isinstance(matrix, Sequence):
            raise InvalidInputError("Cost matrix must be a sequence of rows.")
        n = len(matrix)
        if n < 1:
            raise InvalidInputError("Cost matrix must contain at least one stop.")

        durations = np.zeros((n, n), dtype=float)
        distances = np.zeros((n, n), dtype=float)
        cost_min = np.zeros((n, n), dtype=float)
        cost_max = np.zeros((n, n), dtype=float)
        for i, row in enumerate(matrix):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise InvalidInputError(f"Row {i} of the cost matrix is not a sequence.")
            if len(row) != n:
                raise InvalidInputError(f"Cost matrix is not square: row {i} has {len(row)} cells, expected {n}.")
            for j, cell in enumerate(row):
                durations[i, j] = _number(cell, "duration", i, j)
                distances[i, j] = _number(cell, "distance", i, j)
                cost = _field(cell, "cost")
                if cost is not None:
                    cost_min[i, j] = _number(cost, "min", i, j, default=0.0)
                    cost_max[i, j] = _number(cost, "max", i, j, default=0.0)

        return cls._frozen(durations, distances, cost_min, cost_max)

    @classmethod
    def from_durations(cls, durations: Any, distances: Any | None = None) -> "CostMatrix":
        """Build a matrix from plain grids; cost ranges are zero."""
        try:
            dur = np.array(durations, dtype=float)
            dist = None if distances is None else np.array(distances, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Matrix values must form a numeric grid: {exc}") from exc
        if dur.ndim != 2 or dur.shape[0] != dur.shape[1] or dur.shape[0] < 1:
            raise InvalidInputError(f"Duration matrix must be square and non-empty, got shape {dur.shape}.")
        if dist is None:
            dist = np.zeros_like(dur)
        if dist.shape != dur.shape:
            raise InvalidInputError(f"Distance matrix shape {dist.shape} does not match durations {dur.shape}.")
        return cls._frozen(dur, dist, np.zeros_like(dur), np.zeros_like(dur))

    @classmethod
    def _frozen(cls, *arrays: np.ndarray) -> "CostMatrix":
        for arr in arrays:
            if not np.isfinite(arr).all():
                raise InvalidInputError(
                    "Cost matrix values must be finite; use a large finite duration for impractical legs."
                )
            # Staying put costs nothing.
            np.fill_diagonal(arr, 0.0)
            arr.setflags(write=False)
        return cls(*arrays)

    def validate_indices(self, start_index: Any, end_index: Any = None) -> None:
        n = self.size
        for label, value in (("start_index", start_index), ("end_index", end_index)):
            if value is None and label == "end_index":
                continue
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidInputError(f"{label} must be an integer, got {value!r}.")
            if not 0 <= int(value) < n:
                raise InvalidInputError(f"{label}={value} is out of range for {n} stops.")


def _field(cell: Any, name: str) -> Any:
    if isinstance(cell, Mapping):
        return cell.get(name)
    return getattr(cell, name, None)


def _number(cell: Any, name: str, i: int, j: int, default: float | None = None) -> float:
    value = _field(cell, name)
    if value is None:
        if default is not None:
            return default
        raise InvalidInputError(f"Cell ({i}, {j}) has no '{name}' value.")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Cell ({i}, {j}) has a non-numeric '{name}': {value!r}.") from exc


__all__ = ["CostMatrix", "EndConstraint"]
