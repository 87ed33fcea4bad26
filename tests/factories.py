from __future__ import annotations

from typing import Optional

import numpy as np


def make_cells(durations, distances=None, costs=None) -> list[list[dict]]:
    """Wrap plain grids into the cell shape collaborators send."""
    n = len(durations)
    rows = []
    for i in range(n):
        row = []
        for j in range(n):
            cell = {
                "duration": durations[i][j],
                "distance": distances[i][j] if distances is not None else durations[i][j] * 10,
            }
            if costs is not None and costs[i][j] is not None:
                cell["cost"] = {"min": costs[i][j][0], "max": costs[i][j][1]}
            row.append(cell)
        rows.append(row)
    return rows


def random_durations(n: int, seed: int, symmetric: bool = False) -> np.ndarray:
    rng = np.random.default_rng(seed)
    durations = rng.integers(60, 3600, size=(n, n)).astype(float)
    if symmetric:
        durations = np.triu(durations) + np.triu(durations, 1).T
    np.fill_diagonal(durations, 0.0)
    return durations


def assert_valid_route(route, n: int, start: int = 0, end: Optional[int] = None) -> None:
    route = list(route)
    assert route[0] == start
    if end is None or end == start:
        assert len(route) == n + 1
        assert route[-1] == start
        interior = route[:-1]
    else:
        assert len(route) == n
        assert route[-1] == end
        interior = route
    assert sorted(interior) == list(range(n))
