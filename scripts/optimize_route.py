#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from typing import Any, Iterable

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from RouteWise import OptimizationMode, RouteOptimizer, RouteWiseError, SelectionThresholds
from RouteWise.selectors.selector_rule_based import EXHAUSTIVE_MAX_STOPS, HELD_KARP_MAX_STOPS, MAX_STOPS


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Order the stops of a travel-cost matrix.")
    parser.add_argument(
        "--matrix",
        type=pathlib.Path,
        required=True,
        help="JSON file holding a matrix of {duration, distance, cost?} cells, or an object with a 'matrix' key.",
    )
    parser.add_argument("--start", type=int, default=0, help="Index of the fixed first stop.")
    parser.add_argument(
        "--end",
        type=int,
        default=None,
        help="Index of a fixed last stop (default: return to the start).",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in OptimizationMode],
        default=OptimizationMode.FASTEST.value,
        help="Optimization preference.",
    )
    parser.add_argument(
        "--exhaustive-max",
        type=int,
        default=EXHAUSTIVE_MAX_STOPS,
        help="Largest instance solved by exhaustive search.",
    )
    parser.add_argument(
        "--held-karp-max",
        type=int,
        default=HELD_KARP_MAX_STOPS,
        help="Largest instance solved by subset dynamic programming.",
    )
    parser.add_argument(
        "--max-stops",
        type=int,
        default=MAX_STOPS,
        help="Reject instances with more stops than this (0 disables the cap).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level.",
    )
    return parser.parse_args(raw_args)


def load_matrix(path: pathlib.Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        payload = json.load(fh)
    if isinstance(payload, dict):
        return payload.get("matrix")
    return payload


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level, format="[%(asctime)s][%(levelname)s] %(name)s: %(message)s")

    try:
        thresholds = SelectionThresholds(
            exhaustive_max_stops=args.exhaustive_max,
            held_karp_max_stops=args.held_karp_max,
            max_stops=args.max_stops or None,
        )
        matrix = load_matrix(args.matrix)
        result = RouteOptimizer(thresholds=thresholds).optimize(matrix, args.start, args.end, mode=args.mode)
    except (OSError, json.JSONDecodeError, RouteWiseError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
