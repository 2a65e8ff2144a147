from backend.engine.heuristics.heuristics import (
    Heuristic,
    HeuristicFn,
    manhattan_distance,
    total_manhattan_distance,
)

__all__ = [
    "Heuristic",
    "HeuristicFn",
    "manhattan_distance",
    "total_manhattan_distance",
]
