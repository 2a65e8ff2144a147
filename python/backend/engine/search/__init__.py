from backend.engine.search.node import Node
from backend.engine.search.solver import SearchResult, Solver

__all__ = ["Node", "SearchResult", "Solver"]
