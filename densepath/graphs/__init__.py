"""
Shortest-path algorithms over small dense graphs.

This package provides:
- DenseGraph, a bounded adjacency-matrix graph with a "no edge" sentinel
- All-pairs shortest paths (Floyd-Warshall) with negative-cycle detection
- Single-source shortest paths (dense Dijkstra) and its all-pairs repetition
- Path reconstruction matched to each solver's predecessor bookkeeping
- solve_all_pairs, a status-carrying front end over both strategies

All algorithms are deterministic and never modify the graph they solve.
"""

from .allpairs import floyd_warshall
from .core import DenseGraph
from .numeric import INF, MAX_VERTICES, MAX_WEIGHT, UNREACHABLE, is_reachable, validate_weight
from .result import AllPairsResult, Method, Status, solve_all_pairs
from .shortest import all_pairs_via_dijkstra, dijkstra_from
from .utils import reconstruct_from_pred_matrix, reconstruct_from_prev_array

__all__ = [
    "INF",
    "UNREACHABLE",
    "MAX_VERTICES",
    "MAX_WEIGHT",
    "is_reachable",
    "validate_weight",
    "DenseGraph",
    "floyd_warshall",
    "dijkstra_from",
    "all_pairs_via_dijkstra",
    "reconstruct_from_pred_matrix",
    "reconstruct_from_prev_array",
    "Method",
    "Status",
    "AllPairsResult",
    "solve_all_pairs",
]

# Example usage:
# from densepath.graphs import DenseGraph, solve_all_pairs
#
# g = DenseGraph(3)
# g.set_edge(0, 1, 2.0)
# g.set_edge(1, 2, 3.0)
# result = solve_all_pairs(g)
# result.path(0, 2)  # [1, 2, 3]
