"""densepath - shortest paths over small dense weighted digraphs."""

__version__ = "0.1.0"

from .errors import (
    DensePathError,
    InvalidWeightError,
    NegativeCycleError,
    NegativeEdgeError,
    SolveError,
)
from .graphs import (
    INF,
    MAX_VERTICES,
    MAX_WEIGHT,
    UNREACHABLE,
    AllPairsResult,
    DenseGraph,
    Method,
    Status,
    all_pairs_via_dijkstra,
    dijkstra_from,
    floyd_warshall,
    is_reachable,
    reconstruct_from_pred_matrix,
    reconstruct_from_prev_array,
    solve_all_pairs,
    validate_weight,
)
from .io import (
    ExportConfig,
    PathRow,
    TableConfig,
    export_csv,
    format_distance,
    format_path,
    format_weight_cell,
    parse_weight,
    result_rows,
    write_csv,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Errors
    "DensePathError",
    "InvalidWeightError",
    "SolveError",
    "NegativeCycleError",
    "NegativeEdgeError",
    # Graph model and numeric convention
    "INF",
    "UNREACHABLE",
    "MAX_VERTICES",
    "MAX_WEIGHT",
    "is_reachable",
    "validate_weight",
    "DenseGraph",
    # Solvers
    "floyd_warshall",
    "dijkstra_from",
    "all_pairs_via_dijkstra",
    "reconstruct_from_pred_matrix",
    "reconstruct_from_prev_array",
    "Method",
    "Status",
    "AllPairsResult",
    "solve_all_pairs",
    # I/O
    "parse_weight",
    "format_weight_cell",
    "format_distance",
    "format_path",
    "TableConfig",
    "ExportConfig",
    "PathRow",
    "result_rows",
    "write_csv",
    "export_csv",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
