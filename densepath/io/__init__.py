"""I/O helpers: weight-cell text conventions, result tables and CSV export."""

from .table import ExportConfig, PathRow, TableConfig, export_csv, result_rows, write_csv
from .weights import format_distance, format_number, format_path, format_weight_cell, parse_weight

__all__ = [
    "parse_weight",
    "format_number",
    "format_weight_cell",
    "format_distance",
    "format_path",
    "TableConfig",
    "ExportConfig",
    "PathRow",
    "result_rows",
    "write_csv",
    "export_csv",
]
