"""Tabulation and CSV export of all-pairs results.

A result is flattened into one row per ordered pair of distinct vertices,
in row-major order, with 1-indexed vertex numbers. The same rows feed a
results table and a delimited-text export; only the text conventions differ,
and those are carried by frozen config dataclasses.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterator, Tuple, Union

from ..graphs.numeric import is_reachable
from ..graphs.result import AllPairsResult
from ..logging import get_logger
from .weights import ARROW, UNREACHABLE_TEXT, format_distance, format_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class TableConfig:
    """
    Text conventions for a results table.

    Args:
        path_separator: Separator between path vertices.
        unreachable: Length text for an unreachable pair.
        no_path: Path text for an unreachable pair.
        broken_path: Path text for a reachable pair whose path could not be
            reconstructed.
    """

    path_separator: str = ARROW
    unreachable: str = UNREACHABLE_TEXT
    no_path: str = "no path"
    broken_path: str = "-"


@dataclass(frozen=True)
class ExportConfig(TableConfig):
    """
    Text conventions for CSV export.

    Args:
        delimiter: CSV field delimiter.
        lineterminator: Record terminator.
        header: Column names written as the first row.
    """

    path_separator: str = " "
    unreachable: str = "inf"
    no_path: str = ""
    delimiter: str = ";"
    lineterminator: str = "\n"
    header: Tuple[str, str, str, str] = ("i", "j", "length", "path")


@dataclass(frozen=True)
class PathRow:
    """One ordered pair of a results table; every cell is text."""

    source: str
    target: str
    length: str
    path: str

    def as_tuple(self) -> Tuple[str, str, str, str]:
        return (self.source, self.target, self.length, self.path)


def result_rows(result: AllPairsResult, config: TableConfig = TableConfig()) -> Iterator[PathRow]:
    """
    Yield one row per ordered pair ``i != j`` of ``result``.

    Parameters
    ----------
    result : AllPairsResult
        A successful solve result.
    config : TableConfig
        Text conventions.

    Yields
    ------
    PathRow
        Rows in row-major order with 1-indexed vertices.

    Raises
    ------
    SolveError
        If the result status does not allow its tables to be consumed.
    """
    result.raise_for_status()
    n = result.n
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            value = float(result.dist[i, j])
            if not is_reachable(value):
                path_text = config.no_path
            else:
                path = result.path(i, j)
                path_text = format_path(path, config.path_separator) if path else config.broken_path
            yield PathRow(
                source=str(i + 1),
                target=str(j + 1),
                length=format_distance(value, config.unreachable),
                path=path_text,
            )


def write_csv(result: AllPairsResult, stream: IO[str], config: ExportConfig = ExportConfig()) -> int:
    """
    Write ``result`` as delimited text to an open text stream.

    Returns:
        Number of data rows written (header excluded).
    """
    result.raise_for_status()
    writer = csv.writer(
        stream, delimiter=config.delimiter, lineterminator=config.lineterminator
    )
    writer.writerow(config.header)
    count = 0
    for row in result_rows(result, config):
        writer.writerow(row.as_tuple())
        count += 1
    return count


def export_csv(
    result: AllPairsResult, path: Union[str, Path], config: ExportConfig = ExportConfig()
) -> int:
    """
    Export ``result`` to a CSV file at ``path``.

    The file is only created once the result is known to be consumable.

    Returns:
        Number of data rows written (header excluded).
    """
    result.raise_for_status()
    path = Path(path)
    with path.open("w", encoding="utf-8", newline="") as fh:
        count = write_csv(result, fh, config)
    logger.info("exported %d rows to %s", count, path)
    return count


__all__ = ["TableConfig", "ExportConfig", "PathRow", "result_rows", "write_csv", "export_csv"]
