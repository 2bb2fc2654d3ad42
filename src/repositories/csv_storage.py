"""Thin csv-module wrappers that turn I/O failures into StorageError."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

from src.business_objects.errors import StorageError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_rows(path: PathLike, *, encoding: str = "utf-8", delimiter: str = ",") -> List[Tuple[int, List[str]]]:
    """
    Read every non-blank row of a CSV file.
    Returns (line_number, cells) pairs; line numbers are 1-based for error messages.
    """
    path = Path(path)
    rows: List[Tuple[int, List[str]]] = []
    try:
        with path.open("r", newline="", encoding=encoding) as f:
            reader = csv.reader(f, delimiter=delimiter)
            for cells in reader:
                if not cells:
                    continue
                rows.append((reader.line_num, cells))
    except FileNotFoundError as e:
        raise StorageError(f"{path} not found") from e
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise StorageError(f"Cannot read {path}: {e}") from e

    logger.debug("Read %d rows from %s", len(rows), path)
    return rows


def write_rows(
    path: PathLike,
    rows: Iterable[Sequence[object]],
    *,
    encoding: str = "utf-8",
    delimiter: str = ",",
) -> int:
    """Overwrite `path` with `rows`. Returns the number of rows written."""
    path = Path(path)
    count = 0
    try:
        with path.open("w", newline="", encoding=encoding) as f:
            writer = csv.writer(f, delimiter=delimiter)
            for row in rows:
                writer.writerow(row)
                count += 1
    except (OSError, csv.Error) as e:
        raise StorageError(f"Cannot write {path}: {e}") from e

    logger.debug("Wrote %d rows to %s", count, path)
    return count
