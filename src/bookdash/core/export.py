# ABOUTME: CSV export of the dashboard's full row set.
# ABOUTME: Writes every row (not just the visible page) with the display columns in order.

import csv
import logging
from pathlib import Path
from typing import TextIO

from bookdash.core.view import ViewModel

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "books.csv"


def write_csv(view: ViewModel, stream: TextIO) -> int:
    """Serialize the view's full row set as CSV to ``stream``.

    Rows follow the current sort order and carry any inline edits, i.e. exactly
    what the table shows across all pages. The header row holds column labels.

    Returns:
        Number of data rows written.
    """
    writer = csv.writer(stream)
    writer.writerow([column.label for column in view.columns])
    rows = view.sorted_rows()
    for row in rows:
        writer.writerow([view.cell_text(row, column) for column in view.columns])
    return len(rows)


def export_csv(
    view: ViewModel,
    output_dir: Path,
    filename: str = EXPORT_FILENAME,
) -> Path:
    """Write the view's full row set to ``output_dir/filename``, replacing any previous export."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    with path.open("w", newline="", encoding="utf-8") as stream:
        count = write_csv(view, stream)
    logger.info("Exported %d row(s) to %s", count, path)
    return path
