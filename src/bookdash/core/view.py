# ABOUTME: View model for the book table: search status, sort, pagination and inline edits.
# ABOUTME: Derives the visible page from the full row set; edits live in a local override map.

import logging
import math
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from bookdash.catalog.http import NetworkError
from bookdash.core.columns import COLUMNS, Column, get_column
from bookdash.core.rows import DisplayRow

logger = logging.getLogger(__name__)

PAGE_SIZE_OPTIONS = (10, 20, 50, 100)
DEFAULT_PAGE_SIZE = 10
FETCH_ERROR_MESSAGE = "Failed to fetch books. Please try again later."


@dataclass(frozen=True)
class SortState:
    column: str
    descending: bool = False


@dataclass
class ViewState:
    """Everything the table renders from.

    ``rows`` keeps fetch order; the sorted order is derived on demand.
    ``overrides`` maps (row_id, column key) to the text a user typed in.
    """

    search_term: str = ""
    loading: bool = False
    error: str | None = None
    rows: list[DisplayRow] = field(default_factory=list)
    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    sort: SortState | None = None
    editing_row: int | None = None
    overrides: dict[tuple[int, str], str] = field(default_factory=dict)


class ViewModel:
    """State holder behind the dashboard table.

    ``fetch_rows`` is the enrichment step (usually ``EnrichmentPipeline.run``).
    A failed fetch sets a static error message and keeps the previous rows.
    When searches overlap, only the most recently issued one may publish.
    """

    def __init__(
        self,
        fetch_rows: Callable[[str], list[DisplayRow]],
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        columns: tuple[Column, ...] = COLUMNS,
    ) -> None:
        _check_page_size(page_size)
        self._fetch_rows = fetch_rows
        self.columns = columns
        self.state = ViewState(page_size=page_size)
        self._lock = threading.Lock()
        self._generation = 0

    # -- search ---------------------------------------------------------

    def search(self, term: str) -> bool:
        """Fetch and enrich rows for ``term``, replacing the row set on success.

        Returns:
            True if this search published new rows, False on failure or when a
            newer search superseded it.
        """
        with self._lock:
            self._generation += 1
            generation = self._generation
            self.state.search_term = term
            self.state.loading = True
            self.state.error = None

        try:
            rows = self._fetch_rows(term)
        except NetworkError as exc:
            logger.warning("Failed to fetch books for %r: %s", term, exc)
            with self._lock:
                if generation == self._generation:
                    self.state.error = FETCH_ERROR_MESSAGE
            return False
        finally:
            with self._lock:
                if generation == self._generation:
                    self.state.loading = False

        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale results for %r", term)
                return False
            self.state.rows = list(rows)
            self.state.page_index = 0
            self.state.overrides.clear()
            self.state.editing_row = None
        return True

    # -- sorting --------------------------------------------------------

    def toggle_sort(self, column_key: str) -> SortState | None:
        """Cycle a column through ascending, descending and unsorted.

        Selecting a different column starts it at ascending. Resets to the first page.

        Raises:
            ValueError: If the column is unknown or not sortable.
        """
        _sortable_column(column_key)
        current = self.state.sort
        if current is None or current.column != column_key:
            new_sort: SortState | None = SortState(column_key)
        elif not current.descending:
            new_sort = SortState(column_key, descending=True)
        else:
            new_sort = None
        self.state.sort = new_sort
        self.state.page_index = 0
        return new_sort

    def sort_by(self, column_key: str | None, *, descending: bool = False) -> None:
        """Set the sort directly; ``None`` restores fetch order. Resets to the first page."""
        if column_key is None:
            self.state.sort = None
        else:
            _sortable_column(column_key)
            self.state.sort = SortState(column_key, descending=descending)
        self.state.page_index = 0

    def sorted_rows(self) -> list[DisplayRow]:
        """The full row set in display order.

        Missing values go last in both directions; equal keys keep fetch order.
        """
        rows = self.state.rows
        sort = self.state.sort
        if sort is None:
            return list(rows)
        column = get_column(sort.column)
        keyed = [(self._sort_key(row, column), row) for row in rows]
        present = [(key, row) for key, row in keyed if key is not None]
        missing = [row for key, row in keyed if key is None]
        present.sort(key=lambda pair: pair[0], reverse=sort.descending)
        return [row for _, row in present] + missing

    def _sort_key(self, row: DisplayRow, column: Column) -> Any:
        override = self.state.overrides.get((row.row_id, column.key))
        if column.numeric:
            raw = row.value(column.key) if override is None else _parse_number(override)
            return None if raw is None else float(raw)
        text = override if override is not None else column.format(row.value(column.key))
        return text.casefold() if text else None

    # -- pagination -----------------------------------------------------

    @property
    def total_rows(self) -> int:
        return len(self.state.rows)

    @property
    def page_count(self) -> int:
        return math.ceil(self.total_rows / self.state.page_size)

    @property
    def can_previous(self) -> bool:
        return self.state.page_index > 0

    @property
    def can_next(self) -> bool:
        return self.state.page_index < self.page_count - 1

    def page_rows(self) -> list[DisplayRow]:
        start = self.state.page_index * self.state.page_size
        return self.sorted_rows()[start : start + self.state.page_size]

    def goto_page(self, index: int) -> int:
        """Move to ``index`` clamped to the valid page range; returns the new index."""
        last = max(self.page_count - 1, 0)
        self.state.page_index = min(max(index, 0), last)
        return self.state.page_index

    def next_page(self) -> int:
        return self.goto_page(self.state.page_index + 1)

    def previous_page(self) -> int:
        return self.goto_page(self.state.page_index - 1)

    def set_page_size(self, size: int) -> None:
        """Change the page size and return to the first page.

        Raises:
            ValueError: If ``size`` is not one of PAGE_SIZE_OPTIONS.
        """
        _check_page_size(size)
        self.state.page_size = size
        self.state.page_index = 0

    # -- inline edit ----------------------------------------------------

    def find_row(self, row_id: int) -> DisplayRow:
        for row in self.state.rows:
            if row.row_id == row_id:
                return row
        msg = f"No row with id {row_id}"
        raise KeyError(msg)

    def begin_edit(self, row_id: int) -> None:
        """Put a row in edit mode; only one row is edited at a time."""
        self.find_row(row_id)
        self.state.editing_row = row_id

    def commit_cell(self, row_id: int, column_key: str, value: str) -> None:
        """Record an edited cell in the local override map.

        The fetched DisplayRow is left untouched; nothing is sent upstream.
        """
        self.find_row(row_id)
        get_column(column_key)
        self.state.overrides[(row_id, column_key)] = value

    def save_edit(self, row_id: int) -> None:
        """Leave edit mode for the row. Committed cells stay as typed."""
        if self.state.editing_row == row_id:
            self.state.editing_row = None

    def is_editing(self, row_id: int) -> bool:
        return self.state.editing_row == row_id

    def cell_text(self, row: DisplayRow, column: Column) -> str:
        """Displayed text of a cell: the user's edit if any, else the formatted value."""
        override = self.state.overrides.get((row.row_id, column.key))
        if override is not None:
            return override
        return column.format(row.value(column.key))


def _check_page_size(size: int) -> None:
    if size not in PAGE_SIZE_OPTIONS:
        msg = f"Page size must be one of {PAGE_SIZE_OPTIONS}, got {size}"
        raise ValueError(msg)


def _sortable_column(column_key: str) -> Column:
    column = get_column(column_key)
    if not column.sortable:
        msg = f"Column {column_key!r} is not sortable"
        raise ValueError(msg)
    return column


def _parse_number(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None
