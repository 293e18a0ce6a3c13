# ABOUTME: Statically declared display columns for the book table and CSV export.
# ABOUTME: Each column names a DisplayRow field, its label, sortability and formatter.

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


def format_text(value: Any) -> str:
    return "" if value is None else str(value)


def format_year(value: Any) -> str:
    return "" if value is None else f"{value:d}"


def format_rating(value: Any) -> str:
    return "" if value is None else f"{value:.2f}"


def format_subjects(value: Any) -> str:
    return ", ".join(value) if value else ""


@dataclass(frozen=True)
class Column:
    """A display column.

    ``numeric`` columns sort by number; the rest sort as case-insensitive text.
    """

    key: str
    label: str
    sortable: bool = True
    numeric: bool = False
    formatter: Callable[[Any], str] = format_text

    def format(self, value: Any) -> str:
        return self.formatter(value)


COLUMNS: tuple[Column, ...] = (
    Column("title", "Title"),
    Column("author_name", "Author"),
    Column("first_publish_year", "First Publish Year", numeric=True, formatter=format_year),
    Column("subject", "Subject", formatter=format_subjects),
    Column("ratings_average", "Ratings Average", numeric=True, formatter=format_rating),
    Column("author_birth_date", "Author Birth Date"),
    Column("author_top_work", "Author Top Work"),
)

_BY_KEY = {column.key: column for column in COLUMNS}


def get_column(key: str) -> Column:
    """Look up a display column by key.

    Raises:
        ValueError: If no column has that key.
    """
    try:
        return _BY_KEY[key]
    except KeyError:
        msg = f"Unknown column {key!r}; expected one of: {', '.join(_BY_KEY)}"
        raise ValueError(msg) from None


def column_keys() -> list[str]:
    return [column.key for column in COLUMNS]
