# ABOUTME: Parsing functions for Open Library API JSON responses.
# ABOUTME: Converts search docs and author records into BookSummary and AuthorDetail.

from typing import Any

from bookdash.catalog.types import UNKNOWN, AuthorDetail, BookSummary


def normalize_author_key(author_key: str) -> str:
    """Reduce an author reference to its bare id.

    Search docs carry bare keys ("OL26320A") while other endpoints use the
    path form ("/authors/OL26320A"). Both map to the bare id.
    """
    key = author_key.strip()
    if key.startswith("/"):
        key = key.rstrip("/").rsplit("/", 1)[-1]
    return key


def _optional_int(value: Any) -> int | None:
    # bool is an int subclass; the API never means True as a year
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _optional_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _string_tuple(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item)


def parse_search_doc(doc: dict[str, Any]) -> BookSummary:
    """Parse one doc from a search response into a BookSummary."""
    return BookSummary(
        title=doc.get("title") or UNKNOWN,
        first_publish_year=_optional_int(doc.get("first_publish_year")),
        subjects=_string_tuple(doc.get("subject")),
        ratings_average=_optional_float(doc.get("ratings_average")),
        author_keys=tuple(
            normalize_author_key(key) for key in _string_tuple(doc.get("author_key"))
        ),
        key=doc.get("key"),
    )


def parse_search_results(data: dict[str, Any]) -> list[BookSummary]:
    """Parse an Open Library Search API response into BookSummary records.

    Order follows the ``docs`` list of the response. Non-dict entries are skipped.
    """
    docs = data.get("docs") or []
    return [parse_search_doc(doc) for doc in docs if isinstance(doc, dict)]


def _optional_text(value: Any) -> str | None:
    # birth_date and top_work are plain strings; some records use {"type", "value"}
    if isinstance(value, dict):
        value = value.get("value")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_author_response(author_key: str, data: dict[str, Any]) -> AuthorDetail:
    """Extract name, birth date and top work from an Open Library Author response."""
    return AuthorDetail(
        key=normalize_author_key(author_key),
        name=_optional_text(data.get("name")) or UNKNOWN,
        birth_date=_optional_text(data.get("birth_date")),
        top_work=_optional_text(data.get("top_work")),
    )
