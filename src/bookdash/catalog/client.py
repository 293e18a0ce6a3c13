# ABOUTME: Open Library catalog client: keyword search and per-author lookup.
# ABOUTME: Defines the CatalogClient protocol the enrichment pipeline depends on.

import logging
from typing import Protocol, runtime_checkable
from urllib.parse import quote

from bookdash.catalog.http import HttpClient, NetworkError
from bookdash.catalog.parser import (
    normalize_author_key,
    parse_author_response,
    parse_search_results,
)
from bookdash.catalog.types import AuthorDetail, BookSummary

logger = logging.getLogger(__name__)

OL_BASE = "https://openlibrary.org"


@runtime_checkable
class CatalogClient(Protocol):
    """Protocol for the two read-only catalog queries."""

    def search_books(self, query: str) -> list[BookSummary]: ...

    def get_author(self, author_key: str) -> AuthorDetail: ...


def normalize_query(query: str) -> str:
    """Turn a search term into the value sent as the ``q`` parameter.

    "+" separates words, as in a form-encoded query string, so
    "the+lord+of+the+rings" and "the lord of the rings" search the same thing.
    """
    return " ".join(query.replace("+", " ").split())


class OpenLibraryCatalog:
    """Catalog client backed by the Open Library API.

    Uses a dependency-injected HttpClient for testability. Failures are never
    swallowed: NetworkError propagates to the caller after being logged.
    """

    def __init__(self, http_client: HttpClient, *, base_url: str = OL_BASE) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    def search_books(self, query: str) -> list[BookSummary]:
        """Search the catalog by keyword and return summaries in response order."""
        url = f"{self._base_url}/search.json"
        try:
            data = self._http.get(url, params={"q": normalize_query(query)})
        except NetworkError as exc:
            logger.warning("Search failed for %r: %s", query, exc)
            raise
        summaries = parse_search_results(data)
        logger.debug("Search %r returned %d doc(s)", query, len(summaries))
        return summaries

    def get_author(self, author_key: str) -> AuthorDetail:
        """Fetch biographical metadata for a single author key."""
        key = normalize_author_key(author_key)
        url = f"{self._base_url}/authors/{quote(key)}.json"
        try:
            data = self._http.get(url)
        except NetworkError as exc:
            logger.warning("Author lookup failed for %s: %s", key, exc)
            raise
        return parse_author_response(key, data)
