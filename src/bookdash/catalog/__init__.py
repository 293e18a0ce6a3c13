# ABOUTME: Catalog package: HTTP access and parsing for the Open Library API.
# ABOUTME: Exports the catalog client, its record types, and the NetworkError failure.

from bookdash.catalog.client import CatalogClient, OpenLibraryCatalog
from bookdash.catalog.http import CatalogHttpClient, HttpClient, NetworkError
from bookdash.catalog.types import UNKNOWN, AuthorDetail, BookSummary

__all__ = [
    "UNKNOWN",
    "AuthorDetail",
    "BookSummary",
    "CatalogClient",
    "CatalogHttpClient",
    "HttpClient",
    "NetworkError",
    "OpenLibraryCatalog",
]
