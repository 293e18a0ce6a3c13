# ABOUTME: Record types returned by the catalog client.
# ABOUTME: BookSummary comes from the search endpoint, AuthorDetail from the author endpoint.

from dataclasses import dataclass

# Placeholder for author fields that cannot be resolved.
UNKNOWN = "Unknown"


@dataclass(frozen=True)
class BookSummary:
    """One book document from a catalog search response.

    Fields mirror the search doc verbatim; anything the doc omits is None or empty.
    """

    title: str
    first_publish_year: int | None = None
    subjects: tuple[str, ...] = ()
    ratings_average: float | None = None
    author_keys: tuple[str, ...] = ()
    key: str | None = None

    @property
    def primary_author_key(self) -> str | None:
        """The first author reference, which is the one the dashboard resolves."""
        return self.author_keys[0] if self.author_keys else None


@dataclass(frozen=True)
class AuthorDetail:
    """Biographical metadata for a single author key."""

    key: str
    name: str
    birth_date: str | None = None
    top_work: str | None = None
