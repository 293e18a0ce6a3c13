# ABOUTME: DisplayRow, the unit the view model and table operate on.
# ABOUTME: A BookSummary merged with the resolved author name, birth date and top work.

from dataclasses import dataclass
from typing import Any

from bookdash.catalog.types import UNKNOWN, AuthorDetail, BookSummary


@dataclass(frozen=True)
class DisplayRow:
    """One book summary joined with its primary author's metadata.

    ``row_id`` is the position of the summary in the search response and
    identifies the row across sorting and paging. Rows are never mutated;
    inline edits live in the view model's override map.
    """

    row_id: int
    summary: BookSummary
    author_name: str = UNKNOWN
    author_birth_date: str = UNKNOWN
    author_top_work: str = UNKNOWN

    @classmethod
    def without_author(cls, row_id: int, summary: BookSummary) -> "DisplayRow":
        """Row for a summary with no author reference (or an unresolved one)."""
        return cls(row_id=row_id, summary=summary)

    @classmethod
    def merge(cls, row_id: int, summary: BookSummary, author: AuthorDetail) -> "DisplayRow":
        """Merge a resolved author onto a summary, substituting UNKNOWN for absent fields."""
        return cls(
            row_id=row_id,
            summary=summary,
            author_name=author.name or UNKNOWN,
            author_birth_date=author.birth_date or UNKNOWN,
            author_top_work=author.top_work or UNKNOWN,
        )

    def value(self, key: str) -> Any:
        """Raw value of a display column.

        Raises:
            KeyError: If ``key`` is not a display column.
        """
        values = {
            "title": self.summary.title,
            "author_name": self.author_name,
            "first_publish_year": self.summary.first_publish_year,
            "subject": self.summary.subjects,
            "ratings_average": self.summary.ratings_average,
            "author_birth_date": self.author_birth_date,
            "author_top_work": self.author_top_work,
        }
        return values[key]
