# ABOUTME: Enrichment pipeline: search the catalog, then resolve each book's author in parallel.
# ABOUTME: Produces DisplayRows in search-response order; strict mode fails the whole batch.

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from bookdash.catalog.client import CatalogClient
from bookdash.catalog.http import NetworkError
from bookdash.catalog.types import BookSummary
from bookdash.core.rows import DisplayRow

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


class EnrichmentPipeline:
    """Joins book summaries from a catalog search with their primary author's details.

    Summaries without an author key get placeholder author fields and cost no
    request. The remaining author lookups run concurrently and are awaited as a
    group.

    By default any failed lookup aborts the run: lookups not yet started are
    cancelled and the NetworkError propagates, discarding the search results.
    With ``isolate_failures=True`` a failed lookup degrades that one row to
    placeholder author fields instead.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
        isolate_failures: bool = False,
    ) -> None:
        if max_workers < 1:
            msg = f"max_workers must be at least 1, got {max_workers}"
            raise ValueError(msg)
        self._catalog = catalog
        self._max_workers = max_workers
        self._isolate_failures = isolate_failures

    def run(self, term: str) -> list[DisplayRow]:
        """Search for ``term`` and return one enriched row per result.

        Raises:
            NetworkError: If the search fails, or (strict mode) any author lookup fails.
        """
        logger.debug("Fetching books for %r", term)
        summaries = self._catalog.search_books(term)

        rows: list[DisplayRow | None] = [None] * len(summaries)
        pending: list[tuple[int, BookSummary, str]] = []
        for index, summary in enumerate(summaries):
            author_key = summary.primary_author_key
            if author_key is None:
                rows[index] = DisplayRow.without_author(index, summary)
            else:
                pending.append((index, summary, author_key))

        if pending:
            for index, row in self._resolve_authors(pending):
                rows[index] = row

        return [row for row in rows if row is not None]

    def _resolve_authors(
        self, pending: list[tuple[int, BookSummary, str]]
    ) -> list[tuple[int, DisplayRow]]:
        """Resolve authors concurrently; completion order is irrelevant, rows carry their index."""
        executor = ThreadPoolExecutor(
            max_workers=min(self._max_workers, len(pending)),
            thread_name_prefix="bookdash-author",
        )
        try:
            futures: dict[Future[DisplayRow], int] = {
                executor.submit(self._resolve_one, index, summary, key): index
                for index, summary, key in pending
            }
            resolved: list[tuple[int, DisplayRow]] = []
            for future in as_completed(futures):
                resolved.append((futures[future], future.result()))
            return resolved
        finally:
            # On failure, queued lookups are cancelled and in-flight ones abandoned.
            executor.shutdown(wait=False, cancel_futures=True)

    def _resolve_one(self, index: int, summary: BookSummary, author_key: str) -> DisplayRow:
        logger.debug("Fetching author details for %s", author_key)
        try:
            author = self._catalog.get_author(author_key)
        except NetworkError as exc:
            if not self._isolate_failures:
                raise
            logger.warning(
                "Author %s unavailable for %r, using placeholders: %s",
                author_key,
                summary.title,
                exc,
            )
            return DisplayRow.without_author(index, summary)
        return DisplayRow.merge(index, summary, author)
