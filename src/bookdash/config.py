# ABOUTME: Runtime settings for Bookdash, assembled from CLI options.
# ABOUTME: Builds the catalog client, enrichment pipeline and view model from one settings object.

from dataclasses import dataclass

from bookdash.catalog.client import OL_BASE, CatalogClient, OpenLibraryCatalog
from bookdash.catalog.http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, CatalogHttpClient
from bookdash.core.enrichment import DEFAULT_MAX_WORKERS, EnrichmentPipeline
from bookdash.core.export import EXPORT_FILENAME
from bookdash.core.view import DEFAULT_PAGE_SIZE, ViewModel

DEFAULT_QUERY = "the lord of the rings"


@dataclass(frozen=True)
class DashboardSettings:
    """Settings shared by all commands. Nothing here is persisted."""

    base_url: str = OL_BASE
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    max_workers: int = DEFAULT_MAX_WORKERS
    page_size: int = DEFAULT_PAGE_SIZE
    default_query: str = DEFAULT_QUERY
    export_filename: str = EXPORT_FILENAME
    isolate_author_failures: bool = False

    def create_catalog(self) -> OpenLibraryCatalog:
        http_client = CatalogHttpClient(timeout=self.timeout, user_agent=self.user_agent)
        return OpenLibraryCatalog(http_client, base_url=self.base_url)

    def create_view(self, catalog: CatalogClient | None = None) -> ViewModel:
        pipeline = EnrichmentPipeline(
            catalog or self.create_catalog(),
            max_workers=self.max_workers,
            isolate_failures=self.isolate_author_failures,
        )
        return ViewModel(pipeline.run, page_size=self.page_size)
