# ABOUTME: The `bookdash search` command for a one-shot view of a result page.
# ABOUTME: Fetches and enriches results, applies sort and paging, and prints the table.

import click
from rich.console import Console

from bookdash.catalog.client import CatalogClient
from bookdash.cli.options import (
    build_settings,
    catalog_options,
    desc_option,
    page_size_option,
    sort_option,
)
from bookdash.cli.table_view import TablePresentation
from bookdash.config import DashboardSettings


def _create_catalog(settings: DashboardSettings) -> CatalogClient:
    """Create the default catalog client (Open Library)."""
    return settings.create_catalog()


@click.command("search")
@click.argument("query")
@click.option(
    "--page",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Page to show; clamped to the last page.",
)
@page_size_option
@sort_option
@desc_option
@catalog_options
def search(
    query: str,
    page: int,
    page_size: str,
    sort_column: str | None,
    desc: bool,
    base_url: str,
    timeout: float,
    max_workers: int,
    isolate_author_failures: bool,
) -> None:
    """Search the catalog and print one page of enriched results."""
    console = Console()
    settings = build_settings(
        base_url=base_url,
        timeout=timeout,
        max_workers=max_workers,
        isolate_author_failures=isolate_author_failures,
        page_size=page_size,
    )
    view = settings.create_view(_create_catalog(settings))

    if not view.search(query):
        console.print(f"[red]{view.state.error}[/red]")
        raise SystemExit(1)

    view.sort_by(sort_column, descending=desc)
    view.goto_page(page - 1)
    TablePresentation(console).show(view)
