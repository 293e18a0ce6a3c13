# ABOUTME: The `bookdash export` command for writing search results to CSV.
# ABOUTME: Fetches and enriches every result and writes books.csv without any paging.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookdash.catalog.client import CatalogClient
from bookdash.cli.options import (
    build_settings,
    catalog_options,
    desc_option,
    output_dir_option,
    sort_option,
)
from bookdash.config import DashboardSettings
from bookdash.core.export import export_csv


def _create_catalog(settings: DashboardSettings) -> CatalogClient:
    """Create the default catalog client (Open Library)."""
    return settings.create_catalog()


@click.command("export")
@click.argument("query")
@output_dir_option
@sort_option
@desc_option
@catalog_options
def export(
    query: str,
    output_dir: Path | None,
    sort_column: str | None,
    desc: bool,
    base_url: str,
    timeout: float,
    max_workers: int,
    isolate_author_failures: bool,
) -> None:
    """Search the catalog and export all enriched results to books.csv."""
    console = Console()
    settings = build_settings(
        base_url=base_url,
        timeout=timeout,
        max_workers=max_workers,
        isolate_author_failures=isolate_author_failures,
    )
    view = settings.create_view(_create_catalog(settings))

    if not view.search(query):
        console.print(f"[red]{view.state.error}[/red]")
        raise SystemExit(1)

    view.sort_by(sort_column, descending=desc)
    path = export_csv(view, output_dir or Path.cwd(), settings.export_filename)
    console.print(f"[green]Exported {view.total_rows} book(s) to {escape(str(path))}[/green]")
