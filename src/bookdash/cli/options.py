# ABOUTME: Shared Click options for Bookdash CLI commands.
# ABOUTME: Catalog connection, enrichment policy and table options, folded into DashboardSettings.

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from bookdash.catalog.client import OL_BASE
from bookdash.catalog.http import DEFAULT_TIMEOUT
from bookdash.config import DashboardSettings
from bookdash.core.columns import column_keys
from bookdash.core.enrichment import DEFAULT_MAX_WORKERS
from bookdash.core.view import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS

base_url_option = click.option(
    "--base-url",
    default=OL_BASE,
    show_default=True,
    help="Catalog API base URL.",
)

timeout_option = click.option(
    "--timeout",
    type=click.FloatRange(min=0.1),
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Per-request timeout in seconds.",
)

max_workers_option = click.option(
    "--max-workers",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_WORKERS,
    show_default=True,
    help="Concurrent author lookups per search.",
)

tolerant_option = click.option(
    "--tolerant/--strict",
    "isolate_author_failures",
    default=False,
    help="On a failed author lookup, show placeholders for that book (--tolerant) "
    "instead of failing the whole search (--strict, default).",
)

page_size_option = click.option(
    "--page-size",
    type=click.Choice([str(size) for size in PAGE_SIZE_OPTIONS]),
    default=str(DEFAULT_PAGE_SIZE),
    show_default=True,
    help="Rows per page.",
)

sort_option = click.option(
    "--sort",
    "sort_column",
    type=click.Choice(column_keys()),
    default=None,
    help="Sort by this column.",
)

desc_option = click.option(
    "--desc",
    is_flag=True,
    default=False,
    help="Sort descending (with --sort).",
)

output_dir_option = click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for books.csv (default: current directory).",
)


def catalog_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply the options that build DashboardSettings."""
    for option in (tolerant_option, max_workers_option, timeout_option, base_url_option):
        func = option(func)
    return func


def build_settings(
    *,
    base_url: str,
    timeout: float,
    max_workers: int,
    isolate_author_failures: bool,
    page_size: str | int = DEFAULT_PAGE_SIZE,
) -> DashboardSettings:
    return DashboardSettings(
        base_url=base_url,
        timeout=timeout,
        max_workers=max_workers,
        isolate_author_failures=isolate_author_failures,
        page_size=int(page_size),
    )
