# ABOUTME: The `bookdash dashboard` command: log in, then browse results interactively.
# ABOUTME: Routes to /dashboard through the session gate, which sends anonymous users to /login.

from pathlib import Path

import click
from rich.console import Console

from bookdash.catalog.client import CatalogClient
from bookdash.cli.dashboard import DashboardSession
from bookdash.cli.login import LoginForm
from bookdash.cli.options import (
    build_settings,
    catalog_options,
    output_dir_option,
    page_size_option,
)
from bookdash.config import DEFAULT_QUERY, DashboardSettings
from bookdash.core.session import DASHBOARD_PATH, Router, Session, View


def _create_catalog(settings: DashboardSettings) -> CatalogClient:
    """Create the default catalog client (Open Library)."""
    return settings.create_catalog()


def open_dashboard(router: Router, login: LoginForm) -> None:
    """Navigate to the dashboard, showing the login form while the gate redirects there."""
    while True:
        resolution = router.navigate(DASHBOARD_PATH)
        if resolution.view is View.DASHBOARD:
            return
        if resolution.view is not View.LOGIN:
            msg = f"Cannot open the dashboard: {resolution.path} did not resolve"
            raise click.ClickException(msg)
        login.submit()


@click.command("dashboard")
@click.option(
    "-q",
    "--query",
    default=DEFAULT_QUERY,
    show_default=True,
    help="Search term loaded when the dashboard opens.",
)
@page_size_option
@output_dir_option
@catalog_options
def dashboard(
    query: str,
    page_size: str,
    output_dir: Path | None,
    base_url: str,
    timeout: float,
    max_workers: int,
    isolate_author_failures: bool,
) -> None:
    """Log in and browse, sort, edit and export catalog search results."""
    console = Console()
    settings = build_settings(
        base_url=base_url,
        timeout=timeout,
        max_workers=max_workers,
        isolate_author_failures=isolate_author_failures,
        page_size=page_size,
    )

    session = Session()
    open_dashboard(Router(session), LoginForm(session, console=console))

    view = settings.create_view(_create_catalog(settings))
    DashboardSession(
        view,
        console=console,
        output_dir=output_dir,
        export_filename=settings.export_filename,
    ).run(query)
