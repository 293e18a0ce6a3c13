# ABOUTME: CLI package for Bookdash, built on Click.
# ABOUTME: Defines the root command group, logging flag, and registers subcommands.

import click

from bookdash.cli.commands import dashboard_cmd, export_cmd, search_cmd
from bookdash.logging_setup import setup_logging


@click.group()
@click.version_option(package_name="bookdash")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log requests and failures.")
def cli(verbose: bool) -> None:
    """Bookdash - a terminal dashboard for the Open Library catalog."""
    setup_logging("DEBUG" if verbose else "WARNING")


cli.add_command(dashboard_cmd.dashboard)
cli.add_command(search_cmd.search)
cli.add_command(export_cmd.export)


def main() -> None:
    """Console entry point; every option can also come from a BOOKDASH_* variable."""
    cli(auto_envvar_prefix="BOOKDASH")
