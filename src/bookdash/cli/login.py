# ABOUTME: Login form for the dashboard's session gate.
# ABOUTME: Collects a username and password, then authenticates without checking them.

import click
from rich.console import Console
from rich.markup import escape

from bookdash.core.session import Session


class LoginForm:
    """Prompts for credentials and flips the session to authenticated.

    The credentials are collected for the look of a login and then discarded.
    """

    def __init__(self, session: Session, *, console: Console | None = None) -> None:
        self._session = session
        self._console = console or Console()

    def submit(self) -> None:
        self._console.print("[bold]Log in to Book Dashboard[/bold]")
        username = click.prompt("Username", type=str)
        click.prompt("Password", type=str, hide_input=True)
        self._session.login()
        self._console.print(f"[green]Welcome, {escape(username)}.[/green]")
