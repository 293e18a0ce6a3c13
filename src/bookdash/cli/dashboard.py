# ABOUTME: Interactive dashboard loop over the book table.
# ABOUTME: Reads one-letter commands to search, page, sort, edit rows inline and export CSV.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookdash.cli.table_view import TablePresentation
from bookdash.core.export import EXPORT_FILENAME, export_csv
from bookdash.core.view import PAGE_SIZE_OPTIONS, ViewModel

PROMPT = (
    "[/term] Search  [n] Next  [p] Prev  [g N] Page  [z N] Size  "
    "[s N] Sort  [e N] Edit  [x] CSV  [q] Quit"
)


class DashboardSession:
    """Drives a ViewModel from user commands and re-renders after each one.

    Invalid input prints a notice and re-prompts; fetch failures are shown as
    the view's error message and never end the session.
    """

    def __init__(
        self,
        view: ViewModel,
        *,
        console: Console | None = None,
        output_dir: Path | None = None,
        export_filename: str = EXPORT_FILENAME,
    ) -> None:
        self._view = view
        self._console = console or Console()
        self._table = TablePresentation(self._console)
        self._output_dir = output_dir or Path.cwd()
        self._export_filename = export_filename

    def run(self, initial_query: str | None = None) -> None:
        """Load ``initial_query`` (if any) and process commands until the user quits."""
        if initial_query:
            self._search(initial_query)
        else:
            self._table.show(self._view)

        while True:
            choice = click.prompt(PROMPT, type=str, default="", show_default=False).strip()
            if not choice:
                continue
            if choice.lower() == "q":
                return
            self._dispatch(choice)

    def _dispatch(self, choice: str) -> None:
        if choice.startswith("/"):
            term = choice[1:].strip()
            if not term:
                self._notice("Enter a search term after '/'.")
                return
            self._search(term)
            return

        command, _, argument = choice.partition(" ")
        command = command.lower()

        if command == "n":
            if not self._view.can_next:
                self._notice("Already on the last page.")
                return
            self._view.next_page()
        elif command == "p":
            if not self._view.can_previous:
                self._notice("Already on the first page.")
                return
            self._view.previous_page()
        elif command == "g":
            number = self._parse_number(argument)
            if number is None:
                return
            self._view.goto_page(number - 1)
        elif command == "z":
            number = self._parse_number(argument)
            if number is None:
                return
            if number not in PAGE_SIZE_OPTIONS:
                sizes = ", ".join(str(size) for size in PAGE_SIZE_OPTIONS)
                self._notice(f"Page size must be one of {sizes}.")
                return
            self._view.set_page_size(number)
        elif command == "s":
            number = self._parse_number(argument)
            if number is None:
                return
            if not 1 <= number <= len(self._view.columns):
                self._notice(f"Column must be between 1 and {len(self._view.columns)}.")
                return
            try:
                self._view.toggle_sort(self._view.columns[number - 1].key)
            except ValueError as exc:
                self._notice(str(exc))
                return
        elif command == "e":
            number = self._parse_number(argument)
            if number is None:
                return
            self._edit_row(number)
        elif command == "x":
            self._export()
            return
        else:
            self._notice(f"Unknown command: {choice}")
            return

        self._table.show(self._view)

    def _search(self, term: str) -> None:
        with self._console.status("Loading..."):
            self._view.search(term)
        self._table.show(self._view)

    def _edit_row(self, number: int) -> None:
        """Edit each cell of the Nth row on the page, then save.

        Pressing Enter keeps a cell's current text; anything else is committed
        to the local override map as soon as it is entered.
        """
        page = self._view.page_rows()
        if not 1 <= number <= len(page):
            self._notice(f"Row must be between 1 and {len(page)}.")
            return

        row = page[number - 1]
        self._view.begin_edit(row.row_id)
        self._table.show(self._view)
        for column in self._view.columns:
            current = self._view.cell_text(row, column)
            value = click.prompt(column.label, type=str, default=current)
            if value != current:
                self._view.commit_cell(row.row_id, column.key, value)
        self._view.save_edit(row.row_id)

    def _export(self) -> None:
        if not self._view.state.rows:
            self._notice("Nothing to export.")
            return
        path = export_csv(self._view, self._output_dir, self._export_filename)
        self._console.print(
            f"[green]Exported {self._view.total_rows} book(s) to {escape(str(path))}[/green]"
        )

    def _parse_number(self, argument: str) -> int | None:
        try:
            return int(argument)
        except ValueError:
            self._notice("Expected a number after the command.")
            return None

    def _notice(self, message: str) -> None:
        self._console.print(f"[yellow]{escape(message)}[/yellow]")
