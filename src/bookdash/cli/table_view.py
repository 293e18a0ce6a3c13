# ABOUTME: Rich rendering of the dashboard: status line, book table and pagination bar.
# ABOUTME: Pure presentation over ViewModel; it reads state and never changes it.

from rich.console import Console
from rich.table import Table
from rich.text import Text

from bookdash.core.view import PAGE_SIZE_OPTIONS, ViewModel

SORT_ASCENDING = " ▲"
SORT_DESCENDING = " ▼"
EMPTY_CELL = "—"


class TablePresentation:
    """Renders a ViewModel to a Rich console.

    Header cells are numbered so the dashboard prompt can refer to columns
    by position. Body rows are numbered within the page.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def show(self, view: ViewModel) -> None:
        """Render the status line, then the table and pagination bar when there is data."""
        state = view.state
        if state.loading:
            self._console.print("[dim]Loading...[/dim]")
            return
        if state.error:
            self._console.print(f"[red]{state.error}[/red]")
        if not state.rows:
            self._console.print("[yellow]No books found.[/yellow]")
            return
        self._console.print(self.render(view))
        self._console.print(self.render_pagination(view))

    def render(self, view: ViewModel) -> Table:
        """Build the table for the current page."""
        state = view.state
        title = f"Results for {state.search_term!r}" if state.search_term else None
        table = Table(title=title)
        table.add_column("#", style="dim", width=4, justify="right")
        for position, column in enumerate(view.columns, start=1):
            header = f"{position}. {column.label}"
            if state.sort is not None and state.sort.column == column.key:
                header += SORT_DESCENDING if state.sort.descending else SORT_ASCENDING
            table.add_column(
                header,
                style="bold" if column.key == "title" else None,
                justify="right" if column.numeric else "left",
            )

        for number, row in enumerate(view.page_rows(), start=1):
            editing = view.is_editing(row.row_id)
            cells = [Text(f"{number}*" if editing else str(number))]
            for column in view.columns:
                text = view.cell_text(row, column) or EMPTY_CELL
                cells.append(Text(text, style="reverse" if editing else ""))
            table.add_row(*cells)
        return table

    def render_pagination(self, view: ViewModel) -> Text:
        """Previous / page indicator / next / page size, with disabled controls dimmed."""
        state = view.state
        bar = Text()
        bar.append("[p] Previous", style="bold" if view.can_previous else "dim strike")
        bar.append("  Page ")
        bar.append(f"{state.page_index + 1} of {max(view.page_count, 1)}", style="bold")
        bar.append("  ")
        bar.append("[n] Next", style="bold" if view.can_next else "dim strike")
        sizes = "/".join(str(size) for size in PAGE_SIZE_OPTIONS)
        bar.append(f"  Show {state.page_size} ({sizes})  {view.total_rows} book(s)", style="dim")
        return bar
