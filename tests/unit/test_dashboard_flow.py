# ABOUTME: Unit tests for the interactive dashboard loop and login form.
# ABOUTME: Patches click.prompt to script commands and checks the resulting view state.

from io import StringIO
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

from bookdash.catalog.http import NetworkError
from bookdash.catalog.types import BookSummary
from bookdash.cli.commands.dashboard_cmd import open_dashboard
from bookdash.cli.dashboard import DashboardSession
from bookdash.cli.login import LoginForm
from bookdash.core.columns import get_column
from bookdash.core.rows import DisplayRow
from bookdash.core.session import Router, Session
from bookdash.core.view import FETCH_ERROR_MESSAGE, ViewModel


def _rows(count: int) -> list[DisplayRow]:
    return [
        DisplayRow(
            row_id=i,
            summary=BookSummary(title=f"Book {i:02d}", first_publish_year=1950 + i),
        )
        for i in range(count)
    ]


def _session(view: ViewModel, tmp_path: Path | None = None) -> tuple[DashboardSession, StringIO]:
    output = StringIO()
    session = DashboardSession(
        view, console=Console(file=output, width=300), output_dir=tmp_path
    )
    return session, output


class TestDashboardSession:
    """Tests for DashboardSession command handling."""

    def test_initial_query_loads_rows(self) -> None:
        terms: list[str] = []

        def fetch(term: str) -> list[DisplayRow]:
            terms.append(term)
            return _rows(3)

        view = ViewModel(fetch)
        session, output = _session(view)
        with patch("bookdash.cli.dashboard.click.prompt", return_value="q"):
            session.run("the lord of the rings")

        assert terms == ["the lord of the rings"]
        assert "Book 02" in output.getvalue()

    def test_search_command(self) -> None:
        terms: list[str] = []

        def fetch(term: str) -> list[DisplayRow]:
            terms.append(term)
            return _rows(1)

        session, _ = _session(ViewModel(fetch))
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=["/dune messiah", "q"]):
            session.run()

        assert terms == ["dune messiah"]

    def test_paging_commands(self) -> None:
        view = ViewModel(lambda term: _rows(35))
        session, _ = _session(view)
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=["n", "n", "p", "q"]):
            session.run("x")
        assert view.state.page_index == 1

    def test_goto_and_page_size(self) -> None:
        view = ViewModel(lambda term: _rows(35))
        session, _ = _session(view)
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=["g 4", "z 20", "g 2", "q"]):
            session.run("x")
        assert view.state.page_size == 20
        assert view.state.page_index == 1

    def test_blank_input_reprompts(self) -> None:
        """Pressing Enter on an empty command line asks again instead of quitting."""
        view = ViewModel(lambda term: _rows(15))
        session, _ = _session(view)
        with patch(
            "bookdash.cli.dashboard.click.prompt", side_effect=["", "  ", "n", "q"]
        ) as prompt:
            session.run("x")
        assert prompt.call_count == 4
        assert view.state.page_index == 1
        assert prompt.call_args.kwargs["default"] == ""

    def test_next_at_last_page_is_refused(self) -> None:
        view = ViewModel(lambda term: _rows(5))
        session, output = _session(view)
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=["n", "q"]):
            session.run("x")
        assert view.state.page_index == 0
        assert "Already on the last page." in output.getvalue()

    def test_sort_command_uses_column_position(self) -> None:
        view = ViewModel(lambda term: _rows(3))
        session, _ = _session(view)
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=["s 3", "s 3", "q"]):
            session.run("x")
        assert view.state.sort is not None
        assert view.state.sort.column == "first_publish_year"
        assert view.state.sort.descending

    def test_invalid_input_reprompts(self) -> None:
        view = ViewModel(lambda term: _rows(3))
        session, output = _session(view)
        commands = ["s 99", "z 15", "g x", "frobnicate", "q"]
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=commands):
            session.run("x")
        text = output.getvalue()
        assert "Column must be between 1 and 7." in text
        assert "Page size must be one of 10, 20, 50, 100." in text
        assert "Expected a number" in text
        assert "Unknown command: frobnicate" in text

    def test_edit_row_commits_changed_cells(self) -> None:
        """Editing prompts once per column; changed answers become overrides."""
        rows = _rows(2)
        view = ViewModel(lambda term: rows)
        session, _ = _session(view)
        cell_answers = ["New Title", "Someone", "1950", "", "", "Unknown", "Unknown"]
        with patch(
            "bookdash.cli.dashboard.click.prompt",
            side_effect=["e 1", *cell_answers, "q"],
        ):
            session.run("x")

        assert view.state.editing_row is None
        assert view.cell_text(rows[0], get_column("title")) == "New Title"
        assert view.cell_text(rows[0], get_column("author_name")) == "Someone"
        assert set(view.state.overrides) == {(0, "title"), (0, "author_name")}
        assert rows[0].summary.title == "Book 00"

    def test_edit_row_out_of_range(self) -> None:
        view = ViewModel(lambda term: _rows(2))
        session, output = _session(view)
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=["e 5", "q"]):
            session.run("x")
        assert "Row must be between 1 and 2." in output.getvalue()

    def test_export_command(self, tmp_path: Path) -> None:
        view = ViewModel(lambda term: _rows(12))
        session, output = _session(view, tmp_path)
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=["x", "q"]):
            session.run("x")
        exported = tmp_path / "books.csv"
        assert exported.exists()
        assert len(exported.read_text(encoding="utf-8").splitlines()) == 13
        assert "Exported 12 book(s)" in output.getvalue()

    def test_export_with_no_rows(self, tmp_path: Path) -> None:
        session, output = _session(ViewModel(lambda term: []), tmp_path)
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=["x", "q"]):
            session.run("x")
        assert "Nothing to export." in output.getvalue()
        assert not (tmp_path / "books.csv").exists()

    def test_failed_search_keeps_session_running(self) -> None:
        def fetch(term: str) -> list[DisplayRow]:
            if term == "bad":
                raise NetworkError("HTTP 500")
            return _rows(2)

        view = ViewModel(fetch)
        session, output = _session(view)
        with patch("bookdash.cli.dashboard.click.prompt", side_effect=["/bad", "/good", "q"]):
            session.run()
        assert FETCH_ERROR_MESSAGE in output.getvalue()
        assert view.state.error is None
        assert len(view.state.rows) == 2


class TestLogin:
    """Tests for LoginForm and the gated navigation to the dashboard."""

    def test_login_form_authenticates(self) -> None:
        session = Session()
        form = LoginForm(session, console=Console(file=StringIO()))
        with patch("bookdash.cli.login.click.prompt", side_effect=["frodo", "secret"]):
            form.submit()
        assert session.authenticated

    def test_open_dashboard_prompts_login_once(self) -> None:
        session = Session()
        form = LoginForm(session, console=Console(file=StringIO()))
        with patch(
            "bookdash.cli.login.click.prompt", side_effect=["frodo", "secret"]
        ) as prompt:
            open_dashboard(Router(session), form)
        assert session.authenticated
        assert prompt.call_count == 2

    def test_open_dashboard_skips_login_when_authenticated(self) -> None:
        session = Session(authenticated=True)
        form = LoginForm(session, console=Console(file=StringIO()))
        with patch("bookdash.cli.login.click.prompt") as prompt:
            open_dashboard(Router(session), form)
        prompt.assert_not_called()
