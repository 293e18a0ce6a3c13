# ABOUTME: Session gate and route resolution for the dashboard.
# ABOUTME: An explicit Session object decides whether /dashboard renders or redirects to /login.

import enum
from dataclasses import dataclass

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"
ROOT_PATH = "/"

_MAX_REDIRECTS = 5


class SessionState(enum.Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


@dataclass
class Session:
    """The authenticated flag. No identity, token or expiry, and no logout."""

    authenticated: bool = False

    @property
    def state(self) -> SessionState:
        return SessionState.AUTHENTICATED if self.authenticated else SessionState.ANONYMOUS

    def login(self) -> None:
        """Authenticate unconditionally. Credentials are not checked."""
        self.authenticated = True


class View(enum.Enum):
    LOGIN = "login"
    DASHBOARD = "dashboard"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one path: a view to render or a path to redirect to."""

    path: str
    view: View | None = None
    redirect: str | None = None


class Router:
    """Maps paths to views, gating protected paths on the session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def resolve(self, path: str) -> Resolution:
        if path == LOGIN_PATH:
            return Resolution(path, view=View.LOGIN)
        if path == DASHBOARD_PATH:
            if self._session.authenticated:
                return Resolution(path, view=View.DASHBOARD)
            return Resolution(path, redirect=LOGIN_PATH)
        if path == ROOT_PATH:
            return Resolution(path, redirect=LOGIN_PATH)
        return Resolution(path, view=View.NOT_FOUND)

    def navigate(self, path: str) -> Resolution:
        """Resolve ``path`` and follow redirects to the view that renders.

        Raises:
            RuntimeError: If redirects loop.
        """
        resolution = self.resolve(path)
        for _ in range(_MAX_REDIRECTS):
            if resolution.redirect is None:
                return resolution
            resolution = self.resolve(resolution.redirect)
        msg = f"Too many redirects resolving {path!r}"
        raise RuntimeError(msg)
