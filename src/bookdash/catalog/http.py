# ABOUTME: HTTP client abstraction for Open Library catalog calls.
# ABOUTME: Single best-effort GET per call with an injectable transport for testing.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "bookdash/0.1.0"
DEFAULT_TIMEOUT = 30.0


class NetworkError(Exception):
    """Raised when a catalog request fails in transport or returns a non-success status."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against the catalog API."""

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]: ...


class CatalogHttpClient:
    """HTTP client for catalog API calls.

    Wraps httpx.Client. Every call is one round trip: no retries, no caching.
    httpx.Client is safe to share between the worker threads of one pipeline run.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": user_agent, "Accept": "application/json"},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Send a single GET request.

        Args:
            url: The URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response body.

        Raises:
            NetworkError: On transport failure, non-200 status, or a non-object JSON body.
        """
        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Request failed: {url}: {exc}") from exc

        if response.status_code != 200:
            raise NetworkError(f"HTTP {response.status_code} from {url}")

        try:
            data = response.json()
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON from {url}") from exc

        if not isinstance(data, dict):
            raise NetworkError(f"Unexpected JSON from {url}: expected an object")
        return data
