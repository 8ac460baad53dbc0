"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every outbound request (GitHub API,
  boilerplate downloads).
- Makes testing easy: a `transport` (e.g. `httpx.MockTransport`) can be
  injected instead of touching the network.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.errors import DownloadError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so the API client and the downloader
      behave the same way.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {"User-Agent": settings.user_agent}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpDownloader:
    """Fetches boilerplate files; one GET per call, no retries."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def fetch(self, url: str) -> bytes:
        logger.debug("GET %s", url)
        try:
            with build_client(self._settings, transport=self._transport) as client:
                resp = client.get(url)
        except httpx.TimeoutException as exc:
            raise DownloadError(f"timed out fetching {url}") from exc
        except httpx.HTTPError as exc:
            raise DownloadError(f"request to {url} failed: {exc}") from exc

        if not resp.is_success:
            raise DownloadError(f"HTTP {resp.status_code} from {url}")
        return resp.content
