"""
Changelog acquisition from a local file or over HTTP.

Fetching is a single blocking httpx GET. There are no retries: any
failure is reported back and the caller treats it as fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import httpx

from ..config import FetchConfig
from ..core.errors import SourceError


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either content will be populated (response received) or error will be
    populated (request failed), but never both. status_code may be None for
    network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        content: The raw response body, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    content: bytes | None
    error: str | None

    @property
    def ok(self) -> bool:
        return (
            self.error is None
            and self.status_code is not None
            and 200 <= self.status_code < 300
        )


def fetch_url(
    url: str,
    timeout: float,
    user_agent: str,
    trust_env: bool,
    transport: httpx.BaseTransport | None = None,
) -> FetchResult:
    """Fetch a URL using httpx.

    Uses a synchronous HTTP client that follows redirects and respects
    system proxy settings when trust_env is enabled.

    Args:
        url: The URL to fetch
        timeout: Request timeout in seconds
        user_agent: User-Agent header string
        trust_env: Whether to respect system proxy settings from environment
        transport: Optional transport override (used by tests)

    Returns:
        FetchResult with the body on response or error message on failure
    """
    headers = {"User-Agent": user_agent}
    try:
        with httpx.Client(
            timeout=timeout,
            headers=headers,
            follow_redirects=True,
            trust_env=trust_env,
            transport=transport,
        ) as client:
            resp = client.get(url)
            return FetchResult(
                url=url, status_code=resp.status_code, content=resp.content, error=None
            )
    except Exception as exc:  # noqa: BLE001
        return FetchResult(
            url=url, status_code=None, content=None, error=f"{type(exc).__name__}: {exc}"
        )


def fetch_changelog(
    url: str,
    cfg: FetchConfig,
    transport: httpx.BaseTransport | None = None,
) -> bytes:
    """Download the changelog at url.

    Raises:
        SourceError: On connection failure or a non-success response
    """
    result = fetch_url(
        url,
        timeout=cfg.timeout_seconds,
        user_agent=cfg.user_agent,
        trust_env=cfg.trust_env,
        transport=transport,
    )
    if result.error is not None:
        raise SourceError(f"Unable to fetch {url}: {result.error}")
    if not result.ok:
        raise SourceError(f"Unable to fetch {url}: HTTP {result.status_code}")
    return result.content or b""


def read_changelog_file(path: Path) -> bytes:
    """Read the changelog from disk.

    Raises:
        SourceError: If the file cannot be read
    """
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise SourceError(f"Unable to read from {path}: {exc}") from exc
