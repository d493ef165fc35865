from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Mapping, Optional
from urllib.parse import urlparse

import requests

from ..utils.logging import get_logger

logger = get_logger("rumors.fetchers.http")


class FetchError(Exception):
    """Raised when a resource cannot be retrieved or answers with a non-2xx status."""

    def __init__(self, message: str, *, url: str = "", status: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


@dataclass(slots=True)
class FetchResult:
    url: str
    status: int
    body: str
    # undecoded payload; empty when the fetcher only has text
    content: bytes = b""

    @property
    def raw(self) -> bytes:
        return self.content or self.body.encode("utf-8")

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


_DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9",
}


def basic_auth_header(pair: str) -> str:
    """``"user:password"`` -> ``"Basic dXNlcjpwYXNzd29yZA=="``."""
    return "Basic " + base64.b64encode(pair.encode("utf-8")).decode("ascii")


def _validated_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FetchError(f"Invalid URL for HTTP fetch: {url}", url=url)
    return url


def _sniff_encoding(resp: requests.Response) -> str:
    """Encoding for a response that declared no charset (requests would assume Latin-1)."""
    try:
        resp.content.decode("utf-8")
    except UnicodeDecodeError:
        return resp.apparent_encoding or "utf-8"
    return "utf-8"


class Fetcher(ABC):
    """Retrieve a resource by URL."""

    @abstractmethod
    def fetch(self, url: str, headers: Optional[Mapping[str, str]] = None) -> FetchResult:
        """Return status and body; raise ``FetchError`` on transport failure."""

    def fetch_ok(self, url: str, headers: Optional[Mapping[str, str]] = None) -> FetchResult:
        result = self.fetch(url, headers)
        if not result.ok:
            logger.warning("HTTP fetch failed (%s): %s", result.status, url)
            raise FetchError(f"HTTP {result.status} for {url}", url=url, status=result.status)
        return result

    def fetch_text(self, url: str, headers: Optional[Mapping[str, str]] = None) -> str:
        return self.fetch_ok(url, headers).body


class HttpFetcher(Fetcher):
    """``requests``-backed fetcher with browser-like default headers; follows redirects."""

    def __init__(
        self,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: float = 20,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.headers = {**_DEFAULT_HEADERS, **(headers or {})}
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, url: str, headers: Optional[Mapping[str, str]] = None) -> FetchResult:
        url = _validated_url(url)
        merged = {**self.headers, **(headers or {})}
        logger.debug("Fetching %s", url)
        try:
            resp = self.session.get(url, headers=merged, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as exc:
            logger.warning("HTTP request error for %s: %s", url, exc)
            raise FetchError(f"Request failed for {url}: {exc}", url=url) from exc
        if "charset" not in resp.headers.get("Content-Type", "").lower():
            resp.encoding = _sniff_encoding(resp)
        return FetchResult(url=resp.url or url, status=resp.status_code, body=resp.text, content=resp.content)
