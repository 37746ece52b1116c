"""HTTP GET with failover across AnimeApi mirrors.

Mirrors are tried strictly in order, one attempt each, until one returns a
usable JSON body. A mirror written as ``<edge>+<scheme>://<host>/...`` is
reached through the edge network: the request goes to ``<scheme>://<edge>.com``
with a ``Host`` header naming the real mirror.
"""

import re
from collections.abc import Sequence
from typing import Any

import requests

from models.config import ProviderSettings, settings
from utils.exceptions import (
    ConfigError,
    EmptyBodyError,
    HTTPStatusError,
    MirrorError,
    RemoteError,
    TransportError,
)
from utils.logging import get_logger

logger = get_logger(__name__)

_PROXY_SCHEME_RE = re.compile(
    r"^(?P<edge>[\w.-]+)\+(?P<scheme>[a-z][\w.-]*)://(?P<host>[^/]+)(?P<path>/.*)?$",
    re.IGNORECASE,
)


def normalize_endpoints(endpoints: str | Sequence[str]) -> tuple[str, ...]:
    """Turn a comma-separated string or a sequence into a tuple of base URLs.

    Every base URL ends with "/" so paths can be appended directly.

    Raises:
        ConfigError: If no endpoint is left
    """
    if isinstance(endpoints, str):
        endpoints = endpoints.split(",")
    urls = tuple(url.strip() for url in endpoints if url.strip())
    urls = tuple(url if url.endswith("/") else url + "/" for url in urls)
    if not urls:
        raise ConfigError("At least one AnimeApi endpoint is required")
    return urls


class MirrorClient:
    """Sequential failover GET over an immutable list of mirrors."""

    def __init__(self, endpoints: str | Sequence[str], config: ProviderSettings | None = None):
        """Initialize the client.

        Args:
            endpoints: Mirror base URLs in the order they should be tried
            config: Provider settings (timeout, User-Agent, edge TLD)
        """
        config = config or settings.provider
        self.endpoints = normalize_endpoints(endpoints)
        self.timeout = config.timeout
        self.user_agent = config.user_agent
        self.edge_domain = config.edge_domain

    def prepare(self, base_url: str, path: str = "") -> tuple[str, dict[str, str]]:
        """Resolve the URL and headers used to reach one mirror.

        Args:
            base_url: Mirror base URL, possibly using the proxy scheme
            path: Path appended to the base URL (e.g., "animes/1")

        Returns:
            (url, headers) for the outgoing request
        """
        match = _PROXY_SCHEME_RE.match(base_url)
        if not match:
            return base_url + path, {}

        base_path = (match.group("path") or "/").lstrip("/")
        url = f"{match.group('scheme')}://{match.group('edge')}.{self.edge_domain}/{base_path}{path}"
        headers = {
            "Host": match.group("host"),
            "User-Agent": self.user_agent,
        }
        return url, headers

    def _attempt(self, base_url: str, path: str, params: dict[str, str] | None) -> Any:
        url, headers = self.prepare(base_url, path)
        logger.info(f"Request to AnimeApi: {url}")

        try:
            resp = requests.get(url, params=params, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(str(e), base_url) from e

        if resp.status_code >= 400:
            raise HTTPStatusError(resp.status_code, base_url)

        try:
            data = resp.json()
        except ValueError as e:
            raise EmptyBodyError(base_url) from e

        # An empty page ([]) is a valid answer: it ends paging
        if data is None or data == "":
            raise EmptyBodyError(base_url)
        if isinstance(data, dict) and data.get("error"):
            raise RemoteError(data.get("status_message") or "Unknown AnimeApi error", base_url)

        return data

    def get(self, path: str, params: dict[str, str] | None = None, start: int = 0) -> Any:
        """GET a path from the first mirror that answers.

        Args:
            path: Path relative to the mirror base URL
            params: Optional query parameters
            start: Index of the first mirror to try

        Returns:
            Decoded JSON body

        Raises:
            MirrorError: Error of the last mirror tried, once all have failed
            ConfigError: If start is outside the endpoint list
        """
        if not 0 <= start < len(self.endpoints):
            raise ConfigError(f"Mirror index {start} out of range (0-{len(self.endpoints) - 1})")

        last_error: MirrorError | None = None
        for index in range(start, len(self.endpoints)):
            base_url = self.endpoints[index]
            try:
                return self._attempt(base_url, path, params)
            except MirrorError as e:
                logger.warning(f"AnimeApi endpoint '{base_url}' failed: {e}")
                last_error = e

        logger.error(f"AnimeApi error: all mirrors failed, last error: {last_error}")
        raise last_error
