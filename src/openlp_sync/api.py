"""OpenLP HTTP API client used for snapshot fetches."""

from typing import Any

import requests
from loguru import logger

from openlp_sync.config import API_PATH_PREFIX, API_PORT, FETCH_TIMEOUT


class FetchError(RuntimeError):
    """A query endpoint failed or returned something that is not JSON."""


class OpenLPApi:
    """Snapshot queries against the OpenLP v2 HTTP API.

    The host is not known up front: the connection manager sets ``hostname``
    once a websocket connection succeeds, so queries target the same machine.
    """

    def __init__(
        self,
        hostname: str | None = None,
        *,
        port: int = API_PORT,
        timeout: float = FETCH_TIMEOUT,
    ) -> None:
        self.hostname = hostname
        self.port = port
        self.timeout = timeout
        self.sess = requests.Session()

    def url(self, path: str) -> str:
        """Build the full URL for an API path."""
        if not self.hostname:
            msg = f"No host selected, cannot query {path!r}"
            raise FetchError(msg)
        return f"http://{self.hostname}:{self.port}{API_PATH_PREFIX}{path}"

    def call(self, path: str) -> Any:
        """Invoke an OpenLP API endpoint, return json."""
        url = self.url(path)
        logger.debug("Fetching {}", url)

        try:
            r = self.sess.get(url, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            # JSON decoding errors from requests subclass RequestException too.
            msg = f"API call failed: {path!r} -> {e}"
            raise FetchError(msg) from e

    def service_items(self) -> list[dict[str, Any]]:
        """Return the lightweight descriptors of every item in the service."""
        items = self.call("service/items")
        if not isinstance(items, list):
            msg = f"bad service/items response: {type(items).__name__}"
            raise FetchError(msg)
        return items

    def live_item(self) -> dict[str, Any]:
        """Return the detailed descriptor of the live item, slides included."""
        item = self.call("controller/live-items")
        if not isinstance(item, dict):
            msg = f"bad controller/live-items response: {type(item).__name__}"
            raise FetchError(msg)
        return item
