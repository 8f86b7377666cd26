"""HTTP access to the Solr ``admin/stats.jsp`` page."""

from __future__ import annotations

import httpx
import structlog

from .config import Settings
from .errors import TransportError

logger = structlog.get_logger(__name__)


class StatsClient:
    """Blocking client that downloads the stats document once per call."""

    def __init__(self, settings: Settings, *, client: httpx.Client | None = None) -> None:
        self.url = settings.stats_url
        # No timeout: the monitoring agent bounds the plugin's runtime.
        self._client = client or httpx.Client(timeout=None)

    def fetch_document(self) -> str:
        """Return the body of the stats page as text."""
        logger.debug("fetching_stats", url=self.url)
        try:
            resp = self._client.get(self.url)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(f"Failed to fetch {self.url}: {exc}") from exc
        return resp.text

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "StatsClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: object | None,
    ) -> None:
        self.close()
