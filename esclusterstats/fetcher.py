"""Fetch /_cluster/stats and turn it into flat metric values."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from esclusterstats.errors import DecodeError, TransportError
from esclusterstats.metrics.base import Extraction, extract_value
from esclusterstats.metrics.catalog import CATALOG, CatalogEntry

logger = logging.getLogger(__name__)

STATS_PATH = "/_cluster/stats"
USER_AGENT = "mackerel-plugin-elasticsearch"


def extract_metrics(
    document: Any,
    catalog: Iterable[CatalogEntry] = CATALOG,
) -> list[tuple[str, Extraction]]:
    """Resolve every catalog entry against *document*, one result per entry."""
    return [(entry.name, extract_value(document, entry.path)) for entry in catalog]


class StatsFetcher:
    """Issues one GET against the cluster stats endpoint per ``fetch`` call."""

    def __init__(
        self,
        base_uri: str,
        client: httpx.AsyncClient | None = None,
        catalog: Iterable[CatalogEntry] = CATALOG,
    ) -> None:
        self.base_uri = base_uri.rstrip("/")
        self._client = client
        self._catalog = tuple(catalog)

    @property
    def url(self) -> str:
        return self.base_uri + STATS_PATH

    async def fetch(self) -> dict[str, float]:
        document = await self._fetch_document()

        metrics: dict[str, float] = {}
        for name, result in extract_metrics(document, self._catalog):
            if not result.ok:
                logger.error("Failed to find '%s': %s", name, result.failure.value)
                continue
            metrics[name] = result.value
        logger.debug("Fetched %d of %d metrics from %s",
                     len(metrics), len(self._catalog), self.url)
        return metrics

    async def _fetch_document(self) -> dict[str, Any]:
        if self._client is not None:
            resp = await self._get(self._client)
        else:
            async with httpx.AsyncClient() as client:
                resp = await self._get(client)

        try:
            document = resp.json()
        except ValueError as exc:
            raise DecodeError(f"Invalid JSON from {self.url}: {exc}") from exc
        if not isinstance(document, dict):
            raise DecodeError(
                f"Expected a JSON object from {self.url}, "
                f"got {type(document).__name__}"
            )
        return document

    async def _get(self, client: httpx.AsyncClient) -> httpx.Response:
        try:
            resp = await client.get(self.url, headers={"User-Agent": USER_AGENT})
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Request to {self.url} failed: {exc}") from exc
        return resp
