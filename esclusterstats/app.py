"""Application orchestrator — one fetch, one hand-off."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import httpx

from esclusterstats.config.settings import Settings
from esclusterstats.errors import StatsError
from esclusterstats.fetcher import StatsFetcher
from esclusterstats.metrics import build_graphs
from esclusterstats.output import format_graph_definitions, format_metrics

logger = logging.getLogger(__name__)


class Application:
    """Top-level application orchestrator."""

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.settings = settings
        self.fetcher = StatsFetcher(self.settings.cluster.base_uri, client=client)
        self.graphs = build_graphs(self.settings.metric_key_prefix)
        self._out = out if out is not None else sys.stdout

    def print_graphs(self) -> int:
        self._out.write(
            format_graph_definitions(self.graphs, self.settings.metric_key_prefix) + "\n"
        )
        return 0

    async def run(self) -> int:
        """Fetch once and print the metric lines. Returns the exit status."""
        try:
            values = await self.fetcher.fetch()
        except StatsError as exc:
            logger.error("%s", exc)
            return 1

        for line in format_metrics(values, self.settings.metric_key_prefix, self.graphs):
            self._out.write(line + "\n")
        return 0


def setup_logging(level: str | int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
