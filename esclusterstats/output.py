"""Plugin output — metric lines and graph definition JSON for the host agent."""

from __future__ import annotations

import json
import time
from typing import Iterable, Mapping

from esclusterstats.metrics.graphs import GraphDefinition, resolve_prefix


def metric_key(prefix: str, graph: GraphDefinition, name: str) -> str:
    return f"{resolve_prefix(prefix)}.{graph.name}.{name}"


def format_metrics(
    values: Mapping[str, float],
    prefix: str,
    graphs: Iterable[GraphDefinition],
    timestamp: int | None = None,
) -> list[str]:
    """Render one ``key\\tvalue\\ttimestamp`` line per fetched value.

    Lines follow graph and member order. Values that belong to no graph
    are not emitted. Diff-mode counters are written as-is; the host agent
    computes the delta.
    """
    if timestamp is None:
        timestamp = int(time.time())
    lines: list[str] = []
    for graph in graphs:
        for metric in graph.metrics:
            if metric.name not in values:
                continue
            lines.append(
                f"{metric_key(prefix, graph, metric.name)}\t"
                f"{values[metric.name]:f}\t{timestamp}"
            )
    return lines


def graph_definitions_payload(
    graphs: Iterable[GraphDefinition],
    prefix: str,
) -> dict:
    payload: dict[str, dict] = {}
    for graph in graphs:
        payload[f"{resolve_prefix(prefix)}.{graph.name}"] = {
            "label": graph.label,
            "unit": graph.unit,
            "metrics": [
                {
                    "name": m.name,
                    "label": m.label,
                    "stacked": m.stacked,
                    "diff": m.diff,
                }
                for m in graph.metrics
            ],
        }
    return {"graphs": payload}


def format_graph_definitions(
    graphs: Iterable[GraphDefinition],
    prefix: str,
) -> str:
    return json.dumps(graph_definitions_payload(graphs, prefix), indent=2)
