"""Metric extraction — catalog of /_cluster/stats paths and their graphs."""

from __future__ import annotations

from esclusterstats.metrics.base import Extraction, PathFailure, extract_value
from esclusterstats.metrics.catalog import CATALOG, METRIC_PATHS, RenderMode
from esclusterstats.metrics.graphs import (
    DEFAULT_PREFIX,
    GraphDefinition,
    MetricDefinition,
    build_graphs,
)

__all__ = [
    "CATALOG",
    "DEFAULT_PREFIX",
    "Extraction",
    "GraphDefinition",
    "METRIC_PATHS",
    "MetricDefinition",
    "PathFailure",
    "RenderMode",
    "build_graphs",
    "extract_value",
]
