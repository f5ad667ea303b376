"""Graph definitions handed to the monitoring agent."""

from __future__ import annotations

import re
from dataclasses import dataclass

from esclusterstats.metrics.catalog import GRAPH_GROUPS, GraphGroup, RenderMode

DEFAULT_PREFIX = "elasticsearchclusterstats"

_WORD_START = re.compile(r"\b(\w)")


@dataclass(frozen=True)
class MetricDefinition:
    name: str
    label: str
    mode: RenderMode

    @property
    def stacked(self) -> bool:
        return self.mode is RenderMode.STACKED

    @property
    def diff(self) -> bool:
        return self.mode is RenderMode.DIFF


@dataclass(frozen=True)
class GraphDefinition:
    name: str
    label: str
    unit: str
    metrics: tuple[MetricDefinition, ...]


def resolve_prefix(prefix: str) -> str:
    return prefix or DEFAULT_PREFIX


def title_case(text: str) -> str:
    """Upper-case the first letter of each word, leaving the rest alone.

    Unlike ``str.title`` this keeps ``myES`` as ``MyES`` and treats
    underscores and digits as part of a word.
    """
    return _WORD_START.sub(lambda m: m.group(1).upper(), text)


def _build(group: GraphGroup, label_prefix: str) -> GraphDefinition:
    return GraphDefinition(
        name=group.name,
        label=f"{label_prefix} {group.label}",
        unit=group.unit,
        metrics=tuple(
            MetricDefinition(name=m.name, label=m.label, mode=m.mode)
            for m in group.members
        ),
    )


def build_graphs(prefix: str = "") -> tuple[GraphDefinition, ...]:
    """Build the docs, memory size and evictions graphs for *prefix*."""
    label_prefix = title_case(resolve_prefix(prefix))
    return tuple(_build(group, label_prefix) for group in GRAPH_GROUPS)
