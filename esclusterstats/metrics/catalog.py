"""Metric catalog — where each metric lives in /_cluster/stats and how it is graphed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class RenderMode(str, Enum):
    STACKED = "stacked"
    DIFF = "diff"


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    path: tuple[str, ...]


@dataclass(frozen=True)
class GraphMember:
    name: str
    label: str
    mode: RenderMode = RenderMode.STACKED


@dataclass(frozen=True)
class GraphGroup:
    """A graph before the label prefix is applied."""
    name: str
    label: str
    unit: str
    members: tuple[GraphMember, ...]


def _entry(name: str, dotted: str) -> CatalogEntry:
    return CatalogEntry(name=name, path=tuple(dotted.split(".")))


CATALOG: tuple[CatalogEntry, ...] = (
    _entry("docs_count", "indices.docs.count"),
    _entry("docs_deleted", "indices.docs.deleted"),
    _entry("fielddata_size", "indices.fielddata.memory_size_in_bytes"),
    _entry("query_cache_size", "indices.query_cache.memory_size_in_bytes"),
    _entry("segments_size", "indices.segments.memory_in_bytes"),
    _entry("segments_terms_size", "indices.segments.terms_memory_in_bytes"),
    _entry("segments_stored_fields_size", "indices.segments.stored_fields_memory_in_bytes"),
    _entry("segments_norms_size", "indices.segments.norms_memory_in_bytes"),
    _entry("segments_points_size", "indices.segments.points_memory_in_bytes"),
    _entry("segments_doc_values_size", "indices.segments.doc_values_memory_in_bytes"),
    _entry("segments_index_writer_size", "indices.segments.index_writer_memory_in_bytes"),
    _entry("segments_version_map_size", "indices.segments.version_map_memory_in_bytes"),
    _entry("segments_fixed_bit_set_size", "indices.segments.fixed_bit_set_memory_in_bytes"),
    _entry("evictions_fielddata", "indices.fielddata.evictions"),
    _entry("evictions_query_cache", "indices.query_cache.evictions"),
)

METRIC_PATHS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {entry.name: entry.path for entry in CATALOG}
)


GRAPH_GROUPS: tuple[GraphGroup, ...] = (
    GraphGroup(
        name="indices.docs",
        label="Indices Docs",
        unit="integer",
        members=(
            GraphMember("docs_count", "Count"),
            GraphMember("docs_deleted", "Deleted"),
        ),
    ),
    GraphGroup(
        name="indices.memory_size",
        label="Indices Memory Size",
        unit="bytes",
        members=(
            GraphMember("fielddata_size", "Fielddata"),
            GraphMember("query_cache_size", "Query Cache"),
            GraphMember("segments_size", "Lucene Segments"),
            GraphMember("segments_terms_size", "Lucene Segments Term"),
            GraphMember("segments_stored_fields_size", "Lucene Segments Stored Fields"),
            GraphMember("segments_norms_size", "Lucene Segments Norms"),
            GraphMember("segments_points_size", "Lucene Segments Points"),
            GraphMember("segments_doc_values_size", "Lucene Segments Doc Values"),
            GraphMember("segments_index_writer_size", "Lucene Segments Index Writer"),
            GraphMember("segments_version_map_size", "Lucene Segments Version Map"),
            GraphMember("segments_fixed_bit_set_size", "Lucene Segments Fixed Bit Set"),
        ),
    ),
    GraphGroup(
        name="indices.evictions",
        label="Indices Evictions",
        unit="integer",
        members=(
            GraphMember("evictions_fielddata", "Fielddata", RenderMode.DIFF),
            GraphMember("evictions_query_cache", "Query Cache", RenderMode.DIFF),
        ),
    ),
)
