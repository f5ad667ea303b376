"""Shared test fixtures."""

from __future__ import annotations

import copy
from typing import Any, Callable

import httpx
import pytest

from esclusterstats.config.settings import ClusterConfig, Settings


CLUSTER_STATS: dict[str, Any] = {
    "_nodes": {"total": 3, "successful": 3, "failed": 0},
    "cluster_name": "search-prod",
    "cluster_uuid": "c0ffee-uuid",
    "timestamp": 1718000000000,
    "status": "green",
    "indices": {
        "count": 12,
        "shards": {"total": 24, "primaries": 12, "replication": 1.0},
        "docs": {"count": 1250000, "deleted": 3400},
        "store": {"size_in_bytes": 987654321},
        "fielddata": {"memory_size_in_bytes": 2048, "evictions": 5},
        "query_cache": {
            "memory_size_in_bytes": 65536,
            "total_count": 900,
            "hit_count": 600,
            "miss_count": 300,
            "cache_size": 40,
            "cache_count": 45,
            "evictions": 11,
        },
        "completion": {"size_in_bytes": 0},
        "segments": {
            "count": 180,
            "memory_in_bytes": 4194304,
            "terms_memory_in_bytes": 2097152,
            "stored_fields_memory_in_bytes": 524288,
            "term_vectors_memory_in_bytes": 0,
            "norms_memory_in_bytes": 65536,
            "points_memory_in_bytes": 131072,
            "doc_values_memory_in_bytes": 262144,
            "index_writer_memory_in_bytes": 0,
            "version_map_memory_in_bytes": 1024,
            "fixed_bit_set_memory_in_bytes": 512.5,
            "file_sizes": {},
        },
    },
    "nodes": {
        "count": {"total": 3, "data": 3, "master": 3},
        "versions": ["7.17.9"],
    },
}


@pytest.fixture
def cluster_stats() -> dict[str, Any]:
    return copy.deepcopy(CLUSTER_STATS)


@pytest.fixture
def sample_settings() -> Settings:
    return Settings(
        cluster=ClusterConfig(scheme="http", host="es.example.com", port=9200),
        metric_key_prefix="",
    )


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by *handler*."""
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return factory
