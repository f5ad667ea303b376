"""Elasticsearch /_cluster/stats metrics plugin."""

__version__ = "0.1.0"
