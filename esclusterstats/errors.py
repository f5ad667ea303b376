"""Exceptions raised by the stats fetcher and configuration loader."""

from __future__ import annotations


class StatsError(Exception):
    """Base class for fatal errors of a single plugin run."""


class TransportError(StatsError):
    """The stats request could not be sent or was not answered with 2xx."""


class DecodeError(StatsError):
    """The stats response body is not a JSON object."""


class ConfigError(StatsError):
    """The configuration file is missing or invalid."""
