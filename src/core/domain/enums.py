"""Enumerations shared by the worker configuration.

This module centralizes the symbolic vocabularies that configuration files
may reference by name. Keeping it in the domain layer lets both the binder
and the CLI share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class MetricsLevel(str, Enum):
    """Granularity of the metrics emitted by the worker."""

    NONE = "NONE"
    SUMMARY = "SUMMARY"
    DETAILED = "DETAILED"

    @classmethod
    def default(cls) -> "MetricsLevel":
        return cls.DETAILED


class InitialPositionInStream(str, Enum):
    """Where a worker starts reading a shard that has no checkpoint yet."""

    LATEST = "LATEST"
    TRIM_HORIZON = "TRIM_HORIZON"
    AT_TIMESTAMP = "AT_TIMESTAMP"

    @classmethod
    def default(cls) -> "InitialPositionInStream":
        return cls.LATEST
