# src/texmeta/observability/base.py

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MetricsHook(Protocol):
    """Receives timings and counters from parsing and rendering.

    Names come from `texmeta.observability.names`; labels are small
    fixed sets such as `field` or `kind`.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook: drops everything."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        return None


def _format_labels(labels: dict[str, str] | None) -> str:
    if not labels:
        return ""
    return "{" + ",".join(f"{k}={v}" for k, v in sorted(labels.items())) + "}"


class LoggingMetricsHook:
    """Writes every metric as a debug log line and keeps running totals.

    Used by the CLI in verbose mode, where there is no metrics backend.
    """

    def __init__(self, level: int = logging.DEBUG) -> None:
        self.level = level
        self.counters: dict[str, int] = {}

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self.level, "metric %s%s = %.3f ms", name, _format_labels(labels), value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        key = name + _format_labels(labels)
        self.counters[key] = self.counters.get(key, 0) + value
        logger.log(self.level, "metric %s += %d (total %d)", key, value, self.counters[key])

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self.level, "metric %s%s = %s", name, _format_labels(labels), value)
