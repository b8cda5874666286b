"""Metrics hook protocol and no-op default implementation.

mdchain reports a handful of counters, timings and gauges while a document
is built and rendered.  By default a :class:`NoopMetricsHook` is used so
there is no overhead.  Pass any object satisfying :class:`MetricsHook` as
``DocumentConfig(metrics=...)`` to route them to StatsD, Prometheus or
similar.

Emitted metric names:

* ``mdchain.fragments_appended_total`` -- counter, tag ``kind``
* ``mdchain.fragments_omitted_total``  -- counter, tag ``kind``
* ``mdchain.render_duration_ms``       -- timing
* ``mdchain.render_fragments``         -- gauge
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict of string keys and values.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Default metrics implementation that discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
