from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager

from redactor_metrics.services.metrics.interface import LogRedactorMetrics


@contextmanager
def timed(
    metrics: LogRedactorMetrics, metric_name: str, tags: dict[str, str] | None = None
) -> Iterator[None]:
    """Report the elapsed seconds of the block via ``metrics.timer``.

    The timer is reported even when the block raises; the exception propagates.
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        metrics.timer(time.perf_counter() - t0, metric_name, dict(tags) if tags else {})
