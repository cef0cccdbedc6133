"""Latency instrumentation for translation requests.

Keeps a bounded window of timings per operation name.
"""
import time
from collections import defaultdict, deque
from contextlib import contextmanager

_WINDOW = 1000
_timings_ms: dict = defaultdict(lambda: deque(maxlen=_WINDOW))


@contextmanager
def record_latency(name: str):
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        _timings_ms[name].append(elapsed_ms)


def snapshot_latency_stats(name: str) -> dict:
    values = _timings_ms.get(name)
    if not values:
        return {"count": 0, "p95_ms": None, "p99_ms": None}
    sorted_vals = sorted(values)
    count = len(sorted_vals)

    def _percentile(p: float) -> float:
        idx = int(round(p * (count - 1)))
        return sorted_vals[idx]
    return {
        "count": count,
        "p95_ms": _percentile(0.95),
        "p99_ms": _percentile(0.99),
    }


def get_metrics_snapshot() -> dict:
    return {name: snapshot_latency_stats(name) for name in list(_timings_ms.keys())}


def reset_metrics() -> None:
    _timings_ms.clear()
