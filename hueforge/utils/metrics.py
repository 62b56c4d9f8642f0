"""
HueForge Metrics Collection
In-process counters and value series for palette and theme requests.
"""
import time
from collections import Counter, defaultdict
from contextlib import contextmanager
from threading import Lock
from typing import Any, Dict, Iterator, List, Optional

import numpy as np

TIMING_SUFFIX = "_duration_ms"
QUALITY_SERIES = "palette_quality_score"


class MetricsCollector:
    """Lock-guarded counters and observation series."""

    def __init__(self):
        self._lock = Lock()
        self._counters: Dict[str, int] = Counter()
        self._series: Dict[str, List[float]] = defaultdict(list)
        self._start_time = time.time()

    def increment(self, name: str, amount: int = 1):
        with self._lock:
            self._counters[name] += amount

    def observe(self, name: str, value: float):
        with self._lock:
            self._series[name].append(float(value))

    def increment_request_count(self, operation: str):
        """Count a request for `operation` ("optimize", "theme", ...)."""
        self.increment(f"{operation}_requests_total")

    def increment_schema_count(self, schema: str):
        self.increment(f"theme_schema_total_{schema}")

    def increment_failure_count(self, error_type: str):
        self.increment(f"failed_total_{error_type}")

    def record_timing(self, operation: str, duration_ms: float):
        self.observe(f"{operation}{TIMING_SUFFIX}", duration_ms)

    def record_quality_score(self, score: float):
        """Record the quality score of an optimized palette."""
        self.observe(QUALITY_SERIES, score)

    @contextmanager
    def timed(self, operation: str) -> Iterator[None]:
        """Record the wall time of the enclosed block, even if it raises."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.record_timing(operation, (time.perf_counter() - start) * 1000)

    def get_counters(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counters)

    def get_timing_stats(self) -> Dict[str, Dict[str, float]]:
        with self._lock:
            return {
                name: self._describe(values)
                for name, values in self._series.items()
                if name.endswith(TIMING_SUFFIX) and values
            }

    def get_quality_stats(self) -> Dict[str, float]:
        with self._lock:
            scores = self._series.get(QUALITY_SERIES)
            return self._describe(scores) if scores else {}

    def get_uptime_seconds(self) -> float:
        return time.time() - self._start_time

    def get_summary(self) -> Dict[str, Any]:
        """Get complete metrics summary."""
        return {
            "uptime_seconds": self.get_uptime_seconds(),
            "counters": self.get_counters(),
            "timing_stats": self.get_timing_stats(),
            "quality_stats": self.get_quality_stats()
        }

    def reset(self):
        """Reset all metrics (for testing)."""
        with self._lock:
            self._counters.clear()
            self._series.clear()
            self._start_time = time.time()

    @staticmethod
    def _describe(values: List[float]) -> Dict[str, float]:
        data = np.asarray(values, dtype=np.float64)
        p50, p95 = np.percentile(data, [50, 95])
        return {
            "count": int(data.size),
            "mean": float(data.mean()),
            "min": float(data.min()),
            "max": float(data.max()),
            "p50": float(p50),
            "p95": float(p95),
        }


# Global metrics instance
_metrics: Optional[MetricsCollector] = None


def get_metrics() -> MetricsCollector:
    """Get or create global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def reset_metrics():
    """Reset global metrics (for testing)."""
    global _metrics
    if _metrics is not None:
        _metrics.reset()
