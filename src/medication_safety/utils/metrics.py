# ============================================================================
# src/medication_safety/utils/metrics.py
# ============================================================================
"""
Counters and timings for validations, interaction checks and refills.
"""

import threading
import time
from typing import Dict, List, Optional, Any
from collections import defaultdict
import statistics


class MetricsCollector:
    """Collect and aggregate metrics. Safe to share between threads."""

    def __init__(self):
        self._lock = threading.RLock()
        self._counters: Dict[str, int] = defaultdict(int)
        self._timers: Dict[str, List[float]] = defaultdict(list)

    def increment(self, name: str, value: int = 1) -> None:
        """
        Increment counter.

        Args:
            name: Counter name
            value: Increment amount
        """
        with self._lock:
            self._counters[name] += value

    def record_time(self, name: str, duration: float) -> None:
        """
        Record operation duration.

        Args:
            name: Operation name
            duration: Duration in seconds
        """
        with self._lock:
            self._timers[name].append(duration)

    def get_counter(self, name: str) -> int:
        """Get counter value."""
        with self._lock:
            return self._counters.get(name, 0)

    def get_timer_stats(self, name: str) -> Optional[Dict[str, float]]:
        """
        Get timer statistics.

        Returns:
            Dict with count, min, max, mean, median
        """
        with self._lock:
            values = list(self._timers.get(name, []))
        if not values:
            return None

        return {
            'count': len(values),
            'min': min(values),
            'max': max(values),
            'mean': statistics.mean(values),
            'median': statistics.median(values),
        }

    def get_all_metrics(self) -> Dict[str, Any]:
        """Get all metrics."""
        with self._lock:
            return {
                'counters': dict(self._counters),
                'timers': {
                    name: self.get_timer_stats(name)
                    for name in self._timers
                },
            }

    def reset(self) -> None:
        """Reset all metrics."""
        with self._lock:
            self._counters.clear()
            self._timers.clear()


class Timer:
    """Context manager for timing operations."""

    def __init__(self, collector: MetricsCollector, operation: str):
        self.collector = collector
        self.operation = operation
        self.start_time: Optional[float] = None
        self.duration: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time
        self.collector.record_time(self.operation, self.duration)


# Global metrics collector
_global_metrics = MetricsCollector()


def get_metrics() -> MetricsCollector:
    """Get global metrics collector."""
    return _global_metrics
