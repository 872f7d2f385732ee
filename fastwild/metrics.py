"""Comparison statistics for the matcher variants."""

import time
import threading
from typing import Dict, Optional
from collections import defaultdict, deque


class Metrics:
    """Track and report per-variant comparison counts and timings."""

    def __init__(self):
        self.lock = threading.Lock()
        self.start_time = time.time()

        self.comparisons: Dict[str, int] = defaultdict(int)
        self.failures: Dict[str, int] = defaultdict(int)
        self.elapsed_ns: Dict[str, int] = defaultdict(int)

        self.recent_comparisons = deque(maxlen=100)

    def record_comparison(self, variant: str, elapsed_ns: int, passed: Optional[bool] = None):
        """Record one matcher call.

        passed tells whether the call gave the expected verdict; None means
        there was no expectation, and the call never counts as a failure.
        """
        with self.lock:
            self.comparisons[variant] += 1
            self.elapsed_ns[variant] += elapsed_ns
            if passed is False:
                self.failures[variant] += 1
            self.recent_comparisons.append((variant, elapsed_ns, passed, time.time()))

    def elapsed_seconds(self, variant: str) -> float:
        """Accumulated time spent in one variant, in seconds."""
        with self.lock:
            return self.elapsed_ns.get(variant, 0) / 1e9

    def get_stats(self) -> Dict:
        """Get current statistics."""
        with self.lock:
            uptime = time.time() - self.start_time

            variants = {}
            for variant, count in self.comparisons.items():
                elapsed = self.elapsed_ns[variant]
                variants[variant] = {
                    "comparisons": count,
                    "failures": self.failures[variant],
                    "elapsed_seconds": round(elapsed / 1e9, 3),
                    "avg_comparison_ns": round(elapsed / count, 1) if count else 0.0
                }

            return {
                "uptime_seconds": round(uptime, 2),
                "comparisons": sum(self.comparisons.values()),
                "failures": sum(self.failures.values()),
                "variants": variants,
                "recent_comparisons": [
                    {"variant": variant, "elapsed_ns": elapsed_ns, "passed": passed, "timestamp": timestamp}
                    for variant, elapsed_ns, passed, timestamp in self.recent_comparisons
                ]
            }
