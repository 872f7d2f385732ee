"""Prometheus metrics export for fastwild."""

from prometheus_client import Counter, Gauge, Histogram, start_http_server


# Module-level metrics (singleton pattern to avoid duplicate registration)
_metrics_initialized = False
_comparisons = None
_comparison_failures = None
_comparison_time = None
_suite_passed = None


def _init_metrics():
    """Initialize metrics only once."""
    global _metrics_initialized, _comparisons, _comparison_failures
    global _comparison_time, _suite_passed

    if _metrics_initialized:
        return

    _comparisons = Counter('fastwild_comparisons_total', 'Total matcher calls', ['variant'])
    _comparison_failures = Counter('fastwild_comparison_failures_total', 'Matcher calls with an unexpected verdict', ['variant'])
    _comparison_time = Histogram('fastwild_comparison_seconds', 'Time spent in one matcher call', ['variant'],
                                 buckets=[1e-6, 5e-6, 1e-5, 5e-5, 1e-4, 5e-4, 1e-3, 1e-2])
    _suite_passed = Gauge('fastwild_suite_passed', 'Whether the last run of a suite passed', ['suite'])

    _metrics_initialized = True


class PrometheusMetrics:
    """Prometheus metrics collector."""

    _server_started = False

    def __init__(self, port: int = 9090):
        self.port = port
        _init_metrics()

        self.comparisons = _comparisons
        self.comparison_failures = _comparison_failures
        self.comparison_time = _comparison_time
        self.suite_passed = _suite_passed

    def start(self):
        """Start Prometheus metrics server."""
        if not PrometheusMetrics._server_started:
            start_http_server(self.port)
            PrometheusMetrics._server_started = True

    def record_comparison(self, variant: str, elapsed_seconds: float, passed: bool):
        """Record one matcher call."""
        self.comparisons.labels(variant=variant).inc()
        self.comparison_time.labels(variant=variant).observe(elapsed_seconds)
        if not passed:
            self.comparison_failures.labels(variant=variant).inc()

    def update_suite(self, suite: str, passed: bool):
        """Update the pass/fail gauge of a suite."""
        self.suite_passed.labels(suite=suite).set(1 if passed else 0)
