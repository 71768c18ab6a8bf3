"""
Metrics Collection
Prometheus metrics for OTUI parse/export traffic
"""

import time

from prometheus_client import Counter, Gauge, Histogram, Summary, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the OTUI service.
    """

    def __init__(self) -> None:
        # Parse metrics
        self.parse_requests_total = Counter(
            "otui_parse_requests_total",
            "Total number of OTUI parse requests",
            ["status"],
        )
        self.parse_duration = Histogram(
            "otui_parse_duration_seconds",
            "OTUI parse duration in seconds",
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
        )
        self.widgets_parsed = Summary(
            "otui_widgets_parsed",
            "Number of root widgets per parse",
        )
        self.diagnostics_total = Counter(
            "otui_diagnostics_total",
            "Total number of parser diagnostics",
            ["level"],
        )

        # Export metrics
        self.export_requests_total = Counter(
            "otui_export_requests_total",
            "Total number of OTUI export requests",
            ["status"],
        )
        self.export_duration = Histogram(
            "otui_export_duration_seconds",
            "OTUI export duration in seconds",
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
        )

        # Error metrics
        self.errors_total = Counter(
            "otui_errors_total",
            "Total number of errors",
            ["error_type", "component"],
        )

        # System metrics
        self.uptime = Gauge(
            "otui_uptime_seconds",
            "Service uptime in seconds",
        )
        self.start_time = time.time()

    def record_parse_request(self, status: str, duration: float) -> None:
        """Record a parse request."""
        self.parse_requests_total.labels(status=status).inc()
        self.parse_duration.observe(duration)

    def record_parse_result(self, widgets: int, levels: list[str]) -> None:
        """Record what a successful parse produced."""
        self.widgets_parsed.observe(widgets)
        for level in levels:
            self.diagnostics_total.labels(level=level).inc()

    def record_export_request(self, status: str, duration: float) -> None:
        """Record an export request."""
        self.export_requests_total.labels(status=status).inc()
        self.export_duration.observe(duration)

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type, component=component).inc()

    def update_uptime(self) -> None:
        """Update the uptime metric."""
        self.uptime.set(time.time() - self.start_time)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        self.update_uptime()
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
