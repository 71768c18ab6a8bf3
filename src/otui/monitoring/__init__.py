"""
Service Monitoring
Prometheus-based metrics collection for the OTUI service
"""

from otui.core.tracing import trace_operation
from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "metrics_collector",
    "trace_operation",
]
