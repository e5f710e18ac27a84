"""
Monitoring Module

Prometheus metrics for tile addressing operations.
"""

from .metrics import MetricsCollector, MetricValue

__all__ = [
    "MetricsCollector",
    "MetricValue"
]
