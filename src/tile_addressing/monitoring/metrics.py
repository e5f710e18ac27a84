"""
Metrics Collection

Counts tile coordinate conversions and conversion failures with Prometheus
client metrics. Each collector owns its own ``CollectorRegistry`` so several
tile grids (and test cases) can keep independent counts in one process.
"""

import json
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

import structlog
from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest


@dataclass
class MetricValue:
    """Represents a single metric value with metadata."""
    name: str
    value: Union[int, float]
    timestamp: datetime
    labels: Dict[str, str] = field(default_factory=dict)


class MetricsCollector:
    """
    Prometheus-backed counters for tile addressing operations.

    Built-in metrics:
        tile_conversions_total{operation, crs}
        tile_conversion_errors_total{operation, error}
        tile_scheme_zoom_levels{crs}
    """

    COUNTERS = {
        'tile_conversions_total': ('Total number of tile coordinate conversions', ['operation', 'crs']),
        'tile_conversion_errors_total': ('Total number of rejected tile coordinate conversions', ['operation', 'error']),
    }

    GAUGES = {
        'tile_scheme_zoom_levels': ('Number of zoom levels precomputed by a tile grid scheme', ['crs']),
    }

    def __init__(self, registry: Optional[CollectorRegistry] = None, buffer_size: int = 1000):
        """
        Initialize the metrics collector.

        Args:
            registry: Prometheus registry to register metrics in; a private
                one is created when omitted
            buffer_size: Number of recent metric values kept for JSON export
        """
        self.logger = structlog.get_logger(collector_type="MetricsCollector")

        self.prometheus_registry = registry or CollectorRegistry()
        self.prometheus_counters: Dict[str, Counter] = {}
        self.prometheus_gauges: Dict[str, Gauge] = {}

        self.metrics_buffer = deque(maxlen=buffer_size)
        self.lock = threading.RLock()

        for name, (description, labels) in self.COUNTERS.items():
            self._create_prometheus_metric('counter', name, description, labels)
        for name, (description, labels) in self.GAUGES.items():
            self._create_prometheus_metric('gauge', name, description, labels)

    def _create_prometheus_metric(
        self,
        metric_type: str,
        name: str,
        description: str,
        labels: List[str] = None
    ) -> None:
        """Create a Prometheus metric."""
        if labels is None:
            labels = []

        if metric_type == 'counter':
            self.prometheus_counters[name] = Counter(
                name, description, labels,
                registry=self.prometheus_registry
            )
        elif metric_type == 'gauge':
            self.prometheus_gauges[name] = Gauge(
                name, description, labels,
                registry=self.prometheus_registry
            )
        else:
            raise ValueError(f"Unsupported metric type: {metric_type}")

    def _buffer(self, name: str, value: Union[int, float], labels: Dict[str, str]) -> None:
        self.metrics_buffer.append(
            MetricValue(name=name, value=value, timestamp=datetime.now(timezone.utc), labels=labels)
        )

    def increment_counter(
        self,
        name: str,
        value: Union[int, float] = 1,
        labels: Dict[str, str] = None
    ) -> None:
        """
        Increment a counter metric.

        Args:
            name: Metric name
            value: Value to increment by
            labels: Metric labels
        """
        if labels is None:
            labels = {}

        try:
            with self.lock:
                self._buffer(name, value, labels)

                if labels:
                    self.prometheus_counters[name].labels(**labels).inc(value)
                else:
                    self.prometheus_counters[name].inc(value)

        except (KeyError, ValueError) as e:
            self.logger.error(
                "Failed to increment counter",
                metric_name=name,
                error=str(e)
            )

    def set_gauge(
        self,
        name: str,
        value: Union[int, float],
        labels: Dict[str, str] = None
    ) -> None:
        """Set a gauge metric value."""
        if labels is None:
            labels = {}

        try:
            with self.lock:
                self._buffer(name, value, labels)

                if labels:
                    self.prometheus_gauges[name].labels(**labels).set(value)
                else:
                    self.prometheus_gauges[name].set(value)

        except (KeyError, ValueError) as e:
            self.logger.error(
                "Failed to set gauge",
                metric_name=name,
                error=str(e)
            )

    def get_counter_value(self, name: str, labels: Dict[str, str] = None) -> float:
        """Current value of a counter, 0.0 if it was never incremented."""
        value = self.prometheus_registry.get_sample_value(name, labels or {})
        return value or 0.0

    def get_gauge_value(self, name: str, labels: Dict[str, str] = None) -> Optional[float]:
        return self.prometheus_registry.get_sample_value(name, labels or {})

    def export_metrics(self, format: str = "prometheus") -> str:
        """
        Export metrics.

        Args:
            format: ``"prometheus"`` for the text exposition format, ``"json"``
                for the recently recorded values

        Returns:
            Exported metrics as text
        """
        if format.lower() == "prometheus":
            return generate_latest(self.prometheus_registry).decode('utf-8')

        if format.lower() == "json":
            with self.lock:
                recent_metrics = [
                    {
                        'name': m.name,
                        'value': m.value,
                        'timestamp': m.timestamp.isoformat(),
                        'labels': m.labels
                    }
                    for m in self.metrics_buffer
                ]

            return json.dumps({
                'export_timestamp': datetime.now(timezone.utc).isoformat(),
                'metrics_count': len(recent_metrics),
                'metrics': recent_metrics
            }, indent=2)

        raise ValueError(f"Unsupported export format: {format}")
