"""
Unit Tests for Metrics Collection
"""

import json
import unittest
from pathlib import Path

from prometheus_client import CollectorRegistry

import sys
sys.path.append(str(Path(__file__).parent.parent.parent / "src"))

from tile_addressing.monitoring.metrics import MetricsCollector


class TestMetricsCollector(unittest.TestCase):
    """Test suite for MetricsCollector."""

    def setUp(self):
        self.metrics = MetricsCollector(buffer_size=3)

    def test_collectors_are_independent(self):
        other = MetricsCollector()
        labels = {'operation': 'crs_to_tile', 'crs': 'EPSG:3857'}

        self.metrics.increment_counter('tile_conversions_total', labels=labels)

        self.assertEqual(self.metrics.get_counter_value('tile_conversions_total', labels), 1.0)
        self.assertEqual(other.get_counter_value('tile_conversions_total', labels), 0.0)

    def test_shared_registry(self):
        registry = CollectorRegistry()
        metrics = MetricsCollector(registry=registry)

        metrics.set_gauge('tile_scheme_zoom_levels', 20, labels={'crs': 'EPSG:4326'})

        self.assertEqual(registry.get_sample_value('tile_scheme_zoom_levels', {'crs': 'EPSG:4326'}), 20.0)

    def test_unknown_metric_is_logged_not_raised(self):
        self.metrics.increment_counter('no_such_metric')
        self.metrics.set_gauge('no_such_gauge', 1)

        self.assertEqual(self.metrics.get_counter_value('no_such_metric'), 0.0)

    def test_export_prometheus(self):
        self.metrics.increment_counter(
            'tile_conversion_errors_total',
            labels={'operation': 'tile_to_crs', 'error': 'TileOutOfRangeError'}
        )

        exported = self.metrics.export_metrics("prometheus")

        self.assertIn('tile_conversion_errors_total{', exported)
        self.assertIn('error="TileOutOfRangeError"', exported)

    def test_export_json_keeps_recent_values(self):
        for zoom_levels in (1, 2, 3, 4):
            self.metrics.set_gauge('tile_scheme_zoom_levels', zoom_levels, labels={'crs': 'EPSG:3857'})

        exported = json.loads(self.metrics.export_metrics("json"))

        self.assertEqual(exported['metrics_count'], 3)
        self.assertEqual([m['value'] for m in exported['metrics']], [2, 3, 4])
        self.assertEqual(exported['metrics'][0]['labels'], {'crs': 'EPSG:3857'})

    def test_export_unsupported_format(self):
        with self.assertRaises(ValueError):
            self.metrics.export_metrics("xml")


if __name__ == '__main__':
    unittest.main(verbosity=2, buffer=True)
