"""
Unit Tests for Tile Grids

Covers absolute (TMS/XYZ) and relative (GeoPackage style) numbering, tile
ranges covering an extent, and the logging and metrics around conversions.
"""

import unittest
from pathlib import Path
from unittest.mock import patch

import structlog

import sys
sys.path.append(str(Path(__file__).parent.parent.parent / "src"))

from tile_addressing.coordinates import BoundingBox, CrsCoordinate
from tile_addressing.exceptions import (
    CoordinateOutOfBoundsError,
    MissingArgumentError,
    ZoomLevelOutOfRangeError,
)
from tile_addressing.grid import TileGrid, TileRange
from tile_addressing.monitoring.metrics import MetricsCollector
from tile_addressing.profiles import GlobalGeodeticCrsProfile
from tile_addressing.tiles.coordinate import TileCoordinate
from tile_addressing.tiles.origin import TileOrigin
from tile_addressing.tiles.scheme import ZoomTimesTwo
from tile_addressing.utils.config import Config

HALF_CIRCUMFERENCE = 20037508.342789244


class TestTmsGrid(unittest.TestCase):
    """Test suite for the absolute TMS grid over Web Mercator."""

    def setUp(self):
        self.grid = TileGrid.tms()

    def test_tms_defaults(self):
        self.assertTrue(self.grid.is_absolute)
        self.assertEqual(self.grid.origin, TileOrigin.LOWER_LEFT)
        self.assertEqual(str(self.grid.crs), "EPSG:3857")
        self.assertEqual(self.grid.dimensions(0).tile_count, 1)
        self.assertEqual(self.grid.dimensions(31).width, 2**31)

    def test_crs_to_tile(self):
        center = CrsCoordinate(0.0, 0.0, "EPSG:3857")
        self.assertEqual(self.grid.crs_to_tile(center, 1), TileCoordinate(1, 1))

        lower_left = CrsCoordinate(-HALF_CIRCUMFERENCE, -HALF_CIRCUMFERENCE, "EPSG:3857")
        self.assertEqual(self.grid.crs_to_tile(lower_left, 0), TileCoordinate(0, 0))

    def test_crs_to_tile_xyz_numbering(self):
        """Asking for an upper-left origin gives XYZ numbering from the same grid."""
        north_west = CrsCoordinate(-HALF_CIRCUMFERENCE + 1.0, HALF_CIRCUMFERENCE - 1.0, "EPSG:3857")

        self.assertEqual(self.grid.crs_to_tile(north_west, 3, TileOrigin.UPPER_LEFT), TileCoordinate(0, 0))
        self.assertEqual(self.grid.crs_to_tile(north_west, 3), TileCoordinate(0, 7))

    def test_tile_to_crs(self):
        corner = self.grid.tile_to_crs(0, 0, 0)
        self.assertAlmostEqual(corner.x, -HALF_CIRCUMFERENCE, places=6)
        self.assertAlmostEqual(corner.y, -HALF_CIRCUMFERENCE, places=6)

        corner = self.grid.tile_to_crs(1, 1, 1)
        self.assertEqual((corner.x, corner.y), (0.0, 0.0))

    def test_transform(self):
        self.assertEqual(self.grid.transform(0, 0, 1, TileOrigin.UPPER_LEFT), TileCoordinate(0, 1))

    def test_zoom_level_out_of_range(self):
        with self.assertRaises(ZoomLevelOutOfRangeError):
            self.grid.tile_to_crs(0, 0, 32)


class TestRelativeGrid(unittest.TestCase):
    """Test suite for a grid covering part of the geodetic extent."""

    def setUp(self):
        self.profile = GlobalGeodeticCrsProfile()
        self.scheme = ZoomTimesTwo(0, 5, 2, 1, TileOrigin.UPPER_LEFT)
        self.grid = TileGrid(self.profile, self.scheme, BoundingBox(0.0, 0.0, 64.0, 32.0))

    def test_bounds_tagged_with_profile_crs(self):
        self.assertEqual(self.grid.bounds, BoundingBox(0.0, 0.0, 64.0, 32.0, "EPSG:4326"))
        self.assertFalse(self.grid.is_absolute)

    def test_relative_numbering(self):
        coordinate = CrsCoordinate(16.5, 31.0, "EPSG:4326")

        self.assertEqual(self.grid.crs_to_tile(coordinate, 0), TileCoordinate(0, 0))
        self.assertEqual(self.grid.crs_to_tile(coordinate, 2), TileCoordinate(2, 0))

    def test_absolute_numbering_differs(self):
        coordinate = CrsCoordinate(16.5, 31.0, "EPSG:4326")
        absolute = TileGrid(self.profile, self.scheme)

        self.assertTrue(absolute.is_absolute)
        self.assertEqual(absolute.crs_to_tile(coordinate, 2), TileCoordinate(4, 1))

    def test_coordinate_outside_grid(self):
        with self.assertRaises(CoordinateOutOfBoundsError):
            self.grid.crs_to_tile(CrsCoordinate(-1.0, 10.0, "EPSG:4326"), 1)

    def test_tile_bounds(self):
        self.assertEqual(
            self.grid.tile_bounds(2, 0, 2),
            BoundingBox(16.0, 24.0, 24.0, 32.0, "EPSG:4326")
        )

    def test_tiles_in_bounds(self):
        tiles = self.grid.tiles_in_bounds(BoundingBox(4.0, 4.0, 20.0, 12.0), 2)

        self.assertEqual(tiles, TileRange(0, 2, 2, 3, 2, TileOrigin.UPPER_LEFT))
        self.assertEqual(len(tiles), 6)
        self.assertIn((1, 3), tiles)
        self.assertNotIn((3, 3), tiles)
        self.assertEqual(
            list(tiles),
            [
                TileCoordinate(0, 2), TileCoordinate(0, 3),
                TileCoordinate(1, 2), TileCoordinate(1, 3),
                TileCoordinate(2, 2), TileCoordinate(2, 3),
            ]
        )

    def test_tiles_in_bounds_other_origin(self):
        tiles = self.grid.tiles_in_bounds(BoundingBox(4.0, 4.0, 20.0, 12.0), 2, TileOrigin.LOWER_LEFT)
        self.assertEqual(tiles, TileRange(0, 0, 2, 1, 2, TileOrigin.LOWER_LEFT))

    def test_tiles_in_bounds_tile_aligned(self):
        """Extents ending on tile edges do not pull in the neighbouring tiles."""
        tiles = self.grid.tiles_in_bounds(BoundingBox(8.0, 8.0, 24.0, 16.0), 2)
        self.assertEqual(tiles, TileRange(1, 2, 2, 2, 2, TileOrigin.UPPER_LEFT))

    def test_tiles_in_bounds_clipped(self):
        tiles = self.grid.tiles_in_bounds(BoundingBox(-10.0, -10.0, 8.0, 8.0), 2)
        self.assertEqual(tiles, TileRange(0, 3, 0, 3, 2, TileOrigin.UPPER_LEFT))

    def test_tiles_in_bounds_no_overlap(self):
        self.assertIsNone(self.grid.tiles_in_bounds(BoundingBox(100.0, 40.0, 120.0, 50.0), 2))

    def test_tiles_in_bounds_touching_outline(self):
        """Extents sharing only an edge with the grid cover no tiles."""
        touching = [
            BoundingBox(64.0, 0.0, 80.0, 32.0),
            BoundingBox(-16.0, 0.0, 0.0, 32.0),
            BoundingBox(0.0, 32.0, 64.0, 40.0),
            BoundingBox(0.0, -8.0, 64.0, 0.0),
        ]

        for bounds in touching:
            with self.subTest(bounds=bounds.to_tuple()):
                self.assertIsNone(self.grid.tiles_in_bounds(bounds, 2))

    def test_tiles_in_bounds_missing(self):
        with self.assertRaises(MissingArgumentError):
            self.grid.tiles_in_bounds(None, 2)

    def test_missing_profile_or_scheme(self):
        with self.assertRaises(MissingArgumentError):
            TileGrid(None, self.scheme)
        with self.assertRaises(MissingArgumentError):
            TileGrid(self.profile, None)


class TestGridMetricsAndLogging(unittest.TestCase):
    """Test suite for conversion counting and rejection logging."""

    def setUp(self):
        self.metrics = MetricsCollector()
        self.grid = TileGrid(
            GlobalGeodeticCrsProfile(),
            ZoomTimesTwo(0, 5, 2, 1, TileOrigin.UPPER_LEFT),
            metrics=self.metrics
        )

    def test_zoom_level_gauge(self):
        self.assertEqual(
            self.metrics.get_gauge_value('tile_scheme_zoom_levels', {'crs': 'EPSG:4326'}),
            6.0
        )

    def test_successful_conversions_counted(self):
        coordinate = CrsCoordinate(10.0, 10.0, "EPSG:4326")
        self.grid.crs_to_tile(coordinate, 1)
        self.grid.crs_to_tile(coordinate, 2)
        self.grid.tile_to_crs(0, 0, 0)

        self.assertEqual(
            self.metrics.get_counter_value(
                'tile_conversions_total',
                {'operation': 'crs_to_tile', 'crs': 'EPSG:4326'}
            ),
            2.0
        )
        self.assertEqual(
            self.metrics.get_counter_value(
                'tile_conversions_total',
                {'operation': 'tile_to_crs', 'crs': 'EPSG:4326'}
            ),
            1.0
        )

    def test_rejected_conversions_counted_and_logged(self):
        with patch.object(self.grid, 'logger') as mock_logger:
            with self.assertRaises(CoordinateOutOfBoundsError):
                self.grid.crs_to_tile(CrsCoordinate(180.0, 0.0, "EPSG:4326"), 1)

            mock_logger.warning.assert_called_once()
            _, kwargs = mock_logger.warning.call_args
            self.assertEqual(kwargs['operation'], 'crs_to_tile')
            self.assertEqual(kwargs['error_type'], 'CoordinateOutOfBoundsError')

        self.assertEqual(
            self.metrics.get_counter_value(
                'tile_conversion_errors_total',
                {'operation': 'crs_to_tile', 'error': 'CoordinateOutOfBoundsError'}
            ),
            1.0
        )
        self.assertEqual(
            self.metrics.get_counter_value(
                'tile_conversions_total',
                {'operation': 'crs_to_tile', 'crs': 'EPSG:4326'}
            ),
            0.0
        )


class TestGridFromConfig(unittest.TestCase):
    """Test suite for building grids from configuration."""

    def tearDown(self):
        structlog.reset_defaults()

    def test_logging_configured_from_config(self):
        config = Config(log_level="DEBUG", log_format="console")

        with patch("tile_addressing.grid.configure_logging") as mock_configure:
            TileGrid.from_config(config)

        mock_configure.assert_called_once_with("DEBUG", "console")

    def test_default_config_is_tms(self):
        grid = TileGrid.from_config(Config())

        self.assertTrue(grid.is_absolute)
        self.assertEqual(grid.origin, TileOrigin.LOWER_LEFT)
        self.assertIsNone(grid.metrics)

    def test_from_dict_config(self):
        config = Config.from_dict({
            "tile_scheme": {
                "crs": "EPSG:4326",
                "minimum_zoom_level": 0,
                "maximum_zoom_level": 5,
                "initial_width": 2,
                "initial_height": 1,
                "origin": "upper_left",
                "bounds": "0,0,64,32"
            },
            "enable_metrics": True
        })

        grid = TileGrid.from_config(config)

        self.assertEqual(grid.bounds, BoundingBox(0.0, 0.0, 64.0, 32.0, "EPSG:4326"))
        self.assertEqual(grid.origin, TileOrigin.UPPER_LEFT)
        self.assertIsInstance(grid.metrics, MetricsCollector)
        self.assertEqual(grid.crs_to_tile(CrsCoordinate(16.5, 31.0, "EPSG:4326"), 2), TileCoordinate(2, 0))


if __name__ == '__main__':
    unittest.main(verbosity=2, buffer=True)
