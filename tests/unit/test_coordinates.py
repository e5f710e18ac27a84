"""
Unit Tests for CRS Identifiers, Coordinates and Bounding Boxes
"""

import unittest
from pathlib import Path

import pyproj

import sys
sys.path.append(str(Path(__file__).parent.parent.parent / "src"))

from tile_addressing.coordinates import BoundingBox, Coordinate, CoordinateReferenceSystem, CrsCoordinate
from tile_addressing.exceptions import InvalidBoundingBoxError, MissingArgumentError, TileAddressingError
from tile_addressing.tiles.origin import TileOrigin


class TestCoordinateReferenceSystem(unittest.TestCase):
    """Test suite for CoordinateReferenceSystem."""

    def test_equality_ignores_name_and_case(self):
        self.assertEqual(
            CoordinateReferenceSystem("epsg", 3857),
            CoordinateReferenceSystem("EPSG", 3857, "Web Mercator")
        )
        self.assertNotEqual(CoordinateReferenceSystem("EPSG", 3857), CoordinateReferenceSystem("EPSG", 4326))

    def test_hash_matches_equality(self):
        crs_set = {CoordinateReferenceSystem("EPSG", 4326), CoordinateReferenceSystem("epsg", 4326, "WGS 84")}
        self.assertEqual(len(crs_set), 1)

    def test_ordering(self):
        self.assertLess(CoordinateReferenceSystem("EPSG", 3395), CoordinateReferenceSystem("EPSG", 3857))

    def test_parse(self):
        crs = CoordinateReferenceSystem.parse(" epsg:4326 ")
        self.assertEqual(crs.authority, "EPSG")
        self.assertEqual(crs.identifier, 4326)
        self.assertIsNone(crs.name)

    def test_parse_invalid(self):
        for text in ("", "EPSG", "EPSG:abc", "4326"):
            with self.subTest(text=text):
                with self.assertRaises(TileAddressingError):
                    CoordinateReferenceSystem.parse(text)

    def test_str(self):
        self.assertEqual(str(CoordinateReferenceSystem("EPSG", 3857)), "EPSG:3857")
        self.assertEqual(str(CoordinateReferenceSystem("EPSG", 3857, "Web Mercator")), "EPSG:3857 - Web Mercator")

    def test_invalid_arguments(self):
        with self.assertRaises(TileAddressingError):
            CoordinateReferenceSystem("", 4326)
        with self.assertRaises(TileAddressingError):
            CoordinateReferenceSystem("EPSG", 4326, "")
        with self.assertRaises(TileAddressingError):
            CoordinateReferenceSystem("EPSG", "4326")

    def test_to_pyproj(self):
        crs = CoordinateReferenceSystem("EPSG", 4326).to_pyproj()
        self.assertIsInstance(crs, pyproj.CRS)
        self.assertEqual(crs.to_epsg(), 4326)


class TestCrsCoordinate(unittest.TestCase):
    """Test suite for CRS-tagged coordinates."""

    def test_crs_text_is_parsed(self):
        coordinate = CrsCoordinate(1.0, 2.0, "EPSG:4326")
        self.assertEqual(coordinate.crs, CoordinateReferenceSystem("EPSG", 4326))

    def test_missing_crs(self):
        with self.assertRaises(MissingArgumentError):
            CrsCoordinate(1.0, 2.0, None)

    def test_conversion_to_and_from_plain_coordinate(self):
        coordinate = CrsCoordinate.from_coordinate(Coordinate(3.0, 4.0), "EPSG:3857")
        self.assertEqual(coordinate.to_coordinate(), Coordinate(3.0, 4.0))
        self.assertEqual(tuple(coordinate), (3.0, 4.0))

    def test_equality_includes_crs(self):
        self.assertNotEqual(CrsCoordinate(0.0, 0.0, "EPSG:4326"), CrsCoordinate(0.0, 0.0, "EPSG:3857"))


class TestBoundingBox(unittest.TestCase):
    """Test suite for BoundingBox."""

    def setUp(self):
        self.bounds = BoundingBox(-10.0, -5.0, 30.0, 15.0, "EPSG:4326")

    def test_invalid_extent(self):
        with self.assertRaises(InvalidBoundingBoxError):
            BoundingBox(1.0, 0.0, 0.0, 1.0)
        with self.assertRaises(InvalidBoundingBoxError):
            BoundingBox(0.0, 1.0, 1.0, 0.0)

    def test_size_and_center(self):
        self.assertEqual(self.bounds.width, 40.0)
        self.assertEqual(self.bounds.height, 20.0)
        self.assertEqual(self.bounds.center, Coordinate(10.0, 5.0))

    def test_corners(self):
        self.assertEqual(self.bounds.corner(TileOrigin.UPPER_LEFT), Coordinate(-10.0, 15.0))
        self.assertEqual(self.bounds.corner(TileOrigin.UPPER_RIGHT), Coordinate(30.0, 15.0))
        self.assertEqual(self.bounds.corner(TileOrigin.LOWER_LEFT), Coordinate(-10.0, -5.0))
        self.assertEqual(self.bounds.corner(TileOrigin.LOWER_RIGHT), Coordinate(30.0, -5.0))
        self.assertEqual(self.bounds.top_left, self.bounds.corner(TileOrigin.UPPER_LEFT))
        self.assertEqual(self.bounds.bottom_right, self.bounds.corner(TileOrigin.LOWER_RIGHT))

    def test_contains_is_closed(self):
        self.assertTrue(self.bounds.contains(-10.0, -5.0))
        self.assertTrue(self.bounds.contains(30.0, 15.0))
        self.assertFalse(self.bounds.contains(30.1, 0.0))

    def test_contains_for_origin_excludes_far_edges(self):
        self.assertTrue(self.bounds.contains_for_origin(-10.0, 15.0, TileOrigin.UPPER_LEFT))
        self.assertFalse(self.bounds.contains_for_origin(30.0, 0.0, TileOrigin.UPPER_LEFT))
        self.assertFalse(self.bounds.contains_for_origin(0.0, -5.0, TileOrigin.UPPER_LEFT))

        self.assertTrue(self.bounds.contains_for_origin(30.0, -5.0, TileOrigin.LOWER_RIGHT))
        self.assertFalse(self.bounds.contains_for_origin(-10.0, 0.0, TileOrigin.LOWER_RIGHT))
        self.assertFalse(self.bounds.contains_for_origin(0.0, 15.0, TileOrigin.LOWER_RIGHT))

    def test_intersection(self):
        other = BoundingBox(20.0, 10.0, 50.0, 50.0)
        self.assertEqual(
            self.bounds.intersection(other),
            BoundingBox(20.0, 10.0, 30.0, 15.0, "EPSG:4326")
        )
        self.assertIsNone(self.bounds.intersection(BoundingBox(31.0, 0.0, 32.0, 1.0)))

    def test_tuple_and_polygon(self):
        self.assertEqual(self.bounds.to_tuple(), (-10.0, -5.0, 30.0, 15.0))
        self.assertEqual(BoundingBox.from_tuple(self.bounds.to_tuple(), "EPSG:4326"), self.bounds)

        polygon = self.bounds.to_polygon()
        self.assertEqual(polygon.bounds, (-10.0, -5.0, 30.0, 15.0))
        self.assertEqual(polygon.area, 800.0)

    def test_with_crs(self):
        untagged = BoundingBox(0.0, 0.0, 1.0, 1.0)
        self.assertIsNone(untagged.crs)
        self.assertEqual(untagged.with_crs("EPSG:3857").crs, CoordinateReferenceSystem("EPSG", 3857))


if __name__ == '__main__':
    unittest.main(verbosity=2, buffer=True)
