"""Tests for the lat/lng <-> tile grid."""

import math

import pytest
from tile_explorer.tiler import (
    LAT_CELL_SIZE,
    TileIndex,
    bounds_of,
    lng_cell_size,
    parse_tile_key,
    tile_area_km2,
    tile_key,
    tile_of,
)

# lat, lng pairs around the world, both hemispheres and both sides of 0 lng
SAMPLE_POINTS = [
    (51.505, -0.09),          # London
    (37.7749, -122.4194),     # San Francisco
    (40.7128, -74.0060),      # New York
    (-33.8688, 151.2093),     # Sydney
    (-54.8019, -68.3030),     # Ushuaia
    (64.1466, -21.9426),      # Reykjavik
    (69.6496, 18.9560),       # Tromso
    (0.5, 0.5),
    (-0.5, -0.5),
    (70.0, 179.9),
]


class TestLngCellSize:
    def test_at_equator(self):
        assert lng_cell_size(0.0) == pytest.approx(1 / 111.32)

    def test_at_60_degrees(self):
        """cos(60) = .5, so cells are twice as wide in degrees."""
        assert lng_cell_size(60.0) == pytest.approx(2 / 111.32)

    def test_symmetric_about_equator(self):
        assert lng_cell_size(45.0) == pytest.approx(lng_cell_size(-45.0))

    def test_lat_cell_size_constant(self):
        assert LAT_CELL_SIZE == pytest.approx(1 / 110.574)


class TestTileOf:
    def test_origin(self):
        assert tile_of(0.0, 0.0) == (0, 0)

    def test_negative_quadrant(self):
        """floor(), not truncation: just south-west of 0,0 is tile -1,-1."""
        assert tile_of(-0.001, -0.001) == (-1, -1)

    def test_row_formula(self):
        lat, lng = 51.505, -0.09
        assert tile_of(lat, lng).y == math.floor(lat * 110.574)

    def test_column_uses_point_latitude(self):
        lat, lng = 60.0, 1.0
        expected = math.floor(lng / (1 / (111.32 * math.cos(math.radians(lat)))))
        assert tile_of(lat, lng).x == expected

    def test_deterministic(self):
        assert tile_of(37.7749, -122.4194) == tile_of(37.7749, -122.4194)

    def test_returns_tile_index(self):
        tile = tile_of(51.505, -0.09)
        assert isinstance(tile, TileIndex)
        assert tile == (tile.x, tile.y)
        assert hash(tile) == hash((tile.x, tile.y))

    def test_cells_are_about_one_km(self):
        """~0.009 degrees of latitude apart is the next row."""
        a = tile_of(10.0, 10.0)
        b = tile_of(10.0 + LAT_CELL_SIZE, 10.0)
        assert b.y == a.y + 1


class TestBoundsOf:
    @pytest.mark.parametrize("lat,lng", SAMPLE_POINTS)
    def test_contains_point(self, lat, lng):
        sw, ne = bounds_of(tile_of(lat, lng))
        assert sw.lat <= lat <= ne.lat
        assert sw.lng <= lng <= ne.lng

    def test_northern_positive_tile_matches_cell_edges(self):
        """For x >= 0 north of the equator the rectangle is the plain
        south-west / north-east cell corners."""
        sw, ne = bounds_of(TileIndex(10, 20))
        south, north = 20 * LAT_CELL_SIZE, 21 * LAT_CELL_SIZE
        assert sw.lat == pytest.approx(south)
        assert sw.lng == pytest.approx(10 * lng_cell_size(south))
        assert ne.lat == pytest.approx(north)
        assert ne.lng == pytest.approx(11 * lng_cell_size(north))

    @pytest.mark.parametrize("lat,lng", SAMPLE_POINTS)
    def test_sw_ne_ordering(self, lat, lng):
        sw, ne = bounds_of(tile_of(lat, lng))
        assert sw.lat < ne.lat
        assert sw.lng < ne.lng

    def test_origin_tile(self):
        sw, ne = bounds_of(TileIndex(0, 0))
        assert sw == (0.0, 0.0)
        assert ne.lat == pytest.approx(1 / 110.574)
        assert ne.lng == pytest.approx(lng_cell_size(1 / 110.574))


class TestTileKey:
    def test_format(self):
        assert tile_key(TileIndex(-7, 5695)) == "-7,5695"

    def test_parse(self):
        assert parse_tile_key("-7,5695") == TileIndex(-7, 5695)

    def test_plain_tuple(self):
        assert tile_key((3, 4)) == "3,4"


class TestTileArea:
    def test_about_one_km2_at_equator(self):
        assert abs(tile_area_km2(TileIndex(0, 0)) - 1.0) < 0.02

    def test_about_one_km2_at_high_latitude(self):
        """The grid compensates for longitude shrinkage."""
        area = tile_area_km2(tile_of(60.0, 0.01))
        assert 0.95 < area < 1.05

    def test_west_of_greenwich(self):
        """A single cell is measured, not the bounds_of() rectangle, which
        widens with |x|."""
        area = tile_area_km2(tile_of(37.7749, -122.4194))
        assert 0.95 < area < 1.05

    def test_southern_hemisphere(self):
        area = tile_area_km2(tile_of(-33.8688, 151.2093))
        assert 0.95 < area < 1.05

    def test_same_row_same_area(self):
        """Every tile in a row is the same size, whatever its column."""
        row = tile_of(51.505, -0.09).y
        assert tile_area_km2(TileIndex(-9000, row)) == \
            pytest.approx(tile_area_km2(TileIndex(3, row)))
