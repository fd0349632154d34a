"""Geographic grid helpers: map lat/lng to ~1 km tiles and back.

The grid is non-uniform in longitude.  A degree of longitude shrinks with
distance from the equator, so the longitude cell width is recomputed for
every latitude it is used at."""

import math
from typing import NamedTuple

from geopy import distance

KM_PER_DEG_LAT = 110.574
KM_PER_DEG_LNG_EQUATOR = 111.32

LAT_CELL_SIZE = 1 / KM_PER_DEG_LAT    # degrees, constant everywhere


class GeoPoint(NamedTuple):
    lat: float
    lng: float


class TileIndex(NamedTuple):
    """Integer grid coordinates of one tile.  x is the longitude column,
    y the latitude row."""
    x: int
    y: int


def lng_cell_size(lat: float) -> float:
    """Width in degrees of a ~1 km longitude cell at the given latitude.

    Args:
        lat: latitude in degrees.  Undefined at the poles.

    Returns:
        Longitude cell size in degrees

    Examples:
        >>> abs(lng_cell_size(0.0) - 1 / 111.32) < 1e-12
        True
        >>> abs(lng_cell_size(60.0) - 2 / 111.32) < 1e-9   # cos(60) = .5
        True
    """
    return 1 / (KM_PER_DEG_LNG_EQUATOR * math.cos(math.radians(lat)))


def tile_of(lat: float, lng: float) -> TileIndex:
    """Return the tile containing the given point."""
    x = math.floor(lng / lng_cell_size(lat))
    y = math.floor(lat / LAT_CELL_SIZE)
    return TileIndex(x, y)


def bounds_of(tile: TileIndex) -> tuple[GeoPoint, GeoPoint]:
    """Return the (south-west, north-east) rectangle of a tile.

    The column edges of a tile move as the longitude cell size changes
    between its south and north edges, so the rectangle takes the outermost
    edge of each side.  This keeps every point that maps to the tile inside
    its rectangle.  In the northern hemisphere at x >= 0 it is exactly
    [(y*lat_size, x*lng_size(south)), ((y+1)*lat_size, (x+1)*lng_size(north))].
    """
    x, y = tile
    south = y * LAT_CELL_SIZE
    north = (y + 1) * LAT_CELL_SIZE
    south_size = lng_cell_size(south)
    north_size = lng_cell_size(north)

    west = min(x * south_size, x * north_size)
    east = max((x + 1) * south_size, (x + 1) * north_size)
    return GeoPoint(south, west), GeoPoint(north, east)


def tile_key(tile: TileIndex) -> str:
    """String key "x,y" for a tile, for interchange formats."""
    return "%d,%d" % (tile[0], tile[1])


def parse_tile_key(key: str) -> TileIndex:
    """Inverse of tile_key()."""
    x, y = key.split(",")
    return TileIndex(int(x), int(y))


def tile_area_km2(tile: TileIndex) -> float:
    """Approximate geodesic area of one tile, in km^2.

    Measures a single cell at the tile's middle latitude rather than the
    bounds_of() rectangle, which widens with |x|."""
    mid_lat = (tile[1] + .5) * LAT_CELL_SIZE
    height = distance.distance((mid_lat - LAT_CELL_SIZE / 2, 0.),
                               (mid_lat + LAT_CELL_SIZE / 2, 0.)).km
    width = distance.distance((mid_lat, 0.), (mid_lat, lng_cell_size(mid_lat))).km
    return height * width
