"""Restrict explored tiles to those inside the displayed map region."""

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from .stats import Stats
from .tiler import GeoPoint, TileIndex, LAT_CELL_SIZE, lng_cell_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """Geographic rectangle currently shown by the map renderer."""
    south_west: GeoPoint
    north_east: GeoPoint

    def __post_init__(self):
        if self.south_west[0] > self.north_east[0]:
            raise ValueError("Viewport south edge %f is north of north edge %f"
                             % (self.south_west[0], self.north_east[0]))

    @classmethod
    def from_bounds(cls, south: float, west: float, north: float, east: float):
        return cls(GeoPoint(south, west), GeoPoint(north, east))

    @property
    def center_lat(self) -> float:
        return (self.south_west[0] + self.north_east[0]) / 2


@dataclass(frozen=True)
class TileRange:
    """Inclusive range of tile indices."""
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    def __contains__(self, tile) -> bool:
        x, y = tile
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


def tile_range(viewport: Viewport, margin: int = 0) -> TileRange:
    """Tile index box covering the viewport corners.

    Rows come straight from the corner latitudes.  Columns use the longitude
    cell size at the viewport's middle latitude for both corners.

    Args:
        viewport: the displayed region
        margin: extra tiles to include on every side
    """
    sw, ne = viewport.south_west, viewport.north_east
    lng_size = lng_cell_size(viewport.center_lat)

    return TileRange(
        min_x=math.floor(sw[1] / lng_size) - margin,
        max_x=math.floor(ne[1] / lng_size) + margin,
        min_y=math.floor(sw[0] / LAT_CELL_SIZE) - margin,
        max_y=math.floor(ne[0] / LAT_CELL_SIZE) + margin)


def visible_tiles(covered: Iterable[TileIndex], viewport: Viewport,
                  margin: int = 0) -> frozenset[TileIndex]:
    """Subset of covered that falls inside the viewport's tile range."""
    box = tile_range(viewport, margin)
    visible = frozenset(t for t in covered if t in box)

    Stats.viewport_queries += 1
    logger.debug("Viewport %s: %d visible tiles", box, len(visible))
    return visible
