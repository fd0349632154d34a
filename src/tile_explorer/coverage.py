"""Build the set of tiles touched by a collection of tracks."""

import logging
from typing import Iterable

from .stats import Stats
from .tiler import GeoPoint, TileIndex, tile_of
from .track import Track

logger = logging.getLogger(__name__)


def track_tiles(coords: Iterable[GeoPoint]) -> set[TileIndex]:
    """Distinct tiles visited by one sequence of points."""
    return {tile_of(lat, lng) for lat, lng in coords}


def build_coverage(tracks: Iterable[Track]) -> frozenset[TileIndex]:
    """Union of the tiles of every point of every track.

    Returns a new frozenset on each call; nothing from the input is retained.
    """
    covered: set[TileIndex] = set()
    ntracks = 0
    for track in tracks:
        covered |= track_tiles(track.coords)
        ntracks += 1

    Stats.coverage_builds += 1
    logger.debug("Coverage: %d tiles from %d tracks", len(covered), ntracks)
    return frozenset(covered)
