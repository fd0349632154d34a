"""This is the main API for the library.

The following builds the explored-tile map for a set of tracks, and returns
what to draw for the region currently on screen:
    explorer = TileExplorer(load_tracks("activities.json"))
    explorer.set_activity_filter("Run")
    tiles = explorer.render(Viewport.from_bounds(51.4, -0.3, 51.6, 0.1))

Coverage and the best square depend only on the (filtered) tracks, so they
are cached until the tracks or the filter change.  Only the viewport filter
runs on every render() call.
"""
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional

from .cluster import Cluster, find_square_cluster
from .config import Config
from .coverage import build_coverage
from .render import RenderTile, activity_color, render_tiles
from .tiler import TileIndex, tile_area_km2
from .track import Track, filter_tracks
from .viewport import Viewport, visible_tiles

from .explorer_logger import Logger

logger = logging.getLogger(__name__)
logger.level = logging.INFO
LOGGER = Logger()


@dataclass(frozen=True)
class ExplorerSummary:
    tracks: int
    tracks_by_type: dict
    tiles: int
    area_km2: float
    cluster_size: int
    cluster_origin: Optional[TileIndex]


class TileExplorer:
    """Main API for the library."""

    def __init__(self, tracks: Iterable[Track] = (), activity_filter=None,
                 config: Optional[Config] = None):
        """
        Args:
            tracks: all known tracks, before activity filtering
            activity_filter: "All", "None", or an activity type.  Defaults to
                the config's default_activity.
            config: display configuration; built-in defaults if not given
        """
        self.config = config or Config()
        self.tracks: tuple[Track, ...] = tuple(tracks)
        self.activity_filter: str = activity_filter or self.config.default_activity

        self._cache_key = None
        self._covered: frozenset = frozenset()
        self._cluster = Cluster()

    def set_tracks(self, tracks: Iterable[Track]) -> None:
        self.tracks = tuple(tracks)

    def set_activity_filter(self, selected: str) -> None:
        self.activity_filter = selected

    @property
    def filtered_tracks(self) -> tuple[Track, ...]:
        return tuple(filter_tracks(self.tracks, self.activity_filter))

    def _refresh(self) -> None:
        """Recompute coverage and cluster if the filtered tracks changed."""
        key = self.filtered_tracks
        if key == self._cache_key:
            return

        self._covered = build_coverage(key)
        self._cluster = find_square_cluster(self._covered)
        self._cache_key = key
        logger.info("Recomputed coverage: %d tracks (%s), %d tiles, "
                    "best square %d", len(key), self.activity_filter,
                    len(self._covered), self._cluster.size)

    @property
    def covered(self) -> frozenset:
        self._refresh()
        return self._covered

    @property
    def cluster(self) -> Cluster:
        self._refresh()
        return self._cluster

    def visible(self, viewport: Viewport, margin: int = 0) -> frozenset:
        return visible_tiles(self.covered, viewport, margin)

    def render(self, viewport: Viewport, margin: int = 0) -> list[RenderTile]:
        """Rendering instructions for the explored tiles inside viewport."""
        return render_tiles(self.visible(viewport, margin), self.cluster,
                            self.config.tile_style)

    def track_colors(self) -> list[tuple[Track, str]]:
        """Each filtered track paired with its line color."""
        colors = self.config.activity_colors
        return [(t, activity_color(t.activity_type, colors))
                for t in self.filtered_tracks]

    def summary(self) -> ExplorerSummary:
        tracks = self.filtered_tracks
        covered = self.covered
        cluster = self.cluster
        return ExplorerSummary(
            tracks=len(tracks),
            tracks_by_type=dict(Counter(t.activity_type for t in tracks)),
            tiles=len(covered),
            area_km2=sum(tile_area_km2(t) for t in covered),
            cluster_size=cluster.size,
            cluster_origin=cluster.origin)
