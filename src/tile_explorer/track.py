"""Activity tracks, and the ingestion boundary that keeps malformed
coordinates out of the tiling code."""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import orjson

from .stats import Stats
from .tiler import GeoPoint
from .explorer_logger import Logger

logger = logging.getLogger(__name__)
#logger.level = logging.DEBUG
LOGGER = Logger()

# Activity types offered by the filter.  The set is open: tracks may carry
# any other string.
ACTIVITY_TYPES = ("Hike", "Walk", "Run", "Ride")
DEFAULT_ACTIVITY_TYPE = "Other"

# Filter selections with special meaning
SELECT_ALL = "All"
SELECT_NONE = "None"


@dataclass(frozen=True)
class Track:
    """An ordered sequence of points plus the activity type.  Immutable and
    hashable, so a collection of tracks can key a cache."""
    coords: tuple[GeoPoint, ...]
    activity_type: str = DEFAULT_ACTIVITY_TYPE

    @classmethod
    def from_dict(cls, d: dict) -> "Track":
        """Build a Track from an activity record of the form
            {"coords": [[lat, lng], ...], "type": "Run"}
        "sport_type" and "activityType" are accepted in place of "type".
        Points that fail valid_point() are dropped."""

        activity_type = (d.get("type") or d.get("sport_type") or
                         d.get("activityType") or DEFAULT_ACTIVITY_TYPE)
        coords = []
        rejected = 0
        for raw in d.get("coords") or []:
            point = _parse_point(raw)
            if point is None:
                rejected += 1
                logger.debug("Dropping bad point %s in %s track", raw,
                             activity_type)
                continue
            coords.append(point)

        if rejected:
            Stats.points_rejected += rejected
            logger.warning("Dropped %d bad points from %s track (%d kept)",
                           rejected, activity_type, len(coords))
        return cls(tuple(coords), str(activity_type))

    def __len__(self):
        return len(self.coords)


def valid_point(lat: float, lng: float) -> bool:
    """True if the point can be tiled: finite, in range, and not polar."""
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False
    return -90. < lat < 90. and -180. <= lng <= 180.


def _parse_point(raw) -> Optional[GeoPoint]:
    try:
        lat, lng = float(raw[0]), float(raw[1])
    except (TypeError, ValueError, IndexError, KeyError):
        return None
    if not valid_point(lat, lng):
        return None
    return GeoPoint(lat, lng)


def filter_tracks(tracks: Iterable[Track], selected: str) -> list[Track]:
    """Apply the activity filter: "All" keeps everything, "None" nothing,
    anything else keeps tracks of exactly that activity type."""
    if selected == SELECT_ALL:
        return list(tracks)
    if selected == SELECT_NONE:
        return []
    return [t for t in tracks if t.activity_type == selected]


def load_tracks(path) -> list[Track]:
    """Read activities from a JSON array or a JSON-lines file.

    Activities with no usable coordinates are skipped, as are lines that
    don't parse.

    Raises:
        ValueError: a JSON array file that doesn't parse as a whole
    """
    path = Path(path)
    data = path.read_bytes()

    records = []
    if data.lstrip().startswith(b"["):
        try:
            records = orjson.loads(data)
        except orjson.JSONDecodeError as e:
            logger.error("%s: JSON parse fail: %s", path, e)
            raise ValueError("%s is not a valid JSON array: %s" % (path, e)) from e
    else:
        for lineno, line in enumerate(data.splitlines(), 1):
            if not line.strip():
                continue
            try:
                records.append(orjson.loads(line))
            except orjson.JSONDecodeError:
                logger.warning("%s:%d: JSON parse fail, skipping", path, lineno)

    tracks = []
    for record in records:
        if not isinstance(record, dict):
            logger.warning("%s: skipping non-object record", path)
            continue
        track = Track.from_dict(record)
        if not track.coords:
            logger.debug("Skipping activity with no coordinates")
            continue
        tracks.append(track)

    Stats.tracks_loaded += len(tracks)
    logger.info("Loaded %d tracks from %s", len(tracks), path)
    return tracks
