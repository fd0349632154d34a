"""Command-line front end: load activities, print the explored-tile summary,
and optionally export the tiles visible in a viewport as GeoJSON.

Usage:
    tile-explorer activities.json --type Run --viewport 51.4 -0.3 51.6 0.1 \\
        --geojson tiles.geojson
"""

import argparse
import logging
import sys
from pathlib import Path

import orjson
from prometheus_client import start_http_server

from .config import Config
from .explorer import TileExplorer
from .render import to_geojson
from .stats import Stats
from .tiler import tile_key
from .track import ACTIVITY_TYPES, SELECT_ALL, SELECT_NONE, load_tracks
from .viewport import Viewport

from .explorer_logger import Logger

logger = logging.getLogger(__name__)
LOGGER = Logger()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Find explored ~1km tiles and the best explored square")
    parser.add_argument("activities",
                        help="JSON or JSON-lines file of activities with coords")
    parser.add_argument("-d", "--debug", action="store_true")
    parser.add_argument("--type", dest="activity_type", default=None,
                        help="activity filter: %s, or any other activity type"
                        % ", ".join((SELECT_ALL, SELECT_NONE) + ACTIVITY_TYPES))
    parser.add_argument("--viewport", nargs=4, type=float,
                        metavar=("SOUTH", "WEST", "NORTH", "EAST"),
                        help="only report tiles inside this region")
    parser.add_argument("--margin", type=int, default=0,
                        help="extra tiles around the viewport")
    parser.add_argument("--geojson", help="write visible tiles to this file")
    parser.add_argument("--config", help="display config yaml")
    parser.add_argument("--mport", type=int, help="prometheus metrics port")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.debug:
        logging.getLogger("tile_explorer").setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)

    if args.mport:
        Stats.register_prom_callbacks()
        start_http_server(args.mport)

    if not Path(args.activities).exists():
        logger.critical("Activities file not found: %s", args.activities)
        return 1
    if args.config and not Path(args.config).exists():
        logger.critical("Config file not found: %s", args.config)
        return 1

    config = Config(args.config)
    try:
        tracks = load_tracks(args.activities)
    except ValueError as e:
        logger.critical("Can't read activities: %s", e)
        return 1
    explorer = TileExplorer(tracks, args.activity_type, config)

    summary = explorer.summary()
    print(f"Tracks: {summary.tracks} {summary.tracks_by_type}")
    print(f"Explored tiles: {summary.tiles} (~{summary.area_km2:.1f} km^2)")
    if summary.cluster_size:
        print(f"Best square: {summary.cluster_size}x{summary.cluster_size} "
              f"at {tile_key(summary.cluster_origin)}")
    else:
        print("Best square: none")

    if args.viewport:
        viewport = Viewport.from_bounds(*args.viewport)
        render_list = explorer.render(viewport, args.margin)
        members = sum(1 for rt in render_list if rt.is_cluster_member)
        print(f"Visible tiles: {len(render_list)} ({members} in best square)")
        if args.geojson:
            with open(args.geojson, "wb") as f:
                f.write(orjson.dumps(to_geojson(render_list)))
            logger.info("Wrote %s", args.geojson)
    elif args.geojson:
        logger.warning("--geojson needs --viewport, nothing written")

    return 0


if __name__ == "__main__":
    sys.exit(main())
