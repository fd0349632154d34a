"""Rendering instructions handed to an external map renderer: one colored
rectangle per visible tile, styled by cluster membership."""

from dataclasses import dataclass
from typing import Iterable, Optional

from shapely.geometry import box, mapping

from .cluster import Cluster
from .config import DEFAULTS
from .tiler import GeoPoint, TileIndex, bounds_of, tile_key


@dataclass(frozen=True)
class RenderTile:
    tile: TileIndex
    bounds: tuple[GeoPoint, GeoPoint]
    is_cluster_member: bool
    style: dict

    @property
    def key(self) -> str:
        return tile_key(self.tile)


def activity_color(activity_type: str, colors: Optional[dict] = None) -> str:
    """Line color for a track of the given activity type."""
    colors = colors or DEFAULTS["activity_colors"]
    return colors.get(activity_type, colors.get("Other",
                      DEFAULTS["activity_colors"]["Other"]))


def render_tiles(visible: Iterable[TileIndex], cluster: Cluster,
                 tile_style: Optional[dict] = None) -> list[RenderTile]:
    """Build rendering instructions for the given visible tiles, sorted by
    tile index so output is stable."""
    tile_style = tile_style or DEFAULTS["tile_style"]
    out = []
    for tile in sorted(visible):
        member = tile in cluster
        style = tile_style["cluster" if member else "explored"]
        out.append(RenderTile(TileIndex(*tile), bounds_of(tile), member, style))
    return out


def to_geojson(render_list: Iterable[RenderTile]) -> dict:
    """GeoJSON FeatureCollection with one polygon per tile.

    Each polygon is the tile's bounds_of() rectangle, which encloses the whole
    cell.  Far from longitude 0, or south of the equator, the column edges
    move between a tile's south and north rows, so rectangles of neighboring
    tiles overlap slightly.  The overlap grows with |x|."""
    features = []
    for rt in render_list:
        sw, ne = rt.bounds
        polygon = box(sw.lng, sw.lat, ne.lng, ne.lat)   # shapely is x=lng, y=lat
        features.append({
            "type": "Feature",
            "geometry": mapping(polygon),
            "properties": {
                "key": rt.key,
                "x": rt.tile.x,
                "y": rt.tile.y,
                "cluster": rt.is_cluster_member,
                "color": rt.style.get("color"),
                "fill_color": rt.style.get("fill_color"),
                "weight": rt.style.get("weight", 1),
            },
        })
    return {"type": "FeatureCollection", "features": features}
