from tile_explorer.stats import Stats
from tile_explorer.tiler import GeoPoint, TileIndex, LAT_CELL_SIZE, lng_cell_size
from tile_explorer.track import Track

def tile_center(tile) -> GeoPoint:
    """A point that tile_of() maps back to the given tile."""
    x, y = tile
    lat = (y + .5) * LAT_CELL_SIZE
    return GeoPoint(lat, (x + .5) * lng_cell_size(lat))

def track_through(tiles, activity_type="Run") -> Track:
    """A track with one point in each of the given tiles."""
    return Track(tuple(tile_center(t) for t in tiles), activity_type)

def square(ox, oy, size) -> set:
    return {TileIndex(ox + dx, oy + dy) for dx in range(size) for dy in range(size)}

def reset():
    Stats.reset()
