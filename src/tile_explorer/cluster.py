"""Find the largest square block of explored tiles.

A square is grown one step at a time from a candidate origin tile (x, y).
At step n the newly exposed top row (x..x+n, y+n) and right column
(x+n, y..y+n) must all be explored for the square to grow to side n+1.
Every tile of the final square lies on one of these strips, so a reported
square is always fully explored.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .stats import Stats
from .tiler import TileIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cluster:
    """A square of size x size tiles anchored at origin (its lowest x and y).
    size 0 means no cluster, and origin is then None."""
    origin: Optional[TileIndex] = None
    size: int = 0

    def __post_init__(self):
        if self.size < 0:
            raise ValueError("Cluster size must be >= 0, got %d" % self.size)
        if self.size and self.origin is None:
            raise ValueError("Non-empty cluster needs an origin")

    def tiles(self) -> frozenset[TileIndex]:
        """Every tile index inside the square."""
        if not self.size:
            return frozenset()
        ox, oy = self.origin
        return frozenset(TileIndex(ox + dx, oy + dy)
                         for dx in range(self.size) for dy in range(self.size))

    def __contains__(self, tile) -> bool:
        if not self.size:
            return False
        x, y = tile
        ox, oy = self.origin
        return ox <= x < ox + self.size and oy <= y < oy + self.size


def square_growth(covered: frozenset, origin: TileIndex) -> int:
    """Side length of the square that grows from origin before a strip
    check fails.  0 if origin itself is not covered."""
    x, y = origin
    length = 0
    while all((x + i, y + length) in covered and (x + length, y + i) in covered
              for i in range(length + 1)):
        length += 1
    return length


def find_square_cluster(covered: frozenset) -> Cluster:
    """Largest square over all covered tiles taken as origins.

    Candidates are tried in sorted order and only a strictly larger square
    replaces the best so far, so ties go to the lowest (x, y) origin and the
    result does not depend on set iteration order."""
    best = Cluster()
    for origin in sorted(covered):
        size = square_growth(covered, origin)
        if size > best.size:
            best = Cluster(TileIndex(*origin), size)

    Stats.cluster_searches += 1
    logger.debug("Best square: size %d at %s", best.size, best.origin)
    return best
