"""Systemwide statistics tracking, mostly for test and debug purposes."""

from prometheus_client import Gauge

class Stats:
    tracks_loaded: int = 0
    points_rejected: int = 0

    coverage_builds: int = 0
    cluster_searches: int = 0
    viewport_queries: int = 0

    _registered: bool = False

    @classmethod
    def reset(cl):
        cl.tracks_loaded = cl.points_rejected = 0
        cl.coverage_builds = cl.cluster_searches = 0
        cl.viewport_queries = 0

    @classmethod
    def register_prom_callbacks(cl):
        """Register a gauge callback for every int member of this class.
        Only the first call registers; prometheus rejects duplicates."""

        if cl._registered:
            return

        def make_callback(attr_name):
            """Closure to capture the current attribute name in the for loop."""
            return lambda: getattr(Stats, attr_name)

        for name in dir(cl):
            value = getattr(cl, name)
            if name.startswith('_') or isinstance(value, bool) or \
                    not isinstance(value, int):
                continue
            d = Gauge('tile_explorer_stat_' + name, name)
            d.set_function(make_callback(name))
        cl._registered = True
