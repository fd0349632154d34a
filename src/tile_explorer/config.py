"""Read local configuration yaml.

The yaml holds display preferences such as activity colors, tile styles,
and the default activity filter.  Anything not given in the file falls
back to the built-in defaults below."""

import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)


def safe_path(relative_path):
    """Absolute path of a file given relative to this module, so lookups
    never depend on the current working directory."""
    return os.path.abspath(os.path.join(os.path.dirname(__file__),
                                        relative_path))

# repo-root config.yaml
CONFIGPATH = safe_path("../../config.yaml")

DEFAULTS = {
    "default_activity": "All",
    "activity_colors": {
        "Hike": "#000000",
        "Walk": "#E64F51",
        "Run": "#328EB9",
        "Ride": "#FE9900",
        "Other": "#EC8CDD",
    },
    "tile_style": {
        "cluster": {"color": "#328EB9", "fill_color": "rgba(50,142,185,0.4)",
                    "weight": 1},
        "explored": {"color": "#E64F51", "fill_color": "rgba(230,79,81,0.3)",
                     "weight": 1},
    },
}

def _merge(base: dict, override: dict) -> dict:
    """Recursively overlay override onto base, returning base."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base

class Config:
    def __init__(self, path=None, yaml_data=None):
        self.vars = copy.deepcopy(DEFAULTS)

        if yaml_data is None:
            path = path or CONFIGPATH
            if os.path.exists(path):
                with open(path, "r", encoding="utf-8") as f:
                    yaml_data = yaml.safe_load(f)
                logger.debug("Loaded config from %s", path)
            else:
                logger.debug("No config at %s, using defaults", path)

        if yaml_data:
            if not isinstance(yaml_data, dict):
                raise ValueError("Config yaml must be a mapping")
            _merge(self.vars, yaml_data)

    @property
    def activity_colors(self) -> dict:
        return self.vars["activity_colors"]

    @property
    def tile_style(self) -> dict:
        return self.vars["tile_style"]

    @property
    def default_activity(self) -> str:
        return self.vars["default_activity"]
