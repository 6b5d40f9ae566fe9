"""Startup check for the packages the map needs.

Only the standard library is imported here so the check can run before
geopandas, matplotlib or cartopy are touched.
"""

import importlib.util
from typing import Dict, List

from .errors import MissingDependencyError

# import name -> distribution name
REQUIRED_PACKAGES: Dict[str, str] = {
    "geopandas": "geopandas",  # geometry
    "matplotlib": "matplotlib",  # plotting
    "cartopy": "cartopy",  # Natural Earth basemap
}


def find_missing(packages: Dict[str, str]) -> List[str]:
    """Return distribution names whose module cannot be found."""
    missing = []
    for module_name, dist_name in packages.items():
        if importlib.util.find_spec(module_name) is None:
            missing.append(dist_name)
    return missing


def check_dependencies(packages: Dict[str, str] = REQUIRED_PACKAGES) -> None:
    missing = find_missing(packages)
    if missing:
        raise MissingDependencyError(missing)
