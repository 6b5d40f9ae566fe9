"""Natural Earth world countries basemap.

The large (10m) tier is only used when its shapefile is already on disk;
otherwise the medium (50m) tier is requested through cartopy.
"""

import logging
import os

import geopandas as gpd
import cartopy
import cartopy.io.shapereader as shapereader

from .errors import ExternalDataError, InvalidInputError

NE_RESOLUTIONS = {
    'medium': '50m',
    'large': '10m',
}
NE_CATEGORY = 'cultural'
NE_NAME = 'admin_0_countries'


def _shapefile_path(data_dir, resolution):
    return os.path.join(data_dir, 'shapefiles', 'natural_earth', NE_CATEGORY,
                        f'ne_{resolution}_{NE_NAME}.shp')


def has_hires():
    """Return True if the 10m countries shapefile is available locally."""
    for key in ('pre_existing_data_dir', 'data_dir'):
        data_dir = cartopy.config.get(key)
        if data_dir and os.path.exists(_shapefile_path(data_dir, NE_RESOLUTIONS['large'])):
            return True
    return False


def select_scale(hires):
    return 'large' if hires else 'medium'


def load_world(scale):
    """
    Read the Natural Earth countries layer at the given scale.

    Parameters:
    scale : str
        'medium' or 'large'.

    Returns:
    geopandas.GeoDataFrame
        Country polygons in lon/lat.
    """
    if scale not in NE_RESOLUTIONS:
        raise InvalidInputError(f"Unknown basemap scale: {scale}. Valid: {', '.join(NE_RESOLUTIONS)}")
    try:
        path = shapereader.natural_earth(resolution=NE_RESOLUTIONS[scale],
                                         category=NE_CATEGORY, name=NE_NAME)
        world = gpd.read_file(path)
    except (OSError, RuntimeError, ValueError) as e:
        raise ExternalDataError(f"Natural Earth {scale} basemap unavailable: {e}") from e
    if world.crs is None:
        world = world.set_crs('EPSG:4326')
    return world


def load_basemap():
    scale = select_scale(has_hires())
    logging.info(f"Loading Natural Earth countries at scale '{scale}' ({NE_RESOLUTIONS[scale]})")
    return load_world(scale)
