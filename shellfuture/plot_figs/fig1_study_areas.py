"""Figure 1: Study areas map.

Natural Earth countries underneath, the three study-area polygons on top,
fixed viewport over the eastern Atlantic and the Mediterranean.
"""

import logging
import os

import matplotlib.pyplot as plt
from matplotlib.colors import to_rgba
import cartopy.crs as ccrs

from ..basemap import load_basemap
from ..config import (
    BASEMAP_EDGE,
    BASEMAP_FACE,
    BASEMAP_LINEWIDTH,
    DPI,
    FIGSIZE,
    GRID_COLOUR,
    GRID_LINEWIDTH,
    LEGEND_TITLE,
    MAP_EXTENT,
    REGION_ALPHA,
    REGION_COLOURS,
    REGION_COLUMN,
    REGION_EDGE,
    REGION_LINEWIDTH,
    TITLE,
)
from ..errors import InvalidInputError
from ..study_areas import assemble_study_areas
from ..utils.plot_map_tools import add_category_legend, add_gridlines, add_north


def _region_fills(names):
    unknown = [name for name in names if name not in REGION_COLOURS]
    if unknown:
        raise InvalidInputError(f"No fill colour for region(s): {', '.join(unknown)}")
    return {name: to_rgba(REGION_COLOURS[name], REGION_ALPHA) for name in names}


def draw_study_areas(world, study_areas, north_arrow=False):
    """Compose basemap and study areas on one PlateCarree map; returns (fig, ax)."""
    names = list(study_areas[REGION_COLUMN])
    fills = _region_fills(names)

    fig = plt.figure(figsize=FIGSIZE)
    ax = fig.add_subplot(1, 1, 1, projection=ccrs.PlateCarree())

    world.plot(ax=ax, transform=ccrs.PlateCarree(), facecolor=BASEMAP_FACE,
               edgecolor=BASEMAP_EDGE, lw=BASEMAP_LINEWIDTH, zorder=1)
    for name in names:
        study_areas[study_areas[REGION_COLUMN] == name].plot(
            ax=ax, transform=ccrs.PlateCarree(), facecolor=fills[name],
            edgecolor=REGION_EDGE, lw=REGION_LINEWIDTH, zorder=3)

    lon_min, lon_max, lat_min, lat_max = MAP_EXTENT
    ax.set_extent([lon_min, lon_max, lat_min, lat_max], crs=ccrs.PlateCarree())

    # Minimal theme: light grid, no frame
    add_gridlines(ax, color=GRID_COLOUR, linewidth=GRID_LINEWIDTH)
    ax.spines['geo'].set_visible(False)

    add_category_legend(ax, fills, names, LEGEND_TITLE,
                        edgecolor=REGION_EDGE, linewidth=REGION_LINEWIDTH)
    ax.set_title(TITLE, loc='left')
    if north_arrow:
        add_north(ax)
    return fig, ax


def save_figure(fig, path):
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    fig.savefig(path, dpi=DPI, bbox_inches='tight')
    logging.info(f"Saved study areas map to {path}")


def plot(show=True, save_path=None, north_arrow=False):
    """Render Figure 1 (study areas)."""
    study_areas = assemble_study_areas()
    world = load_basemap()
    fig, _ = draw_study_areas(world, study_areas, north_arrow=north_arrow)
    if save_path:
        save_figure(fig, save_path)
    if show:
        plt.show()
    return fig
