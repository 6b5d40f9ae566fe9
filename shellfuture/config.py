# -*- coding: utf-8 -*-
# @Project : SHELLFUTURE
# @Description: Fixed settings for the study-area map
# @Note: Coordinates are lon/lat (WGS84; EPSG:4326).

import os

CRS = "EPSG:4326"
REGION_COLUMN = "Region"

# (lon_min, lon_max, lat_min, lat_max)
MAP_EXTENT = (-30, 45, 5, 75)

BASEMAP_FACE = "#f2f2f2"
BASEMAP_EDGE = "#d9d9d9"
BASEMAP_LINEWIDTH = 0.5

REGION_COLOURS = {
    "Mediterranean": "#e41a1c",
    "Atl-South": "#377eb8",
    "Atl-North": "#4daf4a",
}
REGION_ALPHA = 0.5
REGION_EDGE = "black"
REGION_LINEWIDTH = 0.4

GRID_COLOUR = "#ebebeb"
GRID_LINEWIDTH = 0.2

TITLE = "SHELLFUTURE study areas (v3 final)"
LEGEND_TITLE = "Region"

FIGSIZE = (10, 6)
DPI = 300


def setup_paths():
    """Set output paths relative to the working directory."""
    outputs = os.path.join(os.getcwd(), 'outputs')
    paths = {
        'outputs': os.path.normpath(outputs),
        'study_areas_png': os.path.normpath(os.path.join(outputs, 'study_areas_v3_final.png')),
    }
    return paths
