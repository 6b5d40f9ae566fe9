# -*- coding: utf-8 -*-
# @Project : SHELLFUTURE
# @Description: Define the study-area polygons
# @Note: Tables are open rings; create_region closes them.

import logging

import numpy as np
import pandas as pd
import geopandas as gpd
from shapely.geometry import Polygon

from .config import CRS, REGION_COLUMN
from .errors import InvalidInputError

# 1. Mediterranean: tightly constrained at the eastern entrance of the Strait of Gibraltar
MED_PTS = np.array([
    [-5.6, 35.5],  # Gibraltar east, Morocco side
    [-5.6, 36.2],  # Gibraltar east, Spain side
    [3.0, 43.5],
    [15.0, 46.0],
    [36.0, 40.0],
    [36.0, 30.0],
    [19.0, 30.0],  # covers Marsa al Brega
    [3.0, 34.0],
])

# 2. Eastern Atlantic (South), NE corner at 36.0N to meet Atl-North
ATL_S_PTS = np.array([
    [-20.0, 12.0],
    [-5.7, 12.0],
    [-5.7, 36.0],  # Gibraltar axis
    [-10.0, 37.0],
    [-20.0, 37.0],
])

# 3. Eastern Atlantic (North)
ATL_N_PTS = np.array([
    [-15.0, 36.0],
    [-5.7, 36.0],  # same latitude as Atl-South
    [-8.5, 42.0],
    [-1.0, 43.0],
    [1.5, 46.5],  # Royan
    [-1.0, 48.5],
    [5.0, 50.0],
    [12.0, 58.0],
    [12.0, 68.0],
    [-15.0, 68.0],
])

STUDY_AREA_TABLES = [
    ("Mediterranean", MED_PTS),
    ("Atl-South", ATL_S_PTS),
    ("Atl-North", ATL_N_PTS),
]


def create_region(pts, name, crs=CRS):
    """
    Build one labelled polygon from an open ring.

    Parameters:
    pts : array-like of shape (n, 2)
        Ordered (lon, lat) points, n >= 3, first point not repeated at the end.
    name : str
        Region label stored in the ``Region`` column.
    crs : str or int, optional
        Coordinate reference system of the points. Default is EPSG:4326.

    Returns:
    geopandas.GeoDataFrame
        A single row with the region name and its closed polygon.
    """
    try:
        pts = np.asarray(pts, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name}: expected (lon, lat) pairs, got {pts!r}") from e
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidInputError(f"{name}: expected (lon, lat) pairs, got array of shape {pts.shape}")
    if pts.shape[0] < 3:
        raise InvalidInputError(f"{name}: a polygon ring needs at least 3 points, got {pts.shape[0]}")
    if not isinstance(name, str) or not name:
        raise InvalidInputError(f"Region name must be a non-empty string, got {name!r}")

    # Close the polygon ring explicitly
    pts_closed = np.vstack([pts, pts[:1]])

    poly = Polygon(pts_closed)
    return gpd.GeoDataFrame({REGION_COLUMN: [name]}, geometry=[poly], crs=crs)


def assemble_study_areas(tables=STUDY_AREA_TABLES, crs=CRS):
    """Build every region in order and stack them into one GeoDataFrame."""
    names = [name for name, _ in tables]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise InvalidInputError(f"Duplicate region name(s): {', '.join(duplicates)}")
    regions = [create_region(pts, name, crs=crs) for name, pts in tables]
    study_areas = gpd.GeoDataFrame(pd.concat(regions, ignore_index=True), crs=crs)
    logging.info(f"Built {len(study_areas)} study areas: {', '.join(study_areas[REGION_COLUMN])}")
    return study_areas
