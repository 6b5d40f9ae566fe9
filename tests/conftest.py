import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
import geopandas as gpd
from shapely.geometry import box


@pytest.fixture
def world():
    # Two fake "countries" covering the map window
    return gpd.GeoDataFrame(
        {"NAME": ["West", "East"]},
        geometry=[box(-40, 0, 5, 80), box(5, 0, 50, 80)],
        crs="EPSG:4326",
    )


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
