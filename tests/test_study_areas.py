import numpy as np
import pytest

from shellfuture.errors import InvalidInputError
from shellfuture.study_areas import (
    ATL_N_PTS,
    ATL_S_PTS,
    MED_PTS,
    assemble_study_areas,
    create_region,
)


def test_create_region_closes_ring():
    pts = [(-5.6, 35.5), (-5.6, 36.2), (3.0, 43.5)]
    region = create_region(pts, "Test")

    assert len(region) == 1
    assert region["Region"].iloc[0] == "Test"
    assert region.crs.to_epsg() == 4326
    coords = list(region.geometry.iloc[0].exterior.coords)
    assert coords == [(-5.6, 35.5), (-5.6, 36.2), (3.0, 43.5), (-5.6, 35.5)]


@pytest.mark.parametrize("pts", [MED_PTS, ATL_S_PTS, ATL_N_PTS])
def test_study_area_rings_are_closed(pts):
    coords = np.asarray(create_region(pts, "x").geometry.iloc[0].exterior.coords)
    assert len(coords) == len(pts) + 1
    np.testing.assert_allclose(coords[0], pts[0])
    np.testing.assert_allclose(coords[-1], pts[0])


def test_create_region_keeps_crs():
    region = create_region(ATL_S_PTS, "Atl-South", crs=3857)
    assert region.crs.to_epsg() == 3857


def test_create_region_rejects_two_points():
    with pytest.raises(InvalidInputError, match="at least 3 points"):
        create_region([(0, 0), (1, 1)], "Short")


@pytest.mark.parametrize("pts", [
    [(0, 0, 0), (1, 1, 1), (2, 0, 2)],
    [0, 1, 2, 3],
    [(0, 0), (1, 1, 1), (2, 2)],
    [(0, 0), (1, 1), (2,)],
    [("a", "b"), (1, 1), (2, 2)],
])
def test_create_region_rejects_bad_columns(pts):
    with pytest.raises(InvalidInputError):
        create_region(pts, "Bad")


def test_create_region_rejects_empty_name():
    with pytest.raises(InvalidInputError):
        create_region(MED_PTS, "")


def test_self_intersecting_ring_is_not_rejected():
    bowtie = [(0, 0), (1, 1), (1, 0), (0, 1)]
    region = create_region(bowtie, "Bowtie")
    assert not region.geometry.iloc[0].is_valid


def test_assemble_study_areas_order():
    study_areas = assemble_study_areas()

    assert list(study_areas["Region"]) == ["Mediterranean", "Atl-South", "Atl-North"]
    assert study_areas["Region"].is_unique
    assert study_areas.crs.to_epsg() == 4326
    assert list(study_areas.index) == [0, 1, 2]


def test_assemble_study_areas_fails_on_bad_table():
    tables = [("Mediterranean", MED_PTS), ("Broken", [(0, 0), (1, 1)])]
    with pytest.raises(InvalidInputError, match="Broken"):
        assemble_study_areas(tables)


def test_assemble_study_areas_rejects_duplicate_names():
    tables = [("Atl-South", ATL_S_PTS), ("Atl-South", ATL_N_PTS)]
    with pytest.raises(InvalidInputError, match="Duplicate region name"):
        assemble_study_areas(tables)
