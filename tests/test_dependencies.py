import pytest

from shellfuture.dependencies import REQUIRED_PACKAGES, check_dependencies, find_missing
from shellfuture.errors import MissingDependencyError


def test_required_packages_cover_geometry_plotting_and_basemap():
    assert set(REQUIRED_PACKAGES) == {"geopandas", "matplotlib", "cartopy"}


def test_find_missing_keeps_order():
    packages = {"json": "json", "no_such_pkg_b": "pkg-b", "no_such_pkg_a": "pkg-a"}
    assert find_missing(packages) == ["pkg-b", "pkg-a"]


def test_check_dependencies_lists_missing_names():
    with pytest.raises(MissingDependencyError) as excinfo:
        check_dependencies({"json": "json", "no_such_pkg_c": "pkg-c"})

    assert excinfo.value.missing == ["pkg-c"]
    assert "Missing packages: pkg-c" in str(excinfo.value)
    assert "pip install pkg-c" in str(excinfo.value)


def test_check_dependencies_passes_when_installed():
    check_dependencies()
