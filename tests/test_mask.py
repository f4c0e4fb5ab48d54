import geopandas as gpd
import pytest
from shapely.geometry import MultiPolygon, Polygon, box

from partner_map.mask import Extent, boundary_extent, build_mask, mask_polygon


def test_extent_and_center_of_example_box():
    boundary = gpd.GeoDataFrame(geometry=[box(-91.5, 37.0, -87.0, 42.5)], crs=4326)

    result = build_mask(boundary)

    assert result.extent == Extent(-91.5, 37.0, -87.0, 42.5)
    # bbox midpoint, deliberately not the area centroid
    assert result.center == ((37.0 + 42.5) / 2, (-91.5 + -87.0) / 2)
    assert result.extent.to_leaflet() == [[37.0, -91.5], [42.5, -87.0]]


def test_center_is_bbox_midpoint_not_centroid(boundary):
    ext = boundary_extent(boundary)
    centroid = boundary.union_all().centroid

    assert ext.center == pytest.approx((39.75, -89.25))
    assert (centroid.y, centroid.x) != pytest.approx(ext.center)


def test_mask_partitions_buffered_box(boundary):
    margin = 5.0
    outer = boundary_extent(boundary).expand(margin, margin, margin, margin).to_polygon()
    shape = boundary.union_all()

    mask = mask_polygon(boundary, margin=margin)

    assert mask.intersection(shape).area == pytest.approx(0.0, abs=1e-9)
    assert mask.union(shape).symmetric_difference(outer).area == pytest.approx(0.0, abs=1e-9)
    assert mask.area == pytest.approx(outer.area - shape.area)


def test_mask_respects_holes_and_multipolygons():
    ring = Polygon(
        [(-91, 37), (-87, 37), (-87, 42), (-91, 42)],
        holes=[[(-90, 38), (-88, 38), (-88, 40), (-90, 40)]],
    )
    island = box(-86.5, 41.0, -86.0, 41.5)
    boundary = gpd.GeoDataFrame(geometry=[MultiPolygon([ring, island])], crs=4326)

    mask = mask_polygon(boundary, margin=2.0)

    assert mask.contains(box(-89.5, 38.5, -88.5, 39.5))  # inside the hole
    assert mask.intersection(island).area == pytest.approx(0.0, abs=1e-9)
    assert mask.intersection(ring).area == pytest.approx(0.0, abs=1e-9)


def test_mask_handles_shared_vertices():
    # two counties sharing an edge, dissolved before differencing
    west = box(-91.0, 37.0, -89.0, 42.0)
    east = box(-89.0, 37.0, -87.0, 42.0)
    boundary = gpd.GeoDataFrame(geometry=[west, east], crs=4326)

    mask = mask_polygon(boundary, margin=1.0)

    assert mask.is_valid
    assert mask.area == pytest.approx(box(-92, 36, -86, 43).area - box(-91, 37, -87, 42).area)


def test_build_mask_returns_frame_in_boundary_crs(boundary):
    result = build_mask(boundary)

    assert result.mask.crs == boundary.crs
    assert len(result.mask) == 1
    assert not result.mask.geometry.iloc[0].is_empty


def test_partners_inside_boundary_are_inside_extent(partners, boundary):
    ext = boundary_extent(boundary).to_polygon()
    inside = partners[partners.within(boundary.union_all())]

    assert len(inside) == len(partners)
    assert inside.within(ext).all()
