# -*- coding: utf-8 -*-
"""
Geometry derived from the state boundary: its extent, a rough center, and
the "outside" polygon used to dim everything beyond the state line.
"""

from collections import namedtuple

import geopandas as gpd
from shapely.geometry import box

from .config import MASK_MARGIN


class Extent(namedtuple("Extent", ["min_lon", "min_lat", "max_lon", "max_lat"])):
    """Axis-aligned lon/lat box."""

    __slots__ = ()

    @property
    def center(self):
        """
        (lat, lon) midpoint of the box corners.

        Not an area centroid; it is only used to seed the initial view, which
        is then fitted to the box anyway.
        """
        return ((self.min_lat + self.max_lat) / 2.0, (self.min_lon + self.max_lon) / 2.0)

    def expand(self, south=0.0, west=0.0, north=0.0, east=0.0):
        return Extent(self.min_lon - west, self.min_lat - south,
                      self.max_lon + east, self.max_lat + north)

    def to_leaflet(self):
        """[[south, west], [north, east]], the order Leaflet's fitBounds wants."""
        return [[self.min_lat, self.min_lon], [self.max_lat, self.max_lon]]

    def to_polygon(self):
        return box(self.min_lon, self.min_lat, self.max_lon, self.max_lat)


MaskResult = namedtuple("MaskResult", ["mask", "extent", "center"])


def boundary_extent(boundary):
    return Extent(*(float(v) for v in boundary.total_bounds))


def mask_polygon(boundary, margin=MASK_MARGIN):
    """Boundary extent grown by ``margin`` degrees, minus the boundary itself."""
    extent = boundary_extent(boundary)
    outer = extent.expand(margin, margin, margin, margin).to_polygon()
    return outer.difference(boundary.union_all())


def build_mask(boundary, margin=MASK_MARGIN):
    extent = boundary_extent(boundary)
    mask = gpd.GeoDataFrame(
        {"name": ["outside"]},
        geometry=[mask_polygon(boundary, margin)],
        crs=boundary.crs,
    )
    return MaskResult(mask=mask, extent=extent, center=extent.center)
