# -*- coding: utf-8 -*-
"""
Read the partner CSV and the state boundary file into GeoDataFrames.

Both come back in WGS84 lon/lat. Any problem with either input is a
DataLoadError: the map is never built from partial data.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd
import geopandas as gpd
from pyogrio.errors import DataLayerError, DataSourceError

from .config import COLUMNS, REQUIRED_COLUMNS, WGS84
from .errors import DataLoadError

logger = logging.getLogger(__name__)

POLYGON_TYPES = {"Polygon", "MultiPolygon"}


def _require_file(path):
    path = Path(path)
    if not path.is_file():
        raise DataLoadError(f"Input file not found: {path}")
    return path


def _bad_positions(df):
    """Boolean mask of rows whose lon/lat is missing, non-numeric or out of range."""
    lon = pd.to_numeric(df["longitude"], errors="coerce")
    lat = pd.to_numeric(df["latitude"], errors="coerce")
    ok = (
        np.isfinite(lon) & np.isfinite(lat)
        & lon.between(-180, 180) & lat.between(-90, 90)
    )
    return ~ok.fillna(False).astype(bool)


# -------------------------------
# Partners
# -------------------------------

def load_partners(path):
    path = _require_file(path)
    try:
        df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Could not read partner file {path}: {exc}") from exc

    df = df.rename(columns={c: COLUMNS[c.strip()] for c in df.columns if c.strip() in COLUMNS})
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise DataLoadError(f"{path} is missing required column(s): {', '.join(missing)}")
    for col in COLUMNS.values():
        if col not in df.columns:
            df[col] = pd.NA

    bad = _bad_positions(df)
    if bad.any():
        # +2: header line and 1-based numbering
        rows = ", ".join(str(i + 2) for i in df.index[bad][:10])
        raise DataLoadError(
            f"{int(bad.sum())} partner row(s) in {path} have no usable longitude/latitude "
            f"(lines {rows})"
        )

    df["longitude"] = pd.to_numeric(df["longitude"])
    df["latitude"] = pd.to_numeric(df["latitude"])
    partners = gpd.GeoDataFrame(
        df[list(COLUMNS.values())],
        geometry=gpd.points_from_xy(df["longitude"], df["latitude"]),
        crs=WGS84,
    )
    logger.info("Loaded %d partners from %s", len(partners), path)
    return partners


# -------------------------------
# Boundary
# -------------------------------

def load_boundary(path, crs=WGS84):
    path = _require_file(path)
    try:
        boundary = gpd.read_file(path)
    except (DataSourceError, DataLayerError, ValueError) as exc:
        raise DataLoadError(f"Could not read boundary file {path}: {exc}") from exc

    if boundary.empty:
        raise DataLoadError(f"Boundary file {path} has no features")
    kinds = set(boundary.geom_type.dropna())
    if not kinds or not kinds <= POLYGON_TYPES:
        raise DataLoadError(
            f"Boundary file {path} must hold polygons, found: {', '.join(sorted(kinds)) or 'nothing'}"
        )

    if boundary.crs is None:
        logger.warning("%s has no CRS; assuming EPSG:%s", path, crs)
        boundary = boundary.set_crs(crs)
    else:
        boundary = boundary.to_crs(crs)
    logger.info("Loaded boundary (%d feature(s)) from %s", len(boundary), path)
    return boundary


def load_inputs(partners_path, boundary_path):
    """Load both inputs; the boundary is brought into the partners' CRS."""
    partners = load_partners(partners_path)
    boundary = load_boundary(boundary_path, crs=partners.crs)

    outside = ~partners.within(boundary.union_all())
    if outside.any():
        logger.warning(
            "%d partner(s) fall outside the boundary: %s",
            int(outside.sum()), ", ".join(partners.loc[outside, "name"].astype(str).head(5)),
        )
    return partners, boundary
