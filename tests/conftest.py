import geopandas as gpd
import pytest
from shapely.geometry import Polygon

from partner_map.loader import load_partners

HEADER = "Name,Address1,Address2,City,State,Zip,Type,Dates,Days,Hours,Website,Notes,Longitude,Latitude\n"

ROWS = [
    "Urbana Market at the Square,100 S Vine St,,Urbana,IL,61801,Farmers Market,May-Nov,Saturday,7am-12pm,,,-88.2034,40.1106\n",
    "Corner Grocery,55 W Main St,Suite 2,Springfield,IL,62701,Store,,,,https://example.org,Accepts SNAP,-89.6501,39.7817\n",
    "Prairie Box,,,,,,CSA,,,,,,-89.0,41.0\n",
    "Mystery Stand,1 Elm St,,Peoria,IL,,,,,,,,-89.589,40.6936\n",
]

# roughly Illinois-shaped: bbox (-91.5, 37.0) - (-87.0, 42.5)
IL_RING = [(-91.5, 40.0), (-90.5, 42.5), (-87.5, 42.5), (-87.0, 39.0), (-89.0, 37.0), (-91.5, 40.0)]


def write_csv(path, rows=ROWS, header=HEADER):
    path.write_text(header + "".join(rows), encoding="utf-8")
    return path


@pytest.fixture
def partners_csv(tmp_path):
    return write_csv(tmp_path / "partners.csv")


@pytest.fixture
def partners(partners_csv):
    return load_partners(partners_csv)


@pytest.fixture
def boundary():
    return gpd.GeoDataFrame({"name": ["Illinois"]}, geometry=[Polygon(IL_RING)], crs=4326)


@pytest.fixture
def boundary_file(tmp_path, boundary):
    path = tmp_path / "boundary.geojson"
    boundary.to_file(path, driver="GeoJSON")
    return path
