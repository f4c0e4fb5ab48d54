# -*- coding: utf-8 -*-
"""
File names, column layout and style tables for the partner map.
"""

# -------------------------------
# Files
# -------------------------------

PARTNERS_CSV = "partner_locations.csv"
BOUNDARY_FILE = "IL_BNDY_State_Py.shp"
OUTPUT_HTML = "IL_partner_map.html"

WGS84 = 4326

# CSV header -> field name
COLUMNS = {
    "Name": "name",
    "Address1": "address1",
    "Address2": "address2",
    "City": "city",
    "State": "state",
    "Zip": "zip",
    "Type": "category",
    "Dates": "dates",
    "Days": "days",
    "Hours": "hours",
    "Website": "website",
    "Notes": "notes",
    "Longitude": "longitude",
    "Latitude": "latitude",
}
REQUIRED_COLUMNS = ["name", "longitude", "latitude"]

# -------------------------------
# Categories (folium.Icon colors; glyphicon names must exist in Bootstrap 3.0.0,
# the version folium links)
# -------------------------------

DEFAULT_CATEGORY = "Other"
DEFAULT_STYLE = ("purple", "map-marker")

CATEGORY_STYLES = {
    "Farmers Market": ("green", "leaf"),
    "Store": ("darkred", "shopping-cart"),
    "CSA": ("orange", "tree-deciduous"),
    "Mobile Market": ("blue", "road"),
    "Pop-up Market": ("cadetblue", "flag"),
}

# -------------------------------
# Links
# -------------------------------

DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1&destination={destination}"
DIRECTIONS_SUFFIX = "IL+USA"

# -------------------------------
# View
# -------------------------------

TILES = "CartoDB positron"
MIN_ZOOM = 6
MAX_ZOOM = 18
MINIMAP_ZOOM = 4

# degrees around the boundary box covered by the dimming mask
MASK_MARGIN = 20.0
# degrees the user may pan past the boundary box; north is wider so popups
# opening above markers near the top edge stay reachable
PAN_MARGIN = {"south": 1.0, "west": 1.0, "east": 1.0, "north": 3.0}

MASK_STYLE = {"fillColor": "#000000", "fillOpacity": 0.35, "stroke": False, "weight": 0}
OUTLINE_STYLE = {"color": "black", "weight": 1.5, "opacity": 0.8, "fill": False, "fillOpacity": 0}
POPUP_MAX_WIDTH = 300
