# -*- coding: utf-8 -*-
"""
Assemble the folium map: tiles, outside-the-state mask, state outline,
one clustered marker layer per partner type, and the map controls.

Output is a single static HTML page.
"""

import logging
from pathlib import Path

import folium
from folium import LayerControl
from folium.plugins import (
    FeatureGroupSubGroup, Geocoder, LocateControl, MarkerCluster, MiniMap,
)
from branca.element import MacroElement
from jinja2 import Template

from .config import (
    MASK_STYLE, MAX_ZOOM, MIN_ZOOM, MINIMAP_ZOOM, OUTLINE_STYLE,
    PAN_MARGIN, POPUP_MAX_WIDTH, TILES,
)
from .enrich import is_missing

logger = logging.getLogger(__name__)


class ResetViewControl(MacroElement):
    """Button that fits the map back to ``bounds`` ([[s, w], [n, e]])."""

    _template = Template("""
        {% macro script(this, kwargs) %}
        var {{ this.get_name() }} = L.Control.extend({
            options: {position: {{ this.position|tojson }}},
            onAdd: function(map) {
                var div = L.DomUtil.create('div', 'leaflet-bar leaflet-control');
                var a = L.DomUtil.create('a', '', div);
                a.href = '#';
                a.title = {{ this.title|tojson }};
                a.setAttribute('role', 'button');
                a.innerHTML = '&#8962;';
                L.DomEvent.disableClickPropagation(div);
                L.DomEvent.on(a, 'click', function(e) {
                    L.DomEvent.preventDefault(e);
                    map.fitBounds({{ this.bounds|tojson }});
                });
                return div;
            }
        });
        {{ this._parent.get_name() }}.addControl(new {{ this.get_name() }}());
        {% endmacro %}
    """)

    def __init__(self, bounds, position="topleft", title="Reset view"):
        super().__init__()
        self._name = "ResetViewControl"
        self.bounds = bounds
        self.position = position
        self.title = title


def pan_limits(extent):
    """Extent the user may pan within; the north edge gets extra room for popups."""
    return extent.expand(**PAN_MARGIN)


def _add_overlays(m, boundary, mask):
    folium.GeoJson(
        mask.mask[["geometry"]],
        name="Outside Illinois",
        style_function=lambda f: MASK_STYLE,
        control=False,
    ).add_to(m)
    folium.GeoJson(
        boundary[["geometry"]],
        name="Illinois",
        style_function=lambda f: OUTLINE_STYLE,
        control=False,
    ).add_to(m)


def _add_markers(m, partners):
    """One toggleable sub-layer per category, all feeding a single cluster."""
    cluster = MarkerCluster(name="Partners", control=False).add_to(m)
    layers = {}
    for category in sorted(partners["category"].unique()):
        group = FeatureGroupSubGroup(cluster, name=category, show=True).add_to(m)
        rows = partners[partners["category"] == category]
        for _, r in rows.iterrows():
            folium.Marker(
                [r.geometry.y, r.geometry.x],
                popup=folium.Popup(r["popup_html"], max_width=POPUP_MAX_WIDTH),
                tooltip=None if is_missing(r["name"]) else str(r["name"]),
                icon=folium.Icon(color=r["color"], icon=r["icon"]),
            ).add_to(group)
        layers[category] = group
        logger.info("Layer %r: %d marker(s)", category, len(rows))
    return layers


def build_map(partners, boundary, mask):
    """
    Build the map from enriched partners, the boundary and its mask.

    The view starts fitted to the boundary extent; panning is limited to
    that extent plus PAN_MARGIN.
    """
    limits = pan_limits(mask.extent)
    m = folium.Map(
        location=list(mask.center),
        zoom_start=MIN_ZOOM + 1,
        tiles=TILES,
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
        max_bounds=True,
        min_lat=limits.min_lat,
        max_lat=limits.max_lat,
        min_lon=limits.min_lon,
        max_lon=limits.max_lon,
        control_scale=True,
    )

    _add_overlays(m, boundary, mask)
    _add_markers(m, partners)

    bounds = mask.extent.to_leaflet()
    m.fit_bounds(bounds)

    LayerControl(collapsed=False).add_to(m)
    ResetViewControl(bounds).add_to(m)
    LocateControl(auto_start=False, flyTo=True).add_to(m)
    Geocoder(collapsed=True, add_marker=False).add_to(m)
    MiniMap(toggle_display=True, minimized=True, zoom_level_fixed=MINIMAP_ZOOM).add_to(m)
    return m


def save_map(m, path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    m.save(str(path))
    size_kb = path.stat().st_size / 1024
    logger.info("Wrote %s (%.0f KB)", path, size_kb)
    return path
