# -*- coding: utf-8 -*-
"""
Presentation fields for each partner: category, marker color and icon,
a directions link and the popup body.

Nothing here raises on odd text. Fields are only checked for presence, and
an absent field drops its popup line entirely instead of printing "NA".
"""

import pandas as pd

from .config import (
    CATEGORY_STYLES, DEFAULT_CATEGORY, DEFAULT_STYLE,
    DIRECTIONS_URL, DIRECTIONS_SUFFIX,
)


def is_missing(value):
    """True for None, NaN/NA and blank strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _text(value):
    return str(value).strip()


def normalize_category(value):
    """Absent or blank becomes "Other"; anything else is kept exactly as given."""
    return DEFAULT_CATEGORY if is_missing(value) else value


def category_style(category):
    """(color, icon) for a category; anything not in the table gets the default."""
    return CATEGORY_STYLES.get(category, DEFAULT_STYLE)


def directions_url(address, city):
    """
    Google Maps directions link for an address.

    Only spaces are replaced; '&', '#' and non-ASCII characters pass through
    untouched and can break the link.
    """
    parts = [_text(p).replace(" ", "+") for p in (address, city) if not is_missing(p)]
    parts.append(DIRECTIONS_SUFFIX)
    return DIRECTIONS_URL.format(destination="+".join(parts))


def _city_line(record):
    city = _text(record["city"])
    state = record.get("state")
    zip_code = record.get("zip")
    tail = " ".join(_text(p) for p in (state, zip_code) if not is_missing(p))
    return f"{city}, {tail}" if tail else city


def popup_html(record):
    """
    Popup body for one partner, in a fixed order:

        name, address lines, city/state/zip, directions, type,
        dates, days, hours, website, notes

    ``record`` is any mapping (a row Series works). The city line and the
    directions link are only shown when a city is present.
    """
    def has(field):
        return not is_missing(record.get(field))

    lines = []
    if has("name"):
        lines.append(f"<b>{_text(record['name'])}</b>")
    if has("address1"):
        lines.append(_text(record["address1"]))
    if has("address2"):
        lines.append(_text(record["address2"]))
    if has("city"):
        lines.append(_city_line(record))
        url = record.get("directions_url")
        if is_missing(url):
            url = directions_url(record.get("address1"), record["city"])
        lines.append(f'<a href="{url}" target="_blank">Get directions</a>')
    lines.append(f"Type: {normalize_category(record.get('category'))}")
    for field, label in (("dates", "Dates"), ("days", "Days"), ("hours", "Hours")):
        if has(field):
            lines.append(f"{label}: {_text(record[field])}")
    if has("website"):
        lines.append(f'<a href="{_text(record["website"])}" target="_blank">Website</a>')

    html = "<br>".join(lines)
    if has("notes"):
        html += "<br><br>" + _text(record["notes"])
    return html


def enrich(partners):
    """Return a copy of ``partners`` with the derived display columns added."""
    out = partners.copy()
    out["category"] = out["category"].map(normalize_category)
    styles = [category_style(c) for c in out["category"]]
    out["color"] = [color for color, _ in styles]
    out["icon"] = [icon for _, icon in styles]
    out["directions_url"] = pd.Series(
        [
            directions_url(addr, city) if not is_missing(city) else None
            for addr, city in zip(out["address1"], out["city"])
        ],
        index=out.index,
        dtype=object,
    )
    out["popup_html"] = [popup_html(row) for _, row in out.iterrows()]
    return out
