# -*- coding: utf-8 -*-
"""
Build the Illinois partner map.

Reads the partner CSV and state boundary named in config, and writes
a standalone HTML page:
  - IL_partner_map.html

Run with ``python -m partner_map`` (or ``partner-map``) from the folder
holding the input files.
"""

import logging
import sys
import warnings
warnings.filterwarnings("ignore", category=UserWarning)

from .config import BOUNDARY_FILE, OUTPUT_HTML, PARTNERS_CSV
from .enrich import enrich
from .errors import PartnerMapError
from .loader import load_inputs
from .map import build_map, save_map
from .mask import build_mask

logger = logging.getLogger("partner_map")


def run(partners_path=PARTNERS_CSV, boundary_path=BOUNDARY_FILE, output_path=OUTPUT_HTML):
    # 1) Load
    partners, boundary = load_inputs(partners_path, boundary_path)

    # 2) Popups, colors, icons
    partners = enrich(partners)
    for category, n in partners["category"].value_counts().sort_index().items():
        logger.info("  %-20s %d", category, n)

    # 3) Outside-the-state mask
    mask = build_mask(boundary)

    # 4) Map
    m = build_map(partners, boundary, mask)
    return save_map(m, output_path)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        out = run()
    except PartnerMapError as exc:
        logger.error("Map not built: %s", exc)
        return 1
    print(f" Wrote {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
