"""
Label Placement Demo
====================

Demonstrates polylabel_core usage: load a label job from YAML, find the
pole of inaccessibility of each polygon and print where a label fits.

Usage:
    python run_polylabel.py [config/polygons_example.yaml]
"""

import logging
import sys

from polylabel_core import (
    LabelJobConfig,
    LabelPlacement,
    PoleSearch,
    create_logger,
)

CONFIG_PATH = "./config/polygons_example.yaml"


def main():
    """Run every polygon of the example job."""

    # 1. Load job (polygons + search settings)
    config = LabelJobConfig.from_yaml(sys.argv[1] if len(sys.argv) > 1 else CONFIG_PATH)

    # 2. Structured logger shared by all searches
    logger = create_logger("search", level=logging.INFO)

    for polygon in config.polygons:
        # 3. Search (per-polygon precision override applied)
        search = PoleSearch(config.search_config_for(polygon), logger=logger)
        result = search.find(polygon.coordinates)

        # 4. Placement for drawing code (sv.Point anchor + circle diameter)
        placement = LabelPlacement.from_result(result, label_id=polygon.polygon_id)

        print(
            f"{polygon.polygon_id}: pole=({placement.x:.3f}, {placement.y:.3f}) "
            f"radius={placement.radius:.3f} diameter={placement.diameter:.3f} "
            f"probes={result.probes}"
        )


if __name__ == "__main__":
    main()
