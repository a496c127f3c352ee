"""
Base MapLibre style document for Shortbread vector tiles.

Builders deep-clone this template for every build; it is never modified.
"""

from typing import Any, Dict

SOURCE_NAME = "versatiles-shortbread"

STYLE_TEMPLATE: Dict[str, Any] = {
    "version": 8,
    "name": "versatiles",
    "metadata": {
        "maputnik:renderer": "mlgljs",
        "license": "https://creativecommons.org/publicdomain/zero/1.0/",
    },
    "glyphs": "https://tiles.versatiles.org/assets/fonts/{fontstack}/{range}.pbf",
    "sprite": "https://tiles.versatiles.org/assets/sprites/sprites",
    "sources": {
        SOURCE_NAME: {
            "type": "vector",
            "tilejson": "3.0.0",
            "scheme": "xyz",
            "attribution": "&copy; <a href=\"https://www.openstreetmap.org/copyright\">"
                           "OpenStreetMap</a> contributors",
            "tiles": ["https://tiles.versatiles.org/tiles/osm/{z}/{x}/{y}"],
            "bounds": [-180, -85.0511287798066, 180, 85.0511287798066],
            "minzoom": 0,
            "maxzoom": 14,
        }
    },
    "layers": [],
}
