"""
Layer skeletons for the Shortbread vector tile schema.

Skeletons carry everything a layer needs except its look: id, type,
source-layer, filter and zoom range, plus the text field for labels.
Colors, widths and fonts are added later by a style's rule generator.

Layers are returned in render order (bottom to top):
- Background
- Land use and landcover
- Water
- Buildings
- Streets and railways
- Boundaries
- Labels
"""

from typing import Any, Dict, List, Sequence


def _name_field(language_suffix: str) -> Any:
    """Text field that prefers the localized name and falls back to ``name``."""
    if not language_suffix:
        return ["get", "name"]
    return ["coalesce", ["get", f"name{language_suffix}"], ["get", "name"]]


def _kind_filter(kinds: Sequence[str]) -> List[Any]:
    return ["in", ["get", "kind"], ["literal", list(kinds)]]


def create_background_layers() -> List[Dict[str, Any]]:
    """Create the base background layer."""
    return [
        {
            "id": "background",
            "type": "background",
        }
    ]


def create_land_layers() -> List[Dict[str, Any]]:
    """Create land use and landcover fills."""
    kinds = {
        "land-glacier": ["glacier"],
        "land-forest": ["forest"],
        "land-grass": ["grass", "grassland", "meadow", "heath", "scrub"],
        "land-park": ["park", "garden", "village_green", "recreation_ground"],
        "land-agriculture": ["farmland", "farmyard", "orchard", "vineyard", "allotments"],
        "land-residential": ["residential"],
        "land-commercial": ["commercial", "retail"],
        "land-industrial": ["industrial", "quarry", "railway"],
        "land-leisure": ["pitch", "playground", "sports_centre", "stadium"],
    }
    return [
        {
            "id": layer_id,
            "type": "fill",
            "source-layer": "land",
            "filter": _kind_filter(layer_kinds),
        }
        for layer_id, layer_kinds in kinds.items()
    ]


def create_water_layers() -> List[Dict[str, Any]]:
    """Create ocean, inland water areas and waterways."""
    layers: List[Dict[str, Any]] = [
        {
            "id": "water-ocean",
            "type": "fill",
            "source-layer": "ocean",
        },
        {
            "id": "water-area",
            "type": "fill",
            "source-layer": "water_polygons",
            "filter": _kind_filter(["water", "river", "basin", "reservoir", "dock"]),
        },
    ]

    # Waterways (lines), widest last
    for kind, minzoom in (("stream", 14), ("canal", 12), ("river", 9)):
        layers.append({
            "id": f"water-{kind}",
            "type": "line",
            "source-layer": "water_lines",
            "filter": ["==", ["get", "kind"], kind],
            "minzoom": minzoom,
            "layout": {"line-cap": "round", "line-join": "round"},
        })

    return layers


def create_building_layers() -> List[Dict[str, Any]]:
    """Create building footprints."""
    return [
        {
            "id": "building",
            "type": "fill",
            "source-layer": "buildings",
            "minzoom": 14,
        }
    ]


def create_street_layers() -> List[Dict[str, Any]]:
    """Create streets from minor to major, then railways on top."""
    streets = [
        ("street-track", ["track"], 14),
        ("street-path", ["path", "footway", "cycleway", "steps", "pedestrian"], 14),
        ("street-service", ["service"], 14),
        ("street-residential", ["residential", "living_street", "unclassified"], 12),
        ("street-tertiary", ["tertiary"], 11),
        ("street-secondary", ["secondary"], 9),
        ("street-primary", ["primary"], 8),
        ("street-trunk", ["trunk"], 7),
        ("street-motorway", ["motorway"], 5),
    ]
    layers = [
        {
            "id": layer_id,
            "type": "line",
            "source-layer": "streets",
            "filter": _kind_filter(kinds),
            "minzoom": minzoom,
            "layout": {"line-cap": "round", "line-join": "round"},
        }
        for layer_id, kinds, minzoom in streets
    ]

    layers.append({
        "id": "transport-rail",
        "type": "line",
        "source-layer": "streets",
        "filter": _kind_filter(["rail", "light_rail", "subway", "tram"]),
        "minzoom": 8,
    })

    return layers


def create_boundary_layers() -> List[Dict[str, Any]]:
    """Create administrative boundaries (countries and states)."""
    return [
        {
            "id": "boundary-state",
            "type": "line",
            "source-layer": "boundaries",
            "filter": ["all", ["==", ["get", "admin_level"], 4],
                       ["!=", ["get", "maritime"], True]],
            "minzoom": 7,
            "layout": {"line-join": "round"},
        },
        {
            "id": "boundary-country",
            "type": "line",
            "source-layer": "boundaries",
            "filter": ["all", ["==", ["get", "admin_level"], 2],
                       ["!=", ["get", "maritime"], True]],
            "layout": {"line-join": "round"},
        },
    ]


def create_label_layers(language_suffix: str = "") -> List[Dict[str, Any]]:
    """Create symbol layers for street, water and place names."""
    name = _name_field(language_suffix)
    return [
        {
            "id": "label-street",
            "type": "symbol",
            "source-layer": "street_labels",
            "minzoom": 14,
            "layout": {
                "text-field": name,
                "symbol-placement": "line",
            },
        },
        {
            "id": "label-water",
            "type": "symbol",
            "source-layer": "water_lines_labels",
            "minzoom": 12,
            "layout": {
                "text-field": name,
                "symbol-placement": "line",
            },
        },
        {
            "id": "label-place-village",
            "type": "symbol",
            "source-layer": "place_labels",
            "filter": ["==", ["get", "kind"], "village"],
            "minzoom": 11,
            "layout": {"text-field": name},
        },
        {
            "id": "label-place-town",
            "type": "symbol",
            "source-layer": "place_labels",
            "filter": ["==", ["get", "kind"], "town"],
            "minzoom": 8,
            "layout": {"text-field": name},
        },
        {
            "id": "label-place-city",
            "type": "symbol",
            "source-layer": "place_labels",
            "filter": ["all", ["==", ["get", "kind"], "city"],
                       ["!", ["has", "capital"]]],
            "minzoom": 6,
            "layout": {"text-field": name},
        },
        {
            "id": "label-place-capital",
            "type": "symbol",
            "source-layer": "place_labels",
            "filter": ["all", ["==", ["get", "kind"], "city"], ["has", "capital"]],
            "minzoom": 4,
            "layout": {"text-field": name},
        },
    ]


def get_layers(language_suffix: str = "") -> List[Dict[str, Any]]:
    """
    Return all Shortbread layer skeletons in render order.

    Args:
        language_suffix: "" for local names, or e.g. "_de" for German labels

    Returns:
        New list of layer dicts (safe to modify)
    """
    layers: List[Dict[str, Any]] = []
    layers.extend(create_background_layers())
    layers.extend(create_land_layers())
    layers.extend(create_water_layers())
    layers.extend(create_building_layers())
    layers.extend(create_street_layers())
    layers.extend(create_boundary_layers())
    layers.extend(create_label_layers(language_suffix))
    return layers
