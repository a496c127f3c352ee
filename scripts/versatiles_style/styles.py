"""
Bundled styles.

- colorful: full color OpenStreetMap style
- graybeard: colorful palette, fully desaturated

Each style is a finished ``StyleFactory``:

    from versatiles_style.styles import colorful
    style = colorful(language="en")
"""

from typing import Any, Dict

from .errors import InvalidArgument
from .resolver import Resolver
from .style_maker import StyleFactory, StyleMaker


COLORS = {
    # Base
    "land": "#f9f4ee",
    "background": "#f9f4ee",

    # Landcover
    "glacier": "#ffffff",
    "wood": "#66aa44",
    "grass": "#d9d9a5",
    "park": "#d9d9a5",
    "agriculture": "#f0e7d1",
    "residential": "#eae6e1",
    "commercial": "#f7deed",
    "industrial": "#fff4c2",
    "leisure": "#e7edde",

    # Water
    "water": "#beddf3",

    # Buildings
    "building": "#dfdbd7",

    # Streets
    "street": "#ffffff",
    "street_bg": "#cfcdca",
    "motorway": "#ffcc88",
    "motorway_bg": "#e9ac77",
    "trunk": "#ffeeaa",
    "trunk_bg": "#e9ac77",
    "rail": "#b1bbc4",

    # Boundaries
    "boundary": "#a6a6c8",

    # Labels
    "label": "#333344",
    "label_halo": "#ffffff",
}

FONTS = {
    "regular": ["noto_sans_regular"],
    "bold": ["noto_sans_bold"],
}


def colorful_layer_style(colors: Resolver, fonts: Resolver,
                         language_suffix: str) -> Dict[str, Dict[str, Any]]:
    """Rules for the colorful palette."""
    street_width = ["interpolate", ["exponential", 1.6], ["zoom"], 12, 1, 20, 24]
    major_width = ["interpolate", ["exponential", 1.6], ["zoom"], 7, 1, 20, 30]

    rules: Dict[str, Dict[str, Any]] = {
        "background": {"paint": {"background-color": colors.background.hex()}},

        # Land
        "land-glacier": {"paint": {"fill-color": colors.glacier.hex()}},
        "land-forest": {"paint": {"fill-color": colors.wood.hex(), "fill-opacity": 0.1}},
        "land-grass": {"paint": {"fill-color": colors.grass.hex(), "fill-opacity": 0.3}},
        "land-park": {"paint": {"fill-color": colors.park.hex(), "fill-opacity": 0.5}},
        "land-agriculture": {"paint": {"fill-color": colors.agriculture.hex()}},
        "land-residential": {"paint": {"fill-color": colors.residential.hex()}},
        "land-commercial": {"paint": {"fill-color": colors.commercial.hex(), "fill-opacity": 0.5}},
        "land-industrial": {"paint": {"fill-color": colors.industrial.hex(), "fill-opacity": 0.5}},
        "land-leisure": {"paint": {"fill-color": colors.leisure.hex()}},

        # Water
        "water-ocean": {"paint": {"fill-color": colors.water.hex()}},
        "water-area": {"paint": {"fill-color": colors.water.hex()}},
        "water-river": {"paint": {"line-color": colors.water.hex(), "line-width": 3}},
        "water-canal": {"paint": {"line-color": colors.water.hex(), "line-width": 2}},
        "water-stream": {"paint": {"line-color": colors.water.hex(), "line-width": 1}},

        # Buildings
        "building": {
            "paint": {
                "fill-color": colors.building.hex(),
                "fill-outline-color": colors.building.darken(0.1).hex(),
            }
        },

        # Streets
        "street-track": {"paint": {"line-color": colors.street_bg.hex(), "line-width": 1,
                                   "line-dasharray": [2, 2]}},
        "street-path": {"paint": {"line-color": colors.street.hex(), "line-width": 1}},
        "street-service": {"paint": {"line-color": colors.street.hex(), "line-width": 1.5}},
        "street-residential": {"paint": {"line-color": colors.street.hex(),
                                         "line-width": street_width}},
        "street-tertiary": {"paint": {"line-color": colors.street.hex(),
                                      "line-width": street_width}},
        "street-secondary": {"paint": {"line-color": colors.trunk.lighten(0.05).hex(),
                                       "line-width": major_width}},
        "street-primary": {"paint": {"line-color": colors.trunk.hex(),
                                     "line-width": major_width}},
        "street-trunk": {"paint": {"line-color": colors.trunk.hex(),
                                   "line-width": major_width}},
        "street-motorway": {"paint": {"line-color": colors.motorway.hex(),
                                      "line-width": major_width}},
        "transport-rail": {"paint": {"line-color": colors.rail.hex(), "line-width": 1.5}},

        # Boundaries
        "boundary-state": {"paint": {"line-color": colors.boundary.fade(0.5).rgb_string(),
                                     "line-dasharray": [2, 1]}},
        "boundary-country": {"paint": {"line-color": colors.boundary.hex(), "line-width": 2}},
    }

    # Labels
    label_paint = {
        "text-color": colors.label.hex(),
        "text-halo-color": colors.label_halo.hex(),
        "text-halo-width": 2,
    }
    for layer_id, font, size in (
        ("label-street", fonts.regular, 12),
        ("label-water", fonts.regular, 12),
        ("label-place-village", fonts.regular, 13),
        ("label-place-town", fonts.regular, 15),
        ("label-place-city", fonts.bold, 18),
        ("label-place-capital", fonts.bold, 20),
    ):
        rules[layer_id] = {
            "layout": {"text-font": font, "text-size": size},
            "paint": dict(label_paint),
        }
    rules["label-water"]["paint"]["text-color"] = colors.water.darken(0.4).hex()

    return rules


def _colorful_maker(style_id: str, **defaults: Any) -> StyleMaker:
    maker = StyleMaker(style_id, **defaults)
    maker.add_colors(COLORS)
    maker.add_fonts(FONTS)
    maker.set_layer_style(colorful_layer_style)
    return maker


colorful = _colorful_maker("colorful").finish()
graybeard = _colorful_maker("graybeard", color_transformer={"saturate": -1}).finish()

STYLES: Dict[str, StyleFactory] = {
    "colorful": colorful,
    "graybeard": graybeard,
}


def get_style(name: str) -> StyleFactory:
    """Look up a bundled style by name.

    Raises:
        InvalidArgument: If no style with that name exists.
    """
    try:
        return STYLES[name]
    except KeyError:
        raise InvalidArgument(
            f"unknown style {name!r}, choose from: {', '.join(STYLES)}"
        ) from None
