#!/usr/bin/env python3
"""Tests for the bundled styles and Shortbread layer skeletons."""
import pytest

from versatiles_style.color import Color
from versatiles_style.errors import InvalidArgument
from versatiles_style.shortbread_layers import get_layers
from versatiles_style.styles import STYLES, colorful, get_style, graybeard
from versatiles_style.template import SOURCE_NAME


class TestShortbreadLayers:
    """Tests for the layer skeleton library."""

    def test_ids_are_unique(self):
        ids = [layer["id"] for layer in get_layers()]
        assert len(ids) == len(set(ids))

    def test_background_first(self):
        layers = get_layers()
        assert layers[0] == {"id": "background", "type": "background"}

    def test_labels_on_top(self):
        types = [layer["type"] for layer in get_layers()]
        first_symbol = types.index("symbol")
        assert all(t == "symbol" for t in types[first_symbol:])

    def test_local_names_without_suffix(self):
        label = next(l for l in get_layers() if l["id"] == "label-street")
        assert label["layout"]["text-field"] == ["get", "name"]

    def test_localized_names_with_suffix(self):
        label = next(l for l in get_layers("_de") if l["id"] == "label-street")
        assert label["layout"]["text-field"] == [
            "coalesce", ["get", "name_de"], ["get", "name"]
        ]

    def test_each_call_returns_new_list(self):
        first = get_layers()
        first[0]["type"] = "changed"
        assert get_layers()[0]["type"] == "background"


class TestColorful:
    """Tests for the colorful style."""

    def test_identity(self):
        style = colorful()
        assert style["id"] == style["name"] == "versatiles-colorful"
        assert colorful.id == "colorful"

    def test_every_skeleton_is_styled(self):
        style = colorful()
        assert [l["id"] for l in style["layers"]] == [l["id"] for l in get_layers()]
        for layer in style["layers"]:
            assert "paint" in layer, layer["id"]

    def test_layers_use_default_source(self):
        style = colorful()
        assert SOURCE_NAME in style["sources"]
        for layer in style["layers"][1:]:
            assert layer["source"] == SOURCE_NAME

    def test_background_color(self):
        style = colorful()
        assert style["layers"][0]["paint"]["background-color"] == "#f9f4ee"

    def test_hide_labels(self):
        style = colorful(hide_labels=True)
        assert style["layers"]
        assert all(l["type"] != "symbol" for l in style["layers"])

    def test_language(self):
        style = colorful(language="en")
        label = next(l for l in style["layers"] if l["id"] == "label-place-city")
        assert label["layout"]["text-field"][1] == ["get", "name_en"]
        assert label["layout"]["text-font"] == ["noto_sans_bold"]

    def test_tiles_url(self):
        style = colorful(tiles_url="https://example.org/{z}/{x}/{y}")
        assert style["sources"][SOURCE_NAME]["tiles"] == ["https://example.org/{z}/{x}/{y}"]


class TestGraybeard:
    """Tests for the desaturated style."""

    def test_identity(self):
        assert graybeard()["id"] == "versatiles-graybeard"

    def test_colors_are_gray(self):
        style = graybeard()
        for layer in style["layers"]:
            for key, value in layer.get("paint", {}).items():
                if key.endswith("-color") and isinstance(value, str) and value.startswith("#"):
                    r, g, b = Color.parse(value).rgb()
                    assert r == g == b, (layer["id"], key, value)

    def test_palette_is_unchanged(self):
        graybeard()
        assert graybeard.options.colors["water"] == "#beddf3"


class TestRegistry:
    """Tests for style lookup."""

    def test_get_style(self):
        assert get_style("colorful") is colorful
        assert set(STYLES) == {"colorful", "graybeard"}

    def test_unknown_style(self):
        with pytest.raises(InvalidArgument, match="unknown style 'neon'"):
            get_style("neon")
