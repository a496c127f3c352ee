#!/usr/bin/env python3
"""Tests for lazy color and font resolution."""
import pytest

from versatiles_style.color import Color
from versatiles_style.errors import StyleError, UnknownReference
from versatiles_style.resolver import Resolver, color_resolver, font_resolver


class TestColorResolver:
    """Tests for the colors surface."""

    def test_attribute_access_returns_color(self):
        colors = color_resolver({"land": "#ffffff"})
        assert isinstance(colors.land, Color)
        assert colors.land.hex() == "#ffffff"

    def test_item_and_get_access(self):
        colors = color_resolver({"land": "#ffffff"})
        assert colors["land"] == colors.get("land") == Color(255, 255, 255)

    def test_each_lookup_returns_fresh_value(self):
        colors = color_resolver({"land": "#ffffff"})
        assert colors.land.darken(0.5).hex() != colors.land.hex()

    def test_unknown_color_raises(self):
        colors = color_resolver({"land": "#ffffff"})
        with pytest.raises(UnknownReference) as exc_info:
            colors.sea
        assert exc_info.value.surface == "colors"
        assert exc_info.value.name == "sea"
        assert exc_info.value.reference == "colors.sea"
        assert str(exc_info.value) == "unknown color name: colors.sea"

    def test_empty_value_counts_as_unknown(self):
        with pytest.raises(UnknownReference):
            color_resolver({"land": ""}).get("land")

    def test_invalid_values_fail_only_when_dereferenced(self):
        colors = color_resolver({"land": "#ffffff", "broken": "not-a-color"})
        assert colors.land.hex() == "#ffffff"
        with pytest.raises(ValueError):
            colors.broken

    def test_resolver_reflects_map_at_lookup_time(self):
        values = {}
        colors = color_resolver(values)
        values["late"] = "#000000"
        assert colors.late.hex() == "#000000"


class TestFontResolver:
    """Tests for the fonts surface."""

    def test_returns_value_verbatim(self):
        stack = ["Noto Sans Regular"]
        fonts = font_resolver({"regular": stack})
        assert fonts.regular is stack

    def test_unknown_font_raises(self):
        fonts = font_resolver({})
        with pytest.raises(UnknownReference, match=r"unknown font name: fonts\.title"):
            fonts.title


class TestResolver:
    """Tests for generic resolver behavior."""

    def test_error_is_lookup_and_style_error(self):
        with pytest.raises(LookupError):
            Resolver("fonts", {}).get("x")
        with pytest.raises(StyleError):
            Resolver("fonts", {}).get("x")

    def test_private_attributes_are_not_resolved(self):
        with pytest.raises(AttributeError):
            Resolver("fonts", {})._missing

    def test_contains(self):
        fonts = Resolver("fonts", {"bold": "Noto Sans Bold"})
        assert "bold" in fonts
        assert "italic" not in fonts

    def test_contains_ignores_empty_values(self):
        fonts = Resolver("fonts", {"blank": "", "missing": None})
        assert "blank" not in fonts
        assert "missing" not in fonts

    def test_token_named_surface_resolves_by_attribute(self):
        colors = color_resolver({"surface": "#ffffff"})
        assert colors.surface.hex() == "#ffffff"

    def test_token_named_get_resolves_by_item(self):
        colors = color_resolver({"get": "#000000"})
        assert colors["get"].hex() == "#000000"
        assert colors.get("get").hex() == "#000000"
