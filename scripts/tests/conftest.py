#!/usr/bin/env python3
"""Pytest configuration and shared fixtures."""
import sys
import tempfile
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from versatiles_style.style_maker import StyleMaker


@pytest.fixture
def basic_template():
    """Minimal style template with a single vector source."""
    return {
        "version": 8,
        "sources": {
            "shortbread": {
                "type": "vector",
                "url": "https://example.org/tiles.json",
            }
        },
        "layers": [],
    }


@pytest.fixture
def basic_skeletons():
    """Two fill layers, one with a baseline color."""
    return [
        {"id": "landLayer", "type": "fill"},
        {"id": "water", "type": "fill", "fillColor": "#0000ff"},
    ]


@pytest.fixture
def mixed_skeletons():
    """Background, fill, line and symbol layers in render order."""
    return [
        {"id": "background", "type": "background"},
        {"id": "land", "type": "fill", "paint": {"fill-color": "#eeeeee", "fill-opacity": 1}},
        {"id": "street", "type": "line", "paint": {"line-width": 2}},
        {"id": "label-street", "type": "symbol", "layout": {"text-field": ["get", "name"]}},
        {"id": "building", "type": "fill"},
        {"id": "label-place", "type": "symbol"},
    ]


@pytest.fixture
def basic_maker(basic_template, basic_skeletons):
    """The 'basic' builder with one color and a generator that uses it."""
    maker = StyleMaker("basic", template=basic_template, layers=basic_skeletons)
    maker.add_colors({"land": "#ffffff"})
    maker.set_layer_style(
        lambda colors, **_: {"landLayer": {"fillColor": colors.land.hex()}}
    )
    return maker


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
