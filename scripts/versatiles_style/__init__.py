"""
VersaTiles Style Builder

Generates MapLibre style documents for Shortbread vector tiles:
- Named color palettes and fonts, resolved lazily by rule generators
- Palette-wide color transformations (desaturate, tint, rotate, ...)
- Rules overlaid onto a library of layer skeletons by layer id
- Caller-selected tile, glyph and sprite endpoints

Usage:
    # Generate a bundled style
    python -m versatiles_style.cli generate colorful style.json --language de

    # List styles
    python -m versatiles_style.cli list
"""

from .color import Color
from .color_transformer import ColorTransformer, get_default_color_transformer, transform_colors
from .config import BuilderConfig
from .decorator import decorate
from .errors import InvalidArgument, StyleError, UnknownReference
from .resolver import Resolver
from .shortbread_layers import get_layers
from .style_maker import StyleFactory, StyleMaker, assemble_style
from .template import STYLE_TEMPLATE
from .utils import deep_clone, deep_merge

__all__ = [
    # Builder API
    "StyleMaker",
    "StyleFactory",
    "BuilderConfig",
    "Resolver",
    # Engine
    "decorate",
    "assemble_style",
    "transform_colors",
    "deep_clone",
    "deep_merge",
    # Colors
    "Color",
    "ColorTransformer",
    "get_default_color_transformer",
    # Shortbread
    "get_layers",
    "STYLE_TEMPLATE",
    # Errors
    "StyleError",
    "InvalidArgument",
    "UnknownReference",
]
__version__ = "0.1.0"
