"""
Style builder: palette registration, rule generation and style assembly.

Usage:
    maker = StyleMaker("basic")
    maker.add_colors({"land": "#f8f4e8", "water": "#beddf3"})
    maker.add_fonts({"regular": ["Noto Sans Regular"]})
    maker.set_layer_style(lambda colors, fonts, language_suffix: {
        "land-park": {"paint": {"fill-color": colors.land.darken(0.1).hex()}},
    })
    basic = maker.finish()

    style = basic(language="de", tiles_url="https://example.org/{z}/{x}/{y}")

A build runs these steps on a fresh copy of the builder's options:
    1. Merge the call's overrides over the stored options
    2. Transform every registered color
    3. Call the rule generator with color/font resolvers
    4. Overlay the rules onto the layer skeletons (optionally hiding labels)
    5. Assemble the style document from the template
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence, Union

from .config import BuilderConfig
from .color_transformer import transform_colors
from .decorator import Layer, RuleSet, decorate
from .errors import InvalidArgument
from .resolver import Resolver, color_resolver, font_resolver
from .shortbread_layers import get_layers
from .template import STYLE_TEMPLATE
from .utils import deep_clone

logger = logging.getLogger(__name__)

STYLE_ID_PREFIX = "versatiles-"

LayerSupplier = Union[Callable[..., Sequence[Layer]], Sequence[Layer]]


class RuleGenerator(Protocol):
    """Computes per-layer rules from resolved colors and fonts."""

    def __call__(self, colors: Resolver, fonts: Resolver,
                 language_suffix: str) -> RuleSet:
        ...


def generate_rules(generator: Optional[RuleGenerator], options: BuilderConfig) -> RuleSet:
    """Invoke ``generator`` once against ``options``.

    Errors raised while resolving colors or fonts propagate unchanged.
    """
    if generator is None:
        logger.debug("no layer style registered, using empty rule set")
        return {}
    rules = generator(
        colors=color_resolver(options.colors),
        fonts=font_resolver(options.fonts),
        language_suffix=options.language_suffix,
    )
    return rules or {}


def assemble_style(template: Mapping[str, Any], layers: List[Layer],
                   options: BuilderConfig, style_id: str) -> Dict[str, Any]:
    """
    Build the final style document from a copy of ``template``.

    Args:
        template: Base document with a ``sources`` mapping (not modified)
        layers: Decorated layers, used as-is
        options: Merged invocation options
        style_id: Builder id, prefixed to form the style id and name

    Returns:
        New style document
    """
    style = deep_clone(template)
    sources = style.setdefault("sources", {})

    source_name = options.source_name
    if not sources and not source_name:
        raise InvalidArgument("template has no sources and no source_name was given")
    if not source_name:
        source_name = next(iter(sources))

    style["layers"] = layers
    for layer in layers:
        if layer.get("type") != "background":
            layer["source"] = source_name

    style["id"] = STYLE_ID_PREFIX + style_id
    style["name"] = STYLE_ID_PREFIX + style_id

    if options.glyphs_url:
        style["glyphs"] = options.glyphs_url
    if options.sprite_url:
        style["sprite"] = options.sprite_url
    if options.tiles_url:
        tiles = options.tiles_url
        if isinstance(tiles, str):
            tiles = [tiles]
        sources.setdefault(source_name, {})["tiles"] = list(tiles)

    return style


class StyleMaker:
    """Accumulates colors, fonts and a rule generator for one named style."""

    def __init__(self, style_id: str, *, template: Optional[Mapping[str, Any]] = None,
                 layers: Optional[LayerSupplier] = None, **defaults: Any):
        """
        Args:
            style_id: Non-empty identifier, e.g. "colorful"
            template: Base document (default: Shortbread template)
            layers: Skeleton list, or callable taking ``language_suffix``
            **defaults: Initial ``BuilderConfig`` options

        Raises:
            InvalidArgument: If ``style_id`` is missing or empty, or a
                default names an unknown option.
        """
        if not style_id or not isinstance(style_id, str):
            raise InvalidArgument("every style should have an id")

        self._id = style_id
        self._template = template if template is not None else STYLE_TEMPLATE
        self._layers = layers if layers is not None else get_layers
        self._options = BuilderConfig().merged(defaults)
        self.layer_style_generator: Optional[RuleGenerator] = None

    @property
    def id(self) -> str:
        return self._id

    def add_colors(self, colors: Mapping[str, Any]) -> None:
        """Register colors; later names overwrite earlier ones."""
        self._options.colors.update(colors)

    def add_fonts(self, fonts: Mapping[str, Any]) -> None:
        """Register fonts; later names overwrite earlier ones."""
        self._options.fonts.update(fonts)

    def set_layer_style(self, generator: RuleGenerator) -> None:
        """Set the rule generator used by every later build."""
        self.layer_style_generator = generator

    def get_options(self) -> BuilderConfig:
        """Deep copy of the current options."""
        return self._options.copy()

    def _skeletons(self, language_suffix: str) -> Sequence[Layer]:
        if callable(self._layers):
            return self._layers(language_suffix=language_suffix)
        return self._layers

    def make(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Build a fresh style document."""
        options = self._options.merged(overrides)
        logger.debug("building style %r (language=%r, hide_labels=%r)",
                     self._id, options.language, options.hide_labels)

        transform_colors(options.colors, options.color_transformer)
        rules = generate_rules(self.layer_style_generator, options)

        layers = decorate(self._skeletons(options.language_suffix), rules,
                          hide_labels=options.hide_labels)

        return assemble_style(self._template, layers, options, self._id)

    def finish(self) -> "StyleFactory":
        """Return the public build entry point for this style."""
        return StyleFactory(self)


class StyleFactory:
    """Callable returned by ``StyleMaker.finish``.

    ``factory()`` or ``factory.build()`` produces a new style document;
    options may be given as a mapping, as keywords, or both (keywords win).
    """

    def __init__(self, maker: StyleMaker):
        self._maker = maker

    @property
    def id(self) -> str:
        return self._maker.id

    @property
    def options(self) -> BuilderConfig:
        """Deep copy of the builder's current options."""
        return self._maker.get_options()

    def build(self, overrides: Optional[Mapping[str, Any]] = None,
              **options: Any) -> Dict[str, Any]:
        if options:
            overrides = {**(overrides or {}), **options}
        return self._maker.make(overrides)

    __call__ = build

    def __repr__(self) -> str:
        return f"StyleFactory({self.id!r})"
