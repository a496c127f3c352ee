"""
Builder configuration.

``BuilderConfig`` holds a builder's defaults: palette, fonts, endpoint URLs
and the color transformer. Each build merges the caller's overrides over a
deep copy of it, so the stored configuration is only ever changed through
the builder's registration methods.
"""

from collections.abc import Mapping
from copy import deepcopy
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional, Union

from .color_transformer import (
    ColorTransformer,
    ColorTransformerFunc,
    get_default_color_transformer,
)
from .errors import InvalidArgument
from .utils import deep_merge


TilesUrl = Union[str, List[str]]


@dataclass
class BuilderConfig:
    """Options of one style builder."""

    hide_labels: bool = False
    language: Optional[str] = None  # None, "de", "en", ...
    glyphs_url: Optional[str] = None
    sprite_url: Optional[str] = None
    tiles_url: Optional[TilesUrl] = None
    colors: Dict[str, Any] = field(default_factory=dict)
    fonts: Dict[str, Any] = field(default_factory=dict)
    color_transformer: ColorTransformerFunc = field(
        default_factory=get_default_color_transformer
    )
    source_name: Optional[str] = None

    @classmethod
    def option_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @property
    def language_suffix(self) -> str:
        return f"_{self.language}" if self.language else ""

    def to_dict(self) -> Dict[str, Any]:
        """Deep copy of all options as a plain dict."""
        return {f.name: deepcopy(getattr(self, f.name)) for f in fields(self)}

    def copy(self) -> "BuilderConfig":
        return BuilderConfig(**self.to_dict())

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "BuilderConfig":
        """Return a new config with ``overrides`` deep-merged over this one.

        ``colors`` and ``fonts`` merge key by key, lists are replaced and
        every other option is overridden. ``color_transformer`` accepts a
        callable or a mapping of ``ColorTransformer`` parameters, which are
        layered over the stored transformer when that is a ``ColorTransformer``.

        Raises:
            InvalidArgument: If ``overrides`` names an unknown option, or
                ``colors``/``fonts`` is not a mapping.
        """
        overrides = dict(overrides or {})
        unknown = sorted(set(overrides) - set(self.option_names()))
        if unknown:
            raise InvalidArgument(f"unknown style options: {', '.join(unknown)}")
        for name in ("colors", "fonts"):
            if name in overrides and not isinstance(overrides[name], Mapping):
                raise InvalidArgument(
                    f"{name} must be a mapping, got {overrides[name]!r}"
                )

        merged = deep_merge(self.to_dict(), overrides)

        transformer = merged["color_transformer"]
        if transformer is None:
            merged["color_transformer"] = get_default_color_transformer()
        elif isinstance(transformer, Mapping):
            params = dict(transformer)
            if isinstance(self.color_transformer, ColorTransformer):
                params = {**asdict(self.color_transformer), **params}
            try:
                merged["color_transformer"] = ColorTransformer(**params)
            except TypeError as e:
                raise InvalidArgument(f"invalid color transformer options: {e}") from e
        elif not callable(transformer):
            raise InvalidArgument(
                f"color_transformer must be callable or a mapping, got {transformer!r}"
            )

        return BuilderConfig(**merged)
