"""
Palette-wide color transformations.

A color transformer is any callable mapping one color value to another.
``transform_colors`` applies it to every registered color before rule
generators see them, so a whole style can be desaturated, tinted or
brightened without touching its rules.

``ColorTransformer`` is the configurable default. With all parameters at
their neutral values it is the identity and returns values unchanged.
The steps run in a fixed order:

    invert_brightness -> rotate -> saturate -> gamma -> contrast
    -> brightness -> tint

Applying a transformer twice is only idempotent if the transformer itself
is; callers that re-run builds get a fresh copy of the palette each time.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, MutableMapping

import numpy as np

from .color import Color


ColorTransformerFunc = Callable[[Any], Any]


@dataclass
class ColorTransformer:
    """Configurable transformer applied to each palette entry."""

    rotate: float = 0.0  # Hue rotation in degrees
    saturate: float = 0.0  # -1 gives grayscale, positive boosts saturation
    gamma: float = 1.0  # Per-channel power curve
    contrast: float = 1.0  # Scale around mid gray
    brightness: float = 0.0  # -1..1, added to every channel
    tint: float = 0.0  # 0..1, strength of the tint color
    tint_color: str = "#ff0000"
    invert_brightness: bool = False

    def is_identity(self) -> bool:
        return all(
            getattr(self, f.name) == f.default
            for f in fields(self)
            if f.name != "tint_color"
        )

    def __call__(self, value: Any) -> Any:
        if self.is_identity():
            return value

        color = Color.parse(value)

        if self.invert_brightness:
            _, _, l = color.hsl()
            color = color.lightness(100 - l)
        if self.rotate:
            color = color.rotate(self.rotate)
        if self.saturate:
            color = color.saturate(self.saturate)

        channels = np.array([color.r, color.g, color.b], dtype=np.float64) / 255.0
        if self.gamma != 1.0:
            channels = np.power(channels, self.gamma)
        if self.contrast != 1.0:
            channels = (channels - 0.5) * self.contrast + 0.5
        if self.brightness:
            channels = channels + self.brightness
        channels = np.clip(channels, 0.0, 1.0) * 255.0
        color = Color(*channels.tolist(), alpha=color.alpha)

        if self.tint:
            tint = Color.parse(self.tint_color)
            tint_h, tint_s, _ = tint.hsl()
            _, _, l = color.hsl()
            color = color.mix(Color.from_hsl(tint_h, tint_s, l, color.alpha), self.tint)

        return color.hex() if color.alpha >= 1 else color.hexa()


def get_default_color_transformer() -> ColorTransformer:
    """Return the neutral (identity) transformer."""
    return ColorTransformer()


def transform_colors(colors: MutableMapping[str, Any],
                     transformer: ColorTransformerFunc) -> None:
    """Replace every value in ``colors`` with ``transformer(value)`` in place."""
    for name, value in list(colors.items()):
        colors[name] = transformer(value)
