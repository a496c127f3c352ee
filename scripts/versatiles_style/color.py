"""
Color values for style rule generators.

Rule generators receive ``Color`` objects when they look up a named color,
so they can derive shades before serializing them into layer paint
properties:

    fill_color = colors.land.darken(0.1).hex()

Parsing is delegated to Pillow's ImageColor, which understands hex
notation (#rgb, #rgba, #rrggbb, #rrggbbaa), rgb()/rgba()/hsl()/hsv()
functions and CSS color names. HSL math uses colorsys.
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass, replace
from typing import Tuple, Union

from PIL import ImageColor


ColorLike = Union["Color", str, tuple]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Color:
    """An sRGB color with alpha.

    Channels are floats in 0-255, alpha is 0-1. Instances are immutable;
    every operation returns a new color.
    """

    r: float
    g: float
    b: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _clamp(float(self.r), 0.0, 255.0))
        object.__setattr__(self, "g", _clamp(float(self.g), 0.0, 255.0))
        object.__setattr__(self, "b", _clamp(float(self.b), 0.0, 255.0))
        object.__setattr__(self, "alpha", _clamp(float(self.alpha), 0.0, 1.0))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, value: ColorLike) -> "Color":
        """Parse a color string, RGB(A) tuple or ``Color``.

        Raises:
            ValueError: If the value is not a recognizable color.
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, tuple):
            if len(value) == 3:
                return cls(*value)
            if len(value) == 4:
                r, g, b, a = value
                return cls(r, g, b, a)
            raise ValueError(f"color tuple must have 3 or 4 items: {value!r}")
        if not isinstance(value, str):
            raise ValueError(f"unsupported color value: {value!r}")

        channels = ImageColor.getrgb(value.strip())
        if len(channels) == 4:
            r, g, b, a = channels
            return cls(r, g, b, a / 255)
        return cls(*channels)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> "Color":
        return cls(r, g, b, alpha)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, alpha: float = 1.0) -> "Color":
        """Build a color from hue (degrees), saturation and lightness (0-100)."""
        r, g, b = colorsys.hls_to_rgb((h % 360) / 360, _clamp(l, 0, 100) / 100,
                                      _clamp(s, 0, 100) / 100)
        return cls(r * 255, g * 255, b * 255, alpha)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def rgb(self) -> Tuple[int, int, int]:
        return (round(self.r), round(self.g), round(self.b))

    def hex(self) -> str:
        """``#rrggbb``, alpha is dropped."""
        return "#{:02x}{:02x}{:02x}".format(*self.rgb())

    def hexa(self) -> str:
        """``#rrggbbaa``."""
        return self.hex() + "{:02x}".format(round(self.alpha * 255))

    def rgb_string(self) -> str:
        """CSS ``rgb()`` or ``rgba()`` notation."""
        r, g, b = self.rgb()
        if self.alpha >= 1:
            return f"rgb({r},{g},{b})"
        return f"rgba({r},{g},{b},{round(self.alpha, 3):g})"

    def hsl(self) -> Tuple[float, float, float]:
        """Hue in degrees, saturation and lightness in percent."""
        h, l, s = colorsys.rgb_to_hls(self.r / 255, self.g / 255, self.b / 255)
        return (h * 360, s * 100, l * 100)

    def __str__(self) -> str:
        return self.hex() if self.alpha >= 1 else self.rgb_string()

    # ------------------------------------------------------------------
    # Manipulation
    # ------------------------------------------------------------------

    def _with_hsl(self, h: float, s: float, l: float) -> "Color":
        return Color.from_hsl(h, s, l, self.alpha)

    def lighten(self, ratio: float) -> "Color":
        h, s, l = self.hsl()
        return self._with_hsl(h, s, l + l * ratio)

    def darken(self, ratio: float) -> "Color":
        h, s, l = self.hsl()
        return self._with_hsl(h, s, l - l * ratio)

    def saturate(self, ratio: float) -> "Color":
        h, s, l = self.hsl()
        return self._with_hsl(h, s + s * ratio, l)

    def desaturate(self, ratio: float) -> "Color":
        return self.saturate(-ratio)

    def rotate(self, degrees: float) -> "Color":
        """Rotate the hue."""
        h, s, l = self.hsl()
        return self._with_hsl(h + degrees, s, l)

    def lightness(self, value: float) -> "Color":
        """Return a copy with the given HSL lightness (0-100)."""
        h, s, _ = self.hsl()
        return self._with_hsl(h, s, value)

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, alpha=alpha)

    def fade(self, ratio: float) -> "Color":
        return self.with_alpha(self.alpha - self.alpha * ratio)

    def opaquer(self, ratio: float) -> "Color":
        return self.with_alpha(self.alpha + self.alpha * ratio)

    def grayscale(self) -> "Color":
        # Rec. 601 luma, same weights as PIL's "L" conversion
        value = self.r * 0.299 + self.g * 0.587 + self.b * 0.114
        return Color(value, value, value, self.alpha)

    def negate(self) -> "Color":
        return Color(255 - self.r, 255 - self.g, 255 - self.b, self.alpha)

    def mix(self, other: ColorLike, weight: float = 0.5) -> "Color":
        """Blend towards ``other``; ``weight`` 0 keeps self, 1 gives other."""
        other = Color.parse(other)
        w = _clamp(weight, 0.0, 1.0)
        return Color(
            self.r + (other.r - self.r) * w,
            self.g + (other.g - self.g) * w,
            self.b + (other.b - self.b) * w,
            self.alpha + (other.alpha - self.alpha) * w,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def luminosity(self) -> float:
        """WCAG relative luminance (0-1)."""

        def channel(c: float) -> float:
            c = c / 255
            return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4

        return 0.2126 * channel(self.r) + 0.7152 * channel(self.g) + 0.0722 * channel(self.b)

    def is_dark(self) -> bool:
        """YIQ brightness below the midpoint."""
        return (self.r * 299 + self.g * 587 + self.b * 114) / 1000 < 128
