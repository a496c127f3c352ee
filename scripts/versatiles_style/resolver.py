"""
Named color and font lookup for rule generators.

A ``Resolver`` wraps one option map (colors or fonts). Lookups are lazy:
nothing is checked until a generator dereferences a name, so a generator
only needs the tokens it actually uses to be registered.

    colors.land          # attribute access
    colors["land"]       # item access
    colors.get("land")   # explicit

Attribute access reaches every registered name except ``get``, which is
the lookup method itself; use ``colors["get"]`` for a token with that name.
"""

from typing import Any, Callable, Mapping, Optional

from .color import Color
from .errors import UnknownReference


class Resolver:
    """Read-only view over a name -> value map that fails loudly on misses."""

    def __init__(self, surface: str, values: Mapping[str, Any],
                 convert: Optional[Callable[[Any], Any]] = None):
        self._surface = surface
        self._values = values
        self._convert = convert

    def get(self, name: str) -> Any:
        """Resolve ``name``.

        Raises:
            UnknownReference: If ``name`` is not registered (or empty).
        """
        if not self._is_registered(name):
            raise UnknownReference(self._surface, name)
        value = self._values[name]
        if self._convert is not None:
            return self._convert(value)
        return value

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return self._is_registered(name)

    def _is_registered(self, name: object) -> bool:
        value = self._values.get(name)
        return value is not None and value != ""

    def __repr__(self) -> str:
        return f"Resolver({self._surface!r}, {sorted(self._values)!r})"


def color_resolver(colors: Mapping[str, Any]) -> Resolver:
    """Resolver returning parsed ``Color`` objects."""
    return Resolver("colors", colors, Color.parse)


def font_resolver(fonts: Mapping[str, Any]) -> Resolver:
    """Resolver returning font values verbatim."""
    return Resolver("fonts", fonts)
