"""
Exceptions raised while building styles.

Every error aborts the current operation and carries enough context
(argument description, or surface and name) to diagnose the failure.
"""


class StyleError(Exception):
    """Base class for all style building errors."""


class InvalidArgument(StyleError, ValueError):
    """A builder was constructed or invoked with an invalid argument."""


class UnknownReference(StyleError, LookupError):
    """A rule generator dereferenced a color or font that is not registered."""

    def __init__(self, surface: str, name: str):
        self.surface = surface
        self.name = name
        kind = surface[:-1] if surface.endswith("s") else surface
        super().__init__(f"unknown {kind} name: {surface}.{name}")

    @property
    def reference(self) -> str:
        """Dotted reference, e.g. ``colors.land``."""
        return f"{self.surface}.{self.name}"
