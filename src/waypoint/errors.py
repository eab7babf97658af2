"""Waypoint exception hierarchy.

Every error raised by the package derives from ``WaypointError`` so
callers can catch the whole family with one ``except`` clause.
"""

from dataclasses import dataclass


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when a ``RouteConfig`` cannot produce a usable matcher.

    Surfaces at ``Route`` construction, never at match time.
    """


@dataclass(frozen=True, slots=True)
class RouteCompileError(WaypointError):
    """``Route.compile()`` was called with parameters that don't fit the template.

    Abstract: only the subclasses below are raised. Catch this type to
    handle every compile failure at once. Always a call-site mistake: the
    same arguments fail the same way on every call.
    """

    format: str

    def __str__(self) -> str:
        return f"cannot compile url: {self.format}"


class UnexpectedParametersError(RouteCompileError):
    """A static route was given a parameter mapping."""

    def __str__(self) -> str:
        return f"expected no parameters for static url: {self.format}"


class MissingParametersError(RouteCompileError):
    """A dynamic route was compiled without any parameter mapping."""

    def __str__(self) -> str:
        return f"expected parameters for non-static url: {self.format}"


@dataclass(frozen=True, slots=True)
class MissingParameterError(RouteCompileError):
    """The mapping has no usable value for one placeholder."""

    name: str

    def __str__(self) -> str:
        return f"expected {{{self.name}}} in parameters for url: {self.format}"
