"""Waypoint: compile a path template into a matcher, parser and URL builder.

Basic usage::

    from waypoint import Route

    route = Route("/foo/{bar}/{baz}")

    route.match("/foo/abc/def")                 # True
    route.parse("/foo/abc/def")                 # {"bar": "abc", "baz": "def"}
    route.compile({"bar": "abc", "baz": "def"}) # "/foo/abc/def"
"""

from waypoint.config import RouteConfig
from waypoint.errors import (
    ConfigurationError,
    MissingParameterError,
    MissingParametersError,
    RouteCompileError,
    UnexpectedParametersError,
    WaypointError,
)
from waypoint.routing.route import Route
from waypoint.routing.template import PathSegment, parse_template

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "MissingParameterError",
    "MissingParametersError",
    "PathSegment",
    "Route",
    "RouteCompileError",
    "RouteConfig",
    "UnexpectedParametersError",
    "WaypointError",
    "parse_template",
]
