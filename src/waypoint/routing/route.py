"""Route: a path template compiled once, then matched, parsed and compiled."""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from waypoint.config import RouteConfig
from waypoint.errors import (
    ConfigurationError,
    MissingParameterError,
    MissingParametersError,
    UnexpectedParametersError,
)
from waypoint.routing.params import param_value
from waypoint.routing.template import PathSegment, build_pattern, parse_template

logger = logging.getLogger("waypoint.routing")


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen, compiled route template.

    Usage::

        route = Route("/users/{id}")
        route.match("/users/42")         # True
        route.parse("/users/42")         # {"id": "42"}
        route.compile({"id": "42"})      # "/users/42"

    Only ``format`` and ``config`` are constructor arguments; everything
    else is derived from them in ``__post_init__`` and never changes.
    Instances hold no mutable state and may be shared across threads.
    """

    format: str
    config: RouteConfig = field(default_factory=RouteConfig)
    segments: tuple[PathSegment, ...] = field(init=False, repr=False, compare=False)
    param_names: tuple[str, ...] = field(init=False, repr=False, compare=False)
    is_static: bool = field(init=False, repr=False, compare=False)
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        segments = parse_template(self.format)
        param_names = tuple(s.param_name for s in segments if s.is_param and s.param_name)
        source = build_pattern(segments, escape_literals=self.config.escape_literals)

        try:
            regex = re.compile(source)
        except re.error as exc:
            msg = f"Route {self.format!r} does not compile to a valid pattern: {exc}"
            raise ConfigurationError(msg) from exc

        # Capture groups align 1:1 with placeholders; groups in raw
        # literal text would shift every value.
        if regex.groups != len(param_names):
            msg = (
                f"Route {self.format!r} compiles to {regex.groups} capture groups "
                f"for {len(param_names)} placeholders. "
                "Escape parentheses in literal text or keep escape_literals on."
            )
            raise ConfigurationError(msg)

        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "param_names", param_names)
        object.__setattr__(self, "is_static", not param_names)
        object.__setattr__(self, "regex", regex)
        logger.debug("Compiled route %r -> %s", self.format, regex.pattern)

    def match(self, path: str) -> bool:
        """Return ``True`` if the whole of *path* matches the template."""
        return self.regex.fullmatch(path) is not None

    def parse(self, path: str) -> dict[str, str] | None:
        """Extract placeholder values from *path*.

        Returns ``None`` when the path does not match. A matching static
        route yields an empty dict. When a name repeats in the template,
        the value captured at its last occurrence wins.
        """
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        return dict(zip(self.param_names, m.groups(), strict=True))

    def compile(self, params: Mapping[str, str] | None = None) -> str:
        """Build a concrete path by substituting *params* into the template.

        Static routes take no parameters and return ``format`` unchanged.
        Dynamic routes need a mapping with a non-empty value for every
        placeholder.

        Raises ``UnexpectedParametersError`` if a static route receives a
        mapping (even an empty one).
        Raises ``MissingParametersError`` if a dynamic route receives none.
        Raises ``MissingParameterError`` naming the first placeholder whose
        value is absent or empty.

        For dynamic routes with unique placeholder names this inverts
        ``parse``: ``compile(parse(path)) == path``. Static routes reject the
        ``{}`` that ``parse`` returns, and repeated names compile every
        occurrence from the single surviving value.
        """
        if self.is_static:
            if params is not None:
                logger.debug("Rejected parameters for static route %r", self.format)
                raise UnexpectedParametersError(self.format)
            return self.format

        if params is None:
            logger.debug("No parameters for dynamic route %r", self.format)
            raise MissingParametersError(self.format)

        parts: list[str] = []
        for seg in self.segments:
            if not seg.is_param:
                parts.append(seg.value)
                continue
            name = seg.param_name or ""
            value = param_value(params, name)
            if value is None:
                logger.debug("Missing parameter {%s} for route %r", name, self.format)
                raise MissingParameterError(self.format, name)
            parts.append(value)
        return "".join(parts)
