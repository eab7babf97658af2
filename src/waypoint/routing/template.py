"""Template tokenising.

Splits a path template into literal and placeholder segments. The
result is the single source every ``Route`` operation reads from.
"""

import re
from dataclasses import dataclass

from waypoint.routing.params import PARAM_PATTERN, PLACEHOLDER


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed piece of a route template.

    Literal:  ``/users/``  (is_param=False)
    Param:    ``{id}``     (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


def parse_template(format: str) -> tuple[PathSegment, ...]:
    """Parse a route template into segments.

    Examples::

        "/users"            -> (PathSegment("/users"),)
        "/users/{id}"       -> (PathSegment("/users/"), PathSegment("{id}", is_param=True, ...))
        "/{a}-{b}"          -> ("/", "{a}", "-", "{b}")
        "/{unclosed"        -> (PathSegment("/{unclosed"),)
    """
    segments: list[PathSegment] = []
    pos = 0
    for m in PLACEHOLDER.finditer(format):
        if m.start() > pos:
            segments.append(PathSegment(value=format[pos : m.start()]))
        segments.append(PathSegment(value=m.group(0), is_param=True, param_name=m.group(1)))
        pos = m.end()
    if pos < len(format):
        segments.append(PathSegment(value=format[pos:]))
    return tuple(segments)


def build_pattern(
    segments: tuple[PathSegment, ...],
    *,
    escape_literals: bool = True,
) -> str:
    """Join segments into a regex source string (unanchored).

    Each placeholder becomes ``([^/]+)``. Literal text is escaped
    unless *escape_literals* is false, in which case it is spliced in raw.
    """
    parts: list[str] = []
    for seg in segments:
        if seg.is_param:
            parts.append(f"({PARAM_PATTERN})")
        elif escape_literals:
            parts.append(re.escape(seg.value))
        else:
            parts.append(seg.value)
    return "".join(parts)
