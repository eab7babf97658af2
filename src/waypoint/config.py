"""Route configuration.

RouteConfig is a frozen dataclass: immutable after creation, hashable,
shared freely between routes.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """Options applied when a template is compiled into a matcher.

    The defaults suit URL paths. Override what you need::

        config = RouteConfig(escape_literals=False)
        route = Route("/v1.{ext}", config)
    """

    # Escape regex metacharacters in literal text ("." matches only ".")
    escape_literals: bool = True
