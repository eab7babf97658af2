"""Placeholder grammar and parameter presence rules."""

import re
from collections.abc import Mapping

# ``{`` + one or more chars that are neither brace + ``}``
PLACEHOLDER = re.compile(r"\{([^{}]+)\}")

# Default capture for a placeholder: one or more non-separator chars
PARAM_PATTERN = r"[^/]+"


def param_value(params: Mapping[str, str], name: str) -> str | None:
    """Return the value supplied for *name*, or ``None`` if it counts as missing.

    Absent keys and falsy values (``""``, ``None``) are both missing.
    """
    value = params.get(name)
    if not value:
        return None
    return value
