"""LIKE pattern construction for search terms."""
from __future__ import annotations

from typing import Optional, Union

from .config import UserSearchConfig

LIKE_ESCAPE = "\\"
LIKE_WILDCARDS = ("%", "_")


def escape_like(term: str) -> str:
    """Make ``%``, ``_`` and the escape character match literally."""

    escaped = term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
    for wildcard in LIKE_WILDCARDS:
        escaped = escaped.replace(wildcard, LIKE_ESCAPE + wildcard)
    return escaped


def build_pattern(term: Union[str, int], substring_mode: bool) -> str:
    pattern = escape_like(str(term).lower())
    if substring_mode:
        return f"%{pattern}%"
    return f"{pattern}%"


def like_string_for(term: Union[str, int], config: Optional[UserSearchConfig] = None) -> str:
    """Build the name pattern for ``term`` under the current gist switch."""

    if config is None:
        config = UserSearchConfig.current()
    return build_pattern(term, config.substring_mode)
