"""Runtime switches that shape how user search matches terms."""
from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings

FULL_COMPLEXITY_SETTING = "user_search_with_full_complexity"
GIST_SETTING = "user_search_with_gist"


@dataclass(frozen=True)
class UserSearchConfig:
    """A consistent snapshot of the search switches.

    ``full_complexity`` enables matching on SIS identifiers, email channels and
    numeric ids in addition to names. ``substring_mode`` (the "gist" switch)
    matches names anywhere in the string instead of only as a prefix.
    """

    full_complexity: bool = False
    substring_mode: bool = False

    @classmethod
    def current(cls) -> "UserSearchConfig":
        """Read both switches at once from the Setting table."""

        from .models import Setting

        flags = Setting.get_flags(
            {
                FULL_COMPLEXITY_SETTING: settings.USER_SEARCH_WITH_FULL_COMPLEXITY,
                GIST_SETTING: settings.USER_SEARCH_WITH_GIST,
            }
        )
        return cls(full_complexity=flags[FULL_COMPLEXITY_SETTING], substring_mode=flags[GIST_SETTING])
