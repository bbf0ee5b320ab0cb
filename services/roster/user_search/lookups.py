"""ORM helpers for matching prebuilt LIKE patterns."""
from __future__ import annotations

from typing import Optional

from django.db.backends.signals import connection_created
from django.db.models import CharField, Func, Lookup, TextField
from django.dispatch import receiver

SQLITE_LOWER_FUNCTION = "unicode_lower"


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return None if value is None else value.lower()


@receiver(connection_created)
def register_sqlite_functions(sender, connection, **kwargs) -> None:
    # SQLite's LOWER() only folds ASCII; patterns are lower-cased with str.lower().
    if connection.vendor == "sqlite":
        connection.connection.create_function(
            SQLITE_LOWER_FUNCTION, 1, _unicode_lower, deterministic=True
        )


class UnicodeLower(Func):
    """``LOWER()`` that folds the same characters as ``str.lower()``."""

    function = "LOWER"

    def as_sqlite(self, compiler, connection, **extra_context):
        return super().as_sql(compiler, connection, function=SQLITE_LOWER_FUNCTION, **extra_context)


@CharField.register_lookup
@TextField.register_lookup
class LikePattern(Lookup):
    """Case-insensitive ``LIKE`` against a pattern that is already lower-cased.

    The right hand side is used verbatim, so ``%`` and ``_`` act as wildcards
    and a backslash escapes them.
    """

    lookup_name = "like_pattern"

    def as_sql(self, compiler, connection):
        lhs, lhs_params = compiler.compile(UnicodeLower(self.lhs))
        rhs, rhs_params = self.process_rhs(compiler, connection)
        return f"{lhs} LIKE {rhs} ESCAPE '\\'", [*lhs_params, *rhs_params]
