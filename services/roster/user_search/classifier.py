"""Shape classification for raw search terms."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

NUMERIC_PATTERN = re.compile(r"[+-]?[0-9]+")
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+")

# Largest value a BigAutoField primary key can hold.
MAX_RECORD_ID = 2**63 - 1


@dataclass(frozen=True)
class TermClassification:
    raw: str
    is_numeric: bool
    looks_like_email: bool

    @property
    def as_id(self) -> Optional[int]:
        """The term as a record id, or None when it can not be one."""

        if not self.is_numeric:
            return None
        value = int(self.raw.strip())
        if 0 < value <= MAX_RECORD_ID:
            return value
        return None


def classify(term: Union[str, int]) -> TermClassification:
    raw = str(term)
    stripped = raw.strip()
    return TermClassification(
        raw=raw,
        is_numeric=NUMERIC_PATTERN.fullmatch(stripped) is not None,
        looks_like_email=EMAIL_PATTERN.fullmatch(stripped) is not None,
    )
