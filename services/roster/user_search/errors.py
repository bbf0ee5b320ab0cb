"""Errors raised by user search."""
from __future__ import annotations


class InvalidRoleError(ValueError):
    """A role filter named a value outside the role taxonomy."""

    LABELS = {
        "enrollment_type": "Enrollment Type",
        "enrollment_role": "Enrollment Role",
    }

    def __init__(self, option: str, value: object) -> None:
        self.option = option
        self.value = value
        super().__init__(f"Invalid {self.LABELS.get(option, option)}: {value}")
