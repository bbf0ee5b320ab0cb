"""Database models for user search."""
from __future__ import annotations

from django.db import models

TRUTHY_VALUES = {"1", "true", "yes", "on"}


class Setting(models.Model):
    """A process-wide runtime switch, toggled by operators."""

    name = models.CharField(max_length=255, unique=True)
    value = models.CharField(max_length=255, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name}={self.value}"

    @classmethod
    def set(cls, name: str, value: object) -> "Setting":
        setting, _ = cls.objects.update_or_create(name=name, defaults={"value": str(value).lower()})
        return setting

    @classmethod
    def get_flags(cls, defaults: dict[str, bool]) -> dict[str, bool]:
        """Read several boolean switches with a single query."""

        stored = dict(cls.objects.filter(name__in=list(defaults)).values_list("name", "value"))
        return {
            name: stored[name].strip().lower() in TRUTHY_VALUES if name in stored else default
            for name, default in defaults.items()
        }
