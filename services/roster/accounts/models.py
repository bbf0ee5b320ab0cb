"""Database models for user identities."""
from __future__ import annotations

from django.db import models


def derive_sortable_name(name: str) -> str:
    """Turn "First Middle Last" into "Last, First Middle"."""

    parts = name.split()
    if len(parts) < 2:
        return name.strip()
    return f"{parts[-1]}, {' '.join(parts[:-1])}"


class User(models.Model):
    """An identity that can be enrolled in courses and searched for."""

    name = models.CharField(max_length=255)
    sortable_name = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["sortable_name", "id"]

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs) -> None:
        if not self.sortable_name:
            self.sortable_name = derive_sortable_name(self.name)
        super().save(*args, **kwargs)


class SystemIdentifier(models.Model):
    """An identifier assigned to a user by an external system."""

    SIS = "sis"
    INTEGRATION = "integration"

    KIND_CHOICES = [
        (SIS, "SIS"),
        (INTEGRATION, "Integration"),
    ]

    ACTIVE = "active"
    DELETED = "deleted"

    STATE_CHOICES = [
        (ACTIVE, "Active"),
        (DELETED, "Deleted"),
    ]

    user = models.ForeignKey(User, related_name="system_identifiers", on_delete=models.CASCADE)
    kind = models.CharField(max_length=32, choices=KIND_CHOICES, default=SIS)
    value = models.CharField(max_length=255)
    workflow_state = models.CharField(max_length=32, choices=STATE_CHOICES, default=ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["kind", "value"]
        unique_together = ("kind", "value")

    def __str__(self) -> str:
        return f"{self.kind}:{self.value}"


class ContactChannel(models.Model):
    """A way to reach a user, such as an email address."""

    EMAIL = "email"
    SMS = "sms"
    TWITTER = "twitter"
    PUSH = "push"

    PATH_TYPE_CHOICES = [
        (EMAIL, "Email"),
        (SMS, "SMS"),
        (TWITTER, "Twitter"),
        (PUSH, "Push"),
    ]

    UNCONFIRMED = "unconfirmed"
    ACTIVE = "active"
    RETIRED = "retired"

    STATE_CHOICES = [
        (UNCONFIRMED, "Unconfirmed"),
        (ACTIVE, "Active"),
        (RETIRED, "Retired"),
    ]

    user = models.ForeignKey(User, related_name="contact_channels", on_delete=models.CASCADE)
    path = models.CharField(max_length=255)
    path_type = models.CharField(max_length=32, choices=PATH_TYPE_CHOICES, default=EMAIL)
    workflow_state = models.CharField(max_length=32, choices=STATE_CHOICES, default=UNCONFIRMED)
    position = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["position", "id"]

    def __str__(self) -> str:
        return f"{self.path_type}:{self.path} ({self.workflow_state})"
