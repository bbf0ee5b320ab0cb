# Generated manually for initial schema.
from __future__ import annotations

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("sortable_name", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["sortable_name", "id"]},
        ),
        migrations.CreateModel(
            name="SystemIdentifier",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "kind",
                    models.CharField(
                        choices=[("sis", "SIS"), ("integration", "Integration")],
                        default="sis",
                        max_length=32,
                    ),
                ),
                ("value", models.CharField(max_length=255)),
                (
                    "workflow_state",
                    models.CharField(
                        choices=[("active", "Active"), ("deleted", "Deleted")],
                        default="active",
                        max_length=32,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="system_identifiers",
                        to="accounts.user",
                    ),
                ),
            ],
            options={"ordering": ["kind", "value"], "unique_together": {("kind", "value")}},
        ),
        migrations.CreateModel(
            name="ContactChannel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("path", models.CharField(max_length=255)),
                (
                    "path_type",
                    models.CharField(
                        choices=[("email", "Email"), ("sms", "SMS"), ("twitter", "Twitter"), ("push", "Push")],
                        default="email",
                        max_length=32,
                    ),
                ),
                (
                    "workflow_state",
                    models.CharField(
                        choices=[("unconfirmed", "Unconfirmed"), ("active", "Active"), ("retired", "Retired")],
                        default="unconfirmed",
                        max_length=32,
                    ),
                ),
                ("position", models.PositiveIntegerField(default=1)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="contact_channels",
                        to="accounts.user",
                    ),
                ),
            ],
            options={"ordering": ["position", "id"]},
        ),
    ]
