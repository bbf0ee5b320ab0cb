# Generated manually for initial schema.
from __future__ import annotations

import django.db.models.deletion
from django.db import migrations, models

BASE_ROLE_TYPES = [
    ("StudentEnrollment", "Student"),
    ("TeacherEnrollment", "Teacher"),
    ("TaEnrollment", "TA"),
    ("ObserverEnrollment", "Observer"),
    ("DesignerEnrollment", "Designer"),
]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(blank=True, max_length=255)),
                ("course_code", models.CharField(blank=True, max_length=64)),
                (
                    "workflow_state",
                    models.CharField(
                        choices=[
                            ("claimed", "Claimed"),
                            ("available", "Available"),
                            ("completed", "Completed"),
                            ("deleted", "Deleted"),
                        ],
                        default="available",
                        max_length=32,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["name", "id"]},
        ),
        migrations.CreateModel(
            name="CourseSection",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sections",
                        to="courses.course",
                    ),
                ),
            ],
            options={"ordering": ["name", "id"]},
        ),
        migrations.CreateModel(
            name="Role",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, unique=True)),
                ("base_role_type", models.CharField(choices=BASE_ROLE_TYPES, max_length=32)),
                (
                    "workflow_state",
                    models.CharField(
                        choices=[("active", "Active"), ("inactive", "Inactive"), ("deleted", "Deleted")],
                        default="active",
                        max_length=32,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Enrollment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type", models.CharField(choices=BASE_ROLE_TYPES, default="StudentEnrollment", max_length=32)),
                (
                    "workflow_state",
                    models.CharField(
                        choices=[
                            ("active", "Active"),
                            ("invited", "Invited"),
                            ("creation_pending", "Creation Pending"),
                            ("completed", "Completed"),
                            ("inactive", "Inactive"),
                            ("rejected", "Rejected"),
                            ("deleted", "Deleted"),
                        ],
                        default="creation_pending",
                        max_length=32,
                    ),
                ),
                ("limit_privileges_to_course_section", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="courses.course",
                    ),
                ),
                (
                    "course_section",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="enrollments",
                        to="courses.coursesection",
                    ),
                ),
                (
                    "role",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="enrollments",
                        to="courses.role",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="accounts.user",
                    ),
                ),
            ],
            options={"ordering": ["course", "type", "id"]},
        ),
        migrations.AddIndex(
            model_name="enrollment",
            index=models.Index(fields=["course", "workflow_state"], name="enrollment_course_state_idx"),
        ),
    ]
