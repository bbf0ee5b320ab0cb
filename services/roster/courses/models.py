"""Database models for courses and their rosters."""
from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models

BASE_ROLE_TYPE_CHOICES = [
    ("StudentEnrollment", "Student"),
    ("TeacherEnrollment", "Teacher"),
    ("TaEnrollment", "TA"),
    ("ObserverEnrollment", "Observer"),
    ("DesignerEnrollment", "Designer"),
]


class Course(models.Model):
    """A course that users join through enrollments."""

    AVAILABLE = "available"
    CLAIMED = "claimed"
    COMPLETED = "completed"
    DELETED = "deleted"

    STATE_CHOICES = [
        (CLAIMED, "Claimed"),
        (AVAILABLE, "Available"),
        (COMPLETED, "Completed"),
        (DELETED, "Deleted"),
    ]

    name = models.CharField(max_length=255, blank=True)
    course_code = models.CharField(max_length=64, blank=True)
    workflow_state = models.CharField(max_length=32, choices=STATE_CHOICES, default=AVAILABLE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name", "id"]

    def __str__(self) -> str:
        return self.name or f"Course {self.pk}"


class CourseSection(models.Model):
    """A subdivision of a course roster."""

    course = models.ForeignKey(Course, related_name="sections", on_delete=models.CASCADE)
    name = models.CharField(max_length=255)

    class Meta:
        ordering = ["name", "id"]

    def __str__(self) -> str:
        return self.name


class Role(models.Model):
    """A named role built on top of one of the base enrollment types."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"

    STATE_CHOICES = [
        (ACTIVE, "Active"),
        (INACTIVE, "Inactive"),
        (DELETED, "Deleted"),
    ]

    name = models.CharField(max_length=255, unique=True)
    base_role_type = models.CharField(max_length=32, choices=BASE_ROLE_TYPE_CHOICES)
    workflow_state = models.CharField(max_length=32, choices=STATE_CHOICES, default=ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.base_role_type})"


class Enrollment(models.Model):
    """Membership of a user in a course under a base role."""

    STUDENT = "StudentEnrollment"
    TEACHER = "TeacherEnrollment"
    TA = "TaEnrollment"
    OBSERVER = "ObserverEnrollment"
    DESIGNER = "DesignerEnrollment"

    TYPE_CHOICES = BASE_ROLE_TYPE_CHOICES

    ACTIVE = "active"
    INVITED = "invited"
    CREATION_PENDING = "creation_pending"
    COMPLETED = "completed"
    INACTIVE = "inactive"
    REJECTED = "rejected"
    DELETED = "deleted"

    STATE_CHOICES = [
        (ACTIVE, "Active"),
        (INVITED, "Invited"),
        (CREATION_PENDING, "Creation Pending"),
        (COMPLETED, "Completed"),
        (INACTIVE, "Inactive"),
        (REJECTED, "Rejected"),
        (DELETED, "Deleted"),
    ]

    user = models.ForeignKey("accounts.User", related_name="enrollments", on_delete=models.CASCADE)
    course = models.ForeignKey(Course, related_name="enrollments", on_delete=models.CASCADE)
    course_section = models.ForeignKey(
        CourseSection,
        related_name="enrollments",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
    )
    type = models.CharField(max_length=32, choices=TYPE_CHOICES, default=STUDENT)
    role = models.ForeignKey(
        Role,
        related_name="enrollments",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
    )
    workflow_state = models.CharField(max_length=32, choices=STATE_CHOICES, default=CREATION_PENDING)
    limit_privileges_to_course_section = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["course", "type", "id"]
        indexes = [
            models.Index(fields=["course", "workflow_state"], name="enrollment_course_state_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} in {self.course_id} as {self.role_name} ({self.workflow_state})"

    @property
    def role_name(self) -> str:
        if self.role_id is not None:
            return self.role.name
        return self.type

    @property
    def is_active(self) -> bool:
        return self.workflow_state == self.ACTIVE

    def clean(self) -> None:
        if self.role is not None and self.role.base_role_type != self.type:
            raise ValidationError(
                {"role": f"Role {self.role.name} is based on {self.role.base_role_type}, not {self.type}"}
            )
        if self.course_section is not None and self.course_section.course_id != self.course_id:
            raise ValidationError({"course_section": "Section belongs to another course"})

    def save(self, *args, **kwargs) -> None:
        self.clean()
        super().save(*args, **kwargs)
