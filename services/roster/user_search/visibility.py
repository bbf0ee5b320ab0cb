"""Which enrollments in a course a viewer is allowed to see."""
from __future__ import annotations

from typing import Callable, Optional

from django.conf import settings
from django.db.models import QuerySet
from django.utils.module_loading import import_string

from accounts.models import User
from courses.models import Course, Enrollment


class VisibilityPolicy:
    """Permission collaborator consulted before any search filtering."""

    def visible_enrollments(self, course: Course, viewer: Optional[User]) -> QuerySet[Enrollment]:
        raise NotImplementedError

    def can_view(self, viewer: Optional[User], enrollee: User, course: Course) -> bool:
        return self.visible_enrollments(course, viewer).filter(user=enrollee).exists()


class RosterVisibilityPolicy(VisibilityPolicy):
    """Course members see the active roster.

    A viewer without an active enrollment in the course sees nobody. A viewer
    whose enrollments are all limited to their sections only sees the active
    enrollments of those sections.
    """

    def visible_enrollments(self, course: Course, viewer: Optional[User]) -> QuerySet[Enrollment]:
        roster = Enrollment.objects.filter(course=course, workflow_state=Enrollment.ACTIVE)
        if viewer is None or viewer.pk is None:
            return roster.none()

        own = list(
            roster.filter(user=viewer).values_list(
                "limit_privileges_to_course_section", "course_section_id"
            )
        )
        if not own:
            return roster.none()
        if all(limited for limited, _ in own):
            sections = {section_id for _, section_id in own if section_id is not None}
            return roster.filter(course_section_id__in=sections)
        return roster


class CallbackVisibilityPolicy(VisibilityPolicy):
    """Adapts a per-enrollee ``can_view(viewer, enrollee, course)`` oracle."""

    def __init__(self, can_view: Callable[[Optional[User], User, Course], bool]) -> None:
        self._can_view = can_view

    def visible_enrollments(self, course: Course, viewer: Optional[User]) -> QuerySet[Enrollment]:
        roster = Enrollment.objects.filter(course=course, workflow_state=Enrollment.ACTIVE).select_related("user")
        visible_ids = [
            enrollment.pk for enrollment in roster if self._can_view(viewer, enrollment.user, course)
        ]
        return Enrollment.objects.filter(pk__in=visible_ids)

    def can_view(self, viewer: Optional[User], enrollee: User, course: Course) -> bool:
        return self._can_view(viewer, enrollee, course)


def default_visibility_policy() -> VisibilityPolicy:
    return import_string(settings.USER_SEARCH_VISIBILITY_POLICY)()
