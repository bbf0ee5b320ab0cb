"""Tests for course rosters."""
from __future__ import annotations

from django.core.exceptions import ValidationError
from django.test import TestCase

from accounts.models import User

from .models import Course, CourseSection, Enrollment, Role


class EnrollmentModelTests(TestCase):
    def setUp(self) -> None:
        self.course = Course.objects.create(name="Biology")
        self.user = User.objects.create(name="Tyler Observer")

    def test_defaults(self) -> None:
        enrollment = Enrollment.objects.create(user=self.user, course=self.course)
        self.assertEqual(enrollment.type, Enrollment.STUDENT)
        self.assertEqual(enrollment.workflow_state, Enrollment.CREATION_PENDING)
        self.assertFalse(enrollment.is_active)
        self.assertEqual(enrollment.role_name, Enrollment.STUDENT)

    def test_custom_role_on_its_base_type(self) -> None:
        mentor = Role.objects.create(name="Mentor", base_role_type=Enrollment.OBSERVER)
        enrollment = Enrollment.objects.create(
            user=self.user,
            course=self.course,
            type=Enrollment.OBSERVER,
            role=mentor,
            workflow_state=Enrollment.ACTIVE,
        )
        self.assertEqual(enrollment.type, Enrollment.OBSERVER)
        self.assertEqual(enrollment.role_name, "Mentor")
        self.assertTrue(enrollment.is_active)

    def test_clean_rejects_mismatched_roles(self) -> None:
        mentor = Role.objects.create(name="Mentor", base_role_type=Enrollment.OBSERVER)
        enrollment = Enrollment(user=self.user, course=self.course, type=Enrollment.TA, role=mentor)
        with self.assertRaises(ValidationError):
            enrollment.clean()

    def test_clean_rejects_sections_of_other_courses(self) -> None:
        other_section = CourseSection.objects.create(course=Course.objects.create(name="Chemistry"), name="A")
        enrollment = Enrollment(user=self.user, course=self.course, course_section=other_section)
        with self.assertRaises(ValidationError):
            enrollment.clean()

    def test_save_rejects_a_role_on_another_base_type(self) -> None:
        mentor = Role.objects.create(name="Mentor", base_role_type=Enrollment.OBSERVER)
        with self.assertRaises(ValidationError):
            Enrollment.objects.create(user=self.user, course=self.course, role=mentor)
        self.assertFalse(Enrollment.objects.exists())
