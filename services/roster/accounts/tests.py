"""Tests for identity records."""
from __future__ import annotations

from django.db import IntegrityError
from django.test import SimpleTestCase, TestCase

from .models import ContactChannel, SystemIdentifier, User, derive_sortable_name


class SortableNameTests(SimpleTestCase):
    def test_last_word_moves_to_the_front(self) -> None:
        self.assertEqual(derive_sortable_name("Stewart Little"), "Little, Stewart")
        self.assertEqual(derive_sortable_name("Rose Mary Tyler"), "Tyler, Rose Mary")

    def test_single_words_are_kept(self) -> None:
        self.assertEqual(derive_sortable_name(" Cher "), "Cher")
        self.assertEqual(derive_sortable_name(""), "")


class UserModelTests(TestCase):
    def test_sortable_name_is_derived_on_save(self) -> None:
        user = User.objects.create(name="Martha Jones")
        self.assertEqual(user.sortable_name, "Jones, Martha")

    def test_explicit_sortable_name_is_kept(self) -> None:
        user = User.objects.create(name="Jon Stewart", sortable_name="Leibowitz, Jonathan")
        self.assertEqual(user.sortable_name, "Leibowitz, Jonathan")

    def test_channel_defaults(self) -> None:
        user = User.objects.create(name="Rose Tyler")
        channel = ContactChannel.objects.create(user=user, path="rose@example.com")
        self.assertEqual(channel.path_type, ContactChannel.EMAIL)
        self.assertEqual(channel.workflow_state, ContactChannel.UNCONFIRMED)

    def test_system_identifiers_are_unique_per_kind(self) -> None:
        user = User.objects.create(name="Rose Tyler")
        SystemIdentifier.objects.create(user=user, value="ROSE_SIS")
        SystemIdentifier.objects.create(user=user, kind=SystemIdentifier.INTEGRATION, value="ROSE_SIS")
        with self.assertRaises(IntegrityError):
            SystemIdentifier.objects.create(user=user, value="ROSE_SIS")
