"""Tests for course roster user search."""
from __future__ import annotations

from typing import List, Optional
from unittest import mock

from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import ContactChannel, SystemIdentifier, User
from courses.models import Course, CourseSection, Enrollment, Role

from .classifier import classify
from .config import FULL_COMPLEXITY_SETTING, GIST_SETTING, UserSearchConfig
from .errors import InvalidRoleError
from .models import Setting
from .patterns import build_pattern, escape_like, like_string_for
from .roles import RoleResolver
from .search import UserSearch, search
from .visibility import CallbackVisibilityPolicy, RosterVisibilityPolicy

SEARCH_NAMES = [
    "Rose Tyler",
    "Martha Jones",
    "Rosemary Giver",
    "Martha Stewart",
    "Tyler Pickett",
    "Jon Stewart",
    "Stewart Little",
]

FULL_GIST = UserSearchConfig(full_complexity=True, substring_mode=True)
FULL_PREFIX = UserSearchConfig(full_complexity=True, substring_mode=False)
NAME_ONLY_GIST = UserSearchConfig(full_complexity=False, substring_mode=True)


def enroll(
    user: User,
    course: Course,
    enrollment_type: str = Enrollment.STUDENT,
    workflow_state: str = Enrollment.ACTIVE,
    **kwargs,
) -> Enrollment:
    return Enrollment.objects.create(
        user=user, course=course, type=enrollment_type, workflow_state=workflow_state, **kwargs
    )


class RosterFixtureMixin:
    """A course with one teacher and the students in SEARCH_NAMES."""

    def setUp(self) -> None:
        self.course = Course.objects.create(name="Time Travel 101")
        self.teacher = User.objects.create(name="Tyler Teacher")
        enroll(self.teacher, self.course, Enrollment.TEACHER)
        for name in SEARCH_NAMES:
            enroll(User.objects.create(name=name), self.course)
        # The viewer is the last student, "Stewart Little".
        self.user = User.objects.get(name=SEARCH_NAMES[-1])

    def names(self, term, viewer: Optional[User] = None, config=None, **options) -> List[str]:
        users = UserSearch(config=config).for_user_in_course(
            term, self.course, viewer or self.user, **options
        )
        return [user.name for user in users]


class ClassifierTests(SimpleTestCase):
    def test_digits_are_numeric(self) -> None:
        self.assertTrue(classify("42").is_numeric)
        self.assertEqual(classify(" 42 ").as_id, 42)
        self.assertEqual(classify(42).as_id, 42)

    def test_mixed_terms_are_not_numeric(self) -> None:
        for term in ["", "4 2", "42a", "1_000", "0x1f", "٤٢", "Stewart"]:
            with self.subTest(term=term):
                self.assertFalse(classify(term).is_numeric)
                self.assertIsNone(classify(term).as_id)

    def test_out_of_range_numbers_are_not_record_ids(self) -> None:
        self.assertTrue(classify("-3").is_numeric)
        self.assertIsNone(classify("-3").as_id)
        self.assertIsNone(classify("0").as_id)
        self.assertIsNone(classify(str(2**63)).as_id)

    def test_email_shape_is_reported(self) -> None:
        self.assertTrue(classify("the.giver@example.com").looks_like_email)
        self.assertFalse(classify("the.giver").looks_like_email)
        self.assertEqual(classify("giver").raw, "giver")


class PatternTests(SimpleTestCase):
    def test_lowercases_the_term(self) -> None:
        self.assertIn("mickymouse", build_pattern("MickyMouse", False))

    def test_prefix_mode(self) -> None:
        self.assertEqual(build_pattern("word", substring_mode=False), "word%")

    def test_substring_mode(self) -> None:
        self.assertEqual(build_pattern("word", substring_mode=True), "%word%")

    def test_wildcards_are_escaped(self) -> None:
        self.assertEqual(escape_like("100%_a\\b"), "100\\%\\_a\\\\b")
        self.assertEqual(build_pattern("50%", substring_mode=False), "50\\%%")

    def test_like_string_for_uses_injected_config(self) -> None:
        self.assertEqual(like_string_for("Word", FULL_PREFIX), "word%")
        self.assertEqual(like_string_for("Word", FULL_GIST), "%word%")


class LikeStringSettingTests(TestCase):
    def test_uses_a_prefix_if_gist_is_not_configured(self) -> None:
        Setting.set(GIST_SETTING, "false")
        self.assertEqual(like_string_for("word"), "word%")

    def test_modulos_both_sides_if_gist_is_configured(self) -> None:
        Setting.set(GIST_SETTING, "true")
        self.assertEqual(like_string_for("word"), "%word%")

    def test_missing_settings_fall_back_to_django_settings(self) -> None:
        with self.settings(USER_SEARCH_WITH_GIST=True, USER_SEARCH_WITH_FULL_COMPLEXITY=False):
            config = UserSearchConfig.current()
        self.assertEqual(config, UserSearchConfig(full_complexity=False, substring_mode=True))

    def test_setting_rows_override_django_settings(self) -> None:
        Setting.set(FULL_COMPLEXITY_SETTING, True)
        with self.settings(USER_SEARCH_WITH_FULL_COMPLEXITY=False):
            self.assertTrue(UserSearchConfig.current().full_complexity)


class RoleResolverTests(TestCase):
    def setUp(self) -> None:
        self.resolver = RoleResolver()

    def test_no_options_means_no_restriction(self) -> None:
        role_filter = self.resolver.resolve()
        self.assertFalse(role_filter.is_restricted)
        self.assertFalse(self.resolver.resolve([], []).is_restricted)

    def test_short_keys_and_type_names(self) -> None:
        role_filter = self.resolver.resolve(["ta", "Teacher", "StudentEnrollment"])
        self.assertEqual(
            role_filter.enrollment_types,
            {Enrollment.TA, Enrollment.TEACHER, Enrollment.STUDENT},
        )

    def test_bad_enrollment_type(self) -> None:
        with self.assertRaisesMessage(InvalidRoleError, "Invalid Enrollment Type: all"):
            self.resolver.resolve("all")

    def test_one_bad_key_fails_the_list(self) -> None:
        with self.assertRaises(InvalidRoleError) as caught:
            self.resolver.resolve(["student", "bogus"])
        self.assertEqual(caught.exception.option, "enrollment_type")
        self.assertEqual(caught.exception.value, "bogus")

    def test_non_string_values_are_rejected(self) -> None:
        with self.assertRaises(InvalidRoleError):
            self.resolver.resolve([3])
        with self.assertRaises(InvalidRoleError):
            self.resolver.resolve(enrollment_role=[None])

    def test_custom_role_resolves_to_base_role(self) -> None:
        Role.objects.create(name="Mentor", base_role_type=Enrollment.OBSERVER)
        role_filter = self.resolver.resolve(enrollment_role="Mentor")
        self.assertEqual(role_filter.enrollment_types, {Enrollment.OBSERVER})

    def test_unknown_and_deleted_roles_are_rejected(self) -> None:
        Role.objects.create(name="Retired", base_role_type=Enrollment.TA, workflow_state=Role.DELETED)
        for name in ["Nonexistent", "Retired", "observer"]:
            with self.subTest(name=name):
                with self.assertRaisesMessage(InvalidRoleError, f"Invalid Enrollment Role: {name}"):
                    self.resolver.resolve(enrollment_role=name)

    def test_type_and_role_are_combined_with_or(self) -> None:
        role_filter = self.resolver.resolve("student", "ObserverEnrollment")
        self.assertEqual(role_filter.enrollment_types, {Enrollment.STUDENT, Enrollment.OBSERVER})


class VisibilityTests(RosterFixtureMixin, TestCase):
    def test_members_see_the_active_roster(self) -> None:
        policy = RosterVisibilityPolicy()
        visible = policy.visible_enrollments(self.course, self.user)
        self.assertEqual(visible.count(), len(SEARCH_NAMES) + 1)
        self.assertTrue(policy.can_view(self.user, self.teacher, self.course))

    def test_outsiders_and_anonymous_viewers_see_nobody(self) -> None:
        policy = RosterVisibilityPolicy()
        outsider = User.objects.create(name="Unenrolled User")
        self.assertFalse(policy.visible_enrollments(self.course, outsider).exists())
        self.assertFalse(policy.visible_enrollments(self.course, None).exists())
        self.assertFalse(policy.can_view(outsider, self.teacher, self.course))

    def test_inactive_viewer_enrollment_grants_nothing(self) -> None:
        former = User.objects.create(name="Former Student")
        enroll(former, self.course, workflow_state=Enrollment.DELETED)
        self.assertFalse(RosterVisibilityPolicy().visible_enrollments(self.course, former).exists())

    def test_callback_policy_consults_the_oracle(self) -> None:
        hidden = User.objects.get(name="Jon Stewart")
        oracle = mock.Mock(side_effect=lambda viewer, enrollee, course: enrollee != hidden)
        policy = CallbackVisibilityPolicy(oracle)
        visible_users = set(
            policy.visible_enrollments(self.course, self.user).values_list("user__name", flat=True)
        )
        self.assertNotIn("Jon Stewart", visible_users)
        self.assertIn("Martha Stewart", visible_users)
        self.assertEqual(oracle.call_count, len(SEARCH_NAMES) + 1)


class ComplexSearchWithGistTests(RosterFixtureMixin, TestCase):
    def setUp(self) -> None:
        super().setUp()
        Setting.set(FULL_COMPLEXITY_SETTING, "true")
        Setting.set(GIST_SETTING, "true")

    def test_returns_the_matching_users_in_order(self) -> None:
        self.assertEqual(self.names("Stewart"), ["Stewart Little", "Jon Stewart", "Martha Stewart"])

    def test_does_not_contain_users_i_am_not_allowed_to_see(self) -> None:
        unenrolled_user = User.objects.create(name="Unenrolled User")
        self.assertEqual(self.names("Stewart", viewer=unenrolled_user), [])

    def test_can_be_limited_with_an_extra_parameter(self) -> None:
        self.assertEqual(self.names("Stewart", limit=2), ["Stewart Little", "Jon Stewart"])
        self.assertEqual(len(self.names("Stewart", limit=5)), 3)

    def test_zero_and_negative_limits_return_nothing(self) -> None:
        self.assertEqual(self.names("Stewart", limit=0), [])
        self.assertEqual(self.names("Stewart", limit=-1), [])

    def test_default_limit_applies(self) -> None:
        users = UserSearch(default_limit=1).for_user_in_course("Stewart", self.course, self.user)
        self.assertEqual(len(users), 1)

    def test_will_not_pickup_students_outside_the_course(self) -> None:
        User.objects.create(name="Stewart Stewart")
        other_course = Course.objects.create(name="Elsewhere")
        enroll(User.objects.create(name="Stewart Elsewhere"), other_course)
        names = self.names("Stewart")
        self.assertNotIn("Stewart Stewart", names)
        self.assertNotIn("Stewart Elsewhere", names)

    def test_will_find_teachers(self) -> None:
        self.assertIn("Tyler Teacher", self.names("Tyler"))

    def test_inactive_enrollments_are_not_searchable(self) -> None:
        for state in [Enrollment.DELETED, Enrollment.INVITED, Enrollment.REJECTED]:
            enroll(User.objects.create(name=f"Stewart {state}"), self.course, workflow_state=state)
        self.assertEqual(len(self.names("Stewart")), 3)

    def test_another_active_enrollment_still_matches(self) -> None:
        returning = User.objects.create(name="Stewart Returning")
        enroll(returning, self.course, workflow_state=Enrollment.DELETED)
        enroll(returning, self.course, Enrollment.TA)
        self.assertEqual(self.names("Stewart Returning"), ["Stewart Returning"])

    def test_multiple_enrollments_do_not_duplicate_users(self) -> None:
        enroll(self.user, self.course, Enrollment.TA)
        self.assertEqual(self.names("Stewart").count("Stewart Little"), 1)

    def test_matching_through_several_channels_returns_the_user_once(self) -> None:
        SystemIdentifier.objects.create(user=self.user, value="STEWART_SIS")
        ContactChannel.objects.create(
            user=self.user, path="stewart@example.com", workflow_state=ContactChannel.ACTIVE
        )
        names = self.names("Stewart")
        self.assertEqual(len(names), 3)
        self.assertEqual(names.count("Stewart Little"), 1)

    def test_wildcards_in_the_term_match_literally(self) -> None:
        enroll(User.objects.create(name="Percent % Sign"), self.course)
        enroll(User.objects.create(name="Under_score"), self.course)
        self.assertEqual(self.names("%"), ["Percent % Sign"])
        self.assertEqual(self.names("_"), ["Under_score"])

    def test_accented_names_match_in_any_case(self) -> None:
        enroll(User.objects.create(name="Émile Zola"), self.course)
        self.assertEqual(self.names("Émile"), ["Émile Zola"])
        self.assertEqual(self.names("ÉMILE ZOLA"), ["Émile Zola"])
        self.assertEqual(self.names("émile", config=FULL_PREFIX), ["Émile Zola"])

    def test_accented_emails_match_in_any_case(self) -> None:
        ContactChannel.objects.create(
            user=self.user, path="Élodie@example.com", workflow_state=ContactChannel.ACTIVE
        )
        self.assertEqual(self.names("élodie"), ["Stewart Little"])

    def test_reads_the_switches_once_per_search(self) -> None:
        with mock.patch.object(UserSearchConfig, "current", return_value=FULL_GIST) as current:
            UserSearch().for_user_in_course("Stewart", self.course, self.user)
        current.assert_called_once_with()


class RoleFilteringTests(RosterFixtureMixin, TestCase):
    def test_to_a_single_role(self) -> None:
        names = self.names("Tyler", config=FULL_GIST, enrollment_type="student")
        self.assertIn("Rose Tyler", names)
        self.assertIn("Tyler Pickett", names)
        self.assertNotIn("Tyler Teacher", names)

    def test_to_multiple_roles(self) -> None:
        enroll(User.objects.create(name="Tyler TA"), self.course, Enrollment.TA)
        names = self.names("Tyler", config=FULL_GIST, enrollment_type=["ta", "teacher"])
        self.assertIn("Tyler TA", names)
        self.assertIn("Tyler Teacher", names)
        self.assertNotIn("Rose Tyler", names)

    def test_with_the_broader_role_parameter(self) -> None:
        enroll(User.objects.create(name="Tyler Observer"), self.course, Enrollment.OBSERVER)
        mentor_role = Role.objects.create(name="Mentor", base_role_type=Enrollment.OBSERVER)
        enroll(User.objects.create(name="Tyler Mentor"), self.course, Enrollment.OBSERVER, role=mentor_role)
        names = self.names("Tyler", config=FULL_GIST, enrollment_role="ObserverEnrollment")
        self.assertIn("Tyler Observer", names)
        self.assertIn("Tyler Mentor", names)
        self.assertNotIn("Tyler Teacher", names)
        self.assertNotIn("Rose Tyler", names)

    def test_custom_role_name_matches_its_base_role(self) -> None:
        mentor_role = Role.objects.create(name="Mentor", base_role_type=Enrollment.OBSERVER)
        enroll(User.objects.create(name="Tyler Mentor"), self.course, Enrollment.OBSERVER, role=mentor_role)
        enroll(User.objects.create(name="Tyler Observer"), self.course, Enrollment.OBSERVER)
        names = self.names("Tyler", config=FULL_GIST, enrollment_role="Mentor")
        self.assertEqual(names, ["Tyler Mentor", "Tyler Observer"])

    def test_type_and_role_together_are_additive(self) -> None:
        enroll(User.objects.create(name="Tyler Observer"), self.course, Enrollment.OBSERVER)
        names = self.names(
            "Tyler", config=FULL_GIST, enrollment_type="teacher", enrollment_role="ObserverEnrollment"
        )
        self.assertEqual(names, ["Tyler Observer", "Tyler Teacher"])

    def test_bad_enrollment_type_raises_before_querying(self) -> None:
        searcher = UserSearch(config=FULL_GIST)
        with self.assertNumQueries(0):
            with self.assertRaisesMessage(InvalidRoleError, "Invalid Enrollment Type: all"):
                searcher.for_user_in_course("Stewart", self.course, self.user, enrollment_type="all")

    def test_bad_enrollment_type_raises_even_with_zero_limit(self) -> None:
        with self.assertRaises(InvalidRoleError):
            self.names("Stewart", config=FULL_GIST, enrollment_type=["student", "all"], limit=0)

    def test_scope_for_raises_on_a_bad_enrollment_type(self) -> None:
        student = User.objects.create()
        with self.assertRaisesMessage(InvalidRoleError, "Invalid Enrollment Type"):
            UserSearch(config=FULL_GIST).scope_for(self.course, student, enrollment_type="all")

    def test_scope_for_lists_visible_users(self) -> None:
        scope = UserSearch(config=FULL_GIST).scope_for(self.course, self.user, enrollment_type="teacher")
        self.assertEqual(list(scope), [self.teacher])


class IdentifierSearchTests(RosterFixtureMixin, TestCase):
    def setUp(self) -> None:
        super().setUp()
        self.pseudonym = SystemIdentifier.objects.create(user=self.user, value="SOME_SIS_ID")

    def test_will_match_against_an_sis_id(self) -> None:
        users = search("SOME_SIS", self.course, self.user, config=FULL_GIST)
        self.assertEqual(users, [self.user])

    def test_sis_ids_are_matched_by_prefix(self) -> None:
        self.assertEqual(search("SIS_ID", self.course, self.user, config=FULL_GIST), [])
        self.assertEqual(search("some_sis_id", self.course, self.user, config=FULL_GIST), [self.user])

    def test_can_match_an_sis_id_and_a_user_name_in_the_same_query(self) -> None:
        self.pseudonym.value = "MARTHA_SIS_ID"
        self.pseudonym.save()
        results = search("martha", self.course, self.user, config=FULL_GIST)
        self.assertIn(self.user, results)
        self.assertIn(User.objects.get(name="Martha Stewart"), results)

    def test_deleted_and_non_sis_identifiers_do_not_match(self) -> None:
        self.pseudonym.workflow_state = SystemIdentifier.DELETED
        self.pseudonym.save()
        SystemIdentifier.objects.create(user=self.user, kind=SystemIdentifier.INTEGRATION, value="SOME_SIS_X")
        self.assertEqual(search("SOME_SIS", self.course, self.user, config=FULL_GIST), [])

    def test_matches_against_the_database_id(self) -> None:
        self.assertEqual(search(self.user.pk, self.course, self.user, config=FULL_GIST), [self.user])
        self.assertEqual(search(str(self.user.pk), self.course, self.user, config=FULL_PREFIX), [self.user])

    def test_database_id_of_someone_outside_the_course_does_not_match(self) -> None:
        outsider = User.objects.create(name="Unenrolled User")
        self.assertEqual(search(outsider.pk, self.course, self.user, config=FULL_GIST), [])


class EmailSearchTests(RosterFixtureMixin, TestCase):
    def setUp(self) -> None:
        super().setUp()
        self.channel = ContactChannel.objects.create(
            user=self.user,
            path="the.giver@example.com",
            path_type=ContactChannel.EMAIL,
            workflow_state=ContactChannel.ACTIVE,
        )

    def test_matches_against_an_email(self) -> None:
        self.assertEqual(search("the.giver", self.course, self.user, config=FULL_GIST), [self.user])

    def test_can_match_an_email_and_a_name_in_the_same_query(self) -> None:
        results = search("giver", self.course, self.user, config=FULL_GIST)
        self.assertIn(self.user, results)
        self.assertIn(User.objects.get(name="Rosemary Giver"), results)

    def test_email_follows_the_gist_switch(self) -> None:
        self.assertEqual(search("giver", self.course, self.user, config=FULL_PREFIX), [])
        self.assertEqual(search("THE.GIVER@", self.course, self.user, config=FULL_PREFIX), [self.user])

    def test_will_not_match_channels_where_the_type_is_not_email(self) -> None:
        self.channel.path_type = ContactChannel.TWITTER
        self.channel.save()
        self.assertEqual(search("the.giver", self.course, self.user, config=FULL_GIST), [])

    def test_will_not_match_channels_that_are_not_active(self) -> None:
        for state in [ContactChannel.UNCONFIRMED, ContactChannel.RETIRED]:
            with self.subTest(state=state):
                self.channel.workflow_state = state
                self.channel.save()
                self.assertEqual(search("the.giver", self.course, self.user, config=FULL_GIST), [])


class ComplexSearchWithoutGistTests(RosterFixtureMixin, TestCase):
    def setUp(self) -> None:
        super().setUp()
        Setting.set(FULL_COMPLEXITY_SETTING, "true")
        Setting.set(GIST_SETTING, "false")

    def test_returns_a_list_of_matching_users_using_a_prefix_search(self) -> None:
        self.assertEqual(self.names("Stewart"), ["Stewart Little"])


class SimpleSearchTests(RosterFixtureMixin, TestCase):
    def setUp(self) -> None:
        super().setUp()
        Setting.set(FULL_COMPLEXITY_SETTING, "false")
        Setting.set(GIST_SETTING, "true")

    def test_matches_against_the_display_name(self) -> None:
        self.assertEqual(len(self.names("Stewart")), 3)

    def test_does_not_match_against_sis_ids(self) -> None:
        SystemIdentifier.objects.create(user=self.user, value="SOME_SIS_ID")
        self.assertEqual(self.names("SOME_SIS"), [])

    def test_does_not_match_against_emails(self) -> None:
        ContactChannel.objects.create(
            user=self.user, path="the.giver@example.com", workflow_state=ContactChannel.ACTIVE
        )
        self.assertEqual(self.names("the.giver"), [])

    def test_does_not_match_against_the_database_id(self) -> None:
        self.assertEqual(self.names(self.user.pk), [])

    def test_respects_role_filters(self) -> None:
        self.assertEqual(self.names("Tyler", enrollment_type="teacher"), ["Tyler Teacher"])


class SectionVisibilitySearchTests(RosterFixtureMixin, TestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alpha = CourseSection.objects.create(course=self.course, name="Alpha")
        self.beta = CourseSection.objects.create(course=self.course, name="Beta")
        self.section_ta = User.objects.create(name="Section TA")
        enroll(
            self.section_ta,
            self.course,
            Enrollment.TA,
            course_section=self.alpha,
            limit_privileges_to_course_section=True,
        )
        enroll(User.objects.create(name="Sam Alpha"), self.course, course_section=self.alpha)
        enroll(User.objects.create(name="Sam Beta"), self.course, course_section=self.beta)

    def test_section_limited_viewers_only_find_their_sections(self) -> None:
        self.assertEqual(self.names("Sam", viewer=self.section_ta, config=FULL_GIST), ["Sam Alpha"])

    def test_unlimited_viewers_find_every_section(self) -> None:
        self.assertEqual(self.names("Sam", config=FULL_GIST), ["Sam Alpha", "Sam Beta"])

    def test_callback_policy_replaces_the_roster_rules(self) -> None:
        policy = CallbackVisibilityPolicy(lambda viewer, enrollee, course: enrollee.name != "Sam Alpha")
        users = UserSearch(config=FULL_GIST, visibility=policy).for_user_in_course(
            "Sam", self.course, self.section_ta
        )
        self.assertEqual([user.name for user in users], ["Sam Beta"])


class UserSearchApiTests(RosterFixtureMixin, TestCase):
    def setUp(self) -> None:
        super().setUp()
        self.client = APIClient()
        Setting.set(FULL_COMPLEXITY_SETTING, "true")
        Setting.set(GIST_SETTING, "true")
        self.url = reverse("course-user-search", args=[self.course.pk])

    def test_health(self) -> None:
        response = self.client.get(reverse("roster-health"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "ok")

    def test_search(self) -> None:
        response = self.client.get(
            self.url, {"search_term": "Stewart", "limit": 2}, HTTP_X_USER_ID=str(self.user.pk)
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["name"] for item in response.data], ["Stewart Little", "Jon Stewart"])
        self.assertEqual(response.data[0]["id"], self.user.pk)

    def test_repeated_enrollment_types(self) -> None:
        enroll(User.objects.create(name="Tyler TA"), self.course, Enrollment.TA)
        response = self.client.get(
            self.url,
            {"search_term": "Tyler", "enrollment_type": ["ta", "teacher"]},
            HTTP_X_USER_ID=str(self.user.pk),
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["name"] for item in response.data], ["Tyler TA", "Tyler Teacher"])

    def test_invalid_enrollment_type(self) -> None:
        response = self.client.get(
            self.url, {"search_term": "Stewart", "enrollment_type": "all"}, HTTP_X_USER_ID=str(self.user.pk)
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["detail"], "Invalid Enrollment Type: all")

    def test_anonymous_viewer_gets_nothing(self) -> None:
        response = self.client.get(self.url, {"search_term": "Stewart"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, [])

    def test_non_ascii_digit_viewer_header_is_anonymous(self) -> None:
        for header in ["²", "١٢", "12a"]:
            with self.subTest(header=header):
                response = self.client.get(self.url, {"search_term": "Stewart"}, HTTP_X_USER_ID=header)
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.data, [])

    def test_missing_term_and_bad_limit(self) -> None:
        response = self.client.get(self.url, HTTP_X_USER_ID=str(self.user.pk))
        self.assertEqual(response.status_code, 400)
        self.assertIn("search_term", response.data)

        response = self.client.get(
            self.url, {"search_term": "Stewart", "limit": -1}, HTTP_X_USER_ID=str(self.user.pk)
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("limit", response.data)

    def test_unknown_course(self) -> None:
        url = reverse("course-user-search", args=[self.course.pk + 1000])
        response = self.client.get(url, {"search_term": "Stewart"}, HTTP_X_USER_ID=str(self.user.pk))
        self.assertEqual(response.status_code, 404)
