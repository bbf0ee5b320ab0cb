"""Permission-aware search for users enrolled in a course."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from django.conf import settings
from django.db.models import Q, QuerySet

from accounts.models import ContactChannel, SystemIdentifier, User
from courses.models import Course, Enrollment

from .classifier import classify
from .config import UserSearchConfig
from .lookups import UnicodeLower
from .patterns import build_pattern
from .roles import RoleFilter, RoleOption, RoleResolver, RoleTaxonomy
from .visibility import VisibilityPolicy, default_visibility_policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOptions:
    limit: Optional[int] = None
    enrollment_type: RoleOption = None
    enrollment_role: RoleOption = None


@dataclass(frozen=True)
class SearchRequest:
    """A single search, built per call and never stored."""

    term: Union[str, int]
    course: Course
    viewer: Optional[User]
    options: SearchOptions = field(default_factory=SearchOptions)


class UserSearch:
    """Finds the users of a course that match a term and that a viewer may see.

    The visible roster is computed first and narrowed by the role filter. The
    term is then matched against each channel independently (name, SIS id,
    email, numeric id) and the matches are unioned, so a user matching through
    several channels or holding several enrollments is returned once.

    ``config`` pins the search switches; when omitted they are read once per
    search from the Setting table.
    """

    def __init__(
        self,
        config: Optional[UserSearchConfig] = None,
        visibility: Optional[VisibilityPolicy] = None,
        taxonomy: Optional[RoleTaxonomy] = None,
        default_limit: Optional[int] = None,
    ) -> None:
        self.config = config
        self.visibility = visibility or default_visibility_policy()
        self.role_resolver = RoleResolver(taxonomy)
        self.default_limit = settings.USER_SEARCH_DEFAULT_LIMIT if default_limit is None else default_limit

    def for_user_in_course(
        self,
        term: Union[str, int],
        course: Course,
        viewer: Optional[User],
        **options,
    ) -> List[User]:
        return self.execute(SearchRequest(term, course, viewer, SearchOptions(**options)))

    def execute(self, request: SearchRequest) -> List[User]:
        config = self.config if self.config is not None else UserSearchConfig.current()
        options = request.options
        role_filter = self.role_resolver.resolve(options.enrollment_type, options.enrollment_role)

        limit = self.default_limit if options.limit is None else max(int(options.limit), 0)
        if limit == 0:
            return []

        candidates = self._candidates(request.course, request.viewer, role_filter)
        classification = classify(request.term)
        matches = Q(pk__in=self._name_matches(candidates, request.term, config))
        if config.full_complexity:
            matches |= Q(pk__in=self._sis_matches(candidates, request.term))
            matches |= Q(pk__in=self._email_matches(candidates, request.term, config))
            record_id = classification.as_id
            if record_id is not None:
                matches |= Q(pk__in=candidates.filter(pk=record_id).values("pk"))

        users = list(
            User.objects.filter(matches).order_by(UnicodeLower("sortable_name"), "id")[:limit]
        )
        logger.debug(
            "User search in course %s by viewer %s (numeric=%s, email=%s, full=%s, gist=%s) matched %d users",
            request.course.pk,
            getattr(request.viewer, "pk", None),
            classification.is_numeric,
            classification.looks_like_email,
            config.full_complexity,
            config.substring_mode,
            len(users),
        )
        return users

    def scope_for(
        self,
        course: Course,
        viewer: Optional[User],
        enrollment_type: RoleOption = None,
        enrollment_role: RoleOption = None,
    ) -> QuerySet[User]:
        """The users of ``course`` visible to ``viewer`` under a role filter."""

        role_filter = self.role_resolver.resolve(enrollment_type, enrollment_role)
        return self._candidates(course, viewer, role_filter)

    def _candidates(self, course: Course, viewer: Optional[User], role_filter: RoleFilter) -> QuerySet[User]:
        enrollments = (
            self.visibility.visible_enrollments(course, viewer)
            .filter(course=course, workflow_state=Enrollment.ACTIVE)
            .filter(role_filter.as_q())
        )
        return User.objects.filter(pk__in=enrollments.values("user_id"))

    def _name_matches(self, candidates: QuerySet[User], term, config: UserSearchConfig) -> QuerySet:
        pattern = build_pattern(term, config.substring_mode)
        return candidates.filter(name__like_pattern=pattern).values("pk")

    def _sis_matches(self, candidates: QuerySet[User], term) -> QuerySet:
        pattern = build_pattern(term, substring_mode=False)
        return SystemIdentifier.objects.filter(
            user__in=candidates,
            kind=SystemIdentifier.SIS,
            workflow_state=SystemIdentifier.ACTIVE,
            value__like_pattern=pattern,
        ).values("user_id")

    def _email_matches(self, candidates: QuerySet[User], term, config: UserSearchConfig) -> QuerySet:
        pattern = build_pattern(term, config.substring_mode)
        return ContactChannel.objects.filter(
            user__in=candidates,
            path_type=ContactChannel.EMAIL,
            workflow_state=ContactChannel.ACTIVE,
            path__like_pattern=pattern,
        ).values("user_id")


def search(
    term: Union[str, int],
    course: Course,
    viewer: Optional[User],
    *,
    limit: Optional[int] = None,
    enrollment_type: RoleOption = None,
    enrollment_role: RoleOption = None,
    config: Optional[UserSearchConfig] = None,
) -> List[User]:
    return UserSearch(config=config).for_user_in_course(
        term,
        course,
        viewer,
        limit=limit,
        enrollment_type=enrollment_type,
        enrollment_role=enrollment_role,
    )
