"""Validation and expansion of role filters for roster searches."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Union

from django.db.models import Q

from courses.models import Enrollment, Role

from .errors import InvalidRoleError

logger = logging.getLogger(__name__)

RoleOption = Union[str, Sequence[str], None]


class RoleTaxonomy:
    """Source of the base role types and of named roles built on them."""

    def base_role_types(self) -> Dict[str, str]:
        """Map every accepted short key (``"ta"``) to its base type (``"TaEnrollment"``)."""

        raise NotImplementedError

    def base_role_for(self, role_name: str) -> Optional[str]:
        """Return the base type a named role is built on, or None if unknown."""

        raise NotImplementedError


class DatabaseRoleTaxonomy(RoleTaxonomy):
    """Taxonomy backed by the enrollment types and the custom Role table."""

    def base_role_types(self) -> Dict[str, str]:
        types: Dict[str, str] = {}
        for enrollment_type, _ in Enrollment.TYPE_CHOICES:
            types[enrollment_type.removesuffix("Enrollment").lower()] = enrollment_type
        return types

    def base_role_for(self, role_name: str) -> Optional[str]:
        if role_name in dict(Enrollment.TYPE_CHOICES):
            return role_name
        return (
            Role.objects.filter(name=role_name, workflow_state=Role.ACTIVE)
            .values_list("base_role_type", flat=True)
            .first()
        )


@dataclass(frozen=True)
class RoleFilter:
    """The enrollment types a search is restricted to.

    ``None`` means no restriction at all.
    """

    enrollment_types: Optional[FrozenSet[str]] = None

    @property
    def is_restricted(self) -> bool:
        return self.enrollment_types is not None

    def as_q(self) -> Q:
        if self.enrollment_types is None:
            return Q()
        return Q(type__in=sorted(self.enrollment_types))


def _as_list(value: RoleOption) -> List[object]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class RoleResolver:
    """Turns ``enrollment_type`` and ``enrollment_role`` options into a RoleFilter.

    ``enrollment_type`` takes short keys (``"student"``, ``"ta"``) or full type
    names. ``enrollment_role`` takes named roles and matches every enrollment
    whose base type is the role's base type. When both are given the resulting
    type sets are combined with OR.
    """

    def __init__(self, taxonomy: Optional[RoleTaxonomy] = None) -> None:
        self.taxonomy = taxonomy or DatabaseRoleTaxonomy()

    def resolve(
        self,
        enrollment_type: RoleOption = None,
        enrollment_role: RoleOption = None,
    ) -> RoleFilter:
        types = _as_list(enrollment_type)
        roles = _as_list(enrollment_role)
        if not types and not roles:
            return RoleFilter()

        resolved = set(self._resolve_types(types))
        resolved.update(self._resolve_roles(roles))
        return RoleFilter(frozenset(resolved))

    def _resolve_types(self, values: Iterable[object]) -> Iterable[str]:
        known = self.taxonomy.base_role_types()
        full_names = set(known.values())
        for value in values:
            if not isinstance(value, str):
                raise self._reject("enrollment_type", value)
            if value in full_names:
                yield value
            elif value.lower() in known:
                yield known[value.lower()]
            else:
                raise self._reject("enrollment_type", value)

    def _resolve_roles(self, values: Iterable[object]) -> Iterable[str]:
        for value in values:
            base_role = self.taxonomy.base_role_for(value) if isinstance(value, str) else None
            if base_role is None:
                raise self._reject("enrollment_role", value)
            yield base_role

    @staticmethod
    def _reject(option: str, value: object) -> InvalidRoleError:
        logger.info("Rejected %s filter value %r", option, value)
        return InvalidRoleError(option, value)
