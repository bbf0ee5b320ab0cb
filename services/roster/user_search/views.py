"""API views for searching course rosters."""
from __future__ import annotations

from typing import Optional

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.request import Request
from rest_framework.response import Response

from accounts.models import User
from accounts.serializers import UserSerializer
from courses.models import Course

from .errors import InvalidRoleError
from .search import UserSearch
from .serializers import UserSearchParamsSerializer

VIEWER_HEADER = "X-User-Id"


def _viewer_from(request: Request) -> Optional[User]:
    """The viewer named by the gateway-set header, or None for anonymous requests.

    The header is trusted as is, so the service must only be reachable through
    the gateway that authenticates callers and sets it.
    """

    viewer_id = request.headers.get(VIEWER_HEADER, "").strip()
    if not (viewer_id.isascii() and viewer_id.isdigit()):
        return None
    return User.objects.filter(pk=int(viewer_id)).first()


@api_view(["GET"])
def course_user_search(request: Request, course_id: int) -> Response:
    """Search the users of a course that the requesting viewer can see."""

    course = get_object_or_404(Course, pk=course_id)
    data = {
        "search_term": request.query_params.get("search_term", ""),
        "enrollment_type": request.query_params.getlist("enrollment_type"),
        "enrollment_role": request.query_params.getlist("enrollment_role"),
    }
    if "limit" in request.query_params:
        data["limit"] = request.query_params["limit"]
    params_serializer = UserSearchParamsSerializer(data=data)
    params_serializer.is_valid(raise_exception=True)
    params = params_serializer.validated_data

    try:
        users = UserSearch().for_user_in_course(
            params["search_term"],
            course,
            _viewer_from(request),
            limit=params.get("limit"),
            enrollment_type=params.get("enrollment_type") or None,
            enrollment_role=params.get("enrollment_role") or None,
        )
    except InvalidRoleError as exc:
        return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(UserSerializer(users, many=True).data)


@api_view(["GET"])
def health(request: Request) -> Response:  # type: ignore[override]
    """Readiness endpoint for orchestration tooling."""

    return Response({"status": "ok"})
