"""Route registration for user search endpoints."""
from __future__ import annotations

from django.urls import path

from .views import course_user_search, health

urlpatterns = [
    path("healthz/", health, name="roster-health"),
    path(
        "courses/<int:course_id>/users/search/",
        course_user_search,
        name="course-user-search",
    ),
]
