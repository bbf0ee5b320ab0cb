"""URL configuration for the roster service."""
from django.urls import include, path

urlpatterns = [
    path("api/", include("user_search.urls")),
]
