"""Serializers for the user search endpoint."""
from __future__ import annotations

from rest_framework import serializers


class UserSearchParamsSerializer(serializers.Serializer):
    search_term = serializers.CharField(allow_blank=False, trim_whitespace=False)
    limit = serializers.IntegerField(required=False, min_value=0)
    enrollment_type = serializers.ListField(child=serializers.CharField(), required=False)
    enrollment_role = serializers.ListField(child=serializers.CharField(), required=False)
