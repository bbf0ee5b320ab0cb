"""ASGI config for the roster service."""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "roster_service.settings")

application = get_asgi_application()
