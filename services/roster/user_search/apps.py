from django.apps import AppConfig


class UserSearchAppConfig(AppConfig):
    name = "user_search"
    verbose_name = "User search"

    def ready(self) -> None:
        from . import lookups  # noqa: F401
