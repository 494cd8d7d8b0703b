from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class ApiConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "api"

    def ready(self):
        from .models import USERNAME_MAX_LENGTH

        too_long = sorted(u for u in settings.CHAT_ALLOWED_USERS if len(u) > USERNAME_MAX_LENGTH)
        if too_long:
            raise ImproperlyConfigured(
                f"allowed_users longer than {USERNAME_MAX_LENGTH} characters: {too_long}"
            )
