"""
Django settings for the private chat backend.

Chat-specific values (allow-list, length limits, poll interval) live in
``config.json`` next to ``manage.py``; everything else can be overridden
from the environment. Debug mode is off unless ``DJANGO_DEBUG`` opts in.
"""

import json
import logging
import os
from pathlib import Path

from django.core.management.utils import get_random_secret_key

BASE_DIR = Path(__file__).resolve().parent.parent

DEBUG = os.environ.get("DJANGO_DEBUG", "0").lower() in ("1", "true", "yes")

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY")
if not SECRET_KEY:
    # No signed data outlives the process.
    logging.getLogger("api").warning("DJANGO_SECRET_KEY is not set; using a random per-process key")
    SECRET_KEY = get_random_secret_key()

ALLOWED_HOSTS = [
    h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,[::1]").split(",") if h
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "backend.urls"

ASGI_APPLICATION = "backend.asgi.application"

TEMPLATES = []

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("CHAT_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

STATIC_URL = "static/"
STATIC_DIR = BASE_DIR / "static"
STATICFILES_DIRS = [STATIC_DIR]

APPEND_SLASH = False


CONFIG_PATH = BASE_DIR / "config.json"
with open(CONFIG_PATH) as f:
    CONFIG = json.load(f)

CHAT_ALLOWED_USERS = frozenset(u.strip().lower() for u in CONFIG["allowed_users"])
CHAT_MAX_CONTENT_LEN = CONFIG.get("max_content_len", 4096)
CHAT_POLL_INTERVAL_MS = CONFIG.get("poll_interval_ms", 1000)

# "database" or "memory"
CHAT_STORE_BACKEND = os.environ.get("CHAT_STORE_BACKEND", "database")


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "[%(asctime)s] %(levelname)s %(name)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "api": {
            "handlers": ["console"],
            "level": os.environ.get("CHAT_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
