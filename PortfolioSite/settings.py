"""
Django settings for PortfolioSite.

Only the pieces the content rendering app needs are configured here; the
CRUD surfaces (posts, projects, courses, newsletter, payments) live in
their own apps and bring their own settings.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"

ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rendering",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# --- Content rendering ---

# Extra Python-Markdown extensions enabled for markdown content.
# Raw HTML escaping and heading ids are always installed on top of these.
CONTENT_MARKDOWN_EXTENSIONS = [
    "fenced_code",
    "tables",
    "sane_lists",
]

# Reading speed used by the reading_time filter.
CONTENT_READING_WPM = 200

# Run the syntax-highlighting pass in render_for_display.
CONTENT_HIGHLIGHT_ENABLED = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {asctime} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "rendering": {
            "handlers": ["console"],
            "level": os.environ.get("RENDERING_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
