"""
Standalone settings for running graphql_changelog outside a Django project.
Projects that install the app use their own settings instead.
"""

import os
from pathlib import Path

BASE_DIR = Path(os.environ.get("GRAPHQL_CHANGELOG_BASE_DIR", os.getcwd())).resolve()

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "django-insecure-graphql-changelog-default-key-change-me"
)

DEBUG = os.environ.get("DJANGO_DEBUG", "False").lower() == "true"

INSTALLED_APPS = [
    "graphql_changelog",
]

DATABASES = {}

USE_TZ = True

GRAPHQL_CHANGELOG = {
    "old_schema_path": str(BASE_DIR / "data" / "graphql" / "schema.docs.graphql"),
    "previews_path": str(BASE_DIR / "data" / "graphql" / "graphql_previews.yml"),
    "changelog_path": str(BASE_DIR / "lib" / "graphql" / "static" / "changelog.json"),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{levelname}] {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "graphql_changelog": {
            "handlers": ["console"],
            "level": os.environ.get("GRAPHQL_CHANGELOG_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
