"""
Configuration management for graphql_changelog.

This module provides a settings proxy that resolves values from the Django
``GRAPHQL_CHANGELOG`` setting first and the library defaults second.
"""

from typing import Any

from django.conf import settings

from .defaults import LIBRARY_DEFAULTS, merge_settings

SETTINGS_NAME = "GRAPHQL_CHANGELOG"


class SettingsProxy:
    """
    Proxy for accessing changelog settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Global Django settings (GRAPHQL_CHANGELOG)
    2. Library defaults (LIBRARY_DEFAULTS)
    """

    def as_dict(self) -> dict[str, Any]:
        """Return the defaults merged with the Django overrides."""
        return merge_settings(LIBRARY_DEFAULTS, self._get_django_settings())

    def _get_django_settings(self) -> dict[str, Any]:
        value = getattr(settings, SETTINGS_NAME, {})
        return value if isinstance(value, dict) else {}


def get_settings_proxy() -> SettingsProxy:
    """Get a fresh settings proxy instance."""
    return SettingsProxy()
