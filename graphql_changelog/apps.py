"""
Django app configuration for graphql_changelog.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for graphql_changelog."""

    name = "graphql_changelog"
    verbose_name = "GraphQL Changelog"
    label = "graphql_changelog"

    def ready(self):
        """Warn early about unusable configuration."""
        from django.conf import settings

        overrides = getattr(settings, "GRAPHQL_CHANGELOG", {})
        if not isinstance(overrides, dict):
            logger.warning(
                "GRAPHQL_CHANGELOG must be a dict, got %s; library defaults apply",
                type(overrides).__name__,
            )
