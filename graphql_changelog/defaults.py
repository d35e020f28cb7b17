"""
Library defaults for graphql_changelog.

Projects override any of these through the ``GRAPHQL_CHANGELOG`` Django
setting; nested dictionaries are merged key by key.
"""

from typing import Any

LIBRARY_DEFAULTS: dict[str, Any] = {
    # Local documents
    "old_schema_path": "data/graphql/schema.docs.graphql",
    "previews_path": "data/graphql/graphql_previews.yml",
    "changelog_path": "lib/graphql/static/changelog.json",
    # Credential lookup
    "token_env_var": "GITHUB_TOKEN",
    # Remote schema source
    "source": {
        "owner": "github",
        "repo": "github",
        "ref": "heads/master",
        "schema_path": "config/schema.docs.graphql",
        "api_url": "https://api.github.com",
        "timeout_seconds": 30,
    },
}


def merge_settings(*settings_dicts: dict[str, Any]) -> dict[str, Any]:
    """
    Merge multiple settings dictionaries with deep merging for nested dicts.
    Later dictionaries override earlier ones.
    """
    result: dict[str, Any] = {}
    for settings_dict in settings_dicts:
        for key, value in settings_dict.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = merge_settings(result[key], value)
            else:
                result[key] = value
    return result
