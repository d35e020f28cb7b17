"""Configuration helpers for changelog generation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from .config_proxy import get_settings_proxy
from .defaults import LIBRARY_DEFAULTS
from .exceptions import MissingCredentialError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaSourceSettings:
    owner: str = "github"
    repo: str = "github"
    ref: str = "heads/master"
    schema_path: str = "config/schema.docs.graphql"
    api_url: str = "https://api.github.com"
    timeout_seconds: int = 30


@dataclass(frozen=True)
class ChangelogSettings:
    old_schema_path: str = "data/graphql/schema.docs.graphql"
    previews_path: str = "data/graphql/graphql_previews.yml"
    changelog_path: str = "lib/graphql/static/changelog.json"
    token_env_var: str = "GITHUB_TOKEN"
    source: SchemaSourceSettings = field(default_factory=SchemaSourceSettings)

    def with_overrides(self, **overrides: Any) -> "ChangelogSettings":
        """Return a copy with every non-empty override applied."""
        source_overrides = {
            key: overrides.pop(key)
            for key in ("owner", "repo", "ref", "schema_path")
            if key in overrides
        }
        values = {key: value for key, value in overrides.items() if value}
        source_values = {key: value for key, value in source_overrides.items() if value}
        updated = replace(self, **values)
        if source_values:
            updated = replace(updated, source=replace(updated.source, **source_values))
        return updated


def get_changelog_settings() -> ChangelogSettings:
    return _build_settings(get_settings_proxy().as_dict())


def _build_settings(config: dict[str, Any]) -> ChangelogSettings:
    source_defaults = LIBRARY_DEFAULTS["source"]
    source = config.get("source") or {}
    if not isinstance(source, dict):
        logger.warning("GRAPHQL_CHANGELOG['source'] must be a dict; using defaults")
        source = {}

    return ChangelogSettings(
        old_schema_path=str(config.get("old_schema_path") or LIBRARY_DEFAULTS["old_schema_path"]),
        previews_path=str(config.get("previews_path") or LIBRARY_DEFAULTS["previews_path"]),
        changelog_path=str(config.get("changelog_path") or LIBRARY_DEFAULTS["changelog_path"]),
        token_env_var=str(config.get("token_env_var") or LIBRARY_DEFAULTS["token_env_var"]),
        source=SchemaSourceSettings(
            owner=str(source.get("owner") or source_defaults["owner"]),
            repo=str(source.get("repo") or source_defaults["repo"]),
            ref=str(source.get("ref") or source_defaults["ref"]),
            schema_path=str(source.get("schema_path") or source_defaults["schema_path"]),
            api_url=str(source.get("api_url") or source_defaults["api_url"]).rstrip("/"),
            timeout_seconds=_coerce_timeout(
                source.get("timeout_seconds"), source_defaults["timeout_seconds"]
            ),
        ),
    )


def _coerce_timeout(value: Any, default: int) -> int:
    try:
        timeout = int(value)
    except (TypeError, ValueError):
        return default
    return timeout if timeout > 0 else default


def require_access_token(
    settings: ChangelogSettings, environ: Optional[Mapping[str, str]] = None
) -> str:
    """
    Return the access token or fail before any other work starts.

    Raises:
        MissingCredentialError: if the configured variable is unset or blank.
    """
    environ = os.environ if environ is None else environ
    token = (environ.get(settings.token_env_var) or "").strip()
    if not token:
        raise MissingCredentialError(
            f"Error! You must have a {settings.token_env_var} set in the "
            f"environment to run this command.",
            env_var=settings.token_env_var,
        )
    return token
