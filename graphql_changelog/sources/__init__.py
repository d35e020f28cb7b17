"""
Remote schema sources.
"""

from .github import GitHubClient, fetch_current_schema

__all__ = ["GitHubClient", "fetch_current_schema"]
