"""
Custom exceptions for changelog generation.

Every failure aborts the run; nothing here is recovered locally.
"""

from typing import Optional


class ChangelogError(Exception):
    """Base exception for changelog generation errors."""


class MissingCredentialError(ChangelogError):
    """Raised when the access token is absent from the environment."""

    def __init__(self, message: str, env_var: Optional[str] = None):
        self.env_var = env_var
        super().__init__(message)


class UnknownChangeTypeError(ChangelogError):
    """Raised when a diff record carries a kind that is neither reported nor ignored."""

    def __init__(self, change_type: object, path: Optional[str] = None):
        self.change_type = change_type
        self.path = path
        kind = getattr(change_type, "value", change_type)
        super().__init__(
            f"This change type should be added to REPORTABLE_CHANGE_TYPES "
            f"or IGNORED_CHANGE_TYPES: {kind}"
        )


class SchemaFetchError(ChangelogError):
    """Raised when the remote schema document cannot be retrieved."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class PreviewDefinitionError(ChangelogError, ValueError):
    """Raised when the preview definitions document is malformed."""


class ChangelogFormatError(ChangelogError, ValueError):
    """Raised when the persisted changelog is not a JSON list."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
