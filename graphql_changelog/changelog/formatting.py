"""
Message and title cleanup for the published changelog.
"""

import re
from typing import Any, Iterable

# Single-quoted GraphQL names, e.g. 'Query.viewer' or 'first: Int'.
_QUOTED_NAME_RE = re.compile(r"'([a-zA-Z. :!]+)'")
_NON_ANCHOR_CHARS_RE = re.compile(r"[^\w-]", re.ASCII)

_PREVIEW_TITLE_RENAMES = {
    "UpdateRefsPreview": "Update refs preview",
    "MergeInfoPreview": "Merge info preview",
}


def clean_message(message: str) -> str:
    """Replace single quotes around GraphQL names with backticks."""
    return _QUOTED_NAME_RE.sub(r"`\1`", message)


def clean_messages_from_changes(changes: Iterable[Any]) -> list[str]:
    return [clean_message(change.message) for change in changes]


def clean_preview_title(title: str) -> str:
    """Turn a preview name from the schema source into its docs display name."""
    if title in _PREVIEW_TITLE_RENAMES:
        return _PREVIEW_TITLE_RENAMES[title]
    if not title.endswith("preview"):
        return f"{title} preview"
    return title


def preview_anchor(preview_title: str) -> str:
    """
    Build the URL fragment of a preview section on the schema previews page.

    >>> preview_anchor("Update refs preview")
    'update-refs-preview'
    """
    return _NON_ANCHOR_CHARS_RE.sub("", preview_title.lower().replace(" ", "-"))
