"""
Changelog generation package.

This package turns a schema diff into documentation-ready changelog entries
and keeps the changelog document up to date.
"""

from .entry import ChangelogEntry, ChangelogSection, create_changelog_entry, load_schema
from .formatting import clean_message, clean_messages_from_changes, clean_preview_title, preview_anchor
from .previews import (
    PreviewChanges,
    PreviewDefinition,
    PreviewSegmentation,
    build_preview_index,
    load_previews,
    segment_preview_changes,
)
from .store import prepend_entry, read_changelog, write_changelog

__all__ = [
    "ChangelogEntry",
    "ChangelogSection",
    "PreviewChanges",
    "PreviewDefinition",
    "PreviewSegmentation",
    "build_preview_index",
    "clean_message",
    "clean_messages_from_changes",
    "clean_preview_title",
    "create_changelog_entry",
    "load_previews",
    "load_schema",
    "preview_anchor",
    "prepend_entry",
    "read_changelog",
    "segment_preview_changes",
    "write_changelog",
]
