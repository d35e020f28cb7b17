"""
Changelog entry construction.

Compares two SDL documents and turns the reportable differences into one
changelog entry, split between the general schema and preview sections.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional

from graphql import GraphQLSchema, build_schema

from ..changes import SchemaComparator, filter_reportable_changes
from .formatting import clean_messages_from_changes, clean_preview_title, preview_anchor
from .previews import segment_preview_changes

logger = logging.getLogger(__name__)

SCHEMA_CHANGES_TITLE = "The GraphQL schema includes these changes:"
SCHEMA_PREVIEWS_PATH = "/graphql/overview/schema-previews"


@dataclass(frozen=True)
class ChangelogSection:
    title: str
    changes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "changes": list(self.changes)}


@dataclass(frozen=True)
class ChangelogEntry:
    schema_changes: list[ChangelogSection] = field(default_factory=list)
    preview_changes: list[ChangelogSection] = field(default_factory=list)
    # Never populated; kept so every entry has the same shape.
    upcoming_changes: list[ChangelogSection] = field(default_factory=list)
    date: Optional[str] = None

    def stamp(self, today: Optional[datetime.date] = None) -> "ChangelogEntry":
        """Return a copy dated ``today`` (defaults to the current local date)."""
        today = today or datetime.date.today()
        return replace(self, date=today.strftime("%Y-%m-%d"))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "schemaChanges": [section.to_dict() for section in self.schema_changes],
            "previewChanges": [section.to_dict() for section in self.preview_changes],
            "upcomingChanges": [section.to_dict() for section in self.upcoming_changes],
        }
        if self.date:
            data["date"] = self.date
        return data


def load_schema(source: str) -> GraphQLSchema:
    """Build a schema from SDL; malformed documents raise ``GraphQLError``."""
    return build_schema(source)


def preview_section_title(preview_title: str) -> str:
    clean_title = clean_preview_title(preview_title)
    return (
        f"The [{clean_title}]({SCHEMA_PREVIEWS_PATH}#{preview_anchor(clean_title)}) "
        f"includes these changes:"
    )


def create_changelog_entry(
    old_schema_string: str,
    new_schema_string: str,
    previews: Iterable[Any],
    comparator: Optional[SchemaComparator] = None,
) -> Optional[ChangelogEntry]:
    """
    Compare two schema documents and build a changelog entry.

    Args:
        old_schema_string: SDL of the currently published schema
        new_schema_string: SDL of the freshly fetched schema
        previews: Preview definitions used to attribute changes
        comparator: Comparator to diff with; a default one is created if omitted

    Returns:
        The entry, undated, or None when no change is worth reporting

    Raises:
        GraphQLError: if either document is not valid SDL
        UnknownChangeTypeError: if the diff holds an unclassified change kind
    """
    old_schema = load_schema(old_schema_string)
    new_schema = load_schema(new_schema_string)

    changes = (comparator or SchemaComparator()).compare(old_schema, new_schema)
    changes_to_report = filter_reportable_changes(changes)
    logger.info(
        "%s of %s schema changes are reportable", len(changes_to_report), len(changes)
    )

    segmentation = segment_preview_changes(changes_to_report, previews)
    if segmentation.is_empty():
        return None

    schema_sections = []
    if segmentation.schema_changes:
        schema_sections.append(
            ChangelogSection(
                title=SCHEMA_CHANGES_TITLE,
                changes=clean_messages_from_changes(segmentation.schema_changes),
            )
        )

    preview_sections = [
        ChangelogSection(
            title=preview_section_title(preview_title),
            changes=clean_messages_from_changes(preview_changes.changes),
        )
        for preview_title, preview_changes in segmentation.preview_changes.items()
    ]

    return ChangelogEntry(schema_changes=schema_sections, preview_changes=preview_sections)
