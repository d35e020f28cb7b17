"""
Preview definitions and attribution of changes to previews.

A preview is an opt-in part of the schema. Its definition lists the schema
paths it toggles on; any change at or below one of those paths belongs to the
preview instead of the general schema section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import yaml

from ..exceptions import PreviewDefinitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewDefinition:
    title: str
    toggled_on: tuple[str, ...] = ()
    description: str = ""
    toggled_by: Optional[str] = None


@dataclass
class PreviewChanges:
    title: str
    changes: list[Any] = field(default_factory=list)


@dataclass
class PreviewSegmentation:
    schema_changes: list[Any] = field(default_factory=list)
    preview_changes: dict[str, PreviewChanges] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.schema_changes and not self.preview_changes


def load_previews(path: Union[str, Path]) -> list[PreviewDefinition]:
    """Read the preview definitions YAML document."""
    with open(path, "r", encoding="utf-8") as handle:
        try:
            payload = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            logger.error("Failed to parse preview definitions %s: %s", path, exc)
            raise PreviewDefinitionError(f"Invalid YAML in {path}: {exc}") from exc
    previews = parse_previews(payload)
    logger.info("Loaded %s preview definitions from %s", len(previews), path)
    return previews


def parse_previews(payload: Any) -> list[PreviewDefinition]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise PreviewDefinitionError(
            f"Preview definitions must be a list, got {type(payload).__name__}"
        )
    return [_parse_preview(item, index) for index, item in enumerate(payload)]


def _parse_preview(item: Any, index: int) -> PreviewDefinition:
    if not isinstance(item, dict):
        raise PreviewDefinitionError(f"Preview definition #{index} must be a mapping")
    title = item.get("title")
    if not title:
        raise PreviewDefinitionError(f"Preview definition #{index} has no title")

    toggled_on = item.get("toggled_on") or []
    if isinstance(toggled_on, str):
        toggled_on = [toggled_on]
    if not isinstance(toggled_on, list):
        raise PreviewDefinitionError(
            f"Preview '{title}' toggled_on must be a list of schema paths"
        )

    return PreviewDefinition(
        title=str(title),
        toggled_on=tuple(str(path) for path in toggled_on if path),
        description=str(item.get("description") or ""),
        toggled_by=item.get("toggled_by"),
    )


def build_preview_index(previews: Iterable[Any]) -> dict[str, str]:
    """Map every toggled-on path to its preview title; later previews win."""
    path_to_preview: dict[str, str] = {}
    for preview in previews:
        for path in preview.toggled_on:
            previous = path_to_preview.get(path)
            if previous is not None and previous != preview.title:
                logger.debug(
                    "Path '%s' claimed by preview '%s' and '%s'; keeping the latter",
                    path, previous, preview.title,
                )
            path_to_preview[path] = preview.title
    return path_to_preview


def find_preview_for_path(path: str, path_to_preview: dict[str, str]) -> Optional[str]:
    """Return the preview covering ``path`` or its closest ancestor, if any."""
    path_parts = [part for part in (path or "").split(".") if part]
    while path_parts:
        preview_title = path_to_preview.get(".".join(path_parts))
        if preview_title:
            return preview_title
        path_parts = path_parts[:-1]
    return None


def segment_preview_changes(changes: Iterable[Any], previews: Iterable[Any]) -> PreviewSegmentation:
    """Split changes into the general schema bucket and one bucket per preview."""
    path_to_preview = build_preview_index(previews)
    segmentation = PreviewSegmentation()

    for change in changes:
        preview_title = find_preview_for_path(change.path, path_to_preview)
        if preview_title is None:
            segmentation.schema_changes.append(change)
            continue
        bucket = segmentation.preview_changes.get(preview_title)
        if bucket is None:
            bucket = segmentation.preview_changes[preview_title] = PreviewChanges(title=preview_title)
        bucket.changes.append(change)

    return segmentation
