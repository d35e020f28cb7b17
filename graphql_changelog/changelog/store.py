"""
Persistence of the changelog document (a JSON list, newest entry first).
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from ..exceptions import ChangelogFormatError
from .entry import ChangelogEntry

logger = logging.getLogger(__name__)


def read_changelog(path: Union[str, Path]) -> list[dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as handle:
        entries = json.load(handle)
    if not isinstance(entries, list):
        raise ChangelogFormatError(
            f"Changelog at {path} must be a JSON list, got {type(entries).__name__}",
            path=str(path),
        )
    return entries


def write_changelog(path: Union[str, Path], entries: list[dict[str, Any]]) -> None:
    content = json.dumps(entries, indent=2, ensure_ascii=False)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def prepend_entry(path: Union[str, Path], entry: ChangelogEntry) -> list[dict[str, Any]]:
    """Insert ``entry`` at the front of the changelog and rewrite the file."""
    entries = read_changelog(path)
    entries.insert(0, entry.to_dict())
    write_changelog(path, entries)
    logger.info("Wrote changelog entry for %s to %s", entry.date, path)
    return entries
