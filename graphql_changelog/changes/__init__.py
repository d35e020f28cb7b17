"""
Schema change package.
"""

from .classifier import (
    IGNORED_CHANGE_TYPES,
    REPORTABLE_CHANGE_TYPES,
    filter_reportable_changes,
    get_change_disposition,
)
from .comparator import SchemaComparator
from .types import ChangeDisposition, ChangeRecord, ChangeType

__all__ = [
    "SchemaComparator",
    "ChangeRecord",
    "ChangeType",
    "ChangeDisposition",
    "REPORTABLE_CHANGE_TYPES",
    "IGNORED_CHANGE_TYPES",
    "filter_reportable_changes",
    "get_change_disposition",
]
