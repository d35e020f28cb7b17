"""
Type definitions for schema changes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ChangeType(str, Enum):
    """Kinds of change the schema comparator can report."""

    # Field arguments
    FIELD_ARGUMENT_DESCRIPTION_CHANGED = "FIELD_ARGUMENT_DESCRIPTION_CHANGED"
    FIELD_ARGUMENT_DEFAULT_CHANGED = "FIELD_ARGUMENT_DEFAULT_CHANGED"
    FIELD_ARGUMENT_TYPE_CHANGED = "FIELD_ARGUMENT_TYPE_CHANGED"
    # Directives
    DIRECTIVE_REMOVED = "DIRECTIVE_REMOVED"
    DIRECTIVE_ADDED = "DIRECTIVE_ADDED"
    DIRECTIVE_DESCRIPTION_CHANGED = "DIRECTIVE_DESCRIPTION_CHANGED"
    DIRECTIVE_LOCATION_ADDED = "DIRECTIVE_LOCATION_ADDED"
    DIRECTIVE_LOCATION_REMOVED = "DIRECTIVE_LOCATION_REMOVED"
    DIRECTIVE_ARGUMENT_ADDED = "DIRECTIVE_ARGUMENT_ADDED"
    DIRECTIVE_ARGUMENT_REMOVED = "DIRECTIVE_ARGUMENT_REMOVED"
    DIRECTIVE_ARGUMENT_DESCRIPTION_CHANGED = "DIRECTIVE_ARGUMENT_DESCRIPTION_CHANGED"
    DIRECTIVE_ARGUMENT_DEFAULT_VALUE_CHANGED = "DIRECTIVE_ARGUMENT_DEFAULT_VALUE_CHANGED"
    DIRECTIVE_ARGUMENT_TYPE_CHANGED = "DIRECTIVE_ARGUMENT_TYPE_CHANGED"
    # Enums
    ENUM_VALUE_REMOVED = "ENUM_VALUE_REMOVED"
    ENUM_VALUE_ADDED = "ENUM_VALUE_ADDED"
    ENUM_VALUE_DESCRIPTION_CHANGED = "ENUM_VALUE_DESCRIPTION_CHANGED"
    ENUM_VALUE_DEPRECATION_REASON_CHANGED = "ENUM_VALUE_DEPRECATION_REASON_CHANGED"
    ENUM_VALUE_DEPRECATION_REASON_ADDED = "ENUM_VALUE_DEPRECATION_REASON_ADDED"
    ENUM_VALUE_DEPRECATION_REASON_REMOVED = "ENUM_VALUE_DEPRECATION_REASON_REMOVED"
    # Fields
    FIELD_REMOVED = "FIELD_REMOVED"
    FIELD_ADDED = "FIELD_ADDED"
    FIELD_DESCRIPTION_CHANGED = "FIELD_DESCRIPTION_CHANGED"
    FIELD_DESCRIPTION_ADDED = "FIELD_DESCRIPTION_ADDED"
    FIELD_DESCRIPTION_REMOVED = "FIELD_DESCRIPTION_REMOVED"
    FIELD_DEPRECATION_ADDED = "FIELD_DEPRECATION_ADDED"
    FIELD_DEPRECATION_REMOVED = "FIELD_DEPRECATION_REMOVED"
    FIELD_DEPRECATION_REASON_CHANGED = "FIELD_DEPRECATION_REASON_CHANGED"
    FIELD_DEPRECATION_REASON_ADDED = "FIELD_DEPRECATION_REASON_ADDED"
    FIELD_DEPRECATION_REASON_REMOVED = "FIELD_DEPRECATION_REASON_REMOVED"
    FIELD_TYPE_CHANGED = "FIELD_TYPE_CHANGED"
    FIELD_ARGUMENT_ADDED = "FIELD_ARGUMENT_ADDED"
    FIELD_ARGUMENT_REMOVED = "FIELD_ARGUMENT_REMOVED"
    # Input types
    INPUT_FIELD_REMOVED = "INPUT_FIELD_REMOVED"
    INPUT_FIELD_ADDED = "INPUT_FIELD_ADDED"
    INPUT_FIELD_DESCRIPTION_ADDED = "INPUT_FIELD_DESCRIPTION_ADDED"
    INPUT_FIELD_DESCRIPTION_REMOVED = "INPUT_FIELD_DESCRIPTION_REMOVED"
    INPUT_FIELD_DESCRIPTION_CHANGED = "INPUT_FIELD_DESCRIPTION_CHANGED"
    INPUT_FIELD_DEFAULT_VALUE_CHANGED = "INPUT_FIELD_DEFAULT_VALUE_CHANGED"
    INPUT_FIELD_TYPE_CHANGED = "INPUT_FIELD_TYPE_CHANGED"
    # Object types
    OBJECT_TYPE_INTERFACE_ADDED = "OBJECT_TYPE_INTERFACE_ADDED"
    OBJECT_TYPE_INTERFACE_REMOVED = "OBJECT_TYPE_INTERFACE_REMOVED"
    # Schema roots
    SCHEMA_QUERY_TYPE_CHANGED = "SCHEMA_QUERY_TYPE_CHANGED"
    SCHEMA_MUTATION_TYPE_CHANGED = "SCHEMA_MUTATION_TYPE_CHANGED"
    SCHEMA_SUBSCRIPTION_TYPE_CHANGED = "SCHEMA_SUBSCRIPTION_TYPE_CHANGED"
    # Types
    TYPE_REMOVED = "TYPE_REMOVED"
    TYPE_ADDED = "TYPE_ADDED"
    TYPE_KIND_CHANGED = "TYPE_KIND_CHANGED"
    TYPE_DESCRIPTION_CHANGED = "TYPE_DESCRIPTION_CHANGED"
    TYPE_DESCRIPTION_REMOVED = "TYPE_DESCRIPTION_REMOVED"
    TYPE_DESCRIPTION_ADDED = "TYPE_DESCRIPTION_ADDED"
    # Unions
    UNION_MEMBER_REMOVED = "UNION_MEMBER_REMOVED"
    UNION_MEMBER_ADDED = "UNION_MEMBER_ADDED"


class ChangeDisposition(Enum):
    """What the changelog does with a change kind."""
    REPORT = "REPORT"
    IGNORE = "IGNORE"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class ChangeRecord:
    """A single difference between two schemas."""
    type: Union[ChangeType, str]
    path: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            'type': getattr(self.type, 'value', self.type),
            'path': self.path,
            'message': self.message,
        }
