"""
Change classification.

Every kind the comparator can emit is listed in exactly one of the two sets
below. A kind found in neither stops the run so that new diff kinds are
never dropped or published without a decision.
"""

import logging
from typing import Any, Iterable

from ..exceptions import UnknownChangeTypeError
from .types import ChangeDisposition, ChangeType

logger = logging.getLogger(__name__)

REPORTABLE_CHANGE_TYPES = frozenset({
    ChangeType.FIELD_ARGUMENT_DEFAULT_CHANGED,
    ChangeType.FIELD_ARGUMENT_TYPE_CHANGED,
    ChangeType.ENUM_VALUE_REMOVED,
    ChangeType.ENUM_VALUE_ADDED,
    ChangeType.FIELD_REMOVED,
    ChangeType.FIELD_ADDED,
    ChangeType.FIELD_TYPE_CHANGED,
    ChangeType.FIELD_ARGUMENT_ADDED,
    ChangeType.FIELD_ARGUMENT_REMOVED,
    ChangeType.OBJECT_TYPE_INTERFACE_ADDED,
    ChangeType.OBJECT_TYPE_INTERFACE_REMOVED,
    ChangeType.INPUT_FIELD_REMOVED,
    ChangeType.INPUT_FIELD_ADDED,
    ChangeType.INPUT_FIELD_DEFAULT_VALUE_CHANGED,
    ChangeType.INPUT_FIELD_TYPE_CHANGED,
    ChangeType.TYPE_REMOVED,
    ChangeType.TYPE_ADDED,
    ChangeType.TYPE_KIND_CHANGED,
    ChangeType.UNION_MEMBER_REMOVED,
    ChangeType.UNION_MEMBER_ADDED,
    ChangeType.SCHEMA_QUERY_TYPE_CHANGED,
    ChangeType.SCHEMA_MUTATION_TYPE_CHANGED,
    ChangeType.SCHEMA_SUBSCRIPTION_TYPE_CHANGED,
})

IGNORED_CHANGE_TYPES = frozenset({
    ChangeType.FIELD_ARGUMENT_DESCRIPTION_CHANGED,
    ChangeType.DIRECTIVE_REMOVED,
    ChangeType.DIRECTIVE_ADDED,
    ChangeType.DIRECTIVE_DESCRIPTION_CHANGED,
    ChangeType.DIRECTIVE_LOCATION_ADDED,
    ChangeType.DIRECTIVE_LOCATION_REMOVED,
    ChangeType.DIRECTIVE_ARGUMENT_ADDED,
    ChangeType.DIRECTIVE_ARGUMENT_REMOVED,
    ChangeType.DIRECTIVE_ARGUMENT_DESCRIPTION_CHANGED,
    ChangeType.DIRECTIVE_ARGUMENT_DEFAULT_VALUE_CHANGED,
    ChangeType.DIRECTIVE_ARGUMENT_TYPE_CHANGED,
    ChangeType.ENUM_VALUE_DESCRIPTION_CHANGED,
    ChangeType.ENUM_VALUE_DEPRECATION_REASON_CHANGED,
    ChangeType.ENUM_VALUE_DEPRECATION_REASON_ADDED,
    ChangeType.ENUM_VALUE_DEPRECATION_REASON_REMOVED,
    ChangeType.FIELD_DESCRIPTION_CHANGED,
    ChangeType.FIELD_DESCRIPTION_ADDED,
    ChangeType.FIELD_DESCRIPTION_REMOVED,
    ChangeType.FIELD_DEPRECATION_ADDED,
    ChangeType.FIELD_DEPRECATION_REMOVED,
    ChangeType.FIELD_DEPRECATION_REASON_CHANGED,
    ChangeType.FIELD_DEPRECATION_REASON_ADDED,
    ChangeType.FIELD_DEPRECATION_REASON_REMOVED,
    ChangeType.INPUT_FIELD_DESCRIPTION_ADDED,
    ChangeType.INPUT_FIELD_DESCRIPTION_REMOVED,
    ChangeType.INPUT_FIELD_DESCRIPTION_CHANGED,
    ChangeType.TYPE_DESCRIPTION_CHANGED,
    ChangeType.TYPE_DESCRIPTION_REMOVED,
    ChangeType.TYPE_DESCRIPTION_ADDED,
})


def get_change_disposition(change_type: Any) -> ChangeDisposition:
    """Map a change kind, or its string value, to what the changelog does with it."""
    try:
        kind = ChangeType(change_type)
    except ValueError:
        return ChangeDisposition.UNKNOWN
    if kind in REPORTABLE_CHANGE_TYPES:
        return ChangeDisposition.REPORT
    if kind in IGNORED_CHANGE_TYPES:
        return ChangeDisposition.IGNORE
    return ChangeDisposition.UNKNOWN


def filter_reportable_changes(changes: Iterable[Any]) -> list[Any]:
    """
    Keep the changes worth a changelog line, in their original order.

    Raises:
        UnknownChangeTypeError: on the first change whose kind is unclassified.
    """
    reportable = []
    for change in changes:
        disposition = get_change_disposition(change.type)
        if disposition is ChangeDisposition.REPORT:
            reportable.append(change)
        elif disposition is ChangeDisposition.IGNORE:
            logger.debug("Ignoring %s change at '%s'", change.type, change.path)
        else:
            raise UnknownChangeTypeError(change.type, path=getattr(change, "path", None))
    return reportable
