import pytest

from graphql_changelog.changes import (
    IGNORED_CHANGE_TYPES,
    REPORTABLE_CHANGE_TYPES,
    ChangeDisposition,
    ChangeRecord,
    ChangeType,
    filter_reportable_changes,
    get_change_disposition,
)
from graphql_changelog.exceptions import UnknownChangeTypeError

pytestmark = pytest.mark.unit


def test_kind_sets_are_disjoint_and_cover_every_change_type():
    assert not REPORTABLE_CHANGE_TYPES & IGNORED_CHANGE_TYPES
    assert REPORTABLE_CHANGE_TYPES | IGNORED_CHANGE_TYPES == set(ChangeType)
    assert len(REPORTABLE_CHANGE_TYPES) == 23
    assert len(IGNORED_CHANGE_TYPES) == 29


def test_disposition_accepts_enum_members_and_string_values():
    assert get_change_disposition(ChangeType.FIELD_REMOVED) is ChangeDisposition.REPORT
    assert get_change_disposition("FIELD_REMOVED") is ChangeDisposition.REPORT
    assert get_change_disposition("FIELD_DESCRIPTION_CHANGED") is ChangeDisposition.IGNORE
    assert get_change_disposition("FIELD_RENAMED") is ChangeDisposition.UNKNOWN
    assert get_change_disposition(None) is ChangeDisposition.UNKNOWN


def test_reportable_changes_keep_order_and_identity():
    changes = [
        ChangeRecord(ChangeType.TYPE_ADDED, "User", "Type 'User' was added"),
        ChangeRecord(ChangeType.TYPE_DESCRIPTION_ADDED, "User", "Description 'x' was added to type 'User'"),
        ChangeRecord(ChangeType.FIELD_REMOVED, "Query.foo", "Field 'foo' was removed from object type 'Query'"),
        ChangeRecord(ChangeType.DIRECTIVE_ADDED, "@cached", "Directive 'cached' was added"),
        ChangeRecord("ENUM_VALUE_ADDED", "Color.BLUE", "Enum value 'BLUE' was added to enum 'Color'"),
    ]

    reportable = filter_reportable_changes(changes)

    assert reportable == [changes[0], changes[2], changes[4]]
    assert all(a is b for a, b in zip(reportable, [changes[0], changes[2], changes[4]]))


def test_unknown_change_type_aborts_classification():
    changes = [
        ChangeRecord(ChangeType.FIELD_ADDED, "Query.bar", "Field 'bar' was added to object type 'Query'"),
        ChangeRecord("SCHEMA_RENAMED", "Query", "Something new"),
    ]

    with pytest.raises(UnknownChangeTypeError) as exc_info:
        filter_reportable_changes(changes)

    assert exc_info.value.change_type == "SCHEMA_RENAMED"
    assert exc_info.value.path == "Query"
    assert "SCHEMA_RENAMED" in str(exc_info.value)


def test_empty_input_yields_no_changes():
    assert filter_reportable_changes([]) == []
