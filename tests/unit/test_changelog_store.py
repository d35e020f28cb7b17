import json

import pytest

from graphql_changelog.changelog import ChangelogEntry, ChangelogSection, prepend_entry, read_changelog, write_changelog
from graphql_changelog.exceptions import ChangelogFormatError

pytestmark = pytest.mark.unit


def test_prepend_entry_puts_new_entry_first(tmp_path):
    path = tmp_path / "changelog.json"
    previous = [
        {
            "schemaChanges": [{"title": "The GraphQL schema includes these changes:", "changes": ["Type `Team` was added"]}],
            "previewChanges": [],
            "upcomingChanges": [],
            "date": "2019-11-20",
        }
    ]
    path.write_text(json.dumps(previous, indent=2), encoding="utf-8")
    entry = ChangelogEntry(
        schema_changes=[ChangelogSection(title="The GraphQL schema includes these changes:", changes=["Type `User` was added"])],
        date="2020-01-02",
    )

    entries = prepend_entry(path, entry)

    assert [e["date"] for e in entries] == ["2020-01-02", "2019-11-20"]
    assert read_changelog(path) == entries
    assert path.read_text(encoding="utf-8").startswith('[\n  {\n    "schemaChanges"')


def test_non_list_changelog_is_rejected(tmp_path):
    path = tmp_path / "changelog.json"
    path.write_text('{"entries": []}', encoding="utf-8")

    with pytest.raises(ChangelogFormatError) as exc_info:
        read_changelog(path)
    assert exc_info.value.path == str(path)


def test_unserialisable_entries_leave_changelog_intact(tmp_path):
    path = tmp_path / "changelog.json"
    path.write_text('[{"date": "2019-11-20"}]', encoding="utf-8")

    with pytest.raises(TypeError):
        write_changelog(path, [{"date": object()}])

    assert read_changelog(path) == [{"date": "2019-11-20"}]
