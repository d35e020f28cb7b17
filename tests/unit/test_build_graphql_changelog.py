import json
import re
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from graphql_changelog.exceptions import SchemaFetchError

pytestmark = pytest.mark.unit

COMMAND_MODULE = "graphql_changelog.management.commands.build_graphql_changelog"

OLD_SCHEMA = "type Query { foo: String }\n"
NEW_SCHEMA = "type Query { bar: Int }\n"


@pytest.fixture
def docs_files(tmp_path):
    old_schema = tmp_path / "schema.docs.graphql"
    old_schema.write_text(OLD_SCHEMA, encoding="utf-8")
    previews = tmp_path / "graphql_previews.yml"
    previews.write_text("- title: UpdateRefsPreview\n  toggled_on:\n    - Mutation.updateRefs\n", encoding="utf-8")
    changelog = tmp_path / "changelog.json"
    changelog.write_text(json.dumps([{"schemaChanges": [], "previewChanges": [], "upcomingChanges": [], "date": "2019-01-01"}]), encoding="utf-8")
    return {
        "old_schema_path": str(old_schema),
        "previews_path": str(previews),
        "changelog_path": str(changelog),
    }


def test_command_prepends_dated_entry(docs_files, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "secret")
    out = StringIO()

    with patch(f"{COMMAND_MODULE}.fetch_current_schema", return_value=NEW_SCHEMA) as fetch:
        call_command("build_graphql_changelog", stdout=out, **docs_files)

    assert fetch.call_args.args[0] == "secret"
    with open(docs_files["changelog_path"], encoding="utf-8") as f:
        entries = json.load(f)
    assert len(entries) == 2
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", entries[0]["date"])
    assert entries[0]["schemaChanges"] == [
        {
            "title": "The GraphQL schema includes these changes:",
            "changes": [
                "Field `bar` was added to object type `Query`",
                "Field `foo` was removed from object type `Query`",
            ],
        }
    ]
    assert entries[0]["previewChanges"] == []
    assert entries[0]["upcomingChanges"] == []
    assert entries[1]["date"] == "2019-01-01"
    assert "written to" in out.getvalue()


def test_command_dry_run_leaves_changelog_untouched(docs_files, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "secret")
    with open(docs_files["changelog_path"], encoding="utf-8") as f:
        before = f.read()
    out = StringIO()

    with patch(f"{COMMAND_MODULE}.fetch_current_schema", return_value=NEW_SCHEMA):
        call_command("build_graphql_changelog", dry_run=True, stdout=out, **docs_files)

    printed = json.loads(out.getvalue())
    assert printed["schemaChanges"][0]["changes"][0] == "Field `bar` was added to object type `Query`"
    with open(docs_files["changelog_path"], encoding="utf-8") as f:
        assert f.read() == before


def test_command_reports_nothing_to_do(docs_files, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "secret")
    out = StringIO()

    with patch(f"{COMMAND_MODULE}.fetch_current_schema", return_value=OLD_SCHEMA):
        call_command("build_graphql_changelog", stdout=out, **docs_files)

    assert "No changelog-worthy schema changes found." in out.getvalue()
    with open(docs_files["changelog_path"], encoding="utf-8") as f:
        assert len(json.load(f)) == 1


def test_command_requires_token_before_any_io(docs_files, monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with patch(f"{COMMAND_MODULE}.fetch_current_schema") as fetch, \
            patch(f"{COMMAND_MODULE}.load_previews") as load_previews:
        with pytest.raises(CommandError, match="GITHUB_TOKEN"):
            call_command("build_graphql_changelog", **docs_files)

    fetch.assert_not_called()
    load_previews.assert_not_called()


def test_command_surfaces_fetch_failure(docs_files, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "secret")

    with patch(f"{COMMAND_MODULE}.fetch_current_schema", side_effect=SchemaFetchError("GitHub request failed")):
        with pytest.raises(CommandError, match="GitHub request failed"):
            call_command("build_graphql_changelog", **docs_files)


def test_command_surfaces_malformed_schema(docs_files, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "secret")

    with patch(f"{COMMAND_MODULE}.fetch_current_schema", return_value="type Query {"):
        with pytest.raises(CommandError):
            call_command("build_graphql_changelog", **docs_files)


def test_command_surfaces_invalid_previews_yaml(docs_files, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "secret")
    with open(docs_files["previews_path"], "w", encoding="utf-8") as f:
        f.write("- title: Broken\n  toggled_on: [Query\n")

    with patch(f"{COMMAND_MODULE}.fetch_current_schema", return_value=NEW_SCHEMA):
        with pytest.raises(CommandError, match="Invalid YAML"):
            call_command("build_graphql_changelog", **docs_files)
