"""
Unit tests for the GitHub schema source.
"""

import base64
from unittest.mock import Mock

import pytest
import requests

from graphql_changelog.config import SchemaSourceSettings
from graphql_changelog.exceptions import SchemaFetchError
from graphql_changelog.sources import GitHubClient, fetch_current_schema

pytestmark = pytest.mark.unit

SCHEMA_SDL = "type Query { viewer: String }\n"
API = "https://api.github.com"


def _response(payload=None, error=None):
    response = Mock()
    response.json.return_value = payload
    if error is not None:
        response.raise_for_status.side_effect = error
    return response


def _session(routes):
    session = Mock()
    session.headers = {}

    def _get(url, params=None, timeout=None):
        return routes[url]

    session.get.side_effect = _get
    return session


def _routes(tree=None):
    if tree is None:
        tree = [
            {"path": "config", "type": "tree", "sha": "t1"},
            {"path": "config/schema.docs.graphql", "type": "blob", "sha": "b1"},
        ]
    return {
        f"{API}/repos/github/github/git/ref/heads/master": _response({"object": {"sha": "c1"}}),
        f"{API}/repos/github/github/git/trees/c1": _response({"tree": tree, "truncated": False}),
        f"{API}/repos/github/github/git/blobs/b1": _response(
            {"content": base64.b64encode(SCHEMA_SDL.encode("utf-8")).decode("ascii"), "encoding": "base64"}
        ),
    }


def test_fetch_schema_resolves_ref_tree_and_blob():
    session = _session(_routes())
    client = GitHubClient("secret", session=session)

    assert client.fetch_schema("github", "github", "heads/master", "config/schema.docs.graphql") == SCHEMA_SDL
    assert session.headers["Authorization"] == "token secret"
    tree_call = session.get.call_args_list[1]
    assert tree_call.kwargs["params"] == {"recursive": 1}
    assert tree_call.kwargs["timeout"] == 30


def test_fetch_current_schema_uses_source_settings():
    source = SchemaSourceSettings(timeout_seconds=5)
    session = _session(_routes())

    assert fetch_current_schema("secret", source, session=session) == SCHEMA_SDL
    assert all(call.kwargs["timeout"] == 5 for call in session.get.call_args_list)


def test_missing_blob_raises():
    session = _session(_routes(tree=[{"path": "README.md", "type": "blob", "sha": "r1"}]))
    client = GitHubClient("secret", session=session)

    with pytest.raises(SchemaFetchError, match="config/schema.docs.graphql"):
        client.fetch_schema("github", "github", "heads/master", "config/schema.docs.graphql")


def test_http_error_is_wrapped_and_not_retried():
    routes = _routes()
    routes[f"{API}/repos/github/github/git/ref/heads/master"] = _response(
        error=requests.HTTPError("404 Client Error: Not Found")
    )
    session = _session(routes)
    client = GitHubClient("secret", session=session)

    with pytest.raises(SchemaFetchError) as exc_info:
        client.get_tree("github", "github", "heads/master")

    assert exc_info.value.url == f"{API}/repos/github/github/git/ref/heads/master"
    assert isinstance(exc_info.value.__cause__, requests.HTTPError)
    assert session.get.call_count == 1


def test_undecodable_blob_raises():
    routes = _routes()
    routes[f"{API}/repos/github/github/git/blobs/b1"] = _response({"encoding": "base64"})
    client = GitHubClient("secret", session=_session(routes))

    with pytest.raises(SchemaFetchError):
        client.fetch_schema("github", "github", "heads/master", "config/schema.docs.graphql")


def test_non_utf8_blob_raises():
    routes = _routes()
    routes[f"{API}/repos/github/github/git/blobs/b1"] = _response(
        {"content": base64.b64encode(b"\xff\xfe type").decode("ascii"), "encoding": "base64"}
    )
    client = GitHubClient("secret", session=_session(routes))

    with pytest.raises(SchemaFetchError, match="not UTF-8") as exc_info:
        client.fetch_schema("github", "github", "heads/master", "config/schema.docs.graphql")
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
