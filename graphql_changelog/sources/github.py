"""GitHub git-data API client used to fetch the current schema document."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Optional

import requests

from ..config import SchemaSourceSettings
from ..exceptions import SchemaFetchError

logger = logging.getLogger(__name__)


class GitHubClient:
    """Minimal client for the refs, trees and blobs endpoints."""

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        timeout_seconds: int = 30,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github+json",
            }
        )

    @classmethod
    def from_settings(cls, token: str, source: SchemaSourceSettings, **kwargs: Any) -> "GitHubClient":
        return cls(token, api_url=source.api_url, timeout_seconds=source.timeout_seconds, **kwargs)

    def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        url = f"{self.api_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            logger.error("GitHub request failed for %s: %s", url, exc)
            raise SchemaFetchError(f"GitHub request failed for {url}: {exc}", url=url) from exc
        except ValueError as exc:
            raise SchemaFetchError(f"GitHub response for {url} is not JSON", url=url) from exc

    def get_commit_sha(self, owner: str, repo: str, ref: str) -> str:
        data = self._get_json(f"/repos/{owner}/{repo}/git/ref/{ref}")
        try:
            return data["object"]["sha"]
        except (KeyError, TypeError) as exc:
            raise SchemaFetchError(f"Ref '{ref}' of {owner}/{repo} has no commit sha") from exc

    def get_tree(self, owner: str, repo: str, ref: str) -> list[dict[str, Any]]:
        """List every entry of the tree at ``ref``, recursively."""
        commit_sha = self.get_commit_sha(owner, repo, ref)
        data = self._get_json(
            f"/repos/{owner}/{repo}/git/trees/{commit_sha}", params={"recursive": 1}
        )
        if data.get("truncated"):
            logger.warning("Tree of %s/%s at %s was truncated by the API", owner, repo, ref)
        return data.get("tree", [])

    def get_contents_for_blob(self, owner: str, repo: str, blob: dict[str, Any]) -> bytes:
        data = self._get_json(f"/repos/{owner}/{repo}/git/blobs/{blob['sha']}")
        try:
            return base64.b64decode(data["content"])
        except (KeyError, TypeError, binascii.Error) as exc:
            raise SchemaFetchError(f"Blob {blob['sha']} of {owner}/{repo} could not be decoded") from exc

    def fetch_schema(self, owner: str, repo: str, ref: str, schema_path: str) -> str:
        """Return the text of the first blob whose path contains ``schema_path``."""
        tree = self.get_tree(owner, repo, ref)
        schema_blob = next(
            (entry for entry in tree if schema_path in entry.get("path", "") and entry.get("type") == "blob"),
            None,
        )
        if schema_blob is None:
            raise SchemaFetchError(f"No blob matching '{schema_path}' in {owner}/{repo} at {ref}")
        logger.info("Fetching %s from %s/%s at %s", schema_blob["path"], owner, repo, ref)
        content = self.get_contents_for_blob(owner, repo, schema_blob)
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SchemaFetchError(f"Blob {schema_blob['path']} of {owner}/{repo} is not UTF-8 text") from exc


def fetch_current_schema(token: str, source: SchemaSourceSettings, session: Optional[requests.Session] = None) -> str:
    client = GitHubClient.from_settings(token, source, session=session)
    return client.fetch_schema(source.owner, source.repo, source.ref, source.schema_path)
