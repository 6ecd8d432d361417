"""Shared fixtures: a mocked GitHub API and a mocked raw content host.

Only external calls are faked: PyGithub objects with MagicMock, the raw host
with httpx.MockTransport. Everything between them runs for real.
"""

import base64
from unittest.mock import MagicMock, patch

import httpx
import pytest
from github import GithubException

from github_code_bundler.github import GitHubClient
from github_code_bundler.raw_client import RawContentClient


class FakeGitHub:
    """In-memory repository served through mocked PyGithub objects."""

    def __init__(self):
        self.default_branch = "main"
        self.private = False
        self.truncated = False
        self.tree: list[dict] = []
        self.files: dict[str, str] = {}
        self.repo_error: Exception | None = None
        self.raw_requests: list[httpx.Request] = []
        self.content_requests: list[str] = []

    def add_file(self, path: str, body: str, declare_size: bool = True):
        entry = {"path": path, "type": "blob", "mode": "100644"}
        if declare_size:
            entry["size"] = len(body.encode("utf-8"))
        self.tree.append(entry)
        self.files[path] = body

    def add_dir(self, path: str):
        self.tree.append({"path": path, "type": "tree", "mode": "040000"})

    def _get_contents(self, path, ref=None):
        self.content_requests.append(path)
        if path not in self.files:
            raise GithubException(404, {"message": "Not Found"}, {})
        return MagicMock(
            content=base64.b64encode(self.files[path].encode("utf-8")).decode("ascii"),
            encoding="base64",
            size=len(self.files[path]),
            path=path,
        )

    def github(self) -> MagicMock:
        mock = MagicMock()
        if self.repo_error is not None:
            mock.get_repo.side_effect = self.repo_error
            return mock
        repo = mock.get_repo.return_value
        repo.default_branch = self.default_branch
        repo.private = self.private
        repo.get_git_tree.return_value.raw_data = {
            "sha": "deadbeef",
            "tree": self.tree,
            "truncated": self.truncated,
        }
        repo.get_contents.side_effect = self._get_contents
        return mock

    def raw_handler(self, request: httpx.Request) -> httpx.Response:
        self.raw_requests.append(request)
        prefix = f"/octocat/hello/{self.default_branch}/"
        path = request.url.path
        if path.startswith(prefix) and path[len(prefix):] in self.files:
            return httpx.Response(200, text=self.files[path[len(prefix):]])
        return httpx.Response(404, text="404: Not Found")


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def clients(fake_github):
    """Patch client construction in the acquire module to use the fakes."""
    created = {}

    def make_github_client(credential=None):
        client = GitHubClient(credential)
        client._github = fake_github.github()
        created["github"] = client
        return client

    def make_raw_client(credential=None):
        client = RawContentClient(credential, transport=httpx.MockTransport(fake_github.raw_handler))
        created["raw"] = client
        return client

    with patch("github_code_bundler.acquire.get_github_client", side_effect=make_github_client), patch(
        "github_code_bundler.acquire.get_raw_client", side_effect=make_raw_client
    ):
        yield created
