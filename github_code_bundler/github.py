"""GitHub API client using PyGithub, scoped to one acquisition call."""

import logging

import requests
from github import Auth, Github, GithubException

from .errors import RateLimitedError, RemoteApiError, RepositoryNotFoundError
from .models import DEFAULT_BRANCH, RepositoryInfo

logging.getLogger("github").setLevel(logging.ERROR)
logging.getLogger("github.Requester").setLevel(logging.ERROR)
logging.getLogger("urllib3").setLevel(logging.ERROR)

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

RATE_LIMIT_STATUSES = (403, 429)


def _status_text(e: GithubException) -> str:
    if isinstance(e.data, dict) and e.data.get("message"):
        return str(e.data["message"])
    return str(e)


class GitHubClient:
    """GitHub REST client bound to a single optional credential.

    Every call made through one instance carries the same credential. No
    automatic retries: rate limits surface as RateLimitedError.
    """

    def __init__(self, credential: str | None = None, timeout: float = DEFAULT_TIMEOUT):
        self._credential = credential
        self._timeout = timeout
        self._github: Github | None = None
        self._repo_cache: dict[str, object] = {}  # repo objects resolved during this call

    @property
    def authenticated(self) -> bool:
        return bool(self._credential)

    @property
    def github(self) -> Github:
        """Lazy-initialize the GitHub client."""
        if self._github is None:
            auth = Auth.Token(self._credential) if self._credential else None
            self._github = Github(auth=auth, retry=None, timeout=self._timeout, per_page=100)
        return self._github

    def _repo(self, owner: str, repo: str):
        repo_key = f"{owner}/{repo}"
        repo_obj = self._repo_cache.get(repo_key)
        if repo_obj is None:
            repo_obj = self.github.get_repo(repo_key)
            self._repo_cache[repo_key] = repo_obj
        return repo_obj

    def get_repository_info(self, owner: str, repo: str) -> RepositoryInfo:
        """Resolve default branch and visibility for a repository."""
        repo_key = f"{owner}/{repo}"
        try:
            repo_obj = self._repo(owner, repo)
        except GithubException as e:
            if e.status in RATE_LIMIT_STATUSES:
                raise RateLimitedError() from e
            elif e.status == 404:
                raise RepositoryNotFoundError(repo_key, authenticated=self.authenticated) from e
            raise RemoteApiError(f"GitHub API error ({e.status}): {_status_text(e)}", status=e.status) from e
        except requests.RequestException as e:
            raise RemoteApiError(f"GitHub API request failed for {repo_key}: {e}") from e

        branch = repo_obj.default_branch or DEFAULT_BRANCH
        log.debug("Resolved %s default branch %s", repo_key, branch)
        return RepositoryInfo(
            owner=owner,
            repo=repo,
            default_branch=branch,
            private=bool(repo_obj.private),
        )

    def get_tree(self, owner: str, repo: str, ref: str) -> dict:
        """Get the raw recursive tree payload for a ref.

        Raises GithubException / requests.RequestException untouched; the
        tree enumerator maps them.
        """
        tree = self._repo(owner, repo).get_git_tree(ref, recursive=True)
        return tree.raw_data

    def get_file_content(self, owner: str, repo: str, path: str, ref: str) -> dict:
        """Get file content from the contents endpoint.

        Returns dict with 'content' (base64 encoded) and 'encoding' keys.
        """
        contents = self._repo(owner, repo).get_contents(path, ref=ref)
        if isinstance(contents, list):
            raise IsADirectoryError(f"Path is a directory: {path}")
        return {
            "content": contents.content,
            "encoding": contents.encoding,
            "size": contents.size,
            "path": contents.path,
        }

    def close(self) -> None:
        if self._github is not None:
            self._github.close()
            self._github = None
