"""File transports: one is chosen per acquisition call from credential presence."""

import base64
import binascii
import logging
from typing import Protocol

import httpx
import requests
from github import GithubException

from ..errors import FileFetchError
from ..github import GitHubClient
from ..models import RepositoryInfo
from ..raw_client import RawContentClient, raw_file_url

log = logging.getLogger(__name__)


class FileTransport(Protocol):
    def fetch(self, path: str) -> str:
        """Return the file body as text or raise FileFetchError."""
        ...


def decode_content(path: str, data: dict) -> str:
    """Decode a contents-API envelope into text."""
    content, encoding = data.get("content"), data.get("encoding")
    if content is None:
        raise FileFetchError(path, "no content in response", decode=True)
    if encoding != "base64":
        raise FileFetchError(path, f"unsupported encoding {encoding!r}", decode=True)
    try:
        return base64.b64decode(content).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        # UnicodeDecodeError is a ValueError
        raise FileFetchError(path, f"could not decode content: {e}", decode=True) from e


class ContentsApiTransport:
    """Authenticated contents endpoint, returning base64 JSON envelopes."""

    def __init__(self, client: GitHubClient, info: RepositoryInfo):
        self._client = client
        self._info = info

    def fetch(self, path: str) -> str:
        info = self._info
        try:
            data = self._client.get_file_content(info.owner, info.repo, path, ref=info.default_branch)
        except GithubException as e:
            raise FileFetchError(path, f"contents API returned {e.status}") from e
        except (requests.RequestException, IsADirectoryError) as e:
            raise FileFetchError(path, str(e)) from e
        return decode_content(path, data)


class RawHostTransport:
    """Unauthenticated raw-content host, returning bodies verbatim."""

    def __init__(self, client: RawContentClient, info: RepositoryInfo):
        self._client = client
        self._info = info

    def fetch(self, path: str) -> str:
        info = self._info
        url = raw_file_url(info.owner, info.repo, info.default_branch, path)
        try:
            return self._client.get_text(url)
        except httpx.HTTPStatusError as e:
            raise FileFetchError(path, f"raw host returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FileFetchError(path, f"raw fetch failed: {e}") from e


def select_transport(
    github_client: GitHubClient,
    raw_client: RawContentClient,
    info: RepositoryInfo,
) -> FileTransport:
    """Pick the transport once; the GitHub client's credential decides."""
    if github_client.authenticated:
        log.debug("Fetching %s files through the contents API", info.full_name)
        return ContentsApiTransport(github_client, info)
    log.debug("Fetching %s files from the raw content host", info.full_name)
    return RawHostTransport(raw_client, info)
