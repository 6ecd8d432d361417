"""Single entry point: locator string in, bundle text out."""

import logging

import httpx

from .assemble import assemble_bundle
from .errors import NoSuitableFilesError, RateLimitedError, RemoteApiError, RemoteFileNotFoundError
from .fetch_file_content import fetch_candidates, select_transport
from .fetch_repo_tree import enumerate_repository
from .filters import filter_candidates
from .github import GitHubClient
from .locator import classify_locator
from .models import AssembledBundle, FetchBudget, Locator, LocatorKind
from .raw_client import RawContentClient
from .settings import get_settings

log = logging.getLogger(__name__)


def get_github_client(credential: str | None = None) -> GitHubClient:
    """Create a GitHub client for one acquisition call."""
    return GitHubClient(credential, timeout=get_settings().request_timeout)


def get_raw_client(credential: str | None = None) -> RawContentClient:
    """Create a raw-content client for one acquisition call."""
    return RawContentClient(credential, timeout=get_settings().request_timeout)


def fetch_single_file(locator: Locator, credential: str | None = None) -> str:
    """Fetch a blob or gist raw URL and return its body verbatim."""
    raw_client = get_raw_client(credential)
    try:
        return raw_client.get_text(locator.raw_url)
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        if status == 404:
            raise RemoteFileNotFoundError(locator.raw_url, authenticated=bool(credential)) from e
        elif status in (403, 429):
            raise RateLimitedError() from e
        raise RemoteApiError(
            f"Failed to fetch file ({status} {e.response.reason_phrase}). "
            "Check if the URL is correct and public.",
            status=status,
        ) from e
    except httpx.HTTPError as e:
        raise RemoteApiError(f"Failed to fetch file {locator.raw_url}: {e}") from e
    finally:
        raw_client.close()


def acquire_bundle(locator: Locator, credential: str | None = None) -> AssembledBundle:
    """Run the repository pipeline for a classified repository locator."""
    github_client = get_github_client(credential)
    raw_client = get_raw_client(credential)
    try:
        info, listing = enumerate_repository(github_client, locator.owner, locator.repo)

        candidates = filter_candidates(listing.nodes)
        if not candidates:
            raise NoSuitableFilesError(info.full_name)
        log.info("%d of %d tree entries are candidates", len(candidates), len(listing.nodes))

        transport = select_transport(github_client, raw_client, info)
        report = fetch_candidates(candidates, transport, FetchBudget())
        return assemble_bundle(info, report, tree_truncated=listing.truncated)
    finally:
        github_client.close()
        raw_client.close()


def acquire_locator(locator: Locator, credential: str | None = None) -> str | AssembledBundle:
    """Dispatch a classified locator.

    Blob and gist locators yield their raw text; repository locators yield
    the assembled bundle with its diagnostics.
    """
    credential = credential or None
    log.info("Acquiring %s locator %s", locator.kind.value, locator.full_name or locator.raw_url)

    if locator.kind in (LocatorKind.BLOB, LocatorKind.GIST):
        return fetch_single_file(locator, credential)
    return acquire_bundle(locator, credential)


def acquire(raw_locator: str, credential: str | None = None) -> str:
    """Acquire a bundle of source text for a GitHub repository, blob or gist URL.

    Args:
        raw_locator: Repository, blob or gist URL as typed by a user.
        credential: Optional GitHub token used for every remote call.

    Returns:
        The raw file text for blob/gist locators, otherwise the assembled
        repository bundle.

    Raises:
        AcquisitionError: one of its subclasses, for every failure.
    """
    result = acquire_locator(classify_locator(raw_locator), credential)
    return result if isinstance(result, str) else result.text
