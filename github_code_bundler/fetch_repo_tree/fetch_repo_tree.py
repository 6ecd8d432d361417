"""Resolve a repository's default branch and list its files."""

import logging

import requests
from github import GithubException

from ..errors import TreeFetchError
from ..github import GitHubClient
from ..models import RepositoryInfo, TreeListing, TreeNode

log = logging.getLogger(__name__)


def decode_tree(payload: object) -> TreeListing:
    """Validate a git/trees payload into TreeNodes.

    Entries without a string path and type are dropped. A size that is not an
    integer is treated as unknown, never as zero.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("tree"), list):
        raise TreeFetchError("Malformed tree response from GitHub.")

    nodes = []
    for entry in payload["tree"]:
        if not isinstance(entry, dict):
            log.debug("Dropping non-object tree entry: %r", entry)
            continue
        path, node_type = entry.get("path"), entry.get("type")
        if not isinstance(path, str) or not isinstance(node_type, str) or not path:
            log.debug("Dropping tree entry without path/type: %r", entry)
            continue
        size = entry.get("size")
        if not isinstance(size, int) or isinstance(size, bool):
            size = None
        nodes.append(TreeNode(path=path, type=node_type, size=size))

    return TreeListing(nodes=nodes, truncated=bool(payload.get("truncated", False)))


def fetch_tree(client: GitHubClient, info: RepositoryInfo) -> TreeListing:
    """Fetch the recursive file tree for the repository's default branch."""
    try:
        payload = client.get_tree(info.owner, info.repo, info.default_branch)
    except GithubException as e:
        raise TreeFetchError(
            f"Failed to fetch repository structure for {info.full_name} ({e.status}).",
            status=e.status,
        ) from e
    except requests.RequestException as e:
        raise TreeFetchError(f"Failed to fetch repository structure for {info.full_name}: {e}") from e

    listing = decode_tree(payload)
    if listing.truncated:
        log.warning(
            "Repository %s is too large, file tree was truncated (%d entries returned)",
            info.full_name,
            len(listing.nodes),
        )
    return listing


def enumerate_repository(client: GitHubClient, owner: str, repo: str) -> tuple[RepositoryInfo, TreeListing]:
    """Resolve metadata then list the tree. Errors propagate as AcquisitionErrors."""
    info = client.get_repository_info(owner, repo)
    listing = fetch_tree(client, info)
    log.info("Listed %d tree entries for %s@%s", len(listing.nodes), info.full_name, info.default_branch)
    return info, listing
