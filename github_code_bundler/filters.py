"""Path predicates deciding which repository files are worth fetching."""

from collections.abc import Iterable

from .models import MAX_FILE_BYTES, TreeNode

# Binary, asset, lockfile and declarative-data extensions
IGNORED_EXTENSIONS = (
    ".png", ".jpg", ".jpeg", ".gif", ".svg", ".ico", ".pdf", ".zip",
    ".lock", ".json", ".md", ".txt", ".css", ".map", ".mp4", ".mp3",
    ".wav", ".woff", ".woff2", ".ttf", ".eot", ".csv", ".xml",
)
# Generated bundles and lockfiles that share a source extension
IGNORED_ENDINGS = (".min.js", ".min.css", ".bundle.js", "-lock.yaml")

# Matched as substrings anywhere in the path
IGNORED_DIRS = (
    "node_modules", "dist", "build", ".git", ".github", "coverage",
    "__pycache__", "venv", "bin", "obj", "vendor", "public/assets",
)


def is_source_path(path: str) -> bool:
    """True unless the path ends in a denylisted extension or suffix."""
    lower = path.lower()
    return not lower.endswith(IGNORED_EXTENSIONS + IGNORED_ENDINGS)


def is_ignored_dir(path: str) -> bool:
    return any(d in path for d in IGNORED_DIRS)


def is_candidate(node: TreeNode, max_file_bytes: int = MAX_FILE_BYTES) -> bool:
    """Check whether a tree node should be fetched.

    Nodes with an unknown size pass here and are size-checked after fetch.
    """
    if not node.is_blob:
        return False
    if not is_source_path(node.path) or is_ignored_dir(node.path):
        return False
    return node.size is None or node.size < max_file_bytes


def filter_candidates(nodes: Iterable[TreeNode], max_file_bytes: int = MAX_FILE_BYTES) -> list[TreeNode]:
    """Keep candidate nodes in tree order."""
    return [n for n in nodes if is_candidate(n, max_file_bytes)]
