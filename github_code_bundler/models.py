"""Data models and constants for code bundling."""

from dataclasses import dataclass, field
from enum import Enum

GITHUB_HOST = "github.com"
GIST_HOST = "gist.github.com"
RAW_HOST = "raw.githubusercontent.com"
GIST_RAW_HOST = "gist.githubusercontent.com"

DEFAULT_BRANCH = "main"  # Used when repo metadata has no default_branch

# Fixed acquisition policy
MAX_FILES = 20
MAX_FILE_BYTES = 150_000  # Skips huge minified/generated files
MAX_TOTAL_BYTES = 800_000  # ~200k tokens of context
MIN_BUNDLE_CHARS = 50


class LocatorKind(str, Enum):
    BLOB = "blob"
    GIST = "gist"
    REPOSITORY = "repository"


@dataclass(frozen=True)
class Locator:
    """A classified locator string."""

    raw: str
    kind: LocatorKind
    owner: str | None = None
    repo: str | None = None
    raw_url: str | None = None

    @property
    def full_name(self) -> str | None:
        if self.owner and self.repo:
            return f"{self.owner}/{self.repo}"
        return None


@dataclass(frozen=True)
class RepositoryInfo:
    owner: str
    repo: str
    default_branch: str
    private: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class TreeNode:
    """One entry of a recursive tree listing. size is None when not declared."""

    path: str
    type: str
    size: int | None = None

    @property
    def is_blob(self) -> bool:
        return self.type == "blob"


@dataclass(frozen=True)
class TreeListing:
    nodes: list[TreeNode]
    truncated: bool = False


@dataclass(frozen=True)
class FileContent:
    path: str
    body: str

    @property
    def size(self) -> int:
        return len(self.body.encode("utf-8"))


class SkipReason(str, Enum):
    FETCH_FAILED = "fetch_failed"
    DECODE_FAILED = "decode_failed"
    OVERSIZED = "oversized"
    OVER_TOTAL_BUDGET = "over_total_budget"


@dataclass(frozen=True)
class Included:
    file: FileContent


@dataclass(frozen=True)
class Skipped:
    path: str
    reason: SkipReason
    detail: str = ""


FetchOutcome = Included | Skipped


@dataclass
class FetchBudget:
    """Running counters for one acquisition call."""

    max_files: int = MAX_FILES
    max_file_bytes: int = MAX_FILE_BYTES
    max_total_bytes: int = MAX_TOTAL_BYTES
    files: int = 0
    total_bytes: int = 0
    hit_total_cap: bool = False

    @property
    def exhausted(self) -> bool:
        return (
            self.files >= self.max_files
            or self.total_bytes >= self.max_total_bytes
            or self.hit_total_cap
        )

    def would_overflow(self, size: int) -> bool:
        return self.total_bytes + size > self.max_total_bytes


@dataclass
class FetchReport:
    outcomes: list[FetchOutcome] = field(default_factory=list)
    hit_total_cap: bool = False

    @property
    def included(self) -> list[FileContent]:
        return [o.file for o in self.outcomes if isinstance(o, Included)]

    @property
    def skipped(self) -> list[Skipped]:
        return [o for o in self.outcomes if isinstance(o, Skipped)]


@dataclass(frozen=True)
class AssembledBundle:
    """Final bundle for a repository locator, plus the diagnostics behind it."""

    info: RepositoryInfo
    files: list[FileContent]
    text: str
    truncated: bool = False
    tree_truncated: bool = False
    skipped: list[Skipped] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return sum(f.size for f in self.files)
