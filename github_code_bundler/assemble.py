"""Render fetched files into the bundle text."""

from .errors import NoContentRetrievedError
from .models import MIN_BUNDLE_CHARS, AssembledBundle, FetchReport, FileContent, RepositoryInfo


def render_header(info: RepositoryInfo, file_count: int, truncated: bool, tree_truncated: bool = False) -> str:
    visibility = " (Private)" if info.private else ""
    lines = [
        f"// Repository: {info.full_name}{visibility}",
        f"// Analyzed Files: {file_count}",
        f"// Truncated: {'Yes (Size Limit)' if truncated else 'No'}",
    ]
    if tree_truncated:
        lines.append("// Tree Listing: Incomplete (Server Limit)")
    return "\n".join(lines) + "\n"


def render_file(file: FileContent) -> str:
    return f"\n\n--- START OF FILE: {file.path} ---\n{file.body}\n--- END OF FILE: {file.path} ---\n"


def assemble_bundle(info: RepositoryInfo, report: FetchReport, tree_truncated: bool = False) -> AssembledBundle:
    """Build the bundle; an empty or near-empty result is a failure."""
    files = report.included
    text = render_header(info, len(files), report.hit_total_cap, tree_truncated)
    text += "".join(render_file(f) for f in files)

    if not files or len(text) < MIN_BUNDLE_CHARS:
        raise NoContentRetrievedError(info.full_name)

    return AssembledBundle(
        info=info,
        files=files,
        text=text,
        truncated=report.hit_total_cap,
        tree_truncated=tree_truncated,
        skipped=report.skipped,
    )
