"""Fetch candidate files one at a time under count and byte budgets."""

import logging

from ..errors import FileFetchError
from ..models import (
    FetchBudget,
    FetchOutcome,
    FetchReport,
    FileContent,
    Included,
    Skipped,
    SkipReason,
    TreeNode,
)
from .transports import FileTransport

log = logging.getLogger(__name__)


def admit(budget: FetchBudget, path: str, body: str) -> FetchOutcome:
    """Decide whether a fetched body joins the bundle, updating the budget.

    Oversized files are dropped without using a file slot. A file that would
    push the total past the aggregate cap is dropped and marks the cap as hit.
    """
    file = FileContent(path=path, body=body)
    size = file.size
    if size > budget.max_file_bytes:
        return Skipped(path, SkipReason.OVERSIZED, f"{size} bytes")
    if budget.would_overflow(size):
        budget.hit_total_cap = True
        return Skipped(path, SkipReason.OVER_TOTAL_BUDGET, f"{size} bytes")

    budget.files += 1
    budget.total_bytes += size
    if budget.total_bytes >= budget.max_total_bytes:
        budget.hit_total_cap = True
    return Included(file)


def fetch_candidates(
    candidates: list[TreeNode],
    transport: FileTransport,
    budget: FetchBudget | None = None,
) -> FetchReport:
    """Fetch candidates in order until a budget runs out.

    Per-file failures are recorded as Skipped and never abort the loop.
    """
    budget = budget or FetchBudget()
    report = FetchReport()

    for node in candidates:
        if budget.exhausted:
            break
        if node.size is not None and budget.would_overflow(node.size):
            log.info("Stopping before %s: aggregate size limit reached", node.path)
            budget.hit_total_cap = True
            break

        try:
            body = transport.fetch(node.path)
        except FileFetchError as e:
            reason = SkipReason.DECODE_FAILED if e.decode else SkipReason.FETCH_FAILED
            log.info("Skipping %s: %s", node.path, e)
            report.outcomes.append(Skipped(node.path, reason, str(e)))
            continue

        outcome = admit(budget, node.path, body)
        if isinstance(outcome, Skipped):
            log.info("Skipping %s: %s (%s)", node.path, outcome.reason.value, outcome.detail)
        report.outcomes.append(outcome)

    report.hit_total_cap = budget.hit_total_cap
    log.info(
        "Fetched %d files (%d bytes), skipped %d",
        budget.files,
        budget.total_bytes,
        len(report.skipped),
    )
    return report
