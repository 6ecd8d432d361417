"""CLI commands for bundling GitHub source code."""

import argparse
import logging
import sys
from pathlib import Path


def _credential(args) -> str | None:
    if args.token:
        return args.token
    from .settings import get_settings

    return get_settings().credential()


def _configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Bundle source code from a GitHub repository, file or gist",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # fetch subcommand
    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Fetch a repository, file or gist into one text bundle",
    )
    fetch_parser.add_argument(
        "locator",
        help="GitHub URL (e.g., https://github.com/owner/repo)",
    )
    fetch_parser.add_argument(
        "--token",
        default=None,
        help="GitHub token (default: GITHUB_TOKEN from environment or .env)",
    )
    fetch_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    fetch_parser.add_argument(
        "--stats",
        action="store_true",
        help="Print included/skipped file counts to stderr",
    )

    # classify subcommand
    classify_parser = subparsers.add_parser(
        "classify",
        help="Show how a locator would be acquired",
    )
    classify_parser.add_argument("locator", help="GitHub URL")

    # candidates subcommand
    candidates_parser = subparsers.add_parser(
        "candidates",
        help="List repository files that pass the filters, without fetching them",
    )
    candidates_parser.add_argument("locator", help="GitHub repository URL")
    candidates_parser.add_argument(
        "--token",
        default=None,
        help="GitHub token (default: GITHUB_TOKEN from environment or .env)",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    from .errors import AcquisitionError

    try:
        if args.command == "fetch":
            _fetch(args)
        elif args.command == "classify":
            _classify(args)
        elif args.command == "candidates":
            _candidates(args)
        else:
            parser.print_help()
    except AcquisitionError as e:
        sys.stderr.write(f"error: {e}\n")
        sys.exit(1)


def _write(text: str, output: Path | None) -> None:
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text)
        print(f"Wrote {len(text):,} characters to {output}", file=sys.stderr)
    else:
        sys.stdout.write(text)


def _fetch(args) -> None:
    from .acquire import acquire_locator
    from .locator import classify_locator

    bundle = acquire_locator(classify_locator(args.locator), _credential(args))
    if isinstance(bundle, str):
        # Blob or gist: raw text, no stats
        _write(bundle, args.output)
        return
    _write(bundle.text, args.output)
    if args.stats:
        print(
            f"\nDone: {len(bundle.files)} included ({bundle.total_bytes:,} bytes), "
            f"{len(bundle.skipped)} skipped, "
            f"truncated: {'yes' if bundle.truncated else 'no'}, "
            f"tree incomplete: {'yes' if bundle.tree_truncated else 'no'}",
            file=sys.stderr,
        )
        for skipped in bundle.skipped:
            print(f"  skipped {skipped.path}: {skipped.reason.value}", file=sys.stderr)


def _classify(args) -> None:
    from .locator import classify_locator

    locator = classify_locator(args.locator)
    print(f"kind: {locator.kind.value}")
    if locator.full_name:
        print(f"repository: {locator.full_name}")
    if locator.raw_url:
        print(f"raw url: {locator.raw_url}")


def _candidates(args) -> None:
    from .acquire import get_github_client
    from .errors import InvalidLocatorError
    from .fetch_repo_tree import enumerate_repository
    from .filters import filter_candidates
    from .locator import classify_locator
    from .models import LocatorKind

    locator = classify_locator(args.locator)
    if locator.kind != LocatorKind.REPOSITORY:
        raise InvalidLocatorError(f"{args.locator!r} names a single file, not a repository.")

    client = get_github_client(_credential(args))
    try:
        info, listing = enumerate_repository(client, locator.owner, locator.repo)
    finally:
        client.close()

    candidates = filter_candidates(listing.nodes)
    for node in candidates:
        size = f"{node.size:,}" if node.size is not None else "?"
        print(f"{size:>10}  {node.path}")
    print(
        f"\n{len(candidates)} of {len(listing.nodes)} entries in {info.full_name}@{info.default_branch}"
        + (" (tree truncated by GitHub)" if listing.truncated else ""),
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
