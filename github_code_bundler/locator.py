"""Classify a locator string into a blob, gist or repository."""

from urllib.parse import urlsplit, urlunsplit

from .errors import InvalidLocatorError
from .models import GIST_HOST, GIST_RAW_HOST, GITHUB_HOST, RAW_HOST, Locator, LocatorKind


def _split(url: str):
    # Tolerate a missing scheme: "github.com/owner/repo" or plain "owner/repo"
    if "://" not in url and "." in url.split("/", 1)[0]:
        url = f"https://{url}"
    return urlsplit(url)


def _raw_url(url: str) -> tuple[LocatorKind, str]:
    parts = _split(url)
    if not parts.scheme and not parts.netloc:
        # "owner/repo/blob/ref/path" names a github.com blob
        parts = urlsplit(f"https://{GITHUB_HOST}/{parts.path.lstrip('/')}")
    host = parts.netloc.lower()
    # Rewritten URLs are always https
    if host == GIST_HOST:
        path = parts.path.rstrip("/") + "/raw"
        return LocatorKind.GIST, urlunsplit(("https", GIST_RAW_HOST, path, "", ""))
    if host == GITHUB_HOST:
        path = parts.path.replace("/blob/", "/", 1)
        return LocatorKind.BLOB, urlunsplit(("https", RAW_HOST, path, parts.query, ""))
    # Already a raw URL or a foreign host: fetch it as given, without the credential
    return LocatorKind.BLOB, parts.geturl()


def classify_locator(raw: str) -> Locator:
    """Decide which acquisition strategy applies to a locator string."""
    if raw is None or not raw.strip():
        raise InvalidLocatorError("A GitHub URL is required.")
    url = raw.strip()

    if "/blob/" in url or _split(url).netloc.lower() == GIST_HOST:
        kind, raw_url = _raw_url(url)
        return Locator(raw=raw, kind=kind, raw_url=raw_url)

    segments = [s for s in _split(url).path.split("/") if s]
    if len(segments) < 2:
        raise InvalidLocatorError(
            f"Invalid GitHub repository URL: {url!r}, expected owner/repo form "
            "(https://github.com/owner/repo)."
        )
    owner, repo = segments[0], segments[1]
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    return Locator(raw=raw, kind=LocatorKind.REPOSITORY, owner=owner, repo=repo)
