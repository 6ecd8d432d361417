"""Failures surfaced to callers of the acquisition pipeline."""


class AcquisitionError(Exception):
    """Base class for every failure an acquisition call can end with."""


class InvalidLocatorError(AcquisitionError):
    pass


class RateLimitedError(AcquisitionError):
    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "GitHub API rate limit exceeded. Try again later or supply a GitHub token."
        )


class RepositoryNotFoundError(AcquisitionError):
    def __init__(self, full_name: str, authenticated: bool):
        self.full_name = full_name
        if authenticated:
            message = f"Repository not found: {full_name}. Check that the URL is correct."
        else:
            message = (
                f"Repository not found: {full_name}. It might be private "
                "(supply a GitHub token) or the URL is incorrect."
            )
        super().__init__(message)


class RemoteFileNotFoundError(AcquisitionError):
    def __init__(self, url: str, authenticated: bool):
        self.url = url
        if authenticated:
            message = f"File not found: {url}. Check that the URL is correct."
        else:
            message = (
                f"File not found: {url}. It might be private "
                "(supply a GitHub token) or the URL is incorrect."
            )
        super().__init__(message)


class RemoteApiError(AcquisitionError):
    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)


class TreeFetchError(RemoteApiError):
    pass


class NoSuitableFilesError(AcquisitionError):
    def __init__(self, full_name: str):
        super().__init__(f"No suitable source code files found in {full_name}.")


class NoContentRetrievedError(AcquisitionError):
    def __init__(self, full_name: str):
        super().__init__(f"Failed to retrieve any file content from {full_name}.")


class FileFetchError(Exception):
    """A single file could not be fetched. Never escapes the fetch loop."""

    def __init__(self, path: str, message: str, decode: bool = False):
        self.path = path
        self.decode = decode
        super().__init__(message)
