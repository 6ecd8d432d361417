"""Bundle source code from a GitHub repository, file or gist into one text artifact.

Repositories are listed through the GitHub API, filtered to source-like
files, and fetched one file at a time under file-count and byte budgets.
"""

from .acquire import acquire, acquire_bundle, acquire_locator
from .cli import main
from .errors import AcquisitionError
from .models import AssembledBundle

__all__ = ["main", "acquire", "acquire_bundle", "acquire_locator", "AcquisitionError", "AssembledBundle"]

if __name__ == "__main__":
    main()
