"""E2E test fixtures: real GitHub API, isolated temp directories."""

import subprocess
import sys

import pytest


def _run_cli(*args, timeout=300):
    """Run the github-bundle CLI and return CompletedProcess."""
    cmd = [sys.executable, "-m", "github_code_bundler.cli", *args]
    return subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)


@pytest.fixture
def run_cli():
    return _run_cli


@pytest.fixture
def e2e_output_dir(tmp_path):
    """Isolated output dir for CLI invocations."""
    d = tmp_path / "results"
    d.mkdir()
    return d
