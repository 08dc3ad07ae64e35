"""Pytest fixtures for metafetch tests."""
import json
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from metafetch.git.runner import CommandResult


class FakeRunner:
    """Command runner double returning canned results in call order.

    Records every call so tests can inspect the argv that would have been
    executed, and whether the working directory existed at that moment.
    """

    def __init__(self, *results):
        self.results = [CommandResult(*r) for r in results]
        self.calls: List[Dict[str, any]] = []

    def __call__(self, args, silent=False, cwd=None):
        self.calls.append({
            "args": list(args),
            "silent": silent,
            "cwd": cwd,
            "cwd_existed": cwd is not None and Path(cwd).is_dir(),
        })
        if len(self.calls) > len(self.results):
            raise AssertionError(f"Unexpected command: {args}")
        return self.results[len(self.calls) - 1]

    @property
    def clone_args(self) -> List[str]:
        return self.calls[0]["args"]

    def workspace(self, url: str) -> Optional[Path]:
        """Directory the clone was pointed at (the argument after url)."""
        args = self.clone_args
        return Path(args[args.index(url) + 1])


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


def _git(repo_path: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo_fixture(tmp_path: Path) -> Dict[str, any]:
    """Create a minimal module repository with a tag and a branch.

    Returns dict with:
        - path: Path to repo
        - url: file:// URL of the repo
        - main_metadata: metadata.json content on main (and tag v0.1)
        - dev_metadata: metadata.json content on dev
        - tag_sha: SHA of v0.1 tag
        - dev_sha: SHA of dev branch
    """
    repo_path = tmp_path / "test_module"
    repo_path.mkdir()

    _git(repo_path, "init")
    _git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo_path, "config", "user.email", "test@example.com")
    _git(repo_path, "config", "user.name", "Test User")

    main_metadata = json.dumps(
        {"name": "test-module", "version": "0.1.0", "dependencies": []},
        indent=2,
    ) + "\n"
    (repo_path / "metadata.json").write_text(main_metadata)
    (repo_path / "empty.json").write_text("{}")
    _git(repo_path, "add", "metadata.json", "empty.json")
    _git(repo_path, "commit", "-m", "Initial commit")
    _git(repo_path, "tag", "v0.1")
    tag_sha = _git(repo_path, "rev-parse", "HEAD")

    _git(repo_path, "checkout", "-b", "dev")
    dev_metadata = json.dumps(
        {"name": "test-module", "version": "0.2.0-dev", "dependencies": []},
        indent=2,
    ) + "\n"
    (repo_path / "metadata.json").write_text(dev_metadata)
    _git(repo_path, "commit", "-am", "Bump version on dev")
    dev_sha = _git(repo_path, "rev-parse", "HEAD")

    _git(repo_path, "checkout", "main")

    return {
        "path": repo_path,
        "url": repo_path.as_uri(),
        "main_metadata": main_metadata,
        "dev_metadata": dev_metadata,
        "tag_sha": tag_sha,
        "dev_sha": dev_sha,
    }
