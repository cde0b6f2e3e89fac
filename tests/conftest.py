"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bsv_agents.config.settings import Config

AGENT_FILES: dict[str, str] = {
    "bsv-x.md": "# BSV X agent\n",
    "bsv-wallet.md": "# BSV wallet agent\n",
    "other.md": "# Not a BSV agent\n",
    "bsv-y.txt": "wrong extension\n",
}


def write_agent_repo(root: Path, files: dict[str, str] | None = None) -> Path:
    """Create a repository layout with an ``agents`` directory under ``root``."""
    agents = root / "agents"
    agents.mkdir(parents=True, exist_ok=True)
    for name, content in (AGENT_FILES if files is None else files).items():
        (agents / name).write_text(content, encoding="utf-8")
    (root / "README.md").write_text("# agents\n", encoding="utf-8")
    return root


class FakeGitClient:
    """GitClient double that records calls and writes a fixed repository."""

    def __init__(self, files: dict[str, str] | None = None, error: Exception | None = None):
        self.files = files
        self.error = error
        self.cloned: list[tuple[str, Path]] = []
        self.pulled: list[Path] = []

    def clone(self, url: str, dest_dir: Path) -> None:
        self.cloned.append((url, dest_dir))
        if self.error:
            raise self.error
        write_agent_repo(dest_dir, self.files)

    def pull(self, repo_dir: Path) -> None:
        self.pulled.append(repo_dir)
        if self.error:
            raise self.error
        write_agent_repo(repo_dir, self.files)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Provide an empty home directory for tests."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def local_project(tmp_path: Path) -> Path:
    """Provide a working directory laid out like the agent repository."""
    return write_agent_repo(tmp_path / "project")


@pytest.fixture
def config(home: Path, local_project: Path) -> Config:
    """Config rooted at the temporary home, on a POSIX platform."""
    return Config(
        home=home,
        repo_url="https://example.invalid/bsv-claude-agents.git",
        platform="linux",
        local_source=local_project,
    )


@pytest.fixture
def fake_git() -> FakeGitClient:
    """Fake git client that produces the default agent files."""
    return FakeGitClient()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging so caplog sees records in every test."""
    package_logger = logging.getLogger("bsv_agents")
    yield
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
