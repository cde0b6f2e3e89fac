"""Git client used to clone and update the agent repository."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from ..exceptions import RepositorySyncError

logger = logging.getLogger(__name__)


class GitClient(Protocol):
    """The two git operations the installer depends on."""

    def clone(self, url: str, dest_dir: Path) -> None: ...

    def pull(self, repo_dir: Path) -> None: ...


class GitPythonClient:
    """GitClient backed by GitPython."""

    def clone(self, url: str, dest_dir: Path) -> None:
        """Clone ``url`` into ``dest_dir``.

        Raises:
            RepositorySyncError: If git reports a failure
        """
        logger.debug("git clone %s %s", url, dest_dir)
        try:
            Repo.clone_from(url, str(dest_dir))
        except GitCommandError as e:
            raise RepositorySyncError(f"Failed to clone {url}: {e.stderr.strip() or e}") from e

    def pull(self, repo_dir: Path) -> None:
        """Pull the default remote into an existing checkout.

        Raises:
            RepositorySyncError: If the directory is not a git repository or the pull fails
        """
        logger.debug("git pull in %s", repo_dir)
        try:
            repo = Repo(str(repo_dir))
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise RepositorySyncError(f"{repo_dir} is not a git repository") from e

        try:
            # Repo.remotes raises AttributeError for a missing remote name
            origin = repo.remotes.origin
        except AttributeError as e:
            raise RepositorySyncError(f"{repo_dir} has no 'origin' remote") from e

        try:
            origin.pull()
        except GitCommandError as e:
            raise RepositorySyncError(f"Failed to update {repo_dir}: {e.stderr.strip() or e}") from e
