"""Installer service that syncs the agent repository and links agent files.

A run is a single forward pass:

1. ensure the installation root exists,
2. clone or pull the agent repository into the cache (or, in local mode,
   replace the cache with a copy of a local directory),
3. link every qualifying agent file into the agents directory, copying the
   file when the link cannot be created.

Failures in steps 1 and 2 raise :class:`~bsv_agents.exceptions.InstallerError`
subclasses. Failures in step 3 are isolated per file and recorded in the
returned :class:`~bsv_agents.models.InstallReport`.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..config.settings import (
    LINK_STATUS_COPIED,
    LINK_STATUS_FAILED,
    LINK_STATUS_LINKED,
    Config,
)
from ..exceptions import RepositorySyncError, SetupError
from ..models.link import COPY_WARNING, InstallReport, LinkResult
from .git_client import GitClient, GitPythonClient
from .link_strategy import (
    WINDOWS_PERMISSION_HINTS,
    LinkStrategy,
    is_permission_error,
    select_link_strategy,
)

logger = logging.getLogger(__name__)


class Installer:
    """Synchronizes the local agents directory with the remote agent repository."""

    def __init__(
        self,
        config: Config,
        git_client: GitClient | None = None,
        link_strategy: LinkStrategy | None = None,
    ) -> None:
        """Initialize the installer.

        Args:
            config: Installer configuration
            git_client: Client used to clone and pull; GitPython by default
            link_strategy: Link strategy; chosen from ``config.platform`` by default
        """
        self.config = config
        self.git_client = git_client or GitPythonClient()
        self.link_strategy = link_strategy or select_link_strategy(config.platform)

    def run(self, local: bool = False) -> InstallReport:
        """Run the full installation.

        Args:
            local: Copy ``config.local_source`` instead of using the remote repository

        Returns:
            Report with one result per qualifying agent file

        Raises:
            SetupError: If the installation root cannot be created
            RepositorySyncError: If the repository cannot be cloned, pulled or copied
        """
        logger.info("🚀 Setting up BSV Claude Agents...")

        self.ensure_directory(self.config.claude_dir)
        self.sync_source(local=local)
        report = self.link_agents()

        logger.info("✅ BSV Claude Agents setup completed successfully!")
        logger.info("Agents are now available in: %s", self.config.agents_dir)
        return report

    def ensure_directory(self, path: Path) -> None:
        """Create ``path`` and its parents if missing.

        Raises:
            SetupError: If the directory cannot be created
        """
        if path.is_dir():
            return
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SetupError(f"Cannot create directory {path}: {e}") from e
        logger.info("Created directory: %s", path)

    def sync_source(self, local: bool = False) -> None:
        """Bring the cache repository up to date.

        Raises:
            RepositorySyncError: If the sync fails for any reason
        """
        if local:
            self._copy_local_source()
            return

        repo_dir = self.config.repo_dir
        try:
            if repo_dir.exists():
                logger.info("Updating existing BSV Claude Agents repository...")
                self.git_client.pull(repo_dir)
                logger.info("Repository updated successfully!")
            else:
                logger.info("Cloning BSV Claude Agents repository...")
                self.git_client.clone(self.config.repo_url, repo_dir)
                logger.info("Repository cloned successfully!")
        except RepositorySyncError:
            raise
        except Exception as e:
            raise RepositorySyncError(str(e)) from e

    def _copy_local_source(self) -> None:
        source = self.config.local_source.resolve()
        repo_dir = self.config.repo_dir

        logger.info("Using local repository for testing...")

        resolved_repo = repo_dir.resolve()
        if resolved_repo == source or resolved_repo in source.parents:
            raise RepositorySyncError(
                f"Local source {source} is inside the cache directory {repo_dir}"
            )

        try:
            if repo_dir.exists() or repo_dir.is_symlink():
                if repo_dir.is_dir() and not repo_dir.is_symlink():
                    shutil.rmtree(repo_dir)
                else:
                    repo_dir.unlink()
            shutil.copytree(
                source,
                repo_dir,
                symlinks=True,
                ignore=_ignore_path(resolved_repo),
            )
        except OSError as e:
            raise RepositorySyncError(f"Failed to copy {source} to {repo_dir}: {e}") from e

        logger.info("Local repository copied successfully!")

    def find_agent_files(self) -> list[Path]:
        """List qualifying agent files in the cache, sorted by name."""
        source_dir = self.config.source_agents_dir
        return sorted(
            (
                path
                for path in source_dir.iterdir()
                if path.is_file() and self.config.is_agent_file(path.name)
            ),
            key=lambda path: path.name,
        )

    def link_agents(self) -> InstallReport:
        """Link every qualifying agent file into the agents directory.

        Returns:
            Report with one result per qualifying agent file
        """
        report = InstallReport()
        source_dir = self.config.source_agents_dir

        if not source_dir.is_dir():
            logger.error("Agents directory not found in cloned repository")
            return report

        self.ensure_directory(self.config.agents_dir)

        agent_files = self.find_agent_files()
        kind = self.link_strategy.kind
        logger.info("Creating %ss for %d BSV agent(s)...", kind, len(agent_files))

        for source in agent_files:
            report.add(self._install_agent(source))

        if report.failed:
            logger.error(
                "%d agent(s) could not be installed: %s",
                len(report.failed),
                ", ".join(r.name for r in report.failed),
            )
        return report

    def _install_agent(self, source: Path) -> LinkResult:
        name = source.name
        target = self.config.agents_dir / name
        kind = self.link_strategy.kind
        result = LinkResult(name=name, source=source, target=target, link_kind=kind)

        try:
            _remove_existing(target)
        except OSError as e:
            logger.error("Failed to remove existing %s: %s", target, e)
            result.status = LINK_STATUS_FAILED
            result.error = str(e)
            return result

        try:
            self.link_strategy.create(source, target)
        except OSError as e:
            logger.error("Failed to create %s for %s: %s", kind, name, e)
            if self.config.is_windows and is_permission_error(e):
                for hint in WINDOWS_PERMISSION_HINTS:
                    logger.error(hint)
            result.error = str(e)
        else:
            logger.info("Created %s: %s -> %s", kind, target, source)
            result.status = LINK_STATUS_LINKED
            return result

        logger.info("Falling back to file copy for %s...", name)
        try:
            shutil.copyfile(source, target)
        except OSError as e:
            logger.error("Failed to copy file %s: %s", name, e)
            result.status = LINK_STATUS_FAILED
            result.error = str(e)
            return result

        logger.info("Copied file: %s", target)
        logger.warning("Warning: %s", COPY_WARNING)
        result.status = LINK_STATUS_COPIED
        return result


def _remove_existing(target: Path) -> None:
    # is_symlink() catches dangling links that exists() reports as missing
    if target.is_symlink() or target.exists():
        target.unlink()
        logger.info("Removed existing: %s", target)


def _ignore_path(excluded: Path):
    """Build a ``copytree`` ignore callable that skips one absolute path."""

    def ignore(directory: str, names: list[str]) -> set[str]:
        parent = Path(directory).resolve()
        if parent != excluded.parent:
            return set()
        return {name for name in names if name == excluded.name}

    return ignore
