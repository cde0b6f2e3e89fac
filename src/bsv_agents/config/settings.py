"""
Configuration settings for the BSV Claude Agents installer.

Every fixed path and the remote URL live on a ``Config`` instance so that
callers (and tests) can point the installer at an alternate home directory,
repository or platform.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Remote source
DEFAULT_REPO_URL: str = "https://github.com/bsv-blockchain/bsv-claude-agents.git"
REPO_DIR_NAME: str = "bsv-claude-agents"

# Layout under the installation root
CLAUDE_DIR_NAME: str = ".claude"
AGENTS_DIR_NAME: str = "agents"

# Agent file filter
AGENT_SUFFIX: str = ".md"
AGENT_KEYWORD: str = "bsv"

WINDOWS_PLATFORM: str = "win32"

# Link status constants
LINK_STATUS_LINKED: str = "linked"
LINK_STATUS_COPIED: str = "copied"
LINK_STATUS_FAILED: str = "failed"


class Config:
    """Installer configuration with per-instance overrides."""

    def __init__(
        self,
        home: Path | None = None,
        claude_dir: Path | None = None,
        agents_dir: Path | None = None,
        repo_dir: Path | None = None,
        repo_url: str = DEFAULT_REPO_URL,
        agents_subdir: str = AGENTS_DIR_NAME,
        agent_suffix: str = AGENT_SUFFIX,
        agent_keyword: str = AGENT_KEYWORD,
        platform: str | None = None,
        local_source: Path | None = None,
    ) -> None:
        """Build a configuration, deriving unset paths from the home directory.

        Args:
            home: Home directory; defaults to the OS reported one
            claude_dir: Installation root; defaults to ``home/.claude``
            agents_dir: Destination for agent links
            repo_dir: Cache repository location
            repo_url: Remote git URL to clone from
            agents_subdir: Directory inside the cache holding agent files
            agent_suffix: Required file name suffix
            agent_keyword: Substring every agent file name must contain
            platform: Platform identifier in ``sys.platform`` form
            local_source: Directory copied into the cache in local mode
        """
        self.home = Path(home) if home is not None else Path.home()
        self.claude_dir = Path(claude_dir) if claude_dir is not None else self.home / CLAUDE_DIR_NAME
        self.agents_dir = (
            Path(agents_dir) if agents_dir is not None else self.claude_dir / AGENTS_DIR_NAME
        )
        self.repo_dir = Path(repo_dir) if repo_dir is not None else self.claude_dir / REPO_DIR_NAME
        self.repo_url = repo_url
        self.agents_subdir = agents_subdir
        self.agent_suffix = agent_suffix
        self.agent_keyword = agent_keyword
        self.platform = platform if platform is not None else sys.platform
        self.local_source = Path(local_source) if local_source is not None else Path.cwd()

    @property
    def source_agents_dir(self) -> Path:
        """Directory inside the cache repository that holds agent files."""
        return self.repo_dir / self.agents_subdir

    @property
    def is_windows(self) -> bool:
        return self.platform == WINDOWS_PLATFORM

    def is_agent_file(self, name: str) -> bool:
        """Check whether a file name qualifies as a BSV agent file."""
        return name.endswith(self.agent_suffix) and self.agent_keyword in name

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns empty list if configuration is valid.
        """
        errors: list[str] = []

        if not self.repo_url:
            errors.append("repo_url must not be empty")

        if not self.agent_keyword:
            errors.append("agent_keyword must not be empty")

        if not self.agent_suffix.startswith("."):
            errors.append(f"agent_suffix must start with '.', got {self.agent_suffix!r}")

        for name, path in (("repo_dir", self.repo_dir), ("agents_dir", self.agents_dir)):
            if not _is_within(path, self.claude_dir):
                errors.append(f"{name} {path} must be inside the installation root {self.claude_dir}")

        return errors

    def __repr__(self) -> str:
        return f"<Config claude_dir={self.claude_dir} repo_url={self.repo_url} platform={self.platform}>"


def _is_within(path: Path, root: Path) -> bool:
    try:
        path.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True


def get_config(**overrides) -> Config:
    """Get a Config instance, applying any keyword overrides."""
    return Config(**overrides)
