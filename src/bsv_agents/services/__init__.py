"""Services package for installer logic.

This package provides the installer service and the collaborators it
orchestrates: the git client and the platform link strategy.
"""

from .git_client import GitClient, GitPythonClient
from .installer import Installer
from .link_strategy import HardLinkStrategy, LinkStrategy, SymlinkStrategy, select_link_strategy

__all__ = [
    "GitClient",
    "GitPythonClient",
    "HardLinkStrategy",
    "Installer",
    "LinkStrategy",
    "SymlinkStrategy",
    "select_link_strategy",
]
