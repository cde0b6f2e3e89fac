"""Platform specific link creation.

Windows gets hard links, which do not need administrator rights or Developer
Mode. Every other platform gets symbolic links to the absolute source path.
"""

from __future__ import annotations

import abc
import errno
import os
from pathlib import Path

from ..config.settings import WINDOWS_PLATFORM

WINDOWS_PERMISSION_HINTS: list[str] = [
    "Note: On some Windows configurations, you may need to:",
    "  - Run as administrator, or",
    "  - Enable Developer Mode in Windows Settings",
]


class LinkStrategy(abc.ABC):
    """Creates a link at ``target`` that resolves to ``source``."""

    kind: str = ""

    @abc.abstractmethod
    def create(self, source: Path, target: Path) -> None:
        """Create the link, raising ``OSError`` on failure."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} kind={self.kind!r}>"


class HardLinkStrategy(LinkStrategy):
    kind = "hard link"

    def create(self, source: Path, target: Path) -> None:
        os.link(source, target)


class SymlinkStrategy(LinkStrategy):
    kind = "symbolic link"

    def create(self, source: Path, target: Path) -> None:
        os.symlink(Path(source).absolute(), target)


def select_link_strategy(platform: str) -> LinkStrategy:
    """Pick the link strategy for a ``sys.platform`` style identifier."""
    if platform == WINDOWS_PLATFORM:
        return HardLinkStrategy()
    return SymlinkStrategy()


def is_permission_error(error: BaseException) -> bool:
    """Check whether a link failure looks like a permission denial."""
    if isinstance(error, PermissionError):
        return True
    return isinstance(error, OSError) and error.errno in (errno.EPERM, errno.EACCES)
