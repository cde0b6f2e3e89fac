"""Exceptions raised by the installer for fatal, top-level failures."""

from __future__ import annotations


class InstallerError(Exception):
    """Base class for errors that abort an installer run."""


class SetupError(InstallerError):
    """The installation root or another required directory could not be created."""


class RepositorySyncError(InstallerError):
    """Cloning, pulling or locally copying the agent repository failed."""
