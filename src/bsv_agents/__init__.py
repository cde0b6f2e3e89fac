"""Installer factory and logging setup for BSV Claude Agents."""

from __future__ import annotations

import logging
import sys

from .config import Config, get_config
from .services.git_client import GitClient
from .services.installer import Installer
from .services.link_strategy import LinkStrategy

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(message)s"
VERBOSE_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _MaxLevelFilter(logging.Filter):
    """Pass only records below a level."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def configure_logging(verbose: bool = False) -> None:
    """Send progress to stdout and warnings/errors to stderr.

    Replaces any handlers previously installed on the package logger so
    repeated calls do not duplicate output.
    """
    fmt = logging.Formatter(VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(fmt)
    stdout_handler.addFilter(_MaxLevelFilter(logging.WARNING))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(fmt)
    stderr_handler.setLevel(logging.WARNING)

    package_logger = logging.getLogger(__name__)
    package_logger.handlers = [stdout_handler, stderr_handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    package_logger.propagate = False


def create_installer(
    config: Config | None = None,
    git_client: GitClient | None = None,
    link_strategy: LinkStrategy | None = None,
) -> Installer:
    """Create and configure an Installer."""
    config = config or get_config()

    errors = config.validate()
    if errors:
        logger.warning("Configuration warnings: %s", errors)

    logger.debug("Using %r", config)
    return Installer(config, git_client=git_client, link_strategy=link_strategy)


__all__ = ["Config", "Installer", "configure_logging", "create_installer", "get_config"]
