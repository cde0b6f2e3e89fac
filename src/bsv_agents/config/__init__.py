"""
Configuration package for the BSV Claude Agents installer.

This package provides the installer configuration and its fixed defaults.
"""

from .settings import (
    AGENT_KEYWORD,
    AGENT_SUFFIX,
    DEFAULT_REPO_URL,
    LINK_STATUS_COPIED,
    LINK_STATUS_FAILED,
    LINK_STATUS_LINKED,
    Config,
    get_config,
)

__all__ = [
    "Config",
    "get_config",
    "DEFAULT_REPO_URL",
    "AGENT_KEYWORD",
    "AGENT_SUFFIX",
    "LINK_STATUS_LINKED",
    "LINK_STATUS_COPIED",
    "LINK_STATUS_FAILED",
]
