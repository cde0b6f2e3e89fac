"""
Link result models.

This module provides the per-file ``LinkResult`` and the run-level
``InstallReport`` returned by the installer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config.settings import LINK_STATUS_COPIED, LINK_STATUS_FAILED, LINK_STATUS_LINKED
from .base import BaseModel

COPY_WARNING = "File copied instead of linked - updates will not sync automatically"


class LinkResult(BaseModel):
    """Outcome of installing a single agent file.

    ``status`` is one of ``linked``, ``copied`` or ``failed``. ``error`` holds
    the message of the link error for copied files and of the copy error for
    failed ones.
    """

    fields = ("name", "source", "target", "status", "link_kind", "error")
    defaults = {"name": "", "status": LINK_STATUS_FAILED}

    name: str
    source: Path | None
    target: Path | None
    status: str
    link_kind: str | None
    error: str | None

    @property
    def is_linked(self) -> bool:
        return self.status == LINK_STATUS_LINKED

    @property
    def is_copied(self) -> bool:
        return self.status == LINK_STATUS_COPIED

    @property
    def is_failed(self) -> bool:
        return self.status == LINK_STATUS_FAILED


class InstallReport:
    """Ordered collection of link results for one installer run."""

    def __init__(self, results: list[LinkResult] | None = None) -> None:
        self.results: list[LinkResult] = list(results or [])

    def add(self, result: LinkResult) -> LinkResult:
        self.results.append(result)
        return result

    @property
    def linked(self) -> list[LinkResult]:
        return [r for r in self.results if r.is_linked]

    @property
    def copied(self) -> list[LinkResult]:
        return [r for r in self.results if r.is_copied]

    @property
    def failed(self) -> list[LinkResult]:
        return [r for r in self.results if r.is_failed]

    @property
    def warnings(self) -> list[str]:
        """Warnings for files that were copied rather than linked."""
        return [f"{r.name}: {COPY_WARNING}" for r in self.copied]

    @property
    def ok(self) -> bool:
        """True when every qualifying file ended up linked or copied."""
        return not self.failed

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self):
        return iter(self.results)

    def to_dict(self) -> dict[str, Any]:
        """Convert the report to a dictionary.

        Returns:
            Dictionary with per-file results and summary counts.
        """
        return {
            "results": [r.to_dict() for r in self.results],
            "linked": len(self.linked),
            "copied": len(self.copied),
            "failed": len(self.failed),
            "warnings": self.warnings,
        }
