"""Result models for the installer."""

from .base import BaseModel
from .link import COPY_WARNING, InstallReport, LinkResult

__all__ = ["BaseModel", "COPY_WARNING", "InstallReport", "LinkResult"]
