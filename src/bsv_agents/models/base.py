"""
Base model class for installer results.

This module provides a base model class with keyword construction and
dictionary serialization shared by all result models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar


class BaseModel:
    """Base model class with common functionality for result objects.

    Subclasses declare their fields in ``fields`` and default values in
    ``defaults``; values are taken from the keyword arguments passed to the
    constructor.
    """

    # Ordered field names (to be overridden by subclasses)
    fields: ClassVar[tuple[str, ...]] = ()

    # Field defaults for values not passed to the constructor
    defaults: ClassVar[dict[str, Any]] = {}

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the model with provided attributes.

        Args:
            **kwargs: Field values to set on the model instance.
        """
        for field in self.fields:
            setattr(self, field, kwargs.get(field, self.defaults.get(field)))

    def to_dict(self, exclude: list[str] | None = None) -> dict[str, Any]:
        """Convert the model instance to a dictionary.

        Args:
            exclude: List of field names to exclude from the dictionary.

        Returns:
            Dictionary representation of the model instance.
        """
        exclude = exclude or []
        result = {}

        for field in self.fields:
            if field in exclude:
                continue
            value = getattr(self, field)
            if isinstance(value, Path):
                result[field] = str(value)
            else:
                result[field] = value

        return result

    def __repr__(self) -> str:
        """Return a string representation of the model."""
        class_name = self.__class__.__name__
        return f"<{class_name} {self.fields[0]}={getattr(self, self.fields[0])}>"
