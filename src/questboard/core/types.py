"""Shared type aliases for the core and domain layers."""
from enum import Enum
from typing import Literal

DayBoundary = Literal["utc", "local"]


class ResourceType(str, Enum):
    """Kinds of learning resources attached to a quest."""

    VIDEO = "video"
    DOCS = "docs"
    INTERACTIVE = "interactive"
    ARTICLE = "article"
    COURSE = "course"


__all__ = ["DayBoundary", "ResourceType"]
