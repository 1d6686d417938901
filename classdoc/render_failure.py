"""Data models for the outcome of a page build."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RenderFailure:
    """A member that was dropped from a page section."""

    section: str  # "summary", "fields" or "methods"
    member: str
    reason: str


@dataclass(frozen=True)
class PageResult:
    """Result of building one class page."""

    path: Path
    failures: tuple[RenderFailure, ...] = field(default=())

    @property
    def degraded(self) -> bool:
        """True when the page was written but some members were dropped."""
        return bool(self.failures)
