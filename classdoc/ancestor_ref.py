"""Data model for one entry of a type's ancestor chain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AncestorRef:
    """Represents a supertype in an inheritance chain."""

    qualified_name: str
    documented: bool = False  # True when a page exists for it

    @property
    def name(self) -> str:
        """Simple name, e.g. ``AbstractList`` for ``java.util.AbstractList``."""
        return self.qualified_name.rsplit(".", 1)[-1]

    @property
    def package(self) -> str:
        """Package part of the qualified name, empty for the default package."""
        head, _, _ = self.qualified_name.rpartition(".")
        return head
