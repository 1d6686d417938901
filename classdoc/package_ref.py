"""Data model for a package reference."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageRef:
    """A package a documented type belongs to."""

    name: str  # empty for the default package
