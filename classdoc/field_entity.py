"""Data model for documented fields."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldEntity:
    """Represents a documented field."""

    name: str
    type: str
    is_static: bool = False
    comment: str = ""
    modifiers: tuple[str, ...] = ()
    constant_value: str | None = None  # rendered when set
