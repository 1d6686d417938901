"""Ordering rules for the members listed on a class page."""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from classdoc.field_entity import FieldEntity


class _Named(Protocol):
    @property
    def name(self) -> str:
        """Name to order by."""
        ...


N = TypeVar("N", bound=_Named)


def order_members(elements: Iterable[N]) -> list[N]:
    """Sort members by name, comparing code points.

    The sort is stable: overloads keep their declaration order.
    """
    return sorted(elements, key=lambda e: e.name)


def split_fields(
    ordered: list[FieldEntity],
) -> tuple[list[FieldEntity], list[FieldEntity]]:
    """Split already ordered fields into (instance, static), keeping the order."""
    instance = [f for f in ordered if not f.is_static]
    static = [f for f in ordered if f.is_static]
    return instance, static


def order_fields(fields: Iterable[FieldEntity]) -> list[FieldEntity]:
    """Order fields by name with all instance fields before static ones."""
    instance, static = split_fields(order_members(fields))
    return instance + static
