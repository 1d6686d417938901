"""Data model for a documented class or interface."""

from dataclasses import dataclass

from classdoc.ancestor_ref import AncestorRef
from classdoc.field_entity import FieldEntity
from classdoc.member_entity import MemberEntity
from classdoc.package_ref import PackageRef


@dataclass(frozen=True)
class TypeEntity:
    """Represents one declared type and everything documented on it."""

    name: str
    package: PackageRef
    comment: str = ""
    ancestors: tuple[AncestorRef, ...] = ()  # root first, excluding the type
    methods: tuple[MemberEntity, ...] = ()
    fields: tuple[FieldEntity, ...] = ()

    @property
    def qualified_name(self) -> str:
        """Package-qualified name, e.g. ``com.acme.Foo``."""
        if not self.package.name:
            return self.name
        return f"{self.package.name}.{self.name}"

    @property
    def has_methods(self) -> bool:
        """True when at least one method is documented."""
        return bool(self.methods)

    @property
    def has_fields(self) -> bool:
        """True when at least one field is documented."""
        return bool(self.fields)
