"""Shared fixtures for class page tests."""

import pytest

from classdoc.ancestor_ref import AncestorRef
from classdoc.field_entity import FieldEntity
from classdoc.member_entity import MemberEntity, ParameterInfo
from classdoc.package_ref import PackageRef
from classdoc.render_context import RenderContext
from classdoc.type_entity import TypeEntity


@pytest.fixture
def context() -> RenderContext:
    """Default render context."""
    return RenderContext()


@pytest.fixture
def foo() -> TypeEntity:
    """Class ``pkg.Foo`` with two methods and two fields, declared out of order."""
    return TypeEntity(
        name="Foo",
        package=PackageRef("pkg"),
        comment="A foo.\n\nKeeps   its  spacing.",
        ancestors=(AncestorRef("java.lang.Object"),),
        methods=(
            MemberEntity(
                name="baz",
                return_type="int",
                parameters=(ParameterInfo("count", "int", "How many."),),
                comment="Computes baz. More detail.",
                modifiers=("public",),
                return_comment="the baz",
            ),
            MemberEntity(name="bar", comment="Does bar.", modifiers=("public",)),
        ),
        fields=(
            FieldEntity("COUNT", "int", is_static=True, comment="Counter."),
            FieldEntity("value", "String", comment="The value."),
        ),
    )
