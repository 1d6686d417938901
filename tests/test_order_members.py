"""Tests for member ordering."""

from classdoc.field_entity import FieldEntity
from classdoc.member_entity import MemberEntity, ParameterInfo
from classdoc.order_members import order_fields, order_members, split_fields


def test_order_members_by_name() -> None:
    """Verify that members are sorted by name."""
    members = [MemberEntity("zeta"), MemberEntity("alpha"), MemberEntity("mid")]
    assert [m.name for m in order_members(members)] == ["alpha", "mid", "zeta"]


def test_order_members_uses_code_points() -> None:
    """Verify that upper case sorts before lower case."""
    members = [MemberEntity("b"), MemberEntity("B"), MemberEntity("a")]
    assert [m.name for m in order_members(members)] == ["B", "a", "b"]


def test_order_members_is_stable_for_overloads() -> None:
    """Verify that overloads keep their declaration order."""
    first = MemberEntity("run", parameters=(ParameterInfo("a", "int"),))
    second = MemberEntity("run")
    third = MemberEntity("run", parameters=(ParameterInfo("s", "String"),))
    members = [first, MemberEntity("alpha"), second, third]

    ordered = order_members(members)
    assert ordered[1:] == [first, second, third]
    assert order_members(members) == ordered


def test_order_members_empty() -> None:
    """Verify that an empty input gives an empty result."""
    assert order_members([]) == []


def test_split_fields_keeps_order() -> None:
    """Verify that the split preserves the incoming order in each group."""
    ordered = [
        FieldEntity("a", "int", is_static=True),
        FieldEntity("b", "int"),
        FieldEntity("c", "int", is_static=True),
        FieldEntity("d", "int"),
    ]
    instance, static = split_fields(ordered)
    assert [f.name for f in instance] == ["b", "d"]
    assert [f.name for f in static] == ["a", "c"]


def test_order_fields_instance_before_static() -> None:
    """Verify that all instance fields come before all static fields."""
    fields = [
        FieldEntity("MAX", "int", is_static=True),
        FieldEntity("zed", "int"),
        FieldEntity("ALPHA", "int", is_static=True),
        FieldEntity("apple", "int"),
    ]
    assert [f.name for f in order_fields(fields)] == ["apple", "zed", "ALPHA", "MAX"]
