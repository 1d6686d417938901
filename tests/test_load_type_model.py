"""Tests for loading a YAML type model."""

from pathlib import Path

import pytest

from classdoc.ancestor_ref import AncestorRef
from classdoc.load_type_model import load_type_model

MODEL = """
types:
  - name: Foo
    package: com.acme
    comment: A foo.
    ancestors:
      - java.lang.Object
      - name: com.acme.Base
        documented: true
    methods:
      - name: run
        returns: int
        modifiers: [public, static]
        parameters:
          - {name: n, type: int, comment: times}
        throws:
          - {type: IOException}
    fields:
      - {name: MAX, type: int, static: true, value: 10}
  - name: Bar
    package: com.acme
"""


def test_load_type_model(tmp_path: Path) -> None:
    """Verify that types, members and fields are loaded."""
    model = tmp_path / "model.yml"
    model.write_text(MODEL, encoding="utf-8")

    foo, bar = load_type_model(model)
    assert foo.qualified_name == "com.acme.Foo"
    assert foo.ancestors == (
        AncestorRef("java.lang.Object"),
        AncestorRef("com.acme.Base", documented=True),
    )
    run = foo.methods[0]
    assert run.signature == "public static int run(int n) throws IOException"
    assert run.is_static
    assert foo.fields[0].is_static
    assert foo.fields[0].constant_value == "10"
    assert bar.methods == ()


def test_load_type_model_requires_types(tmp_path: Path) -> None:
    """Verify that a document without types is rejected."""
    model = tmp_path / "model.yml"
    model.write_text("classes: []\n", encoding="utf-8")
    with pytest.raises(ValueError, match="types"):
        load_type_model(model)


def test_scalar_modifier_is_one_modifier(tmp_path: Path) -> None:
    """Verify that a single modifier string is not split into characters."""
    model = tmp_path / "model.yml"
    model.write_text(
        "types:\n"
        "  - name: Foo\n"
        "    methods:\n"
        "      - {name: run, modifiers: static}\n"
        "    fields:\n"
        "      - {name: x, type: int, modifiers: final}\n",
        encoding="utf-8",
    )
    (foo,) = load_type_model(model)
    assert foo.methods[0].modifiers == ("static",)
    assert foo.methods[0].is_static
    assert foo.fields[0].modifiers == ("final",)


def test_mapping_modifiers_rejected(tmp_path: Path) -> None:
    """Verify that modifiers must be a list or a single name."""
    model = tmp_path / "model.yml"
    model.write_text(
        "types:\n  - name: Foo\n    methods:\n      - {name: run, modifiers: {a: 1}}\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="modifiers"):
        load_type_model(model)
