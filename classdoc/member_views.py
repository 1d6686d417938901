"""Summary rows and detail blocks for documented members.

Methods and fields expose the same shape (``name``, ``summary_row()``,
``detail_block()``) so every section renders them through one code path.
"""

from collections.abc import Iterable
from typing import Protocol

from classdoc.build_link import build_link
from classdoc.errors import MemberRenderError
from classdoc.field_entity import FieldEntity
from classdoc.first_sentence import first_sentence
from classdoc.header_slug import AnchorRegistry
from classdoc.md_codeblock import md_codeblock
from classdoc.md_table import md_table_header, md_table_row
from classdoc.member_entity import MemberEntity

METHOD_SUMMARY_HEADERS = ["Type", "Method", "Description"]
FIELD_HEADERS = ["Type", "Field", "Description"]
PARAMETER_HEADERS = ["Name", "Type", "Description"]


class MemberView(Protocol):
    """Anything a section can list."""

    @property
    def name(self) -> str:
        """Name the member is ordered by."""
        ...

    def summary_row(self) -> list[str]:
        """Return the cells of the member's summary table row."""
        ...

    def detail_block(self, lang: str) -> list[str]:
        """Return the lines documenting the member in full."""
        ...


def _require(member: str, value: str, what: str) -> None:
    if not value or not value.strip():
        raise MemberRenderError(member, f"missing {what}")


class MethodView:
    """Renders one method."""

    def __init__(self, member: MemberEntity, anchor: str | None = None) -> None:
        self.member = member
        self.anchor = anchor

    @property
    def name(self) -> str:
        """Method name."""
        return self.member.name

    def validate(self) -> None:
        """Raise ``MemberRenderError`` if the method cannot be rendered."""
        m = self.member
        _require(m.name, m.name, "name")
        _require(m.name, m.return_type, "return type")
        for i, p in enumerate(m.parameters):
            _require(m.name, p.name, f"name of parameter {i}")
            _require(m.name, p.type, f"type of parameter {p.name or i}")
        for t in m.throws:
            _require(m.name, t.type, "thrown exception type")

    def is_valid(self) -> bool:
        """Check whether the method renders without error."""
        try:
            self.validate()
        except MemberRenderError:
            return False
        return True

    def headings(self) -> list[str]:
        """Return the headings the detail block emits, in order."""
        m = self.member
        out = [m.name]
        if m.parameters:
            out.append("Parameters")
        if m.return_type != "void":
            out.append("Returns")
        if m.throws:
            out.append("Throws")
        return out

    def summary_row(self) -> list[str]:
        """Return type, linked name with parameter types, and first sentence."""
        self.validate()
        m = self.member
        rtype = f"static {m.return_type}" if m.is_static else m.return_type
        label = build_link(m.name, f"#{self.anchor}") if self.anchor else m.name
        return [
            f"`{rtype}`",
            f"{label}`{m.flat_parameters}`",
            first_sentence(m.comment),
        ]

    def detail_block(self, lang: str) -> list[str]:
        """Render signature, comment, parameters, return value and throws."""
        self.validate()
        m = self.member
        parts = [f"### {m.name}", "", md_codeblock(lang, m.signature), ""]
        if m.comment.strip():
            parts += [m.comment.strip(), ""]

        if m.parameters:
            parts += ["#### Parameters", ""]
            parts += md_table_header(PARAMETER_HEADERS)
            parts += [
                md_table_row([f"`{p.name}`", f"`{p.type}`", p.comment])
                for p in m.parameters
            ]
            parts.append("")

        if m.return_type != "void":
            parts += ["#### Returns", "", f"**Type:** `{m.return_type}`", ""]
            if m.return_comment.strip():
                parts += [m.return_comment.strip(), ""]

        if m.throws:
            parts += ["#### Throws", ""]
            for t in m.throws:
                desc = " ".join(t.comment.split())
                parts.append(f"- `{t.type}` {desc}".rstrip())
            parts.append("")
        return parts


class FieldView:
    """Renders one field as a table row."""

    def __init__(self, field: FieldEntity) -> None:
        self.field = field

    @property
    def name(self) -> str:
        """Field name."""
        return self.field.name

    def validate(self) -> None:
        """Raise ``MemberRenderError`` if the field cannot be rendered."""
        f = self.field
        _require(f.name, f.name, "name")
        _require(f.name, f.type, "type")

    def _row(self, description: str) -> list[str]:
        self.validate()
        f = self.field
        ftype = f"static {f.type}" if f.is_static else f.type
        label = f"`{f.name}`"
        if f.constant_value is not None:
            label += f" = `{f.constant_value}`"
        return [f"`{ftype}`", label, description]

    def summary_row(self) -> list[str]:
        """Return type, name and first sentence of the comment."""
        return self._row(first_sentence(self.field.comment))

    def detail_block(self, lang: str) -> list[str]:
        """Return the field as a table row carrying its full comment."""
        return [md_table_row(self._row(self.field.comment))]


def method_views(
    ordered: Iterable[MemberEntity],
    preceding_headings: Iterable[str] = (),
) -> list[MethodView]:
    """Wrap ordered methods, giving anchors only to those that will render.

    ``preceding_headings`` are the page headings written before the first
    method, in page order. Anchors are numbered across them and across the
    headings of every earlier method, the way GitHub numbers repeats.
    """
    anchors = AnchorRegistry()
    for heading in preceding_headings:
        anchors.next(heading)
    views = []
    for m in ordered:
        view = MethodView(m)
        if view.is_valid():
            own, *sub = view.headings()
            view.anchor = anchors.next(own)
            for heading in sub:
                anchors.next(heading)
        views.append(view)
    return views


def field_views(ordered: Iterable[FieldEntity]) -> list[FieldView]:
    """Wrap ordered fields."""
    return [FieldView(f) for f in ordered]
