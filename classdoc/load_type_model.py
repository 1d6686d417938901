"""Logic for loading a serialized type model from YAML."""

from pathlib import Path
from typing import Any

import yaml

from classdoc.ancestor_ref import AncestorRef
from classdoc.field_entity import FieldEntity
from classdoc.member_entity import MemberEntity, ParameterInfo, ThrowsInfo
from classdoc.package_ref import PackageRef
from classdoc.type_entity import TypeEntity


def _text(v: object) -> str:
    if v is None:
        return ""
    return str(v)


def _modifiers(raw: dict[str, Any]) -> tuple[str, ...]:
    """Read ``modifiers`` as a list; a single scalar counts as one modifier."""
    value = raw.get("modifiers")
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list):
        msg = f"'modifiers' of {raw.get('name')!r} must be a list, got {value!r}"
        raise ValueError(msg)
    return tuple(str(v) for v in value)


def _ancestor(raw: Any) -> AncestorRef:
    if isinstance(raw, dict):
        return AncestorRef(str(raw.get("name") or ""), bool(raw.get("documented")))
    return AncestorRef(str(raw))


def _parameter(raw: dict[str, Any]) -> ParameterInfo:
    return ParameterInfo(
        _text(raw.get("name")), _text(raw.get("type")), _text(raw.get("comment"))
    )


def _method(raw: dict[str, Any]) -> MemberEntity:
    return MemberEntity(
        name=_text(raw.get("name")),
        return_type=_text(raw.get("returns", "void")),
        parameters=tuple(_parameter(p) for p in raw.get("parameters") or []),
        comment=_text(raw.get("comment")),
        modifiers=_modifiers(raw),
        return_comment=_text(raw.get("return_comment")),
        throws=tuple(
            ThrowsInfo(_text(t.get("type")), _text(t.get("comment")))
            for t in raw.get("throws") or []
        ),
    )


def _field(raw: dict[str, Any]) -> FieldEntity:
    value = raw.get("value")
    return FieldEntity(
        name=_text(raw.get("name")),
        type=_text(raw.get("type")),
        is_static=bool(raw.get("static")),
        comment=_text(raw.get("comment")),
        modifiers=_modifiers(raw),
        constant_value=None if value is None else str(value),
    )


def type_from_dict(raw: dict[str, Any]) -> TypeEntity:
    """Build a ``TypeEntity`` from one entry of the ``types`` list."""
    return TypeEntity(
        name=_text(raw.get("name")),
        package=PackageRef(_text(raw.get("package"))),
        comment=_text(raw.get("comment")),
        ancestors=tuple(_ancestor(a) for a in raw.get("ancestors") or []),
        methods=tuple(_method(m) for m in raw.get("methods") or []),
        fields=tuple(_field(f) for f in raw.get("fields") or []),
    )


def load_type_model(path: Path) -> list[TypeEntity]:
    """Load every type of a YAML model file, in file order."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    types = doc.get("types") if isinstance(doc, dict) else None
    if not isinstance(types, list):
        msg = f"No 'types' list found in: {path}"
        raise ValueError(msg)
    return [type_from_dict(t) for t in types]
