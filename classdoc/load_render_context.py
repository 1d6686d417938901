"""Logic for loading the render context from a YAML file."""

import dataclasses
from pathlib import Path
from typing import Any

import yaml

from classdoc.deep_merge import deep_merge
from classdoc.render_context import RenderContext

DEFAULT_CONFIG: dict[str, Any] = {
    f.name: f.default for f in dataclasses.fields(RenderContext)
}


def _check_user_config(path: Path, user_config: object) -> dict[str, Any]:
    if not isinstance(user_config, dict):
        msg = f"Configuration must be a mapping: {path}"
        raise ValueError(msg)
    unknown = sorted(set(user_config) - set(DEFAULT_CONFIG))
    if unknown:
        msg = f"Unknown configuration keys in {path}: {', '.join(unknown)}"
        raise ValueError(msg)
    roots = user_config.get("implicit_roots", [])
    if not isinstance(roots, list) or not all(isinstance(r, str) for r in roots):
        msg = f"'implicit_roots' in {path} must be a list of names, got {roots!r}"
        raise ValueError(msg)
    return user_config


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    ``implicit_roots`` from the file are added to the default roots; the
    defaults (``java.lang.Object``, ``object``) always stay.
    """
    config = dict(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, _check_user_config(p, user_config))
    return config


def load_render_context(path: str | Path | None = None) -> RenderContext:
    """Build a ``RenderContext`` from defaults and an optional YAML file."""
    config = load_config(path)
    config["implicit_roots"] = tuple(config["implicit_roots"])
    return RenderContext(**config)
