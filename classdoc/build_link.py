"""Utilities for rendering links between generated pages."""

import posixpath

from classdoc.ancestor_ref import AncestorRef
from classdoc.render_context import RenderContext

# Characters that would end a Markdown link target early.
_TARGET_ESCAPES = {" ": "%20", "(": "%28", ")": "%29"}


def build_link(label: str, target: str) -> str:
    """Render a Markdown link ``[label](target)``."""
    label = label.replace("[", "\\[").replace("]", "\\]")
    target = "".join(_TARGET_ESCAPES.get(c, c) for c in target)
    return f"[{label}]({target})"


def relative_page_path(
    context: RenderContext,
    from_package: str,
    to_package: str,
    type_name: str,
) -> str:
    """Return the path of ``to_package.type_name`` relative to ``from_package``.

    Pages are laid out one directory per package, e.g. ``com/acme/Foo.md``.
    """
    src = from_package.replace(".", "/") or "."
    dst = posixpath.join(to_package.replace(".", "/"), context.page_name(type_name))
    return posixpath.relpath(dst, src)


def render_ancestor(
    context: RenderContext,
    from_package: str,
    ancestor: AncestorRef,
) -> str:
    """Render one ancestor as a link when it is documented, else as code."""
    if not ancestor.documented:
        return f"`{ancestor.qualified_name}`"
    target = relative_page_path(context, from_package, ancestor.package, ancestor.name)
    return build_link(ancestor.name, target)
