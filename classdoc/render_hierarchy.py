"""Logic for rendering a type's inheritance chain."""

from classdoc.build_link import render_ancestor
from classdoc.render_context import RenderContext
from classdoc.type_entity import TypeEntity


def render_hierarchy(context: RenderContext, entity: TypeEntity) -> str:
    """Render the ancestor chain root first, ending with the type itself.

    Implicit roots configured on the context are skipped. Returns an empty
    string when no explicit ancestor remains.
    """
    chain = [
        render_ancestor(context, entity.package.name, a)
        for a in entity.ancestors
        if a.qualified_name not in context.implicit_roots
    ]
    if not chain:
        return ""
    chain.append(f"**{entity.name}**")
    return context.hierarchy_separator.join(chain)
