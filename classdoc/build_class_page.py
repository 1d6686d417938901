"""Logic for building one Markdown page per documented type."""

import logging
from pathlib import Path

from classdoc.build_link import build_link
from classdoc.markdown_document import MarkdownDocument
from classdoc.member_views import MethodView, field_views, method_views
from classdoc.order_members import order_fields, order_members
from classdoc.render_context import RenderContext
from classdoc.render_failure import PageResult, RenderFailure
from classdoc.render_hierarchy import render_hierarchy
from classdoc.render_members import render_members
from classdoc.type_entity import TypeEntity

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_LABEL = "(default package)"


def output_file_for_type(
    context: RenderContext, entity: TypeEntity, out_dir: Path
) -> Path:
    """Determine the output file for a type: ``out_dir/<Name><ext>``."""
    return out_dir / context.page_name(entity.name)


def build_class_page(
    context: RenderContext, entity: TypeEntity, out_dir: Path
) -> PageResult:
    """Build and write the page for ``entity`` into ``out_dir``.

    Sections are written in a fixed order: header, summary, fields, methods.
    Members that fail to render are dropped and reported on the result;
    ``SinkIOError`` propagates.
    """
    path = output_file_for_type(context, entity, out_dir)
    doc = MarkdownDocument.create(context, path)
    methods = method_views(
        order_members(entity.methods), _headings_before_methods(entity)
    )

    failures: list[RenderFailure] = []
    _build_header(context, doc, entity)
    failures += _build_summary(context, doc, entity, methods)
    failures += _build_fields(doc, entity)
    failures += _build_methods(doc, methods)
    doc.finalize()

    result = PageResult(path, tuple(failures))
    if result.degraded:
        logger.warning(
            "Wrote %s with %d member(s) dropped", path, len(result.failures)
        )
    else:
        logger.info("Wrote %s", path)
    return result


def _headings_before_methods(entity: TypeEntity) -> list[str]:
    """Return the headings written ahead of the first method, in page order."""
    headings = [entity.name]
    if entity.has_fields or entity.has_methods:
        headings.append("Summary")
    if entity.has_fields:
        headings.append("Fields")
    if entity.has_methods:
        headings.append("Methods")
    return headings


def _build_header(
    context: RenderContext, doc: MarkdownDocument, entity: TypeEntity
) -> None:
    """Write the title, package link, hierarchy and class comment."""
    doc.append_header(entity.name, 1)
    label = entity.package.name or DEFAULT_PACKAGE_LABEL
    doc.append_text(
        "Package " + build_link(label, context.package_index) + context.line_break
    )
    hierarchy = render_hierarchy(context, entity)
    if hierarchy:
        doc.append_text(hierarchy)
    if entity.comment:
        doc.new_line()
        doc.append_text(entity.comment)


def _build_summary(
    context: RenderContext,
    doc: MarkdownDocument,
    entity: TypeEntity,
    methods: list[MethodView],
) -> list[RenderFailure]:
    """Write the summary tables."""
    if not (entity.has_fields or entity.has_methods):
        return []
    failures: list[RenderFailure] = []
    doc.new_line()
    doc.append_header("Summary", 2)
    if entity.has_methods:
        doc.initialize_method_header()
        failures += render_members("summary", methods, doc.append_method_header)
    if context.summarize_fields and entity.has_fields:
        if entity.has_methods:
            doc.new_line()
        doc.initialize_field_header()
        failures += render_members(
            "summary",
            field_views(order_fields(entity.fields)),
            doc.append_field_header,
        )
    return failures


def _build_fields(doc: MarkdownDocument, entity: TypeEntity) -> list[RenderFailure]:
    """Write the field table, instance fields before static ones."""
    if not entity.has_fields:
        return []
    doc.new_line()
    doc.append_header("Fields", 2)
    doc.initialize_field_header()
    return render_members(
        "fields", field_views(order_fields(entity.fields)), doc.append_field
    )


def _build_methods(
    doc: MarkdownDocument, methods: list[MethodView]
) -> list[RenderFailure]:
    """Write the full documentation of every method."""
    if not methods:
        return []
    doc.new_line()
    doc.append_header("Methods", 2)
    return render_members("methods", methods, doc.append_method)
