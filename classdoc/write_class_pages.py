"""Logic for writing the pages of many types into one directory."""

import logging
from collections.abc import Sequence
from pathlib import Path

from classdoc.build_class_page import build_class_page, output_file_for_type
from classdoc.render_context import RenderContext
from classdoc.render_failure import PageResult
from classdoc.type_entity import TypeEntity

logger = logging.getLogger(__name__)


def write_class_pages(
    context: RenderContext,
    types: Sequence[TypeEntity],
    out_dir: Path,
) -> list[PageResult]:
    """Write one page per type, in input order.

    Raises ``ValueError`` before writing anything if two types would share
    an output file.
    """
    seen: dict[Path, str] = {}
    for t in types:
        path = output_file_for_type(context, t, out_dir)
        if path in seen:
            msg = f"{t.qualified_name} and {seen[path]} both map to {path}"
            raise ValueError(msg)
        seen[path] = t.qualified_name

    results = []
    total = len(types)
    logger.info("Writing %d class pages...", total)
    for t in types:
        results.append(build_class_page(context, t, out_dir))
        if len(results) % 50 == 0:
            logger.info("  ... wrote %d/%d pages", len(results), total)

    degraded = sum(1 for r in results if r.degraded)
    logger.info("Wrote %d pages (%d degraded) into %s", total, degraded, out_dir)
    return results
