"""Append-only Markdown document bound to one output file."""

import logging
from pathlib import Path

from classdoc.errors import SinkIOError
from classdoc.md_table import md_table_header, md_table_row
from classdoc.member_views import (
    FIELD_HEADERS,
    METHOD_SUMMARY_HEADERS,
    MemberView,
)
from classdoc.render_context import RenderContext

logger = logging.getLogger(__name__)


class MarkdownDocument:
    """Buffers the lines of one page and writes them once on ``finalize``.

    Every member append renders its full text before touching the buffer,
    so a member that fails to render leaves nothing behind.
    """

    def __init__(self, context: RenderContext, path: Path) -> None:
        self.context = context
        self.path = path
        self.lines: list[str] = []
        self.finalized = False

    @classmethod
    def create(cls, context: RenderContext, path: Path) -> "MarkdownDocument":
        """Create a document for ``path``, making its parent directory."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            msg = f"Cannot create output directory for {path}: {e}"
            raise SinkIOError(msg) from e
        if path.is_dir():
            msg = f"Output path is a directory: {path}"
            raise SinkIOError(msg)
        return cls(context, path)

    def _append(self, *lines: str) -> None:
        if self.finalized:
            msg = f"Document already finalized: {self.path}"
            raise SinkIOError(msg)
        self.lines.extend(lines)

    def append_header(self, text: str, level: int) -> None:
        """Append a heading, separated by blank lines."""
        if self.lines and self.lines[-1] != "":
            self._append("")
        self._append("#" * level + " " + text, "")

    def append_text(self, text: str) -> None:
        """Append text verbatim."""
        if text:
            self._append(*text.splitlines())

    def new_line(self) -> None:
        """Append an empty line."""
        self._append("")

    def initialize_method_header(self) -> None:
        """Start the method summary table."""
        self._append(*md_table_header(METHOD_SUMMARY_HEADERS))

    def append_method_header(self, method: MemberView) -> None:
        """Append a method summary row."""
        self._append(md_table_row(method.summary_row()))

    def initialize_field_header(self) -> None:
        """Start a field table."""
        self._append(*md_table_header(FIELD_HEADERS))

    def append_field_header(self, field: MemberView) -> None:
        """Append a field summary row."""
        self._append(md_table_row(field.summary_row()))

    def append_field(self, field: MemberView) -> None:
        """Append a field with its full comment."""
        self._append(*field.detail_block(self.context.code_language))

    def append_method(self, method: MemberView) -> None:
        """Append the full documentation of a method."""
        self._append(*method.detail_block(self.context.code_language))

    def render(self) -> str:
        """Return the document text as it will be written."""
        return "\n".join(self.lines).rstrip() + "\n"

    def finalize(self) -> None:
        """Write the document to its path. Can only be called once."""
        if self.finalized:
            msg = f"Document already finalized: {self.path}"
            raise SinkIOError(msg)
        self.finalized = True
        try:
            self.path.write_text(self.render(), encoding="utf-8")
        except OSError as e:
            msg = f"Cannot write {self.path}: {e}"
            raise SinkIOError(msg) from e
        logger.debug("Wrote %d lines to %s", len(self.lines), self.path)
