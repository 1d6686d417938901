"""Naming and formatting policy shared by every page of one run."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderContext:
    """Configuration passed explicitly to every page build."""

    file_extension: str = ".md"
    package_index: str = "README.md"
    implicit_roots: tuple[str, ...] = ("java.lang.Object", "object")
    line_break: str = "<br>"
    code_language: str = "java"
    hierarchy_separator: str = " > "
    # Off by default: the summary only ever listed methods.
    summarize_fields: bool = False

    def page_name(self, type_name: str) -> str:
        """File name of the page documenting ``type_name``."""
        return f"{type_name}{self.file_extension}"
