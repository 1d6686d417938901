"""Utilities for generating Markdown tables one row at a time."""


def md_cell(text: str) -> str:
    """Make ``text`` safe for a single table cell."""
    return " ".join(text.split()).replace("|", "\\|")


def md_table_header(headers: list[str]) -> list[str]:
    """Generate the heading and delimiter lines of a Markdown table."""
    return [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]


def md_table_row(cells: list[str]) -> str:
    """Generate one Markdown table row."""
    return "| " + " | ".join(md_cell(c) for c in cells) + " |"
