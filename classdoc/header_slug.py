"""Utility for generating anchors for Markdown headings."""

import re


def header_slug(s: str) -> str:
    """Generate a GitHub-style anchor.

    Lower-case, punctuation dropped, spaces turned into dashes.
    """
    s = s.strip().lower()
    s = re.sub(r"[^\w\- ]+", "", s)
    return s.replace(" ", "-") or "section"


class AnchorRegistry:
    """Hands out heading anchors the way GitHub de-duplicates them.

    The first ``bar`` heading is ``#bar``, the next ones ``#bar-1``, ``#bar-2``.
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def next(self, heading: str) -> str:
        """Register ``heading`` and return its anchor."""
        slug = header_slug(heading)
        count = self._seen.get(slug, 0)
        self._seen[slug] = count + 1
        return slug if count == 0 else f"{slug}-{count}"
