"""Logic for extracting the summary sentence of a doc comment."""

import re

# A period followed by whitespace, as javadoc does it.
SENTENCE_END_RE = re.compile(r"\.(\s|$)")


def first_sentence(comment: str) -> str:
    """Return the first sentence of ``comment`` on a single line."""
    text = " ".join(comment.split())
    if not text:
        return ""
    m = SENTENCE_END_RE.search(text)
    return text[: m.start() + 1] if m else text
