"""Utility for generating Markdown code blocks."""

import re

BACKTICK_RUN_RE = re.compile(r"`{3,}")


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block.

    The fence is made longer than any backtick run inside ``code``.
    """
    longest = max((len(m.group()) for m in BACKTICK_RUN_RE.finditer(code)), default=2)
    fence = "`" * max(3, longest + 1)
    return f"{fence}{lang}\n{code.rstrip()}\n{fence}"
