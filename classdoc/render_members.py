"""Per-member failure isolation for page sections."""

import logging
from collections.abc import Callable, Iterable

from classdoc.errors import MemberRenderError
from classdoc.member_views import MemberView
from classdoc.render_failure import RenderFailure

logger = logging.getLogger(__name__)


def render_members(
    section: str,
    views: Iterable[MemberView],
    append: Callable[[MemberView], None],
) -> list[RenderFailure]:
    """Append each member, collecting the ones that fail to render.

    Only ``MemberRenderError`` is isolated. Anything else, sink errors
    included, aborts the page.
    """
    failures: list[RenderFailure] = []
    for view in views:
        try:
            append(view)
        except MemberRenderError as e:
            logger.warning("Skipping %s member %r: %s", section, e.member, e.reason)
            failures.append(RenderFailure(section, e.member, e.reason))
    return failures
