"""Exceptions raised while building class pages."""


class ClassDocError(Exception):
    """Base class for page generation errors."""


class SinkIOError(ClassDocError, OSError):
    """The output document could not be created, written or finalized.

    Fatal to the page being built.
    """


class MemberRenderError(ClassDocError, ValueError):
    """A single field or method could not be rendered.

    Raised for malformed member data. Callers isolate it per member so
    the rest of the page is still produced.
    """

    def __init__(self, member: str, reason: str) -> None:
        super().__init__(f"{member or '<unnamed>'}: {reason}")
        self.member = member
        self.reason = reason
