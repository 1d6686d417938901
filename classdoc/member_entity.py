"""Data models for documented methods."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterInfo:
    """A single method parameter."""

    name: str
    type: str
    comment: str = ""


@dataclass(frozen=True)
class ThrowsInfo:
    """An exception a method declares."""

    type: str
    comment: str = ""


@dataclass(frozen=True)
class MemberEntity:
    """Represents a documented method."""

    name: str
    return_type: str = "void"
    parameters: tuple[ParameterInfo, ...] = ()
    comment: str = ""
    modifiers: tuple[str, ...] = ()
    return_comment: str = ""
    throws: tuple[ThrowsInfo, ...] = ()

    @property
    def is_static(self) -> bool:
        """True when declared with the ``static`` modifier."""
        return "static" in self.modifiers

    @property
    def flat_parameters(self) -> str:
        """Parameter list without names, e.g. ``(String, int)``."""
        return "(" + ", ".join(p.type for p in self.parameters) + ")"

    @property
    def signature(self) -> str:
        """Declaration as it would read in source."""
        params = ", ".join(f"{p.type} {p.name}" for p in self.parameters)
        head = " ".join([*self.modifiers, self.return_type, self.name])
        sig = f"{head}({params})"
        if self.throws:
            sig += " throws " + ", ".join(t.type for t in self.throws)
        return sig
