"""Selector segment kinds and values.

A compound selector is a run of segments that follow one fixed order:

    element#id.class[attr]:pseudoClass::pseudoElement

SegmentKind carries the position of each kind in that order (its rank) and
the text that surrounds a segment's value when rendered.

Thread Safety:
Segment is frozen (immutable) and safe to share across threads.
SegmentKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class SegmentKind(Enum):
    """Kinds of simple selector, declared in grammar order."""

    TYPE = auto()  # div
    ID = auto()  # #main
    CLASS = auto()  # .container
    ATTRIBUTE = auto()  # [href$=".png"]
    PSEUDO_CLASS = auto()  # :focus
    PSEUDO_ELEMENT = auto()  # ::before

    @property
    def rank(self) -> int:
        """Position in grammar order, starting at 0."""
        return self.value - 1

    @property
    def singleton(self) -> bool:
        """Whether a compound selector may hold at most one segment of this kind."""
        return self in _SINGLETON_KINDS

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @property
    def suffix(self) -> str:
        return "]" if self is SegmentKind.ATTRIBUTE else ""


_SINGLETON_KINDS = frozenset({SegmentKind.TYPE, SegmentKind.ID, SegmentKind.PSEUDO_ELEMENT})

_PREFIXES: dict[SegmentKind, str] = {
    SegmentKind.TYPE: "",
    SegmentKind.ID: "#",
    SegmentKind.CLASS: ".",
    SegmentKind.ATTRIBUTE: "[",
    SegmentKind.PSEUDO_CLASS: ":",
    SegmentKind.PSEUDO_ELEMENT: "::",
}


@dataclass(frozen=True, slots=True)
class Segment:
    """One simple selector inside a compound selector.

    The text is rendered verbatim; it is never escaped or validated.

    """

    kind: SegmentKind
    text: str

    def render(self) -> str:
        """Render as CSS, e.g. ``.container`` or ``[type="text"]``."""
        return f"{self.kind.prefix}{self.text}{self.kind.suffix}"


__all__ = [
    "Segment",
    "SegmentKind",
]
