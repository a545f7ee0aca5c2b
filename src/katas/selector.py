"""Immutable CSS selector nodes.

Selectors are built by chaining appends. Each append returns a new
SelectorNode that points back at the node it was called on, so a chain is
a singly-linked list read from tip to root:

    root <- div <- #main <- .container

Node Hierarchy:
Selector
├── SelectorNode (compound selector: div#main.container)
└── CombinedNode (two selectors joined by a combinator: a > b)

Ordering rules are enforced when a segment is appended, never at render
time. A rejected append raises and leaves the receiver usable.

Thread Safety:
All nodes are frozen (immutable). Extending a shared node produces a new
node and never alters the shared one, so intermediate selectors can be
reused from any thread.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from katas.errors import DuplicateSingletonError, OutOfOrderError
from katas.segments import Segment, SegmentKind

COMBINATORS: frozenset[str] = frozenset({" ", ">", "+", "~"})


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class SelectorNode:
    """Compound selector: every segment appended so far, oldest first.

    The empty root has neither a segment nor a previous node. Equality,
    hashing and repr work on the flat segment tuple, so chains of any
    length compare without recursing through ``previous``.

    """

    segment: Segment | None = None
    previous: SelectorNode | None = None

    @property
    def kind(self) -> SegmentKind | None:
        return self.segment.kind if self.segment is not None else None

    @property
    def rank(self) -> int:
        """Grammar rank of this node's own segment, -1 for the root."""
        return self.segment.kind.rank if self.segment is not None else -1

    def segments(self) -> tuple[Segment, ...]:
        """Return the chain's segments from root to tip."""
        parts: list[Segment] = []
        node: SelectorNode | None = self
        while node is not None:
            if node.segment is not None:
                parts.append(node.segment)
            node = node.previous
        parts.reverse()
        return tuple(parts)

    def kinds(self) -> frozenset[SegmentKind]:
        return frozenset(segment.kind for segment in self.segments())

    def append(self, kind: SegmentKind, text: str) -> SelectorNode:
        """Return a new node extending this chain with one segment.

        Args:
            kind: Kind of segment to append
            text: Segment value, rendered verbatim

        Returns:
            New SelectorNode whose ``previous`` is this node

        Raises:
            DuplicateSingletonError: A TYPE, ID or PSEUDO_ELEMENT segment is
                already present anywhere in the chain
            OutOfOrderError: ``kind`` ranks below this node's own kind

        """
        if kind.singleton and self._holds(kind):
            raise DuplicateSingletonError(kind, text)
        if kind.rank < self.rank:
            raise OutOfOrderError(kind, text, previous_kind=self.kind)
        return SelectorNode(Segment(kind, text), previous=self)

    def _holds(self, kind: SegmentKind) -> bool:
        node: SelectorNode | None = self
        while node is not None:
            if node.segment is not None and node.segment.kind is kind:
                return True
            node = node.previous
        return False

    # -- One append per segment kind -------------------------------------------

    def append_type(self, text: str) -> SelectorNode:
        return self.append(SegmentKind.TYPE, text)

    def append_id(self, text: str) -> SelectorNode:
        return self.append(SegmentKind.ID, text)

    def append_class(self, text: str) -> SelectorNode:
        return self.append(SegmentKind.CLASS, text)

    def append_attribute(self, text: str) -> SelectorNode:
        return self.append(SegmentKind.ATTRIBUTE, text)

    def append_pseudo_class(self, text: str) -> SelectorNode:
        return self.append(SegmentKind.PSEUDO_CLASS, text)

    def append_pseudo_element(self, text: str) -> SelectorNode:
        return self.append(SegmentKind.PSEUDO_ELEMENT, text)

    # Chain vocabulary shared with katas.builder
    element = append_type
    id = append_id
    class_ = append_class
    attr = append_attribute
    pseudo_class = append_pseudo_class
    pseudo_element = append_pseudo_element

    def render(self) -> str:
        """Render as CSS text, segments abutting (``a#id.cls``)."""
        return "".join(segment.render() for segment in self.segments())

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorNode):
            return NotImplemented
        return self.segments() == other.segments()

    def __hash__(self) -> int:
        return hash(self.segments())

    def __repr__(self) -> str:
        return f"SelectorNode(segments={self.segments()!r})"


@dataclass(frozen=True, slots=True)
class CombinedNode:
    """Two selectors joined by a combinator.

    Either side may itself be a CombinedNode. The combinator is rendered
    with one space on each side whatever its value, so the descendant
    combinator ``" "`` comes out as three spaces.

    """

    left: Selector
    combinator: str
    right: Selector

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    def __str__(self) -> str:
        return self.render()


Selector: TypeAlias = SelectorNode | CombinedNode

# Shared starting point for every facade call
EMPTY: SelectorNode = SelectorNode()


__all__ = [
    "COMBINATORS",
    "EMPTY",
    "CombinedNode",
    "Selector",
    "SelectorNode",
]
