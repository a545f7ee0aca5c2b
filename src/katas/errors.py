"""Exception classes for katas.

Provides the error hierarchy raised by the selector builder. Every error
is raised synchronously at the offending call and leaves the receiver
untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from katas.segments import SegmentKind


class KatasError(Exception):
    """Base exception for all katas errors.

    Subclass this for specific error categories.
    """

    pass


class SelectorError(KatasError):
    """Error while building a CSS selector.

    Raised when an append or combine call would produce a selector that
    does not follow ``element#id.class[attr]:pseudoClass::pseudoElement``.
    """

    def __init__(
        self,
        message: str,
        kind: SegmentKind | None = None,
        text: str | None = None,
    ) -> None:
        """Initialize selector error.

        Args:
            message: Error description
            kind: Segment kind that was being appended (optional)
            text: Segment text that was being appended (optional)
        """
        self.message = message
        self.kind = kind
        self.text = text
        super().__init__(message)


class DuplicateSingletonError(SelectorError):
    """Element, id or pseudo-element appended twice to one selector."""

    def __init__(self, kind: SegmentKind, text: str) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            kind=kind,
            text=text,
        )


class OutOfOrderError(SelectorError):
    """Segment appended after a segment that must follow it.

    ``previous_kind`` is the kind of the last segment already in the chain.
    """

    def __init__(
        self, kind: SegmentKind, text: str, previous_kind: SegmentKind | None
    ) -> None:
        self.previous_kind = previous_kind
        super().__init__(
            "Selector parts should be arranged in the following order: element, id, "
            "class, attribute, pseudo-class, pseudo-element",
            kind=kind,
            text=text,
        )


class InvalidCombinatorError(SelectorError):
    """Unknown combinator passed to combine() in strict mode."""

    def __init__(self, combinator: str) -> None:
        self.combinator = combinator
        super().__init__(f"Unknown combinator: {combinator!r}")
