"""Facade for building CSS selectors.

Each function starts a new chain from the shared empty node and performs
one append. The returned SelectorNode is extended by chaining:

    >>> from katas import builder
    >>> builder.id("main").class_("container").class_("editable").render()
    '#main.container.editable'
    >>> builder.element("a").attr('href$=".png"').pseudo_class("focus").render()
    'a[href$=".png"]:focus'

Selectors are joined with combine():

    >>> builder.combine(builder.element("ul"), ">", builder.element("li")).render()
    'ul > li'

The module holds no mutable state. ``class`` is a keyword, so the class
selector is spelled ``class_``; ``id`` shadows the builtin only inside this
module's namespace.

"""

from katas.config import get_builder_config
from katas.errors import InvalidCombinatorError
from katas.selector import COMBINATORS, EMPTY, CombinedNode, Selector, SelectorNode
from katas.utils.logger import get_logger

logger = get_logger(__name__)


def element(value: str) -> SelectorNode:
    """Start a selector with a type segment (``div``)."""
    return EMPTY.append_type(value)


def id(value: str) -> SelectorNode:  # noqa: A001
    """Start a selector with an id segment (``#main``)."""
    return EMPTY.append_id(value)


def class_(value: str) -> SelectorNode:
    """Start a selector with a class segment (``.container``)."""
    return EMPTY.append_class(value)


def attr(value: str) -> SelectorNode:
    """Start a selector with an attribute segment (``[type="text"]``)."""
    return EMPTY.append_attribute(value)


def pseudo_class(value: str) -> SelectorNode:
    return EMPTY.append_pseudo_class(value)


def pseudo_element(value: str) -> SelectorNode:
    return EMPTY.append_pseudo_element(value)


def combine(left: Selector, combinator: str, right: Selector) -> CombinedNode:
    """Join two built selectors with a combinator.

    Args:
        left: Selector on the left of the combinator
        combinator: One of ' ', '>', '+', '~'
        right: Selector on the right of the combinator

    Returns:
        New CombinedNode; neither operand is modified

    Raises:
        InvalidCombinatorError: ``combinator`` is unknown and the active
            BuilderConfig has ``strict_combinators`` set

    """
    if combinator not in COMBINATORS:
        if get_builder_config().strict_combinators:
            raise InvalidCombinatorError(combinator)
        logger.debug("Accepting unknown combinator %r", combinator)
    return CombinedNode(left, combinator, right)


__all__ = [
    "attr",
    "class_",
    "combine",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
]
