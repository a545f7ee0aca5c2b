"""
katas — Small Python exercises

Immutable CSS selector builder, lazy sequence generators, tree traversal,
and a plain-object JSON exercise. Zero runtime dependencies.

Quick Start:
    >>> from katas import element, combine
    >>> link = element("a").attr('href$=".png"').pseudo_class("focus")
    >>> link.render()
    'a[href$=".png"]:focus'
    >>> combine(element("ul"), ">", element("li")).render()
    'ul > li'

    >>> # Ordering rules are checked on every append
    >>> element("a").element("b")
    Traceback (most recent call last):
    ...
    katas.errors.DuplicateSingletonError: Element, id and pseudo-element ...

Sequences:
    >>> from itertools import islice
    >>> from katas import fibonacci
    >>> list(islice(fibonacci(), 6))
    [0, 1, 1, 2, 3, 5]

Installation:
    pip install katas
"""

from katas.builder import attr, class_, combine, element, id, pseudo_class, pseudo_element
from katas.config import (
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)
from katas.errors import (
    DuplicateSingletonError,
    InvalidCombinatorError,
    KatasError,
    OutOfOrderError,
    SelectorError,
)
from katas.objects import Rectangle, from_json, get_json
from katas.segments import Segment, SegmentKind
from katas.selector import COMBINATORS, CombinedNode, Selector, SelectorNode
from katas.sequences import (
    bottles_of_beer,
    breadth_first,
    depth_first,
    fibonacci,
    merge_sorted,
)

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Selector facade
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # Selector nodes
    "COMBINATORS",
    "CombinedNode",
    "Segment",
    "SegmentKind",
    "Selector",
    "SelectorNode",
    # Errors
    "KatasError",
    "SelectorError",
    "DuplicateSingletonError",
    "OutOfOrderError",
    "InvalidCombinatorError",
    # Configuration (ContextVar-based)
    "BuilderConfig",
    "get_builder_config",
    "set_builder_config",
    "reset_builder_config",
    "builder_config_context",
    # Sequences
    "bottles_of_beer",
    "fibonacci",
    "depth_first",
    "breadth_first",
    "merge_sorted",
    # Objects
    "Rectangle",
    "get_json",
    "from_json",
]
