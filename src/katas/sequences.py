"""Lazy sequence generators.

Every function here returns a generator: nothing is computed until the
caller iterates, and the infinite sequences never terminate on their own.

    >>> from itertools import islice
    >>> list(islice(fibonacci(), 8))
    [0, 1, 1, 2, 3, 5, 8, 13]

Tree traversal works on any node that exposes its children as a
``children`` list or tuple, held as an attribute or as a ``"children"``
key for mappings. Any other value, or none at all, marks a leaf. Both traversals are iterative, so tree depth
is not limited by the recursion limit.

"""

from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TypeVar

T = TypeVar("T")

_SONG_START = 99


def _bottles(count: int) -> str:
    if count == 0:
        return "no more bottles"
    if count == 1:
        return "1 bottle"
    return f"{count} bottles"


def bottles_of_beer() -> Iterator[str]:
    """Yield the lines of the "99 Bottles of Beer" song.

    Example:
        >>> lines = list(bottles_of_beer())
        >>> lines[0]
        '99 bottles of beer on the wall, 99 bottles of beer.'
        >>> lines[-1]
        'Go to the store and buy some more, 99 bottles of beer on the wall.'
        >>> len(lines)
        200

    """
    for count in range(_SONG_START, 0, -1):
        yield f"{_bottles(count)} of beer on the wall, {_bottles(count)} of beer."
        yield f"Take one down and pass it around, {_bottles(count - 1)} of beer on the wall."
    yield "No more bottles of beer on the wall, no more bottles of beer."
    yield f"Go to the store and buy some more, {_bottles(_SONG_START)} of beer on the wall."


def fibonacci() -> Iterator[int]:
    """Yield the Fibonacci numbers 0, 1, 1, 2, 3, 5, ... forever."""
    current, following = 0, 1
    while True:
        yield current
        current, following = following, current + following


def _children_of(node: Any) -> Iterable[Any]:
    if isinstance(node, Mapping):
        children = node.get("children")
    else:
        children = getattr(node, "children", None)
    if isinstance(children, (list, tuple)):
        return children
    return ()


def depth_first(root: Any) -> Iterator[Any]:
    """Traverse a tree depth-first (pre-order), children left to right.

    Example:
        >>> tree = {"n": 1, "children": [{"n": 2, "children": [{"n": 3}]}, {"n": 4}]}
        >>> [node["n"] for node in depth_first(tree)]
        [1, 2, 3, 4]

    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # Reversed so the leftmost child is popped first
        stack.extend(reversed(list(_children_of(node))))


def breadth_first(root: Any) -> Iterator[Any]:
    """Traverse a tree breadth-first (level order), children left to right.

    Example:
        >>> tree = {"n": 1, "children": [{"n": 2, "children": [{"n": 4}]}, {"n": 3}]}
        >>> [node["n"] for node in breadth_first(tree)]
        [1, 2, 3, 4]

    """
    queue: deque[Any] = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(_children_of(node))


def merge_sorted(first: Iterable[T], second: Iterable[T]) -> Iterator[T]:
    """Merge two ascending iterables into one ascending stream.

    Either input may be empty or infinite; items are pulled only as needed.
    On ties the item from ``second`` comes out first.

    Example:
        >>> list(merge_sorted([1, 3, 5], [2, 4, 6]))
        [1, 2, 3, 4, 5, 6]
        >>> list(merge_sorted([1, 3, 5], [-1]))
        [-1, 1, 3, 5]

    """
    left = iter(first)
    right = iter(second)
    missing = object()

    a = next(left, missing)
    b = next(right, missing)
    while a is not missing and b is not missing:
        if a < b:  # type: ignore[operator]
            yield a  # type: ignore[misc]
            a = next(left, missing)
        else:
            yield b  # type: ignore[misc]
            b = next(right, missing)

    if a is not missing:
        yield a  # type: ignore[misc]
        yield from left
    if b is not missing:
        yield b  # type: ignore[misc]
        yield from right


__all__ = [
    "bottles_of_beer",
    "breadth_first",
    "depth_first",
    "fibonacci",
    "merge_sorted",
]
