"""Selector serialization — JSON round-trip for selector trees.

Converts SelectorNode and CombinedNode trees to/from JSON-compatible dicts.
A compound selector is stored as its flat list of segments rather than as
the linked chain, and is rebuilt by replaying the appends, so ordering
rules are checked again on the way in.

All output is deterministic (sorted keys).

Example:
    from katas import builder
    from katas.serialization import to_json, from_json

    selector = builder.element("a").class_("external")
    restored = from_json(to_json(selector))
    assert restored == selector

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from katas.builder import combine
from katas.segments import SegmentKind
from katas.selector import EMPTY, CombinedNode, Selector, SelectorNode
from katas.utils.logger import get_logger

logger = get_logger(__name__)

_KINDS_BY_NAME: dict[str, SegmentKind] = {kind.name.lower(): kind for kind in SegmentKind}


def to_dict(selector: Selector) -> dict[str, Any]:
    """Convert a selector tree to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        selector: SelectorNode or CombinedNode.

    Returns:
        Dict with ``_type`` and the node's fields.

    """
    if isinstance(selector, CombinedNode):
        return {
            "_type": "CombinedNode",
            "left": to_dict(selector.left),
            "combinator": selector.combinator,
            "right": to_dict(selector.right),
        }
    if isinstance(selector, SelectorNode):
        return {
            "_type": "SelectorNode",
            "segments": [
                {"kind": segment.kind.name.lower(), "text": segment.text}
                for segment in selector.segments()
            ],
        }
    msg = f"Cannot serialize {type(selector).__name__}"
    raise TypeError(msg)


def from_dict(data: dict[str, Any]) -> Selector:
    """Rebuild a selector tree from a dict.

    Combined selectors are rebuilt through katas.builder.combine, so the
    active BuilderConfig applies to stored combinators too.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        SelectorNode or CombinedNode.

    Raises:
        ValueError: If ``_type``, a field or a segment kind is missing,
            malformed or unknown.
        DuplicateSingletonError, OutOfOrderError: If the stored segments
            break the selector ordering rules.
        InvalidCombinatorError: If a stored combinator is unknown and
            ``strict_combinators`` is set.

    """
    if not isinstance(data, dict):
        msg = f"Expected a serialized selector object, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized selector"
        raise ValueError(msg)

    if type_name == "CombinedNode":
        return combine(
            from_dict(_field(data, "left")),
            _field(data, "combinator", str),
            from_dict(_field(data, "right")),
        )
    if type_name == "SelectorNode":
        segments = data.get("segments", [])
        if not isinstance(segments, list):
            msg = f"Expected a list of segments, got {type(segments).__name__}"
            raise ValueError(msg)
        node = EMPTY
        for raw in segments:
            if not isinstance(raw, dict):
                msg = f"Expected a segment object, got {type(raw).__name__}"
                raise ValueError(msg)
            kind_name = raw.get("kind")
            kind = _KINDS_BY_NAME.get(kind_name) if isinstance(kind_name, str) else None
            if kind is None:
                msg = f"Unknown segment kind: {kind_name!r}"
                raise ValueError(msg)
            node = node.append(kind, _field(raw, "text", str))
        return node

    msg = f"Unknown selector type: {type_name!r}"
    raise ValueError(msg)


def _field(data: dict[str, Any], name: str, expected: type | None = None) -> Any:
    """Look up a required field, raising ValueError when absent or mistyped."""
    if name not in data:
        msg = f"Missing {name!r} field in serialized selector"
        raise ValueError(msg)
    value = data[name]
    if expected is not None and not isinstance(value, expected):
        msg = f"Field {name!r} must be {expected.__name__}, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def to_json(selector: Selector, *, indent: int | None = None) -> str:
    """Serialize a selector tree to a JSON string.

    Output is deterministic (sorted keys).

    """
    return json.dumps(to_dict(selector), sort_keys=True, indent=indent)


def from_json(data: str) -> Selector:
    """Deserialize a selector tree from a JSON string.

    Raises:
        ValueError: If the JSON is malformed or doesn't describe a selector.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    logger.debug("Rebuilding %s from JSON", raw.get("_type"))
    return from_dict(raw)


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
