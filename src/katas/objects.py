"""Plain objects and their JSON form.

    >>> r = Rectangle(10, 20)
    >>> r.area()
    200
    >>> get_json(r)
    '{"width":10,"height":20}'
    >>> from_json(Rectangle, '{"width": 10, "height": 20}').area()
    200

"""

import dataclasses
import json
import math
from typing import Any, TypeVar

T = TypeVar("T")


@dataclasses.dataclass
class Rectangle:
    """Rectangle with a width and a height."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with None, inside lists and dicts too."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    return value


def _public_fields(obj: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        fields = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
        return _finite(fields)
    try:
        attributes = vars(obj)
    except TypeError:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg) from None
    return _finite({k: v for k, v in attributes.items() if not k.startswith("_")})


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of ``obj``.

    JSON natives serialize as usual, with non-ASCII text left unescaped
    and NaN or infinite floats written as ``null``. Other objects
    serialize as their public attributes (dataclass fields, or the
    instance ``__dict__``).

    Example:
        >>> get_json([1, 2, 3])
        '[1,2,3]'
        >>> get_json({"name": "café", "ratio": float("nan")})
        '{"name":"café","ratio":null}'

    Raises:
        TypeError: ``obj`` holds a value with no attributes to serialize.

    """
    return json.dumps(
        _finite(obj),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_public_fields,
    )


def from_json(cls: type[T], data: str) -> T:
    """Build a ``cls`` instance from a JSON object.

    ``cls.__init__`` is not called; each key of the JSON object becomes an
    attribute of the new instance, so keys need not match constructor
    parameters.

    Raises:
        ValueError: ``data`` is not valid JSON or not a JSON object.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    instance = cls.__new__(cls)
    for name, value in raw.items():
        setattr(instance, name, value)
    return instance


__all__ = [
    "Rectangle",
    "from_json",
    "get_json",
]
