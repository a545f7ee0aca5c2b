"""Tests for katas.objects — Rectangle and JSON helpers."""

import json

import pytest

from katas.objects import Rectangle, from_json, get_json


class Circle:
    def __init__(self, radius: float) -> None:
        self.radius = radius
        self._cache = None


class TestRectangle:
    def test_fields(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self) -> None:
        assert Rectangle(10, 20).area() == 200
        assert Rectangle(0, 5).area() == 0


class TestGetJson:
    def test_natives_are_compact(self) -> None:
        assert get_json([1, 2, 3]) == "[1,2,3]"
        assert get_json({"a": [True, None]}) == '{"a":[true,null]}'

    def test_dataclass(self) -> None:
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_skips_private(self) -> None:
        assert get_json(Circle(2)) == '{"radius":2}'

    def test_nested_objects(self) -> None:
        assert json.loads(get_json([Rectangle(1, 2)])) == [{"width": 1, "height": 2}]

    def test_unserializable(self) -> None:
        with pytest.raises(TypeError):
            get_json(object())


class TestFromJson:
    def test_rebuilds_instance(self) -> None:
        r = from_json(Rectangle, '{"width": 10, "height": 20}')
        assert isinstance(r, Rectangle)
        assert r == Rectangle(10, 20)
        assert r.area() == 200

    def test_round_trip(self) -> None:
        original = Rectangle(3, 4)
        assert from_json(Rectangle, get_json(original)) == original

    def test_does_not_call_init(self) -> None:
        c = from_json(Circle, '{"radius": 3}')
        assert c.radius == 3
        assert not hasattr(c, "_cache")

    def test_extra_keys_become_attributes(self) -> None:
        r = from_json(Rectangle, '{"width": 1, "height": 2, "color": "red"}')
        assert r.color == "red"  # type: ignore[attr-defined]

    def test_non_object_rejected(self) -> None:
        with pytest.raises(ValueError, match="JSON object"):
            from_json(Rectangle, "[1, 2]")

    def test_invalid_json(self) -> None:
        with pytest.raises(ValueError):
            from_json(Rectangle, "{not json")


class TestGetJsonText:
    """Output matches JSON.stringify for non-ASCII text and non-finite numbers."""

    def test_non_ascii_unescaped(self) -> None:
        assert get_json({"name": "café"}) == '{"name":"café"}'
        assert get_json(["你好"]) == '["你好"]'

    def test_nan_becomes_null(self) -> None:
        assert get_json({"ratio": float("nan")}) == '{"ratio":null}'

    def test_infinities_become_null(self) -> None:
        assert get_json([float("inf"), float("-inf"), 1.5]) == "[null,null,1.5]"

    def test_non_finite_inside_objects(self) -> None:
        assert get_json(Rectangle(float("inf"), 2)) == '{"width":null,"height":2}'

    def test_output_is_valid_json(self) -> None:
        text = get_json({"values": (float("nan"), {"deep": [float("inf")]})})
        assert json.loads(text) == {"values": [None, {"deep": [None]}]}
