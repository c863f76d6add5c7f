"""Tests for the JSON helpers."""

import json
import math
from dataclasses import dataclass

import pytest

from cssbuilder import ParseError, Rectangle, from_json, to_json


class Circle:
    def __init__(self, radius):
        raise AssertionError("from_json must not call __init__")

    def area(self):
        return math.pi * self.radius**2


@dataclass(slots=True)
class Point:
    x: int
    y: int

    def norm(self):
        return abs(self.x) + abs(self.y)


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self):
        assert to_json([1, 2, 3]) == "[1, 2, 3]"

    def test_dict_matches_host_serializer(self):
        value = {"width": 10, "height": 20}
        assert to_json(value) == json.dumps(value)

    def test_key_order_preserved(self):
        assert to_json({"b": 1, "a": 2}) == '{"b": 1, "a": 2}'

    def test_scalars(self):
        assert to_json(None) == "null"
        assert to_json("x") == '"x"'


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_binds_methods(self):
        circle = from_json(Circle, '{"radius": 10}')
        assert isinstance(circle, Circle)
        assert circle.radius == 10
        assert circle.area() == pytest.approx(math.pi * 100)

    def test_rectangle(self):
        r = from_json(Rectangle, '{"width": 10, "height": 20}')
        assert r.area() == 200

    def test_invalid_json(self):
        with pytest.raises(ParseError) as exc_info:
            from_json(Circle, '{"radius": ')
        assert exc_info.value.line == 1
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_non_object_json(self):
        with pytest.raises(ParseError, match="Expected a JSON object"):
            from_json(Circle, "[1, 2, 3]")

    def test_slotted_class(self):
        point = from_json(Point, '{"x": 3, "y": -4}')
        assert isinstance(point, Point)
        assert point.norm() == 7

    def test_slotted_class_unknown_key(self):
        with pytest.raises(ParseError, match="Cannot set 'z' on Point"):
            from_json(Point, '{"x": 1, "z": 2}')
