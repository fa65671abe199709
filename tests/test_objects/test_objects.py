"""Tests for the rectangle type and JSON helpers."""

import json

import pytest

from cssbuilder.objects import Rectangle, from_json, to_json


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area() == 200

    def test_zero_area(self):
        assert Rectangle(0, 5).area() == 0


class TestToJson:
    def test_list_is_compact(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_nested_dataclass(self):
        assert json.loads(to_json({"shape": Rectangle(1, 2)})) == {
            "shape": {"width": 1, "height": 2}
        }

    def test_unserialisable(self):
        with pytest.raises(TypeError):
            to_json(object())


class TestFromJson:
    def test_builds_instance_of_class(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.area() == 200

    def test_round_trip(self):
        r = Rectangle(3, 4)
        assert from_json(Rectangle, to_json(r)) == r

    def test_does_not_call_init(self):
        class Circle:
            def __init__(self, radius):
                raise AssertionError("__init__ must not run")

            def diameter(self):
                return self.radius * 2

        c = from_json(Circle, '{"radius":10}')
        assert c.radius == 10
        assert c.diameter() == 20

    def test_extra_keys_become_attributes(self):
        r = from_json(Rectangle, '{"width":1,"height":2,"label":"box"}')
        assert r.label == "box"

    def test_non_object_rejected(self):
        with pytest.raises(TypeError):
            from_json(Rectangle, "[1, 2]")
