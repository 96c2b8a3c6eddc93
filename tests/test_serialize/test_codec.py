"""Tests for the JSON helpers."""

import math
from dataclasses import dataclass

import pytest

from objtasks.serialize import ParseError, from_json, parse_json, to_json
from objtasks.shapes import Rectangle


@dataclass
class Circle:
    radius: float

    def area(self) -> float:
        return 3.14 * self.radius * self.radius


@dataclass
class Pair:
    first: str
    second: str


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._cache = None


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self) -> None:
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_key_order(self) -> None:
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'
        assert to_json({"height": 20, "width": 10}) == '{"height":20,"width":10}'

    def test_scalars(self) -> None:
        assert to_json("a") == '"a"'
        assert to_json(None) == "null"
        assert to_json(True) == "true"

    def test_unicode_verbatim(self) -> None:
        assert to_json({"name": "Привет"}) == '{"name":"Привет"}'

    def test_dataclass(self) -> None:
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_public_fields(self) -> None:
        assert to_json(Point(1, 2)) == '{"x":1,"y":2}'

    def test_nested(self) -> None:
        assert to_json({"shapes": [Circle(1)]}) == '{"shapes":[{"radius":1}]}'

    def test_indent(self) -> None:
        assert to_json({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_unserializable(self) -> None:
        with pytest.raises(TypeError):
            to_json({1, 2})

    def test_non_finite_floats_become_null(self) -> None:
        assert to_json({"v": math.nan, "w": math.inf, "x": -math.inf}) == (
            '{"v":null,"w":null,"x":null}'
        )

    def test_non_finite_inside_nested_values(self) -> None:
        assert to_json([1.5, (math.nan,)]) == "[1.5,[null]]"
        assert to_json(Circle(math.inf)) == '{"radius":null}'

    def test_function_rejected(self) -> None:
        with pytest.raises(TypeError):
            to_json({"f": len})
        with pytest.raises(TypeError):
            to_json(lambda: 1)

    def test_class_rejected(self) -> None:
        with pytest.raises(TypeError):
            to_json(Circle)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_circle(self) -> None:
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.area() == pytest.approx(314.0)

    def test_values_are_positional(self) -> None:
        r = from_json(Rectangle, '{"a":3,"b":4}')
        assert (r.width, r.height) == (3, 4)

    def test_key_order_drives_positions(self) -> None:
        r = from_json(Rectangle, '{"height":4,"width":3}')
        assert (r.width, r.height) == (4, 3)

    def test_array(self) -> None:
        assert from_json(Rectangle, "[2, 5]").area() == 10

    def test_prototype_instance(self) -> None:
        r = from_json(Rectangle(0, 0), '{"width":2,"height":3}')
        assert isinstance(r, Rectangle)
        assert r.area() == 6

    def test_round_trip(self) -> None:
        r = from_json(Rectangle, to_json(Rectangle(10, 20)))
        assert r == Rectangle(10, 20)

    def test_string_passes_characters(self) -> None:
        assert from_json(Pair, '"ab"') == Pair("a", "b")

    def test_scalar_passes_no_values(self) -> None:
        assert from_json(list, "42") == []

    def test_invalid(self) -> None:
        with pytest.raises(ParseError):
            from_json(Rectangle, "{bad")

    def test_invalid_position(self) -> None:
        with pytest.raises(ParseError) as info:
            parse_json('{"a":1,\n"b":}')
        assert info.value.line == 2
        assert info.value.column == 5
        assert info.value.__cause__ is not None
