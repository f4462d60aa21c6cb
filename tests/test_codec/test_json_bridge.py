"""Tests for JSON text encoding and template-driven decoding."""

import json
import math
from dataclasses import dataclass

import pytest

from objkit.codec import (
    CodecError,
    DecodeError,
    EncodeError,
    UnsupportedTemplateError,
    decode_from_text,
    encode_to_text,
)
from objkit.model import Circle, Rectangle, create_rectangle


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestEncodeScalars:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (1.5, "1.5"),
            ("hi", '"hi"'),
        ],
    )
    def test_literal_forms(self, value, expected):
        assert encode_to_text(value) == expected

    def test_non_finite_floats_become_null(self):
        assert encode_to_text([float("nan"), float("inf")]) == "[null,null]"

    def test_non_ascii_verbatim(self):
        assert encode_to_text("héllo") == '"héllo"'


class TestEncodeContainers:
    def test_array(self):
        assert encode_to_text([1, 2, 3]) == "[1,2,3]"

    def test_tuple_is_array(self):
        assert encode_to_text((1, "a")) == '[1,"a"]'

    def test_object_keeps_insertion_order(self):
        assert encode_to_text({"width": 10, "height": 20}) == '{"width":10,"height":20}'
        assert encode_to_text({"height": 20, "width": 10}) == '{"height":20,"width":10}'

    def test_nested(self):
        value = {"a": [1, {"b": None}], "c": {"d": False}}
        assert encode_to_text(value) == '{"a":[1,{"b":null}],"c":{"d":false}}'

    def test_non_string_keys(self):
        assert encode_to_text({1: "a", False: "b", None: "c"}) == '{"1":"a","false":"b","null":"c"}'

    def test_indent(self):
        assert encode_to_text({"a": [1]}, indent=2) == '{\n  "a": [\n    1\n  ]\n}'

    def test_shared_reference_is_not_a_cycle(self):
        shared = [1]
        assert encode_to_text([shared, shared]) == "[[1],[1]]"

    @pytest.mark.parametrize(
        "value",
        [
            [1, "x", True, None, 2.5],
            {"a": {"b": {"c": [1, 2, {"d": "e"}]}}},
            {"list": [], "dict": {}, "empty": ""},
        ],
    )
    def test_round_trips_through_standard_decoder(self, value):
        assert json.loads(encode_to_text(value)) == value


class TestEncodeObjects:
    def test_rectangle_encodes_fields_only(self):
        assert encode_to_text(create_rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_attributes(self):
        class Point:
            def __init__(self):
                self.x = 1
                self.y = 2

        assert encode_to_text(Point()) == '{"x":1,"y":2}'

    def test_dataclass_inside_list(self):
        @dataclass
        class Tag:
            name: str

        assert encode_to_text([Tag("a")]) == '[{"name":"a"}]'


class TestEncodeCallables:
    def test_omitted_inside_object(self):
        assert encode_to_text({"a": 1, "f": len}) == '{"a":1}'

    def test_null_inside_array(self):
        assert encode_to_text([1, lambda: 0, 3]) == "[1,null,3]"

    def test_top_level_callable_raises(self):
        with pytest.raises(EncodeError):
            encode_to_text(len)


class TestEncodeErrors:
    def test_self_referencing_list(self):
        value: list = [1]
        value.append(value)
        with pytest.raises(EncodeError, match="Cyclic"):
            encode_to_text(value)

    def test_nested_cycle_in_dict(self):
        outer: dict = {"inner": {}}
        outer["inner"]["back"] = outer
        with pytest.raises(EncodeError):
            encode_to_text(outer)

    @pytest.mark.parametrize("value", [b"raw", {1, 2}, 1j])
    def test_unrepresentable_values(self, value):
        with pytest.raises(EncodeError, match="not JSON serializable"):
            encode_to_text({"v": value})

    def test_unsupported_key(self):
        with pytest.raises(EncodeError):
            encode_to_text({(1, 2): "x"})

    def test_is_codec_error(self):
        with pytest.raises(CodecError):
            encode_to_text(print)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestDecodeIntoShapes:
    def test_instance_template(self):
        r = decode_from_text(create_rectangle(1, 1), '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.get_area() == 200

    def test_kind_template(self):
        c = decode_from_text(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10

    def test_template_values_do_not_leak(self):
        template = create_rectangle(7, 9)
        r = decode_from_text(template, '{"width":2}')
        assert r.width == 2
        assert r.height == 0
        assert r is not template
        assert template.width == 7

    def test_unknown_fields_added_verbatim(self):
        r = decode_from_text(Rectangle, '{"width":1,"height":2,"label":"box"}')
        assert r.label == "box"
        assert vars(r) == {"width": 1, "height": 2, "label": "box"}

    def test_constructor_is_bypassed(self):
        calls = []

        @dataclass
        class Tracked(Rectangle):
            def __post_init__(self):
                calls.append((self.width, self.height))

        t = decode_from_text(Tracked, '{"width":5,"height":6}')
        assert calls == [(0, 0)]
        assert t.get_area() == 30


class TestDecodeIntoDict:
    def test_dict_template(self):
        d = decode_from_text({"stale": True}, '{"a":[1,2]}')
        assert d == {"a": [1, 2]}

    def test_dict_subclass_kept(self):
        class Bag(dict):
            pass

        assert type(decode_from_text(Bag, '{"a":1}')) is Bag


class TestDecodeNonObjectPayloads:
    @pytest.mark.parametrize("text", ["null", "5", '"text"', "true"])
    def test_scalars_carry_no_fields(self, text):
        r = decode_from_text(create_rectangle(7, 9), text)
        assert isinstance(r, Rectangle)
        assert vars(r) == {"width": 0, "height": 0}

    def test_array_indices_become_fields(self):
        r = decode_from_text(Rectangle, '["a", "b"]')
        assert getattr(r, "0") == "a"
        assert getattr(r, "1") == "b"
        assert r.width == 0

    def test_array_into_dict(self):
        assert decode_from_text(dict, "[10, 20]") == {"0": 10, "1": 20}

    def test_null_into_dict(self):
        assert decode_from_text(dict, "null") == {}


class TestDecodeErrors:
    @pytest.mark.parametrize("text", ["", "{", "{'a': 1}", '{"a":}', "[1,]"])
    def test_malformed_text(self, text):
        with pytest.raises(DecodeError):
            decode_from_text(Rectangle, text)

    def test_error_reports_position(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_from_text(Rectangle, '{\n"a": }')
        assert exc_info.value.line == 2
        assert isinstance(exc_info.value.cause, json.JSONDecodeError)

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(self, token):
        with pytest.raises(DecodeError):
            decode_from_text(dict, '{"a": %s}' % token)

    @pytest.mark.parametrize("key", ["__class__", "__dict__"])
    def test_reserved_attribute_key(self, key):
        with pytest.raises(DecodeError, match="Cannot overlay") as exc_info:
            decode_from_text(Rectangle, '{"%s": 1}' % key)
        assert isinstance(exc_info.value.cause, TypeError)

    def test_unsupported_template_kind(self):
        class Plain:
            pass

        with pytest.raises(UnsupportedTemplateError):
            decode_from_text(Plain(), '{"a":1}')

    def test_decoded_fields_equal_parsed(self):
        text = '{"width":3.5,"height":null}'
        r = decode_from_text(Rectangle(width=99, height=99), text)
        assert vars(r) == json.loads(text)
        assert math.isclose(r.width, 3.5)
