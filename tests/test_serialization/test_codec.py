"""Tests for serialize / reconstruct / decode."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import pytest

from selectorkit.config import SerializationConfig
from selectorkit.errors import DecodingError, EncodingError, SerializationError
from selectorkit.model import Rectangle
from selectorkit.serialization import ShapeDescriptor, decode, reconstruct, serialize


@dataclass
class Circle:
    radius: float


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_list_is_compact(self):
        assert serialize([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self):
        assert serialize({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_sort_keys_config(self):
        config = SerializationConfig(sort_keys=True)
        assert serialize({"width": 10, "height": 20}, config) == '{"height":20,"width":10}'

    def test_indent_config(self):
        config = SerializationConfig(indent=2, separators=(",", ": "))
        assert serialize({"a": 1}, config) == '{\n  "a": 1\n}'

    def test_tuple_as_array(self):
        assert serialize((1, "a")) == '[1,"a"]'

    def test_scalars(self):
        assert serialize("hi") == '"hi"'
        assert serialize(None) == "null"
        assert serialize(True) == "true"

    def test_non_ascii_kept(self):
        assert serialize("café") == '"café"'

    def test_dataclass_encodes_fields(self):
        assert serialize(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_nested_dataclass(self):
        assert serialize({"shape": Circle(2)}) == '{"shape":{"radius":2}}'


class TestSerializeErrors:
    def test_unsupported_type(self):
        with pytest.raises(EncodingError) as exc_info:
            serialize({"p": Point(1, 2)})
        assert isinstance(exc_info.value.cause, TypeError)

    def test_set_unsupported(self):
        with pytest.raises(EncodingError):
            serialize({1, 2})

    def test_cyclic_list(self):
        data: list = []
        data.append(data)
        with pytest.raises(EncodingError):
            serialize(data)

    def test_cyclic_dict(self):
        data: dict = {}
        data["self"] = data
        with pytest.raises(EncodingError):
            serialize(data)

    def test_nan_rejected_by_default(self):
        with pytest.raises(EncodingError):
            serialize([math.nan])

    def test_nan_allowed_with_config(self):
        assert serialize([math.inf], SerializationConfig(allow_nan=True)) == "[Infinity]"

    def test_exception_chained(self):
        with pytest.raises(EncodingError) as exc_info:
            serialize(object())
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_is_serialization_error(self):
        assert issubclass(EncodingError, SerializationError)


# ---------------------------------------------------------------------------
# decode
# ---------------------------------------------------------------------------


class TestDecode:
    def test_valid(self):
        assert decode('{"a":[1,2]}') == {"a": [1, 2]}

    def test_invalid_reports_position(self):
        with pytest.raises(DecodingError) as exc_info:
            decode('{"a": 1,\n "b": }')
        err = exc_info.value
        assert err.line == 2
        assert err.column is not None
        assert "Invalid JSON" in str(err)

    def test_empty_text(self):
        with pytest.raises(DecodingError):
            decode("")

    def test_invalid_utf8_bytes(self):
        with pytest.raises(DecodingError) as exc_info:
            decode(b'{"width":\xff\xfe}')
        err = exc_info.value
        assert isinstance(err.cause, UnicodeDecodeError)
        assert err.__cause__ is err.cause
        assert err.line is None

    def test_invalid_utf8_through_reconstruct(self):
        with pytest.raises(DecodingError):
            reconstruct(Rectangle, b'{"width":\xff\xfe}')

    def test_excessive_nesting(self):
        with pytest.raises(DecodingError) as exc_info:
            decode("[" * 100000 + "]" * 100000)
        assert isinstance(exc_info.value.cause, RecursionError)

    def test_valid_bytes(self):
        assert decode(b'{"width":1}') == {"width": 1}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestLogging:
    def test_encode_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="selectorkit"):
            with pytest.raises(EncodingError):
                serialize({"p": Point(1, 2)})

        assert any("Failed to encode" in r.message for r in caplog.records)

    def test_decode_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="selectorkit"):
            with pytest.raises(DecodingError):
                decode("{")

        records = [r for r in caplog.records if "Failed to decode" in r.message]
        assert len(records) == 1
        assert records[0].name == "selectorkit.serialization"

    def test_success_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="selectorkit"):
            serialize([1, 2])
            decode("[1,2]")

        assert caplog.records == []


# ---------------------------------------------------------------------------
# reconstruct
# ---------------------------------------------------------------------------


class TestReconstruct:
    def test_rectangle_from_serialized(self):
        r = reconstruct(Rectangle, serialize(Rectangle(10, 20)))
        assert isinstance(r, Rectangle)
        assert r.width == 10
        assert r.height == 20
        assert r.get_area() == 200

    def test_circle(self):
        c = reconstruct(Circle, '{"radius":10}')
        assert c == Circle(10)

    def test_plain_class(self):
        p = reconstruct(Point, '{"x":1,"y":2}')
        assert (p.x, p.y) == (1, 2)

    def test_positional_uses_document_key_order(self):
        r = reconstruct(Rectangle, '{"height":20,"width":10}')
        assert r.width == 20
        assert r.height == 10

    def test_array_passed_positionally(self):
        assert reconstruct(Rectangle, "[3,4]") == Rectangle(3, 4)

    def test_any_callable(self):
        assert reconstruct(lambda *values: sum(values), "[1,2,3]") == 6

    def test_descriptor_with_fields_ignores_key_order(self):
        descriptor = ShapeDescriptor.of(Rectangle)
        r = reconstruct(descriptor, '{"height":20,"width":10}')
        assert r == Rectangle(10, 20)

    def test_invalid_json(self):
        with pytest.raises(DecodingError):
            reconstruct(Rectangle, "{width: 10}")

    def test_scalar_rejected(self):
        with pytest.raises(DecodingError):
            reconstruct(Rectangle, "42")

    def test_arity_mismatch_propagates(self):
        with pytest.raises(TypeError):
            reconstruct(Rectangle, '{"width":1}')
