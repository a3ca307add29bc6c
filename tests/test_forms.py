import json

import pytest
from bson import ObjectId

from forms import (
    FormFieldError,
    coerce_int,
    coerce_number,
    parse_blocks,
    parse_bool,
    parse_dimensions,
    parse_refs,
    parse_string_list,
    parse_variants,
    product_fields,
)

A = "64b7f0c2a1b2c3d4e5f60718"
B = "64b7f0c2a1b2c3d4e5f60719"


@pytest.mark.parametrize("raw", [A, [A], json.dumps(A), json.dumps([A]), [json.dumps([A])]])
def test_parse_refs_accepts_every_shape(raw):
    assert parse_refs(raw) == [ObjectId(A)]


def test_parse_refs_drops_invalid_and_duplicate_ids():
    raw = json.dumps([A, "not-an-id", B, A, 42])
    assert parse_refs(raw) == [ObjectId(A), ObjectId(B)]
    assert parse_refs(None) == []
    assert parse_refs("garbage") == []


def test_numbers_fall_back_to_defaults():
    assert coerce_number("12.5") == 12.5
    assert coerce_number("") == 0
    assert coerce_number("abc") == 0
    assert coerce_number("nan") == 0
    assert coerce_number(None, default=3) == 3
    assert coerce_int("7") == 7
    assert coerce_int("7.9") == 7


def test_parse_bool():
    assert parse_bool("true") is True
    assert parse_bool(True) is True
    assert parse_bool("false") is False
    assert parse_bool(None) is False


def test_malformed_json_is_a_field_error():
    with pytest.raises(FormFieldError) as exc:
        parse_string_list("tags", "[oops")
    assert exc.value.field == "tags"


def test_structured_fields():
    assert parse_string_list("tags", '["lamp", "led"]') == ["lamp", "led"]
    assert parse_variants('[{"option": "Color", "values": ["Red"]}]') == [{"option": "Color", "values": ["Red"]}]
    assert parse_dimensions('{"length": "10", "width": 2}') == {"length": 10.0, "width": 2.0, "height": 0.0}
    with pytest.raises(FormFieldError):
        parse_dimensions("[1, 2]")
    with pytest.raises(FormFieldError):
        parse_variants('[{"values": ["Red"]}]')


def test_parse_blocks_validates_kinds():
    blocks = parse_blocks('[{"type": "text", "content": "hi"}, {"id": 3, "type": "image", "content": "placeholder"}]')
    assert blocks == [{"type": "text", "content": "hi"}, {"id": "3", "type": "image", "content": "placeholder"}]
    with pytest.raises(FormFieldError):
        parse_blocks('[{"type": "video", "content": "x"}]')


def test_product_fields_defaults_and_required_price():
    fields = product_fields({"name": "Lamp", "slug": "lamp", "price": "99.9", "category": [A, "bad"]})
    assert fields["price"] == 99.9
    assert fields["stock"] == 0
    assert fields["discountPrice"] == 0
    assert fields["tax"] == 0
    assert fields["weight"] == 0
    assert fields["category"] == [ObjectId(A)]
    assert fields["tags"] == []
    assert fields["dimensions"] == {"length": 0.0, "width": 0.0, "height": 0.0}
    assert fields["isPublished"] is False

    with pytest.raises(FormFieldError) as exc:
        product_fields({"name": "Lamp", "slug": "lamp", "price": "free"})
    assert exc.value.field == "price"


def test_coerce_int_rejects_values_past_int64():
    assert coerce_int(str(2 ** 62)) == 2 ** 62
    with pytest.raises(FormFieldError) as e:
        coerce_int("1e20", field="stock")
    assert e.value.field == "stock"
    with pytest.raises(FormFieldError):
        coerce_int("-1e19")
