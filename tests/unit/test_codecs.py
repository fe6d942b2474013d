"""Unit tests for JSON codecs and key naming translation."""
from __future__ import annotations

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from resty import CamelCaseJsonCodec, ContentType, JsonCodec
from resty.codec.naming import camelize_keys, convert_keys, snakeize_keys
from resty.ports.codec import Codec, CodecError


class Post(BaseModel):
    post_id: int
    created_at: str


@dataclass
class Draft:
    title: str
    self_text: str


def test_camelize_and_snakeize_keys_are_symmetric_for_digits():
    assert camelize_keys({"address_line_1": "x", "created_at": 1}) == {"addressLine1": "x", "createdAt": 1}
    assert snakeize_keys({"addressLine1": "x", "createdAt": 1}) == {"address_line_1": "x", "created_at": 1}


def test_convert_keys_recurses_without_mutating_input():
    payload = {"outer_key": [{"inner_key": 1}], 3: "non-string key"}
    converted = camelize_keys(payload)

    assert converted == {"outerKey": [{"innerKey": 1}], 3: "non-string key"}
    assert payload == {"outer_key": [{"inner_key": 1}], 3: "non-string key"}


def test_convert_keys_applies_any_converter():
    assert convert_keys({"a": [{"b": 1}]}, str.upper) == {"A": [{"B": 1}]}


def test_json_codec_satisfies_codec_port():
    assert isinstance(JsonCodec(), Codec)
    assert JsonCodec.content_type is ContentType.JSON


def test_json_codec_decodes_into_models_and_containers():
    codec = JsonCodec()
    assert codec.decode(b'[{"post_id": 1, "created_at": "now"}]', list[Post]) == [
        Post(post_id=1, created_at="now")
    ]
    assert codec.decode(b'{"a": 1}', dict) == {"a": 1}


def test_json_codec_encodes_models():
    assert json.loads(JsonCodec().encode(Post(post_id=1, created_at="now"))) == {
        "post_id": 1,
        "created_at": "now",
    }


@pytest.mark.parametrize("data", [b"", b"{not json", b'{"post_id": "x", "created_at": "now"}'])
def test_json_codec_decode_failures_raise_codec_error(data):
    with pytest.raises(CodecError):
        JsonCodec().decode(data, Post)


def test_json_codec_encode_failure_raises_codec_error():
    with pytest.raises(CodecError):
        JsonCodec().encode({"value": object()})


def test_camel_case_codec_translates_both_ways():
    codec = CamelCaseJsonCodec()

    assert json.loads(codec.encode(Draft(title="hi", self_text="body"))) == {"title": "hi", "selfText": "body"}
    assert codec.decode(b'{"postId": 9, "createdAt": "today"}', Post) == Post(post_id=9, created_at="today")


def test_camel_case_codec_decode_failure_raises_codec_error():
    with pytest.raises(CodecError):
        CamelCaseJsonCodec().decode(b"[", Post)


class Address(BaseModel):
    address_line_1: str
    address_line_2: str | None = None


def test_camel_case_codec_round_trips_digit_bearing_fields():
    codec = CamelCaseJsonCodec()
    address = Address(address_line_1="1 Main St", address_line_2="Apt 4")

    encoded = codec.encode(address)

    assert json.loads(encoded) == {"addressLine1": "1 Main St", "addressLine2": "Apt 4"}
    assert codec.decode(encoded, Address) == address


def test_camel_case_codec_decodes_empty_body_as_failure():
    with pytest.raises(CodecError):
        CamelCaseJsonCodec().decode(b"", Address)
