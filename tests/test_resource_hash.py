"""Tests for decoding gateway resource hash responses."""

import base64
import json

import pytest

from xpxsdk.canonicaljson import canonicalize, is_json_string
from xpxsdk.errors import CanonicalizationError, ResourceDecodeError
from xpxsdk.resource_hash import (
    ResourceHashMessage,
    decode_resource_hash,
    encode_resource_hash,
)

RHM = ResourceHashMessage(
    timestamp=1_531_200_000_000,
    digest="e3b0c44298fc1c149afbf4c8996fb924",
    hash="QmTp1ZLLJ4rEmLPH5WyeHsqnTVuLCN5CMHbMwFVXnmbW3a",
    keywords="doc,test",
    metadata='{"author":"xpx"}',
    name="hello.txt",
    type="text/plain",
)


class TestDecode:
    def test_decodes_gateway_body(self):
        decoded = decode_resource_hash(encode_resource_hash(RHM))
        assert decoded == RHM

    def test_accepts_bytes_body(self):
        body = encode_resource_hash(RHM).encode("ascii")
        assert decode_resource_hash(body).hash == RHM.hash

    def test_missing_strings_decode_as_none(self):
        decoded = decode_resource_hash(
            encode_resource_hash(ResourceHashMessage(hash="QmOnly"))
        )
        assert decoded.hash == "QmOnly"
        assert decoded.digest is None
        assert decoded.timestamp == 0

    def test_invalid_base64(self):
        with pytest.raises(ResourceDecodeError, match="base64"):
            decode_resource_hash("not base64 !!")

    def test_too_short(self):
        with pytest.raises(ResourceDecodeError, match="too short"):
            decode_resource_hash(base64.b64encode(b"\x01").decode())

    def test_garbage_table(self):
        body = base64.b64encode(b"\xff\xff\xff\x7f" + b"\x00" * 8).decode()
        with pytest.raises(ResourceDecodeError, match="Malformed"):
            decode_resource_hash(body)

    def test_none_body(self):
        with pytest.raises(ResourceDecodeError):
            decode_resource_hash(None)


class TestJsonForm:
    def test_to_json_is_compact_and_sorted(self):
        text = ResourceHashMessage(hash="Qm1", name="a").to_json()
        assert text == '{"hash":"Qm1","name":"a","timestamp":0}'

    def test_to_dict_drops_none(self):
        assert "digest" not in ResourceHashMessage(hash="Qm1").to_dict()

    def test_round_trips_through_json(self):
        assert json.loads(RHM.to_json())["metadata"] == '{"author":"xpx"}'


class TestCanonicalJson:
    def test_member_ordering(self):
        assert canonicalize({"b": 2, "a": 1}) == b'{"a":1,"b":2}'

    def test_rejects_non_dict(self):
        with pytest.raises(CanonicalizationError, match="dict"):
            canonicalize(["a"])

    @pytest.mark.parametrize("value", ['{"a": 1}', "[]", '"s"', "3"])
    def test_json_strings(self, value):
        assert is_json_string(value)

    @pytest.mark.parametrize("value", ["{a: 1}", "", None, 42, "{'a': 1}"])
    def test_not_json_strings(self, value):
        assert not is_json_string(value)
