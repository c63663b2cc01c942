"""Local request validation: every failure happens before any HTTP call."""

from unittest.mock import MagicMock

import pytest

from xpxsdk import (
    GatewayConfig,
    MessageType,
    RequestValidationError,
    UploadBinaryRequest,
    UploadClient,
    UploadTextRequest,
)
from xpxsdk.nem.keys import KeyPair

SENDER = KeyPair.generate()
RECEIVER = KeyPair.generate()


@pytest.fixture
def transport():
    return MagicMock()


@pytest.fixture
def announcer():
    return MagicMock()


@pytest.fixture
def client(transport, announcer):
    return UploadClient(
        config=GatewayConfig(base_url="http://gateway.test/"),
        transport=transport,
        announcer=announcer,
    )


def _text(**overrides):
    fields = dict(
        text="hello",
        metadata='{"k": "v"}',
        sender_private_key=SENDER.private_key_hex,
        receiver_public_key=RECEIVER.public_key_hex,
    )
    fields.update(overrides)
    return UploadTextRequest(**fields)


def _binary(**overrides):
    fields = dict(
        data=b"\x00\x01",
        metadata='{"k": "v"}',
        sender_private_key=SENDER.private_key_hex,
        receiver_public_key=RECEIVER.public_key_hex,
    )
    fields.update(overrides)
    return UploadBinaryRequest(**fields)


TEXT_METHODS = ["upload_text", "upload_text_to_storage_only"]
BINARY_METHODS = ["upload_binary", "upload_binary_to_storage_only"]


class TestTextValidation:
    @pytest.mark.parametrize("method", TEXT_METHODS)
    def test_none_payload(self, client, transport, method):
        with pytest.raises(RequestValidationError, match="could not be null"):
            getattr(client, method)(None)
        transport.post.assert_not_called()

    @pytest.mark.parametrize("method", TEXT_METHODS)
    @pytest.mark.parametrize("text", [None, ""])
    def test_missing_text(self, client, transport, method, text):
        with pytest.raises(RequestValidationError, match="'text' field is required"):
            getattr(client, method)(_text(text=text))
        transport.post.assert_not_called()

    @pytest.mark.parametrize("method", TEXT_METHODS)
    @pytest.mark.parametrize("text", [b"hello", 42, ["hello"]])
    def test_non_string_text(self, client, transport, method, text):
        with pytest.raises(RequestValidationError, match="must be a string"):
            getattr(client, method)(_text(text=text))
        transport.post.assert_not_called()

    @pytest.mark.parametrize("method", TEXT_METHODS)
    def test_invalid_metadata(self, client, transport, method):
        with pytest.raises(RequestValidationError, match="valid JSON"):
            getattr(client, method)(_text(metadata="{not json"))
        transport.post.assert_not_called()

    def test_metadata_may_be_omitted(self, client):
        coro = client.upload_text_to_storage_only(_text(metadata=None))
        coro.close()


class TestBinaryValidation:
    @pytest.mark.parametrize("method", BINARY_METHODS)
    def test_none_payload(self, client, transport, method):
        with pytest.raises(RequestValidationError, match="could not be null"):
            getattr(client, method)(None)
        transport.post.assert_not_called()

    @pytest.mark.parametrize("method", BINARY_METHODS)
    def test_missing_data(self, client, transport, method):
        with pytest.raises(RequestValidationError, match="'data' field is required"):
            getattr(client, method)(_binary(data=None))
        transport.post.assert_not_called()

    @pytest.mark.parametrize("method", BINARY_METHODS)
    @pytest.mark.parametrize("data", ["text", 7, [0, 1]])
    def test_non_bytes_data(self, client, transport, method, data):
        with pytest.raises(RequestValidationError, match="bytes-like"):
            getattr(client, method)(_binary(data=data))
        transport.post.assert_not_called()

    def test_bytearray_and_memoryview_accepted(self, client):
        client.upload_binary_to_storage_only(_binary(data=bytearray(b"\x01"))).close()
        client.upload_binary_to_storage_only(_binary(data=memoryview(b"\x01"))).close()

    @pytest.mark.parametrize("method", BINARY_METHODS)
    def test_invalid_metadata(self, client, transport, method):
        with pytest.raises(RequestValidationError, match="valid JSON"):
            getattr(client, method)(_binary(metadata="nope"))
        transport.post.assert_not_called()

    def test_empty_bytes_accepted(self, client):
        coro = client.upload_binary_to_storage_only(_binary(data=b""))
        coro.close()


class TestKeyMaterialValidation:
    def test_missing_private_key(self, client, transport):
        with pytest.raises(RequestValidationError, match="private key"):
            client.upload_text(_text(sender_private_key=None))
        transport.post.assert_not_called()

    def test_missing_public_key(self, client, transport):
        with pytest.raises(RequestValidationError, match="public key"):
            client.upload_binary(_binary(receiver_public_key=""))
        transport.post.assert_not_called()

    def test_missing_message_type(self, client, transport):
        with pytest.raises(RequestValidationError, match="PLAIN or SECURE"):
            client.upload_text(_text(message_type=None))
        transport.post.assert_not_called()

    def test_message_type_must_be_enum(self, client, transport):
        with pytest.raises(RequestValidationError, match="PLAIN or SECURE"):
            client.upload_text(_text(message_type="SECURE"))
        transport.post.assert_not_called()

    def test_malformed_private_key(self, client, transport):
        with pytest.raises(RequestValidationError, match="Private key"):
            client.upload_text(_text(sender_private_key="abcd"))
        transport.post.assert_not_called()

    def test_storage_only_needs_no_keys(self, client):
        coro = client.upload_text_to_storage_only(
            _text(sender_private_key=None, receiver_public_key=None, message_type=None)
        )
        coro.close()

    def test_secure_message_type_accepted(self, client):
        coro = client.upload_text(_text(message_type=MessageType.SECURE))
        coro.close()


class TestCleanupValidation:
    @pytest.mark.parametrize("multihash", [None, ""])
    def test_missing_multihash(self, client, transport, multihash):
        with pytest.raises(RequestValidationError, match="Multihash is required"):
            client.upload_cleanup(multihash)
        transport.post.assert_not_called()
