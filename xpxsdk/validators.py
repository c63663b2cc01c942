"""
Local validation for upload requests.

Every check here runs before any network call and raises
RequestValidationError on failure.
"""

from .canonicaljson import is_json_string
from .errors import NemKeyError, RequestValidationError
from .nem.keys import decode_hex_key
from .nem.message import MessageType
from .types import UploadBinaryRequest, UploadTextRequest


def _validate_metadata(metadata) -> None:
    if metadata is not None and not is_json_string(metadata):
        raise RequestValidationError(
            "The request payload 'metadata' field must be a valid JSON"
        )


def validate_text_request(payload: UploadTextRequest) -> UploadTextRequest:
    """
    Validate a text upload request.

    Raises:
        RequestValidationError: If the payload or its text is missing, or the
            metadata is not valid JSON.
    """
    if payload is None:
        raise RequestValidationError("The request payload could not be null")
    if payload.text is None or payload.text == "":
        raise RequestValidationError("The request payload 'text' field is required")
    if not isinstance(payload.text, str):
        raise RequestValidationError("The request payload 'text' field must be a string")
    _validate_metadata(payload.metadata)
    return payload


def validate_binary_request(payload: UploadBinaryRequest) -> UploadBinaryRequest:
    """
    Validate a binary upload request.

    An empty byte string is accepted; only a missing ``data`` is rejected.
    """
    if payload is None:
        raise RequestValidationError("The request payload could not be null")
    if payload.data is None:
        raise RequestValidationError("The request payload 'data' field is required")
    if not isinstance(payload.data, (bytes, bytearray, memoryview)):
        raise RequestValidationError(
            "The request payload 'data' field must be bytes-like"
        )
    _validate_metadata(payload.metadata)
    return payload


def validate_key_material(payload) -> None:
    """Check the fields needed to sign and announce the upload transaction."""
    if not payload.sender_private_key:
        raise RequestValidationError(
            "The private key is required for signing and announcing to the network."
        )
    if not payload.receiver_public_key:
        raise RequestValidationError(
            "The public key is required for signing and announcing to the network."
        )
    if not isinstance(payload.message_type, MessageType):
        raise RequestValidationError(
            "The message type either PLAIN or SECURE is required."
        )
    try:
        decode_hex_key(payload.sender_private_key, "Private key")
        decode_hex_key(payload.receiver_public_key, "Public key")
    except NemKeyError as e:
        raise RequestValidationError(str(e)) from e


def validate_multihash(multihash) -> str:
    if multihash is None or multihash == "":
        raise RequestValidationError("Multihash is required")
    return multihash
