"""Transfer transaction messages: plain and secure (encrypted).

Secure messages use the NEM message encoder of ``symbol-sdk-python``
(AES-256-GCM, ``tag || iv || ciphertext``), so any NEM wallet or SDK that
implements the standard key derivation can read them.  Payloads in the
older AES-CBC (``salt || iv || ciphertext``) format are still accepted by
``decrypt_message``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from symbolchain import nc
from symbolchain.CryptoTypes import PublicKey
from symbolchain.nem.MessageEncoder import MessageEncoder

from ..errors import MessageCryptoError
from .keys import KeyPair

# GCM tag (16) + iv (12)
MIN_SECURE_PAYLOAD = 28


class MessageType(Enum):
    PLAIN = "PLAIN"
    SECURE = "SECURE"

    @property
    def code(self) -> int:
        """Message type field of the NIS1 transfer transaction."""
        return 1 if self is MessageType.PLAIN else 2

    @property
    def nc_type(self) -> nc.MessageType:
        return nc.MessageType.PLAIN if self is MessageType.PLAIN else nc.MessageType.ENCRYPTED


@dataclass(frozen=True)
class Message:
    type: MessageType
    payload: bytes

    @property
    def is_empty(self) -> bool:
        return not self.payload

    def to_nc(self) -> nc.Message:
        message = nc.Message()
        message.message_type = self.type.nc_type
        message.message = self.payload
        return message

    def to_descriptor(self) -> dict:
        """Message part of a transfer descriptor for the NEM transaction factory."""
        return {"message_type": self.type.nc_type, "message": self.payload}

    @classmethod
    def from_nc(cls, message: nc.Message) -> "Message":
        kind = MessageType.PLAIN if message.message_type == nc.MessageType.PLAIN else MessageType.SECURE
        return cls(kind, bytes(message.message))


def plain_message(text: str) -> Message:
    return Message(MessageType.PLAIN, text.encode("utf-8"))


def _public_key(value: bytes) -> PublicKey:
    try:
        return PublicKey(bytes(value))
    except ValueError as e:
        raise MessageCryptoError(f"Unusable public key: {e}") from e


def secure_message(text: str, sender: KeyPair, recipient_public_key: bytes) -> Message:
    """Encrypt *text* so only the recipient (or the sender) can read it."""
    encoder = MessageEncoder(sender.sdk_key_pair)
    try:
        encoded = encoder.encode(_public_key(recipient_public_key), text.encode("utf-8"))
    except ValueError as e:
        raise MessageCryptoError(f"Secure message encryption failed: {e}") from e
    return Message(MessageType.SECURE, bytes(encoded.message))


def decrypt_message(message: Message, key_pair: KeyPair, peer_public_key: bytes) -> str:
    """Recover the text of a secure message.

    *key_pair* is either party of the exchange and *peer_public_key* the
    other party's public key.

    Raises:
        MessageCryptoError: If the payload is malformed or the keys do not match.
    """
    if message.type is MessageType.PLAIN:
        return message.payload.decode("utf-8")
    if len(message.payload) < MIN_SECURE_PAYLOAD:
        raise MessageCryptoError(
            f"Secure message payload too short ({len(message.payload)} bytes)"
        )
    encoder = MessageEncoder(key_pair.sdk_key_pair)
    try:
        ok, plain = encoder.try_decode(_public_key(peer_public_key), message.to_nc())
    except ValueError as e:
        raise MessageCryptoError(f"Secure message decryption failed: {e}") from e
    if not ok:
        raise MessageCryptoError("Secure message decryption failed")
    try:
        return bytes(plain).decode("utf-8")
    except UnicodeDecodeError as e:
        raise MessageCryptoError(f"Secure message is not UTF-8 text: {e}") from e
