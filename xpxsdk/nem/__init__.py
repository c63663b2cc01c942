"""NEM (NIS1) signing and announcing primitives."""

from .announce import TransactionAnnouncer
from .keys import KeyPair
from .message import Message, MessageType, decrypt_message, plain_message, secure_message
from .network import NemNetwork, address_from_public_key, is_valid_address
from .result import NemAnnounceResult, NemHash, TypeNemAnnounceResult, describe_announce_result
from .transaction import (
    SignedTransaction,
    TransferTransaction,
    parse_transfer,
    sign_transaction,
    verify_signed_transaction,
)

__all__ = [
    "KeyPair",
    "Message",
    "MessageType",
    "NemAnnounceResult",
    "NemHash",
    "NemNetwork",
    "SignedTransaction",
    "TransactionAnnouncer",
    "TransferTransaction",
    "TypeNemAnnounceResult",
    "address_from_public_key",
    "decrypt_message",
    "describe_announce_result",
    "is_valid_address",
    "parse_transfer",
    "plain_message",
    "secure_message",
    "sign_transaction",
    "verify_signed_transaction",
]
