"""NIS1 transfer transactions: construction, serialization, signing.

Transactions are built, serialized and signed through the NEM facade of
``symbol-sdk-python``; ``TransferTransaction`` is the immutable record this
package passes around before that happens.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone

from eth_utils import keccak
from symbolchain import nc
from symbolchain.CryptoTypes import PublicKey, Signature
from symbolchain.facade.NemFacade import NemFacade

from ..errors import SigningError
from .keys import KeyPair
from .message import Message
from .network import NemNetwork, nem_facade

NEM_EPOCH = datetime(2015, 3, 29, 0, 6, 25, tzinfo=timezone.utc)
TRANSFER_TYPE = 0x0101
TRANSFER_VERSION = 1
DEFAULT_DEADLINE_SECONDS = 2 * 60 * 60
MICRO_XEM = 1_000_000
MIN_FEE = 50_000  # 0.05 XEM


def nem_timestamp(when: datetime | None = None) -> int:
    """Seconds elapsed since the NEM nemesis block."""
    when = when or datetime.now(timezone.utc)
    return int((when - NEM_EPOCH).total_seconds())


def calculate_fee(amount: int, message: Message | None) -> int:
    """Minimum fee in micro-XEM for a XEM transfer carrying *message*.

    Same schedule as ``symbolchain.nem.FeeCalculator``, which only accepts
    version 2 (mosaic) transfers.
    """
    xem = amount // MICRO_XEM
    fee = MIN_FEE * max(1, min(25, xem // 10_000))
    if message is not None and not message.is_empty:
        fee += MIN_FEE * (len(message.payload) // 32 + 1)
    return fee


@dataclass(frozen=True)
class SignedTransaction:
    """Serialized transaction data and its signature, both hex-encoded."""

    data: str
    signature: str

    @property
    def hash(self) -> str:
        """Transaction hash as reported by NIS (keccak-256 of the data)."""
        return keccak(bytes.fromhex(self.data)).hex()

    def to_dict(self) -> dict:
        return {"data": self.data, "signature": self.signature}


@dataclass(frozen=True)
class TransferTransaction:
    signer: bytes
    recipient: str
    network: NemNetwork
    amount: int = 0
    message: Message | None = None
    timestamp: int = field(default_factory=nem_timestamp)
    deadline: int | None = None
    fee: int | None = None

    @property
    def version(self) -> int:
        return (int(self.network) << 24) | TRANSFER_VERSION

    @property
    def effective_deadline(self) -> int:
        if self.deadline is not None:
            return self.deadline
        return self.timestamp + DEFAULT_DEADLINE_SECONDS

    @property
    def effective_fee(self) -> int:
        if self.fee is not None:
            return self.fee
        return calculate_fee(self.amount, self.message)

    def to_descriptor(self) -> dict:
        """Descriptor for the NEM transaction factory."""
        descriptor = {
            "type": "transfer_transaction_v1",
            "signer_public_key": PublicKey(self.signer),
            "timestamp": self.timestamp,
            "deadline": self.effective_deadline,
            "fee": self.effective_fee,
            "recipient_address": NemFacade.Address(self.recipient.replace("-", "").upper()),
            "amount": self.amount,
        }
        if self.message is not None and not self.message.is_empty:
            descriptor["message"] = self.message.to_descriptor()
        return descriptor

    def build(self) -> nc.TransferTransactionV1:
        try:
            return nem_facade(self.network).transaction_factory.create(self.to_descriptor())
        except ValueError as e:
            raise SigningError(f"Cannot build transfer transaction: {e}") from e

    def serialize(self) -> bytes:
        """Binary NIS1 layout of a version 1 transfer transaction (the signed data)."""
        return bytes(NemFacade.extract_signing_payload(self.build()))


def sign_transaction(transaction: TransferTransaction, key_pair: KeyPair) -> SignedTransaction:
    """Serialize and sign *transaction*.

    Raises:
        SigningError: If *key_pair* is not the transaction signer.
    """
    if transaction.signer != key_pair.public_key:
        raise SigningError("Transaction signer does not match the signing key")
    facade = nem_facade(transaction.network)
    tx = transaction.build()
    signature = facade.sign_transaction(key_pair.sdk_key_pair, tx)
    payload = json.loads(facade.transaction_factory.attach_signature(tx, signature))
    return SignedTransaction(
        data=payload["data"].lower(), signature=payload["signature"].lower()
    )


def verify_signed_transaction(signed: SignedTransaction) -> None:
    """Check the signature against the signer key embedded in the data.

    Raises:
        SigningError: On malformed data or a bad signature.
    """
    try:
        data = bytes.fromhex(signed.data)
        signature = bytes.fromhex(signed.signature)
    except ValueError as e:
        raise SigningError(f"Signed transaction is not valid hex: {e}") from e
    tx = _deserialize(data)
    if len(signature) != Signature.SIZE:
        raise SigningError(
            f"Signature must be {Signature.SIZE} bytes, got {len(signature)}"
        )
    KeyPair.verify(tx.signer_public_key.bytes, signature, data)


def _deserialize(data: bytes) -> nc.NonVerifiableTransaction:
    try:
        return nc.NonVerifiableTransactionFactory.deserialize(data)
    except (AssertionError, KeyError, ValueError) as e:
        raise SigningError(f"Malformed transaction data: {e!r}") from e


def parse_transfer(data: bytes) -> TransferTransaction:
    """Inverse of TransferTransaction.serialize for version 1 transfers."""
    tx = _deserialize(data)
    if not isinstance(tx, nc.NonVerifiableTransferTransactionV1):
        raise SigningError(f"Not a version 1 transfer transaction ({tx.type_})")
    return TransferTransaction(
        signer=tx.signer_public_key.bytes,
        recipient=bytes(tx.recipient_address.bytes).decode("ascii"),
        network=NemNetwork(tx.network.value),
        amount=tx.amount.value,
        message=Message.from_nc(tx.message) if tx.message is not None else None,
        timestamp=tx.timestamp.value,
        deadline=tx.deadline.value,
        fee=tx.fee.value,
    )
