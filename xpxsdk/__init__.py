"""Python client SDK for the ProximaX storage gateway and NEM announcing."""

from .client import UploadClient
from .config import GatewayConfig
from .errors import (
    CanonicalizationError,
    GatewayError,
    MessageCryptoError,
    NemKeyError,
    RequestValidationError,
    ResourceDecodeError,
    SigningError,
    XpxError,
)
from .nem import (
    KeyPair,
    MessageType,
    NemAnnounceResult,
    NemHash,
    NemNetwork,
    SignedTransaction,
    TransactionAnnouncer,
    TypeNemAnnounceResult,
)
from .resource_hash import ResourceHashMessage, decode_resource_hash
from .types import GenericResponseMessage, UploadBinaryRequest, UploadProgress, UploadTextRequest

__all__ = [
    "UploadClient",
    "GatewayConfig",
    "UploadTextRequest",
    "UploadBinaryRequest",
    "UploadProgress",
    "GenericResponseMessage",
    "ResourceHashMessage",
    "decode_resource_hash",
    "KeyPair",
    "MessageType",
    "NemAnnounceResult",
    "NemHash",
    "NemNetwork",
    "SignedTransaction",
    "TransactionAnnouncer",
    "TypeNemAnnounceResult",
    "XpxError",
    "RequestValidationError",
    "CanonicalizationError",
    "GatewayError",
    "ResourceDecodeError",
    "NemKeyError",
    "SigningError",
    "MessageCryptoError",
]
