"""Request and response records exchanged with the storage gateway."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Optional

from .nem.message import MessageType


@dataclass(frozen=True)
class UploadTextRequest:
    text: str
    name: Optional[str] = None
    content_type: Optional[str] = None
    encoding: Optional[str] = None
    keywords: Optional[str] = None
    metadata: Optional[str] = None
    sender_private_key: Optional[str] = None
    receiver_public_key: Optional[str] = None
    message_type: Optional[MessageType] = MessageType.PLAIN

    def to_body(self) -> dict[str, Any]:
        """Gateway JSON body; the text travels base64-encoded, keys never leave."""
        body = {
            "text": base64.b64encode(self.text.encode("utf-8")).decode("ascii"),
            "name": self.name,
            "contentType": self.content_type,
            "encoding": self.encoding,
            "keywords": self.keywords,
            "metadata": self.metadata,
        }
        return {k: v for k, v in body.items() if v is not None}


@dataclass(frozen=True)
class UploadBinaryRequest:
    data: bytes
    name: Optional[str] = None
    content_type: Optional[str] = None
    keywords: Optional[str] = None
    metadata: Optional[str] = None
    sender_private_key: Optional[str] = None
    receiver_public_key: Optional[str] = None
    message_type: Optional[MessageType] = MessageType.PLAIN

    def to_body(self) -> dict[str, Any]:
        """Gateway JSON body; the data travels as an array of byte values."""
        body = {
            "data": list(bytes(self.data)),
            "name": self.name,
            "contentType": self.content_type,
            "keywords": self.keywords,
            "metadata": self.metadata,
        }
        return {k: v for k, v in body.items() if v is not None}


@dataclass(frozen=True)
class GenericResponseMessage:
    status: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict) -> "GenericResponseMessage":
        status = raw.get("status")
        return cls(
            status=None if status is None else str(status),
            message=raw.get("message"),
        )


@dataclass(frozen=True)
class UploadProgress:
    sent: int
    total: int

    @property
    def fraction(self) -> float:
        return 1.0 if self.total == 0 else self.sent / self.total
