"""Resource hash records returned by the storage gateway.

The gateway answers an upload with a base64 string wrapping a FlatBuffers
``ResourceHashMessage`` table (see ``schema/ResourceHashMessage.py``).
"""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import asdict, dataclass
from typing import Optional

import flatbuffers

from .errors import ResourceDecodeError
from .schema import ResourceHashMessage as _schema


@dataclass(frozen=True)
class ResourceHashMessage:
    timestamp: int = 0
    digest: Optional[str] = None
    hash: Optional[str] = None
    keywords: Optional[str] = None
    metadata: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def to_json(self) -> str:
        """Compact JSON form, used as the NEM transaction message."""
        return json.dumps(self.to_dict(), separators=(",", ":"), sort_keys=True)


def _text(value: bytes | None) -> str | None:
    return None if value is None else value.decode("utf-8")


def decode_resource_hash(body: str | bytes) -> ResourceHashMessage:
    """Decode a base64-wrapped FlatBuffers body into a ResourceHashMessage.

    Raises:
        ResourceDecodeError: If the body is not base64 or not a valid table.
    """
    if body is None:
        raise ResourceDecodeError("Empty gateway response body")
    try:
        data = base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ResourceDecodeError(f"Response body is not valid base64: {e}") from e
    if len(data) < 4:
        raise ResourceDecodeError(
            f"Response body too short for a FlatBuffers table ({len(data)} bytes)"
        )

    try:
        table = _schema.ResourceHashMessage.GetRootAsResourceHashMessage(
            bytearray(data), 0
        )
        return ResourceHashMessage(
            timestamp=table.Timestamp(),
            digest=_text(table.Digest()),
            hash=_text(table.Hash()),
            keywords=_text(table.Keywords()),
            metadata=_text(table.Metadata()),
            name=_text(table.Name()),
            type=_text(table.Type()),
        )
    except Exception as e:
        raise ResourceDecodeError(f"Malformed ResourceHashMessage: {e}") from e


def encode_resource_hash(message: ResourceHashMessage) -> str:
    """Serialize *message* the way the gateway does: FlatBuffers, then base64."""
    builder = flatbuffers.Builder(256)
    # Strings must be created before the table is started.
    offsets = {}
    for field in ("digest", "hash", "keywords", "metadata", "name", "type"):
        value = getattr(message, field)
        if value is not None:
            offsets[field] = builder.CreateString(value)

    _schema.ResourceHashMessageStart(builder)
    _schema.ResourceHashMessageAddTimestamp(builder, message.timestamp)
    adders = {
        "digest": _schema.ResourceHashMessageAddDigest,
        "hash": _schema.ResourceHashMessageAddHash,
        "keywords": _schema.ResourceHashMessageAddKeywords,
        "metadata": _schema.ResourceHashMessageAddMetadata,
        "name": _schema.ResourceHashMessageAddName,
        "type": _schema.ResourceHashMessageAddType,
    }
    for field, offset in offsets.items():
        adders[field](builder, offset)
    root = _schema.ResourceHashMessageEnd(builder)
    builder.Finish(root)
    return base64.b64encode(bytes(builder.Output())).decode("ascii")
