"""High-level client for uploading to the storage gateway and announcing to NEM."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Optional

from .canonicaljson import canonicalize
from .config import GatewayConfig
from .errors import GatewayError
from .nem.announce import TransactionAnnouncer
from .nem.result import NemAnnounceResult
from .resource_hash import ResourceHashMessage, decode_resource_hash
from .transport import JSON_HEADERS, HttpTransport, ProgressCallback
from .types import GenericResponseMessage, UploadBinaryRequest, UploadTextRequest
from .validators import (
    validate_binary_request,
    validate_key_material,
    validate_multihash,
    validate_text_request,
)

_LOG = logging.getLogger(__name__)

UPLOAD_TEXT_PATH = "upload/text"
UPLOAD_BINARY_PATH = "upload/bytes/binary"
UPLOAD_CLEANUP_PATH = "upload/cleanup"


class UploadClient:
    """Client for uploading payloads and announcing their resource hashes.

    Every public method validates its arguments immediately and raises
    ``RequestValidationError`` on bad input.  The returned coroutine does
    the network work and only starts once awaited.
    """

    def __init__(
        self,
        config: GatewayConfig | None = None,
        transport: HttpTransport | None = None,
        announcer: TransactionAnnouncer | None = None,
    ):
        """Initialize client with gateway settings.

        Args:
            config: Gateway URL, NEM network and timeout. Read from the
                environment when omitted.
            transport: HTTP transport; a requests-backed one by default.
            announcer: Signs and announces transactions; built from
                *config* and *transport* by default.
        """
        self.config = config or GatewayConfig.from_env()
        self._transport = transport or HttpTransport(timeout=self.config.timeout)
        self._announcer = announcer or TransactionAnnouncer(
            self._transport, self.config.base_url, self.config.network
        )

    def upload_text(
        self, payload: UploadTextRequest, progress: Optional[ProgressCallback] = None
    ) -> Awaitable[NemAnnounceResult]:
        """Upload text, then sign and announce a transaction carrying its hash.

        Example::

            result = await client.upload_text(UploadTextRequest(
                text="hello", sender_private_key=pk, receiver_public_key=pub))
            assert result.is_success
        """
        validate_text_request(payload)
        validate_key_material(payload)
        body = canonicalize(payload.to_body())
        return self._upload_and_announce(
            self.config.endpoint(UPLOAD_TEXT_PATH), body, payload, progress
        )

    def upload_text_to_storage_only(
        self, payload: UploadTextRequest, progress: Optional[ProgressCallback] = None
    ) -> Awaitable[ResourceHashMessage]:
        """Upload text and return the decoded resource hash; nothing is announced."""
        validate_text_request(payload)
        body = canonicalize(payload.to_body())
        return self._upload(self.config.endpoint(UPLOAD_TEXT_PATH), body, progress)

    def upload_binary(
        self, payload: UploadBinaryRequest, progress: Optional[ProgressCallback] = None
    ) -> Awaitable[NemAnnounceResult]:
        """Upload binary data, then sign and announce a transaction carrying its hash."""
        validate_binary_request(payload)
        validate_key_material(payload)
        body = canonicalize(payload.to_body())
        return self._upload_and_announce(
            self.config.endpoint(UPLOAD_BINARY_PATH), body, payload, progress
        )

    def upload_binary_to_storage_only(
        self, payload: UploadBinaryRequest, progress: Optional[ProgressCallback] = None
    ) -> Awaitable[ResourceHashMessage]:
        """Upload binary data and return the decoded resource hash only."""
        validate_binary_request(payload)
        body = canonicalize(payload.to_body())
        return self._upload(self.config.endpoint(UPLOAD_BINARY_PATH), body, progress)

    def upload_cleanup(self, multihash: str) -> Awaitable[GenericResponseMessage]:
        """Ask the gateway to drop the pinned content behind *multihash*."""
        validate_multihash(multihash)
        return self._cleanup(self.config.endpoint(UPLOAD_CLEANUP_PATH), multihash)

    def close(self) -> None:
        self._transport.close()

    # -- internal helpers --

    async def _upload(
        self, endpoint: str, body: bytes, progress: Optional[ProgressCallback]
    ) -> ResourceHashMessage:
        resp = await asyncio.to_thread(
            self._transport.post, endpoint, body, headers=JSON_HEADERS, progress=progress
        )
        resource_hash = decode_resource_hash(resp.text)
        _LOG.info("uploaded %s hash=%s", endpoint, resource_hash.hash)
        return resource_hash

    async def _upload_and_announce(
        self, endpoint: str, body: bytes, payload, progress: Optional[ProgressCallback]
    ) -> NemAnnounceResult:
        resource_hash = await self._upload(endpoint, body, progress)
        signed = self._announcer.sign_transaction(
            resource_hash,
            payload.sender_private_key,
            payload.receiver_public_key,
            payload.message_type,
        )
        return await self._announcer.announce_transaction(signed)

    async def _cleanup(self, endpoint: str, multihash: str) -> GenericResponseMessage:
        resp = await asyncio.to_thread(
            self._transport.post,
            endpoint,
            None,
            params={"multihash": multihash},
            headers=JSON_HEADERS,
        )
        try:
            return GenericResponseMessage.from_dict(resp.json())
        except (ValueError, AttributeError) as e:
            raise GatewayError(
                f"Unexpected cleanup response from {endpoint}: {e}", url=endpoint
            ) from e
