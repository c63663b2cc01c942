"""Sign resource-hash transfer transactions and announce them to NEM.

The transaction is a zero-amount transfer from the uploader to the
receiver whose message carries the resource hash record as JSON.
"""

from __future__ import annotations

import asyncio
import logging

from ..canonicaljson import canonicalize
from ..errors import GatewayError
from ..resource_hash import ResourceHashMessage
from ..transport import JSON_HEADERS, HttpTransport
from .keys import KeyPair, decode_hex_key
from .message import MessageType, plain_message, secure_message
from .network import NemNetwork, address_from_public_key
from .result import NemAnnounceResult
from .transaction import SignedTransaction, TransferTransaction, sign_transaction

_LOG = logging.getLogger(__name__)

ANNOUNCE_PATH = "transaction/announce"


class TransactionAnnouncer:
    def __init__(self, transport: HttpTransport, base_url: str, network: NemNetwork):
        self.transport = transport
        self.base_url = base_url.rstrip("/")
        self.network = network

    def sign_transaction(
        self,
        resource_hash: ResourceHashMessage,
        private_key: str,
        public_key: str,
        message_type: MessageType = MessageType.PLAIN,
    ) -> SignedTransaction:
        """Build and sign the transfer carrying *resource_hash*.

        Raises:
            NemKeyError: If either key is malformed.
        """
        key_pair = KeyPair.from_private_key_hex(private_key)
        recipient_key = decode_hex_key(public_key, "Public key")
        text = resource_hash.to_json()
        if message_type is MessageType.SECURE:
            message = secure_message(text, key_pair, recipient_key)
        else:
            message = plain_message(text)

        tx = TransferTransaction(
            signer=key_pair.public_key,
            recipient=address_from_public_key(recipient_key, self.network),
            network=self.network,
            message=message,
        )
        signed = sign_transaction(tx, key_pair)
        _LOG.debug(
            "signed transfer hash=%s recipient=%s message=%s",
            signed.hash, tx.recipient, message_type.value,
        )
        return signed

    def _announce(self, signed: SignedTransaction) -> NemAnnounceResult:
        url = f"{self.base_url}/{ANNOUNCE_PATH}"
        resp = self.transport.post(
            url, canonicalize(signed.to_dict()), headers=JSON_HEADERS
        )
        try:
            result = NemAnnounceResult.from_dict(resp.json())
        except (ValueError, KeyError, TypeError) as e:
            raise GatewayError(
                f"Unexpected announce response from {url}: {e}", url=url
            ) from e
        _LOG.info(
            "announce tx=%s type=%s code=%s message=%s",
            signed.hash, int(result.type), result.code, result.message,
        )
        return result

    async def announce_transaction(self, signed: SignedTransaction) -> NemAnnounceResult:
        """Submit *signed* to the network and return the node's verdict."""
        return await asyncio.to_thread(self._announce, signed)
