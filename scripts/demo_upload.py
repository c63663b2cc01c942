#!/usr/bin/env python3
"""Demo: upload a text to the storage gateway and announce it on NEM.

Prerequisites
─────────────
1. A reachable gateway (defaults to the public testnet gateway)
2. Environment variables set:
     XPX_SENDER_PRIVATE_KEY   – hex private key of the announcing account
     XPX_RECEIVER_PUBLIC_KEY  – hex public key of the receiving account

Optional env:
     XPX_GATEWAY_URL          – defaults to https://testnet2.gateway.proximax.io/
     XPX_NEM_NETWORK          – defaults to TEST_NET

Usage:
    python scripts/demo_upload.py [text] [--storage-only] [--secure]
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from xpxsdk import MessageType, UploadClient, UploadProgress, UploadTextRequest


def _progress(event: UploadProgress) -> None:
    print(f"  sent {event.sent}/{event.total} bytes ({event.fraction:.0%})")


async def run(text: str, storage_only: bool, secure: bool) -> None:
    client = UploadClient()
    print(f"gateway          = {client.config.base_url}")
    print(f"network          = {client.config.network.name}")
    print()

    request = UploadTextRequest(
        text=text,
        name="demo.txt",
        content_type="text/plain",
        keywords="demo",
        metadata='{"source": "demo_upload"}',
        sender_private_key=os.environ.get("XPX_SENDER_PRIVATE_KEY"),
        receiver_public_key=os.environ.get("XPX_RECEIVER_PUBLIC_KEY"),
        message_type=MessageType.SECURE if secure else MessageType.PLAIN,
    )

    try:
        if storage_only:
            print("--- upload (storage only) ---")
            rhm = await client.upload_text_to_storage_only(request, progress=_progress)
            print(f"  hash:   {rhm.hash}")
            print(f"  digest: {rhm.digest}")
            return

        print("--- upload + sign + announce ---")
        result = await client.upload_text(request, progress=_progress)
        print(f"  type:        {result.type!r}")
        print(f"  code:        {result.code}")
        print(f"  message:     {result.message}")
        print(f"  meaning:     {result.description}")
        if result.transaction_hash:
            print(f"  tx hash:     {result.transaction_hash.data}")
        print(f"  success:     {result.is_success}")
    finally:
        client.close()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    text = args[0] if args else "hello from xpxsdk"
    asyncio.run(run(text, "--storage-only" in sys.argv, "--secure" in sys.argv))


if __name__ == "__main__":
    main()
