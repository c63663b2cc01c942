"""End-to-end tests against a live storage gateway.

These tests run only when XPX_E2E_GATEWAY points at a gateway, e.g.
    XPX_E2E_GATEWAY=https://testnet2.gateway.proximax.io/ pytest -m e2e
"""

import asyncio
import os

import pytest

from xpxsdk import GatewayConfig, UploadClient, UploadTextRequest

GATEWAY_URL = os.environ.get("XPX_E2E_GATEWAY")

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(not GATEWAY_URL, reason="XPX_E2E_GATEWAY not set"),
]


@pytest.fixture
def client():
    c = UploadClient(config=GatewayConfig.from_env(base_url=GATEWAY_URL))
    yield c
    c.close()


class TestE2EFlow:
    def test_upload_text_to_storage_only(self, client):
        rhm = asyncio.run(
            client.upload_text_to_storage_only(
                UploadTextRequest(text="e2e test text", name="e2e.txt", metadata="{}")
            )
        )
        assert rhm.hash

    @pytest.mark.skipif(
        not os.environ.get("XPX_SENDER_PRIVATE_KEY"),
        reason="XPX_SENDER_PRIVATE_KEY not set",
    )
    def test_upload_text_and_announce(self, client):
        result = asyncio.run(
            client.upload_text(
                UploadTextRequest(
                    text="e2e announce",
                    sender_private_key=os.environ["XPX_SENDER_PRIVATE_KEY"],
                    receiver_public_key=os.environ["XPX_RECEIVER_PUBLIC_KEY"],
                )
            )
        )
        assert result.is_success, result.description
