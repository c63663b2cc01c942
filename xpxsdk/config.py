"""Gateway connection settings.

Environment variables (all overridable via constructor args):
    XPX_GATEWAY_URL    – storage gateway base URL
                         (default https://testnet2.gateway.proximax.io/)
    XPX_NEM_NETWORK    – TEST_NET or MAIN_NET (default TEST_NET)
    XPX_HTTP_TIMEOUT   – per-request HTTP timeout in seconds (default 30)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .nem.network import NemNetwork

DEFAULT_BASE_URL = "https://testnet2.gateway.proximax.io/"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class GatewayConfig:
    base_url: str = DEFAULT_BASE_URL
    network: NemNetwork = NemNetwork.TEST_NET
    timeout: float = DEFAULT_TIMEOUT

    @property
    def root(self) -> str:
        """Base URL without the trailing slash, ready for path joins."""
        return self.base_url.rstrip("/")

    def endpoint(self, path: str) -> str:
        return f"{self.root}/{path.lstrip('/')}"

    @classmethod
    def from_env(
        cls,
        base_url: str | None = None,
        network: NemNetwork | str | None = None,
        timeout: float | None = None,
    ) -> "GatewayConfig":
        """Build config from environment variables; explicit args win."""
        if base_url is None:
            base_url = os.environ.get("XPX_GATEWAY_URL", DEFAULT_BASE_URL)
        if network is None:
            network = os.environ.get("XPX_NEM_NETWORK", "TEST_NET")
        if isinstance(network, str):
            network = NemNetwork.from_name(network)
        if timeout is None:
            timeout = float(os.environ.get("XPX_HTTP_TIMEOUT", str(DEFAULT_TIMEOUT)))
        return cls(base_url=base_url, network=network, timeout=timeout)
