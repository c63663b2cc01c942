"""NEM network identifiers and address derivation."""

from __future__ import annotations

from enum import IntEnum
from functools import lru_cache

from symbolchain.CryptoTypes import PublicKey
from symbolchain.facade.NemFacade import NemFacade

from ..errors import NemKeyError


class NemNetwork(IntEnum):
    """Network version byte, as used in addresses and transaction versions."""

    MAIN_NET = 0x68
    TEST_NET = 0x98

    @classmethod
    def from_name(cls, name: str) -> "NemNetwork":
        key = name.strip().upper().replace("-", "_")
        key = {"TESTNET": "TEST_NET", "MAINNET": "MAIN_NET"}.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown NEM network: {name!r}") from None

    @property
    def sdk_name(self) -> str:
        return "mainnet" if self is NemNetwork.MAIN_NET else "testnet"


@lru_cache(maxsize=None)
def nem_facade(network: NemNetwork) -> NemFacade:
    """Shared ``NemFacade`` for *network*; it holds no per-call state."""
    return NemFacade(network.sdk_name)


def address_from_public_key(public_key: bytes, network: NemNetwork) -> str:
    """Return the 40-character base32 NEM address for *public_key*."""
    if len(public_key) != 32:
        raise NemKeyError(
            f"Public key must be 32 bytes, got {len(public_key)}"
        )
    address = nem_facade(network).network.public_key_to_address(PublicKey(bytes(public_key)))
    return str(address)


def is_valid_address(address: str, network: NemNetwork | None = None) -> bool:
    """Check length, base32 alphabet, checksum and (optionally) network byte."""
    clean = address.replace("-", "").strip().upper()
    candidates = list(NemNetwork) if network is None else [network]
    return any(
        nem_facade(n).network.is_valid_address_string(clean) for n in candidates
    )
