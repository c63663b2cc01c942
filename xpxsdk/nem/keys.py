"""NEM ed25519 key pairs: derivation, signing and verification.

NEM (NIS1) uses ed25519 with keccak-512 in place of SHA-512, and stores
private keys as the byte-reversed seed.  The curve work is done by the
NEM key pair of ``symbol-sdk-python``; this module adapts it to raw bytes
and hex strings and to this package's errors.
"""

from __future__ import annotations

from symbolchain.CryptoTypes import PrivateKey, PublicKey, Signature
from symbolchain.facade.NemFacade import NemFacade

from ..errors import NemKeyError, SigningError
from .network import NemNetwork, address_from_public_key


def decode_hex_key(value: str, what: str) -> bytes:
    """Decode a 64-character hex key, tolerating an optional 0x prefix."""
    if not isinstance(value, str):
        raise NemKeyError(f"{what} must be a hex string")
    s = value.strip()
    if s.startswith(("0x", "0X")):
        s = s[2:]
    try:
        raw = bytes.fromhex(s)
    except ValueError as e:
        raise NemKeyError(f"{what} is not valid hex: {e}") from e
    if len(raw) != 32:
        raise NemKeyError(f"{what} must be 32 bytes, got {len(raw)}")
    return raw


class KeyPair:
    """A NEM signing key pair backed by a 32-byte private key."""

    def __init__(self, private_key: bytes):
        if len(private_key) != 32:
            raise NemKeyError(
                f"Private key must be 32 bytes, got {len(private_key)}"
            )
        self._key_pair = NemFacade.KeyPair(PrivateKey(bytes(private_key)))

    @classmethod
    def generate(cls) -> "KeyPair":
        """Generate a new random key pair (in-memory only)."""
        return cls(PrivateKey.random().bytes)

    @classmethod
    def from_private_key_hex(cls, private_key: str) -> "KeyPair":
        return cls(decode_hex_key(private_key, "Private key"))

    @property
    def sdk_key_pair(self):
        """The underlying ``symbolchain`` key pair."""
        return self._key_pair

    @property
    def private_key_hex(self) -> str:
        return self._key_pair.private_key.bytes.hex()

    @property
    def public_key(self) -> bytes:
        """Raw 32-byte public key."""
        return self._key_pair.public_key.bytes

    @property
    def public_key_hex(self) -> str:
        return self.public_key.hex()

    def address(self, network: NemNetwork) -> str:
        return address_from_public_key(self.public_key, network)

    def sign(self, message: bytes) -> bytes:
        """Sign message bytes, returning a 64-byte NEM ed25519 signature."""
        return self._key_pair.sign(bytes(message)).bytes

    @staticmethod
    def verify(public_key: bytes, signature: bytes, message: bytes) -> None:
        """Verify a NEM ed25519 signature over message bytes.

        Raises:
            SigningError: If verification fails.
        """
        if len(signature) != 64:
            raise SigningError(
                f"Signature must be 64 bytes, got {len(signature)}"
            )
        try:
            verifier = NemFacade.Verifier(PublicKey(bytes(public_key)))
        except ValueError as e:
            raise SigningError(f"Unusable public key: {e}") from e
        if not verifier.verify(bytes(message), Signature(bytes(signature))):
            raise SigningError("Signature verification failed")
