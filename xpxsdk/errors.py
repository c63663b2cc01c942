"""Error categories for gateway, decoding and NEM signing failures."""


class XpxError(Exception):
    """Base exception for all SDK errors."""


class RequestValidationError(XpxError):
    """Upload request rejected locally, before any network call."""


class CanonicalizationError(XpxError):
    """JSON canonicalization of a request body failed."""


class GatewayError(XpxError):
    """Gateway transport or API error."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ResourceDecodeError(XpxError):
    """Gateway response body is not a base64 FlatBuffers resource hash."""


class NemKeyError(XpxError):
    """Private or public key material is malformed."""


class SigningError(XpxError):
    """Transaction signing or signature verification failed."""


class MessageCryptoError(XpxError):
    """Secure message could not be encrypted or decrypted."""
