"""RFC 8785 JSON Canonicalization Scheme (JCS) wrapper.

Upload request bodies are serialized through the ``jcs`` library so the
same request always produces the same bytes on the wire.
"""

import json

import jcs as _jcs

from .errors import CanonicalizationError


def canonicalize(obj: dict) -> bytes:
    """Canonicalize a JSON-serializable dict to UTF-8 bytes per RFC 8785.

    Raises:
        CanonicalizationError: If the input cannot be canonicalized.
    """
    if not isinstance(obj, dict):
        raise CanonicalizationError("Input must be a JSON object (dict)")
    try:
        return _jcs.canonicalize(obj)
    except Exception as e:
        raise CanonicalizationError(f"Canonicalization failed: {e}") from e


def is_json_string(value) -> bool:
    """Return True if *value* is a string holding a parseable JSON document."""
    if not isinstance(value, str):
        return False
    try:
        json.loads(value)
    except ValueError:
        return False
    return True
