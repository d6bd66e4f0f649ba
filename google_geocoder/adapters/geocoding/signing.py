"""HMAC-SHA1 request signing for premier (enterprise) accounts.

The signature is URL-safe base64 with ``=`` padding rewritten to ``,``.
The endpoint expects exactly this alphabet, so the output never holds
``+``, ``/`` or ``=``.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac

from ...domain.errors import InvalidKeyError

_SIGNATURE_TRANSLATION = str.maketrans({"+": "-", "/": "_", "=": ","})


def decode_secret(secret_key: str) -> bytes:
    """Decode a standard base64 secret into raw key bytes.

    Line breaks are ignored, so a secret read from a file with a trailing
    newline is accepted. Any other non-alphabet character is rejected.

    Raises:
        InvalidKeyError: If the secret is not valid base64.
    """
    cleaned = secret_key.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidKeyError("Secret key is not valid base64", cause=e) from e


def compute_signature(signing_path: str, query_string: str, key: bytes) -> str:
    """Sign ``<signing_path>?<query_string>`` with an already decoded key."""
    payload = f"{signing_path}?{query_string}".encode("utf-8")
    mac = hmac.new(key, payload, hashlib.sha1).digest()
    return base64.urlsafe_b64encode(mac).decode("ascii").translate(_SIGNATURE_TRANSLATION)


def sign_query(query_string: str, signing_path: str, secret_key: str) -> str:
    """Return the query string with ``&signature=...`` appended.

    Raises:
        InvalidKeyError: If the secret is not valid base64.
    """
    signature = compute_signature(signing_path, query_string, decode_secret(secret_key))
    return f"{query_string}&signature={signature}"
