"""Size limits and byte helpers for uProtocol authorities."""

from __future__ import annotations

import base64


# Micro form carries a raw IPv4 or IPv6 address
REMOTE_IPV4_BYTES = 4
REMOTE_IPV6_BYTES = 16

# Micro form stores the id length in a single byte; zero is an empty id
REMOTE_ID_MINIMUM_BYTES = 1
REMOTE_ID_MAXIMUM_BYTES = 255


def b64_encode(data: bytes) -> str:
    """URL-safe base64 encode *data*, stripping padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64_decode(s: str) -> bytes:
    """URL-safe base64 decode *s*, tolerating missing padding.

    Raises:
        binascii.Error: If *s* has characters outside the URL-safe alphabet.
    """
    padding = 4 - len(s) % 4
    if padding != 4:
        s += "=" * padding
    return base64.b64decode(s, altchars=b"-_", validate=True)
