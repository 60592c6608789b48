"""Micro-form validation for uProtocol authorities.

The micro form is the compact binary URI encoding.  It has no slot for a
name, fixes the IP size, and spends a single byte on the id length.
"""

from __future__ import annotations

import logging

from uprotocol.uri.authority import Authority, Id, Ip, Name
from uprotocol.uri.errors import ValidationError
from uprotocol.uri.types import (
    REMOTE_ID_MAXIMUM_BYTES,
    REMOTE_ID_MINIMUM_BYTES,
    REMOTE_IPV4_BYTES,
    REMOTE_IPV6_BYTES,
)

logger = logging.getLogger(__name__)


def validate_micro_form(authority: Authority) -> None:
    """Check that *authority* is legal input to the micro encoding.

    Every failing rule is collected and reported in a single error, with
    the reasons joined by ``", "`` in the order they were found.

    Raises:
        ValidationError: If the authority cannot be micro encoded.
    """
    validation_errors: list[ValidationError] = []

    remote = authority.remote
    if remote is None:
        validation_errors.append(ValidationError("Has Authority, but no remote"))
    elif isinstance(remote, Ip):
        if len(remote.value) not in (REMOTE_IPV4_BYTES, REMOTE_IPV6_BYTES):
            validation_errors.append(
                ValidationError("IP address is not IPv4 (4 bytes) or IPv6 (16 bytes)")
            )
    elif isinstance(remote, Id):
        if not REMOTE_ID_MINIMUM_BYTES <= len(remote.value) <= REMOTE_ID_MAXIMUM_BYTES:
            validation_errors.append(ValidationError("ID doesn't fit in bytes allocated"))
    elif isinstance(remote, Name):
        validation_errors.append(
            ValidationError("Must use IP address or ID as UAuthority for micro form.")
        )
    else:
        validation_errors.append(
            ValidationError(f"Unknown remote type: {type(remote).__name__}")
        )

    if validation_errors:
        error = ValidationError.join(validation_errors)
        logger.debug("Rejected %s for micro form: %s", authority, error)
        raise error


def is_micro_form(authority: Authority) -> bool:
    """Return ``True`` if *authority* passes :func:`validate_micro_form`."""
    try:
        validate_micro_form(authority)
    except ValidationError:
        return False
    return True
