"""uProtocol URI authority -- address model and micro-form validation.

Public API re-exports for ``uprotocol.uri``.
"""

from uprotocol.uri.types import (
    REMOTE_IPV4_BYTES,
    REMOTE_IPV6_BYTES,
    REMOTE_ID_MINIMUM_BYTES,
    REMOTE_ID_MAXIMUM_BYTES,
    b64_encode,
    b64_decode,
)

from uprotocol.uri.errors import (
    UProtocolError,
    ValidationError,
    InvalidAuthorityError,
)

from uprotocol.uri.authority import (
    Authority,
    Name,
    Ip,
    Id,
    Remote,
    authority_to_dict,
    authority_from_dict,
)

from uprotocol.uri.validator import validate_micro_form, is_micro_form

__all__ = [
    # Types
    "REMOTE_IPV4_BYTES",
    "REMOTE_IPV6_BYTES",
    "REMOTE_ID_MINIMUM_BYTES",
    "REMOTE_ID_MAXIMUM_BYTES",
    "b64_encode",
    "b64_decode",
    # Errors
    "UProtocolError",
    "ValidationError",
    "InvalidAuthorityError",
    # Authority
    "Authority",
    "Name",
    "Ip",
    "Id",
    "Remote",
    "authority_to_dict",
    "authority_from_dict",
    # Validator
    "validate_micro_form",
    "is_micro_form",
]
