"""uProtocol authority addressing.

Top-level convenience re-exports::

    from uprotocol import Authority, validate_micro_form
    from uprotocol.uri import authority_to_dict  # dict form helpers
"""

__version__ = "0.1.0"

from uprotocol.uri import (
    Authority,
    InvalidAuthorityError,
    UProtocolError,
    ValidationError,
    validate_micro_form,
)

__all__ = [
    "__version__",
    "Authority",
    "InvalidAuthorityError",
    "UProtocolError",
    "ValidationError",
    "validate_micro_form",
]
