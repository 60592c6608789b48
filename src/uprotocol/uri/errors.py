"""uProtocol exception hierarchy.

All package exceptions inherit from :class:`UProtocolError`.
"""

from __future__ import annotations

from typing import Iterable


class UProtocolError(Exception):
    """Base exception for all uProtocol errors."""


class ValidationError(UProtocolError):
    """Raised when a value fails a validity check.

    Carries a single human-readable message.  Several failures can be merged
    into one with :meth:`join`.
    """

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)

    @classmethod
    def join(
        cls,
        errors: Iterable[ValidationError | str],
        separator: str = ", ",
    ) -> ValidationError:
        """Merge *errors* into one error, keeping insertion order."""
        return cls(separator.join(str(err) for err in errors))


class InvalidAuthorityError(UProtocolError):
    """Raised when an authority cannot be built from its input."""
