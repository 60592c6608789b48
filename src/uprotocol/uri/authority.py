"""uProtocol authority -- the node that owns a resource.

An authority carries at most one *remote* designator:

* :class:`Name` -- human-readable, long form only
* :class:`Ip` -- raw IPv4 (4 bytes) or IPv6 (16 bytes) address
* :class:`Id` -- opaque identifier, 1-255 bytes in micro form

``remote`` is a single slot, so setting one designator always discards the
previous one.  Nothing is validated at set time; use
:func:`uprotocol.uri.validator.validate_micro_form` before micro encoding.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

from uprotocol.uri.errors import InvalidAuthorityError
from uprotocol.uri.types import (
    REMOTE_IPV4_BYTES,
    REMOTE_IPV6_BYTES,
    b64_decode,
    b64_encode,
)

_IpAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


@dataclass(frozen=True)
class Name:
    """Remote given as a human-readable name."""

    value: str


@dataclass(frozen=True)
class Ip:
    """Remote given as a raw network address."""

    value: bytes


@dataclass(frozen=True)
class Id:
    """Remote given as an opaque identifier."""

    value: bytes


Remote = Name | Ip | Id


@dataclass
class Authority:
    """Location of a resource; ``remote`` is ``None`` for the local node.

    Mutators return ``self`` so calls can be chained::

        Authority().set_ip(b"\\x7f\\x00\\x00\\x01").validate_micro_form()
    """

    remote: Remote | None = None

    @classmethod
    def from_ip_address(cls, address: _IpAddress | str) -> Authority:
        """Build an Ip authority from an IP object or literal.

        Raises:
            InvalidAuthorityError: If *address* is not an IP literal.
        """
        try:
            ip = ipaddress.ip_address(address)
        except ValueError as exc:
            raise InvalidAuthorityError(f"Invalid IP address: {address!r}") from exc
        return cls().set_ip(ip.packed)

    # -- predicates --------------------------------------------------------

    def has_name(self) -> bool:
        return isinstance(self.remote, Name)

    def has_ip(self) -> bool:
        return isinstance(self.remote, Ip)

    def has_id(self) -> bool:
        return isinstance(self.remote, Id)

    # -- accessors ---------------------------------------------------------

    def get_name(self) -> str | None:
        if isinstance(self.remote, Name):
            return self.remote.value
        return None

    def get_ip(self) -> bytes | None:
        if isinstance(self.remote, Ip):
            return self.remote.value
        return None

    def get_id(self) -> bytes | None:
        if isinstance(self.remote, Id):
            return self.remote.value
        return None

    def get_ip_address(self) -> _IpAddress | None:
        """Return the Ip as an ``ipaddress`` object, if it is 4 or 16 bytes."""
        ip = self.get_ip()
        if ip is None or len(ip) not in (REMOTE_IPV4_BYTES, REMOTE_IPV6_BYTES):
            return None
        return ipaddress.ip_address(ip)

    # -- mutators ----------------------------------------------------------

    def set_name(self, name: str) -> Authority:
        self.remote = Name(str(name))
        return self

    # Bytes-like only; an int or str raises TypeError
    def set_ip(self, ip: bytes | bytearray | memoryview) -> Authority:
        self.remote = Ip(memoryview(ip).tobytes())
        return self

    def set_id(self, identifier: bytes | bytearray | memoryview) -> Authority:
        self.remote = Id(memoryview(identifier).tobytes())
        return self

    def clear_remote(self) -> Authority:
        """Drop the remote designator, making this the local authority."""
        self.remote = None
        return self

    # -- validation --------------------------------------------------------

    def validate_micro_form(self) -> None:
        """Check that this authority can be micro encoded.

        Raises:
            ValidationError: With every reason the authority is rejected.
        """
        from uprotocol.uri.validator import validate_micro_form

        validate_micro_form(self)

    def is_micro_form(self) -> bool:
        from uprotocol.uri.validator import is_micro_form

        return is_micro_form(self)

    def __str__(self) -> str:
        if isinstance(self.remote, Name):
            return f"Authority(name={self.remote.value!r})"
        if isinstance(self.remote, Ip):
            address = self.get_ip_address()
            shown = str(address) if address is not None else _hex(self.remote.value)
            return f"Authority(ip={shown})"
        if isinstance(self.remote, Id):
            return f"Authority(id={_hex(self.remote.value)})"
        if self.remote is None:
            return "Authority(local)"
        return f"Authority({self.remote!r})"


def _hex(data: bytes) -> str:
    return "0x" + data.hex()


# ---------------------------------------------------------------------------
# Dict form
# ---------------------------------------------------------------------------

_DICT_KEYS = ("name", "ip", "id")


def authority_to_dict(authority: Authority) -> dict:
    """Convert an authority to a JSON-friendly dict.

    Bytes are URL-safe base64 without padding.  A local authority is ``{}``.
    """
    remote = authority.remote
    if isinstance(remote, Name):
        return {"name": remote.value}
    if isinstance(remote, Ip):
        return {"ip": b64_encode(remote.value)}
    if isinstance(remote, Id):
        return {"id": b64_encode(remote.value)}
    return {}


def authority_from_dict(d: dict) -> Authority:
    """Restore an authority from its dict form.

    Unknown keys are ignored.  No micro-form validation is performed.

    Raises:
        InvalidAuthorityError: If more than one designator is present or a
            value is malformed.
    """
    if not isinstance(d, dict):
        raise InvalidAuthorityError(f"Authority must be an object, got {type(d).__name__}")

    present = [key for key in _DICT_KEYS if d.get(key) is not None]
    if len(present) > 1:
        raise InvalidAuthorityError(f"Authority has more than one remote: {present}")

    authority = Authority()
    if not present:
        return authority

    key = present[0]
    value = d[key]
    if not isinstance(value, str):
        raise InvalidAuthorityError(f"Authority {key!r} must be a string")
    if key == "name":
        return authority.set_name(value)

    try:
        raw = b64_decode(value)
    except ValueError as exc:
        raise InvalidAuthorityError(f"Authority {key!r} is not valid base64") from exc
    if key == "ip":
        return authority.set_ip(raw)
    return authority.set_id(raw)
