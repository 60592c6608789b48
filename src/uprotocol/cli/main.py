"""uProtocol authority command-line interface.

Thin wrapper around ``uprotocol.uri`` using click.  Builds an authority from
command-line options or its dict form and reports micro-form validity.
"""

from __future__ import annotations

import json
import logging

import click

from uprotocol.config import Settings
from uprotocol.uri import (
    Authority,
    UProtocolError,
    ValidationError,
    authority_from_dict,
    authority_to_dict,
    validate_micro_form,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.debug:
        logging.getLogger("uprotocol").setLevel(logging.DEBUG)


def _build_authority(name: str | None, ip: str | None, id_hex: str | None) -> Authority:
    """Build an authority from at most one designator option.

    No option gives the local authority.
    """
    given = [opt for opt, value in (("--name", name), ("--ip", ip), ("--id", id_hex)) if value is not None]
    if len(given) > 1:
        raise click.UsageError(f"Options {', '.join(given)} are mutually exclusive")

    if name is not None:
        return Authority().set_name(name)
    if ip is not None:
        return Authority.from_ip_address(ip)
    if id_hex is not None:
        digits = id_hex[2:] if id_hex.lower().startswith("0x") else id_hex
        try:
            return Authority().set_id(bytes.fromhex(digits))
        except ValueError:
            _error(f"Invalid hex id: {id_hex!r}")
    return Authority()


def _report(authority: Authority, as_json: bool) -> None:
    """Validate *authority*, print the outcome, and exit 1 if it is rejected."""
    if as_json:
        click.echo(json.dumps(authority_to_dict(authority), sort_keys=True))
    try:
        validate_micro_form(authority)
    except ValidationError as exc:
        logger.info("%s is not valid for micro form", authority)
        _error(f"Invalid: {exc}")
    click.echo(f"OK: {authority}")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="uprotocol-authority")
def cli() -> None:
    """uProtocol authority tools."""
    _configure_logging(Settings())


# ---------------------------------------------------------------------------
# uauthority check
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--name", default=None, help="Remote as a human-readable name.")
@click.option("--ip", default=None, help="Remote as an IPv4 or IPv6 literal.")
@click.option("--id", "id_hex", default=None, help="Remote as hex bytes (e.g. 0x01ff).")
@click.option("--json", "as_json", is_flag=True, help="Also print the dict form.")
def check(name: str | None, ip: str | None, id_hex: str | None, as_json: bool) -> None:
    """Check whether an authority can be micro encoded."""
    try:
        authority = _build_authority(name, ip, id_hex)
    except UProtocolError as exc:
        _error(str(exc))
    _report(authority, as_json)


# ---------------------------------------------------------------------------
# uauthority decode
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("document")
def decode(document: str) -> None:
    """Load an authority from its JSON dict form and check it."""
    try:
        data = json.loads(document)
    except json.JSONDecodeError as exc:
        _error(f"Invalid JSON: {exc.msg}")

    try:
        authority = authority_from_dict(data)
    except UProtocolError as exc:
        _error(str(exc))
    _report(authority, as_json=False)
