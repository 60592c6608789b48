"""Shared test fixtures for uProtocol authority tests."""

from __future__ import annotations

import pytest

from uprotocol.uri.authority import Authority


@pytest.fixture()
def local_authority() -> Authority:
    return Authority()


@pytest.fixture()
def ipv4_authority() -> Authority:
    return Authority().set_ip(bytes([127, 0, 0, 1]))


@pytest.fixture()
def ipv6_authority() -> Authority:
    return Authority().set_ip(bytes(16))


@pytest.fixture()
def id_authority() -> Authority:
    return Authority().set_id(b"\x01")


@pytest.fixture()
def name_authority() -> Authority:
    return Authority().set_name("vehicle/engine")
