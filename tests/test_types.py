"""Tests for uprotocol.uri.types module."""

from __future__ import annotations

import binascii

import pytest

from uprotocol.uri.types import (
    REMOTE_ID_MAXIMUM_BYTES,
    REMOTE_ID_MINIMUM_BYTES,
    REMOTE_IPV4_BYTES,
    REMOTE_IPV6_BYTES,
    b64_decode,
    b64_encode,
)


class TestConstants:
    def test_ip_sizes(self):
        assert REMOTE_IPV4_BYTES == 4
        assert REMOTE_IPV6_BYTES == 16

    def test_id_range_fits_one_length_byte(self):
        assert REMOTE_ID_MINIMUM_BYTES == 1
        assert REMOTE_ID_MAXIMUM_BYTES == 0xFF


class TestBase64:
    def test_roundtrip_binary(self):
        data = bytes(range(256))
        assert b64_decode(b64_encode(data)) == data

    def test_encode_no_padding(self):
        assert "=" not in b64_encode(b"a")

    def test_decode_with_padding(self):
        assert b64_decode("YQ==") == b"a"

    def test_decode_without_padding(self):
        assert b64_decode("YQ") == b"a"

    def test_url_safe_alphabet(self):
        encoded = b64_encode(b"\xfb\xff")
        assert "+" not in encoded
        assert "/" not in encoded

    def test_decode_rejects_out_of_alphabet(self):
        with pytest.raises(binascii.Error):
            b64_decode("!!!!")

    def test_decode_rejects_impossible_length(self):
        with pytest.raises(binascii.Error):
            b64_decode("A")
