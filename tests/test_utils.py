#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecclib.utils` module."

# Standard library imports
import secrets
from hashlib import sha256

# Third party imports
import pytest

# Library imports
from ecclib.exceptions import ECDSAValueError
from ecclib.utils import (
    bytes_from_octets,
    bytes_from_string,
    hex_string,
    int_from_bits,
    int_from_integer,
)


def test_int_from_integer() -> None:
    for i in (
        secrets.randbits(256 - 8),
        0x0B6CA75B7D3076C561958CCED813797F6D2275C7F42F3856D007D587769A90,
    ):
        assert i == int_from_integer(i)
        assert i == int_from_integer(" " + hex(i).upper())
        assert -i == int_from_integer(hex(-i).upper() + " ")
        assert i == int_from_integer(hex_string(i))
        assert i == int_from_integer(i.to_bytes(32, byteorder="big", signed=False))


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_).lower()) == "01 DEADBEEF 00000000"
    a_str = "01de adbeef00000000"
    assert hex_string(a_str) == "01 DEADBEEF 00000000"
    a_bytes = bytes.fromhex(a_str)
    assert hex_string(a_bytes) == "01 DEADBEEF 00000000"

    # invalid hex-string: odd number of hex digits
    a_str = "1deadbeef00000000"
    with pytest.raises(ValueError, match="non-hexadecimal number found in fromhex"):
        hex_string(a_str)

    int_ = -1
    with pytest.raises(ECDSAValueError, match="negative integer: "):
        hex_string(int_)


def test_bytes_from_octets() -> None:
    digest = sha256(b"abc").digest()
    assert bytes_from_octets(digest) == digest
    assert bytes_from_octets(digest.hex()) == digest
    assert bytes_from_octets(" " + digest.hex() + " ", 32) == digest

    with pytest.raises(ECDSAValueError, match="invalid size: 32 bytes instead of 20"):
        bytes_from_octets(digest, 20)


def test_bytes_from_string() -> None:
    assert bytes_from_string("abc") == b"abc"
    assert bytes_from_string(b"abc") == b"abc"
    # a text string is not a hex-string
    assert bytes_from_string("deadbeef") == b"deadbeef"
    assert bytes_from_string(bytearray(b"abc")) == b"abc"

    # an int is not a message
    with pytest.raises(ECDSAValueError, match="not a text string or bytes: int"):
        bytes_from_string(5)  # type: ignore


def test_int_from_bits() -> None:
    digest = sha256(b"abc").digest()
    assert digest[0] == 0xBA
    i = int.from_bytes(digest, byteorder="big", signed=False)

    # leftmost bits only
    assert int_from_bits(digest, 5) == 0b10111
    assert int_from_bits(digest, 8) == 0xBA
    assert int_from_bits(digest, 255) == i >> 1
    # no truncation if the digest is not longer than nlen
    assert int_from_bits(digest, 256) == i
    assert int_from_bits(digest, 300) == i
    assert int_from_bits(digest.hex(), 256) == i
