#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Integer and octet conversions.

Messages, digests and scalars cross the public functions
in a few accepted representations: these helpers normalize them
to bytes or int, and format large ints for error messages.
"""

from typing import Optional

from ecclib.alias import Integer, Octets, String
from ecclib.exceptions import ECDSAValueError

# ints above this are shown as hex_string in error messages and repr
HEX_THRESHOLD = 0xFFFFFFFF


def bytes_from_octets(octets: Octets, out_size: Optional[int] = None) -> bytes:
    """Return bytes from bytes or a hex-string.

    Whitespace around a hex-string is ignored.
    If out_size is given, the result must be exactly out_size bytes long.
    """

    data = bytes.fromhex(octets) if isinstance(octets, str) else bytes(octets)
    if out_size is not None and len(data) != out_size:
        err_msg = f"invalid size: {len(data)} bytes instead of {out_size}"
        raise ECDSAValueError(err_msg)
    return data


def bytes_from_string(msg: String) -> bytes:
    "Return the UTF-8 encoding of a text string, or bytes as they are."

    if isinstance(msg, str):
        return msg.encode()
    if isinstance(msg, (bytes, bytearray, memoryview)):
        return bytes(msg)
    raise ECDSAValueError(f"not a text string or bytes: {type(msg).__name__}")


def int_from_bits(octets: Octets, nlen: int) -> int:
    """Return the int of the leftmost nlen bits of octets.

    This is the bits2int conversion of RFC 6979 section 2.3.2,
    as required by SEC 1 v.2 section 4.1.3 step 5:
    trailing bits beyond nlen are dropped, shorter inputs are kept whole.
    The result still has to be reduced mod n.
    """

    data = bytes_from_octets(octets)
    excess = len(data) * 8 - nlen
    i = int.from_bytes(data, byteorder="big", signed=False)
    return i >> excess if excess > 0 else i


def int_from_integer(i: Integer) -> int:
    """Return an int from an int, a hex-string, or big-endian bytes.

    Hex-strings may be signed and "0x"-prefixed (e.g. "-0xdeadbeef"),
    or plain hex digits (e.g. "deadbeef") read as unsigned bytes.
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        digits = i.strip().lower()
        if digits.lstrip("-").startswith("0x"):
            return int(digits, 16)
        i = bytes.fromhex(digits)

    return int.from_bytes(i, byteorder="big", signed=False)


def hex_string(i: Integer) -> str:
    """Return the upper case hex digits of a non-negative integer.

    The digit count is even, grouped by eight (four bytes)
    from the right, e.g. "01 DEADBEEF 00000000".
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECDSAValueError(f"negative integer: {int_}")

    digits = format(int_, "X")
    if len(digits) % 2:
        digits = "0" + digits
    head = len(digits) % 8 or 8
    groups = [digits[:head]]
    groups += [digits[j : j + 8] for j in range(head, len(digits), 8)]
    return " ".join(groups)
